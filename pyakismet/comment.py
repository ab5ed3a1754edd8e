"""The comment submitted to Akismet for classification.

>>> import pyakismet.comment
>>> comment = pyakismet.comment.Comment({
...     "user_ip": "10.0.0.1",
...     "user_agent": "Mozilla/5.0",
...     "author": "Test Author",
...     "author_email": "test@example.com",
...     "content": "Hello, World!",
... })

A comment can also be built up progressively, the required fields are only
checked when it is used in a request:

>>> comment = pyakismet.comment.Comment()
>>> comment = comment.set_field("user_ip", "10.0.0.1").set_field(
...     "user_agent", "Mozilla/5.0")
"""

import collections

import pyakismet

# Attribute name -> name of the POST parameter sent to Akismet.
FIELDS = collections.OrderedDict((
    ("user_ip", "user_ip"),
    ("user_agent", "user_agent"),
    ("referrer", "referrer"),
    ("permalink", "permalink"),
    ("comment_type", "comment_type"),
    ("author", "comment_author"),
    ("author_email", "comment_author_email"),
    ("author_uri", "comment_author_url"),
    ("content", "comment_content"),
))

REQUIRED_FIELDS = ("user_ip", "user_agent")


class Comment(object):
    """A single piece of user-submitted content.

    All fields start unset. `fields` and the keyword arguments are applied
    with `set_field`, so an unknown name raises `UnknownFieldError`.
    """

    def __init__(self, fields=None, **kwargs):
        self._values = dict.fromkeys(FIELDS)
        if fields is not None:
            self.update(fields)
        self.update(kwargs)

    def set_field(self, name, value):
        if name not in FIELDS:
            raise pyakismet.UnknownFieldError(
                "Comment has no field named %r." % (name,), field=name)
        self._values[name] = value
        return self

    def get_field(self, name):
        try:
            return self._values[name]
        except KeyError:
            raise pyakismet.UnknownFieldError(
                "Comment has no field named %r." % (name,), field=name)

    def update(self, fields):
        """Set every field in the `fields` mapping."""
        for name, value in fields.items():
            self.set_field(name, value)
        return self

    def get_missing_fields(self):
        return [name for name in REQUIRED_FIELDS if not self._values[name]]

    def to_wire_parameters(self):
        """Return the POST parameters for this comment.

        Every field that has been set is included, keyed by its wire name.
        A new dictionary is built on every call.
        """
        missing = self.get_missing_fields()
        if missing:
            raise pyakismet.InvalidCommentError(
                "Comment is missing required fields: %s." %
                ", ".join(missing), fields=missing)
        return dict((wire_name, self._values[name])
                    for name, wire_name in FIELDS.items()
                    if self._values[name] is not None)

    def __getattr__(self, name):
        if name.startswith("_") or name not in FIELDS:
            raise AttributeError(name)
        return self._values[name]

    def __eq__(self, other):
        if not isinstance(other, Comment):
            return NotImplemented
        return self._values == other._values

    __hash__ = None

    def __repr__(self):
        fields = ", ".join("%s=%r" % (name, self._values[name])
                           for name in FIELDS
                           if self._values[name] is not None)
        return "%s(%s)" % (self.__class__.__name__, fields)

"""Client library for the Akismet spam-filtering REST API."""

__author__ = "The pyakismet contributors"
__credits__ = "Bret Kuhns, Michael Gauthier, all the pyakismet contributors."
__version__ = "1.0.0"

proto_name = 'pyakismet'

# Default endpoint of the Akismet API. Other anti-spam providers expose the
# same protocol on a different server.
api_server = 'rest.akismet.com'
api_version = '1.1'
api_port = 80


class AkismetError(Exception):
    """Something in general went wrong while talking to Akismet."""
    code = None

    def __init__(self, message, code=None):
        Exception.__init__(self, message)
        if code is not None:
            self.code = code


class InvalidApiKeyError(AkismetError):
    """The API key was rejected by the Akismet server."""

    def __init__(self, message, code=None, api_key=None):
        AkismetError.__init__(self, message, code)
        self.api_key = api_key


class HttpError(AkismetError):
    """The request could not be completed, or the server answered with
    an error status."""
    pass


class InvalidCommentError(AkismetError):
    """The comment is missing one or more required fields."""

    def __init__(self, message, code=None, fields=()):
        AkismetError.__init__(self, message, code)
        self.fields = list(fields)


class UnknownFieldError(AkismetError):
    """The comment does not have a field with this name."""

    def __init__(self, message, code=None, field=None):
        AkismetError.__init__(self, message, code)
        self.field = field


class TransportError(Exception):
    """Raised by transports on network or protocol failures."""
    code = None

    def __init__(self, message, code=None):
        Exception.__init__(self, message)
        if code is not None:
            self.code = code

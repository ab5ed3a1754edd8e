"""Akismet spam-filtering client.

>>> import pyakismet.client
>>> import pyakismet.comment

To create a client (the API key is verified with the server straight away):

>>> client = pyakismet.client.Client("http://blog.example.com/",
...                                  "AABBCCDDEEFF")

To use another provider of the Akismet API:

>>> client = pyakismet.client.Client("http://blog.example.com/",
...                                  "AABBCCDDEEFF",
...                                  api_server="api.antispam.typepad.com")

To check a comment:

>>> comment = pyakismet.comment.Comment({"user_ip": "10.0.0.1",
...                                      "user_agent": "Mozilla/5.0",
...                                      "content": "Hello, World!"})
>>> client.is_spam(comment)

Rather than simply dropping a spam comment, it is recommended to save it
and mark it as spam, in case it is a false positive. Comments that were
classified wrongly should be reported back:

>>> client.submit_spam(comment)
>>> client.submit_false_positive(comment)

Construction raises `pyakismet.InvalidApiKeyError` when the key is rejected.
Every operation raises `pyakismet.HttpError` when the server could not be
reached, and `pyakismet.InvalidCommentError` when the comment lacks the
required `user_ip` or `user_agent` fields.
"""

import logging

import pyakismet
import pyakismet.transport


class Client(object):
    def __init__(self, blog_uri, api_key, transport=None, api_server=None,
                 api_version=None, api_port=None):
        self.log = logging.getLogger("pyakismet")
        self.blog_uri = blog_uri
        self.api_key = api_key
        if api_server is None:
            api_server = pyakismet.api_server
        if api_version is None:
            api_version = pyakismet.api_version
        if api_port is None:
            api_port = pyakismet.api_port
        self.api_server = api_server
        self.api_version = api_version
        self.api_port = int(api_port)
        if transport is None:
            transport = pyakismet.transport.RequestsTransport()
        self.set_transport(transport)

        if not self.verify_api_key(self.api_key):
            self.log.warning("API key %r rejected by %s", self.api_key,
                             self.api_server)
            raise pyakismet.InvalidApiKeyError(
                'The specified API key is not valid. Key used was: "%s".' %
                self.api_key, api_key=self.api_key)

    def set_transport(self, transport):
        self.transport = transport

    def is_spam(self, comment):
        """Return True if Akismet classifies the comment as spam."""
        response = self.send_request("comment-check",
                                     self._comment_params(comment))
        return response == "true"

    def submit_spam(self, comment):
        """Report a spam comment that was not detected by Akismet."""
        self.send_request("submit-spam", self._comment_params(comment))

    def submit_false_positive(self, comment):
        """Report a comment that was wrongly classified as spam."""
        self.send_request("submit-ham", self._comment_params(comment))

    def verify_api_key(self, key):
        params = {"key": key,
                  "blog": self.blog_uri}
        response = self.send_request("verify-key", params)
        return response == "valid"

    def _comment_params(self, comment):
        params = comment.to_wire_parameters()
        params["blog"] = self.blog_uri
        return params

    def get_url(self, method_name):
        if self.api_key:
            host = "%s.%s" % (self.api_key, self.api_server)
        else:
            host = self.api_server
        return "http://%s:%s/%s/%s" % (host, self.api_port, self.api_version,
                                       method_name)

    def get_user_agent(self):
        return "%s/%s | Akismet/%s" % (pyakismet.proto_name,
                                       pyakismet.__version__,
                                       self.api_version)

    def send_request(self, method_name, params=None):
        """Call a method of the Akismet API with a POST request and return
        the body of the response.
        """
        if params is None:
            params = {}
        url = self.get_url(method_name)
        headers = {"User-Agent": self.get_user_agent()}
        self.log.debug("calling %s at %s", method_name, url)
        try:
            status, body = self.transport.send("POST", url, headers, params)
        except pyakismet.TransportError as e:
            raise pyakismet.HttpError("Error in request to Akismet: %s" % e,
                                      e.code)
        if not 200 <= status < 300:
            raise pyakismet.HttpError("Error in request to Akismet: server "
                                      "responded with status %s" % status,
                                      status)
        return body

"""This package contains various utilities used in the pyakismet tests."""

import threading
import unittest
import requests
import urllib.parse
import http.server

import pyakismet
import pyakismet.transport

blog_uri = "http://blog.example.com/"
api_key = "AABBCCDDEEFF"

comment_fields = {"user_ip": "10.0.0.1",
                  "user_agent": "Mozilla/5.0 (X11; Linux x86_64)",
                  "referrer": "http://www.google.com/",
                  "permalink": "http://blog.example.com/post/1",
                  "comment_type": "comment",
                  "author": "Test Author",
                  "author_email": "test@example.com",
                  "author_uri": "http://example.com/",
                  "content": "Hello, World!"}

# Akismet always classifies comments from this author as spam.
spam_author = "viagra-test-123"


class StubTransport(object):
    """Transport that records every request and answers from a mapping of
    Akismet method name -> response body (or exception to raise).
    """

    def __init__(self, responses=None, status=200):
        self.responses = {"verify-key": "valid"}
        if responses:
            self.responses.update(responses)
        self.status = status
        self.requests = []

    def send(self, method, url, headers, params):
        self.requests.append((method, url, headers, dict(params)))
        method_name = url.rsplit("/", 1)[-1]
        response = self.responses.get(method_name, "")
        if isinstance(response, Exception):
            raise response
        return self.status, response

    @property
    def method_names(self):
        return [url.rsplit("/", 1)[-1] for _, url, _, _ in self.requests]


class AkismetRequestHandler(http.server.BaseHTTPRequestHandler):
    """Answers like the Akismet API server."""

    def do_POST(self):
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length).decode("utf8")
        params = dict(urllib.parse.parse_qsl(body, keep_blank_values=True))
        method_name = self.path.rsplit("/", 1)[-1]
        self.server.requests.append(
            (self.path, self.headers.get("User-Agent"), params))

        if method_name == "verify-key":
            valid = params.get("key") in self.server.valid_keys
            self.respond(200, "valid" if valid else "invalid")
        elif method_name == "comment-check":
            spam = params.get("comment_author") == spam_author
            self.respond(200, "true" if spam else "false")
        elif method_name in ("submit-spam", "submit-ham"):
            self.respond(200, "Thanks for making the web a better place.")
        else:
            self.respond(404, "Unknown method")

    def respond(self, status, body):
        body = body.encode("utf8")
        self.send_response(status)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


class AkismetTestBase(unittest.TestCase):
    """Test base that starts a local server speaking the Akismet protocol
    in setUpClass. The server is shut down in tearDownClass.
    """
    valid_keys = ("",)
    server = None

    @classmethod
    def setUpClass(cls):
        super(AkismetTestBase, cls).setUpClass()
        cls.server = http.server.HTTPServer(("127.0.0.1", 0),
                                            AkismetRequestHandler)
        cls.server.valid_keys = cls.valid_keys
        cls.server.requests = []
        cls.address = cls.server.server_address
        cls.server_thread = threading.Thread(target=cls.server.serve_forever)
        cls.server_thread.daemon = True
        cls.server_thread.start()

    def setUp(self):
        unittest.TestCase.setUp(self)
        del self.server.requests[:]

    @classmethod
    def tearDownClass(cls):
        super(AkismetTestBase, cls).tearDownClass()
        cls.server.shutdown()
        cls.server.server_close()
        cls.server_thread.join(5)

    def get_transport(self):
        # Never route the local test server through a proxy.
        session = requests.Session()
        session.trust_env = False
        return pyakismet.transport.RequestsTransport(session=session,
                                                     timeout=5)

    def get_client_options(self, **kwargs):
        options = {"blog_uri": blog_uri,
                   "api_key": "",
                   "api_server": self.address[0],
                   "api_port": self.address[1],
                   "api_version": pyakismet.api_version}
        options.update(kwargs)
        return options

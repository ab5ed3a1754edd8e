"""HTTP transports used by the Akismet client.

A transport is any object with a `send(method, url, headers, params)`
method returning a `(status_code, body_text)` pair, and raising
`pyakismet.TransportError` when the request could not be completed. The
client only depends on this interface, so tests can provide their own.
"""

import logging

import requests

import pyakismet


class Transport(object):
    """Interface implemented by all transports."""

    def send(self, method, url, headers, params):
        raise NotImplementedError()


class RequestsTransport(Transport):
    """Transport that sends form-encoded requests using `requests`."""

    def __init__(self, session=None, timeout=None):
        if session is None:
            session = requests.Session()
        self.session = session
        self.timeout = timeout
        self.log = logging.getLogger("pyakismet")

    def send(self, method, url, headers, params):
        self.log.debug("sending: %s %s", method, url)
        try:
            response = self.session.request(method, url, headers=headers,
                                            data=params, timeout=self.timeout)
        except requests.RequestException as e:
            code = None
            if e.response is not None:
                code = e.response.status_code
            raise pyakismet.TransportError(str(e), code)
        self.log.debug("received: %s %r", response.status_code,
                       response.text)
        return response.status_code, response.text

    def close(self):
        self.session.close()

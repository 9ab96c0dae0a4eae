"""
Requests adapter that serves calls from the in-process sandbox app.

Mount it on a requests.Session so RequestsTransport (and a test's own form
posts) reach the FastAPI app without opening a socket.
"""
from fastapi import FastAPI
from fastapi.testclient import TestClient
from requests import PreparedRequest, Response
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

# Recomputed by the test client from the body it actually sends
_DROPPED_HEADERS = ("content-length", "content-encoding", "transfer-encoding")


class SandboxAdapter(BaseAdapter):

    def __init__(self, app: FastAPI):
        super().__init__()
        self.client = TestClient(app)

    def send(self, request: PreparedRequest, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        headers = {
            name: value for name, value in request.headers.items()
            if name.lower() not in _DROPPED_HEADERS
        }
        reply = self.client.request(
            request.method,
            request.url,
            content=request.body,
            headers=headers,
            follow_redirects=False,
        )

        response = Response()
        response.status_code = reply.status_code
        response.headers = CaseInsensitiveDict({
            name: value for name, value in reply.headers.items()
            if name.lower() not in _DROPPED_HEADERS
        })
        response._content = reply.content
        response._content_consumed = True
        response.encoding = "utf-8"
        response.reason = reply.reason_phrase
        response.url = request.url
        response.request = request
        response.connection = self
        return response

    def close(self):
        self.client.close()

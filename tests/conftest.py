import json

import httpx
import pytest

from chimplite.api.core.authentication import MailChimpConfig, build_auth, build_base_url
from chimplite.client import MailChimpClient
from chimplite.http_client import HttpxMailChimpHTTPClient

API_KEY = "0123456789abcdef-us6"
LIST_ID = "a1b2c3d4e5"


class RecordingHandler:
    """MockTransport handler returning queued responses and recording requests."""

    def __init__(self):
        self.requests = []
        self.responses = []

    def queue(self, status_code=200, **kwargs):
        self.responses.append(httpx.Response(status_code, **kwargs))
        return self

    def raise_error(self, exc):
        self.responses.append(exc)
        return self

    def __call__(self, request):
        self.requests.append(request)
        if not self.responses:
            return httpx.Response(200, json={})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last(self):
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def make_client(handler):
    clients = []

    def factory(api_key=API_KEY, dc="us6", list_id=LIST_ID, debug=False):
        config = MailChimpConfig(api_key=api_key, dc=dc, list_id=list_id)
        http = HttpxMailChimpHTTPClient(
            base_url=build_base_url(dc),
            auth=build_auth(config),
            transport=httpx.MockTransport(handler),
        )
        client = MailChimpClient(config, debug=debug, http=http)
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def client(make_client):
    return make_client()

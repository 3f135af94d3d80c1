import json

import httpx
import pytest

from chimplite.http_client import HttpxMailChimpHTTPClient, MailChimpHTTPClient


def make_http(handler):
    return HttpxMailChimpHTTPClient(
        base_url="https://us6.api.mailchimp.com/3.0/",
        auth=("user", "key-us6"),
        transport=httpx.MockTransport(handler),
    )


def test_paths_are_relative_to_base_url(handler):
    with make_http(handler) as http:
        http.request("GET", "lists/abc/members", params={"count": 5})
        http.request("GET", "")

    assert str(handler.requests[0].url) == "https://us6.api.mailchimp.com/3.0/lists/abc/members?count=5"
    assert handler.requests[1].url.path == "/3.0/"


def test_methods_and_json_body(handler):
    with make_http(handler) as http:
        http.request("PUT", "lists/a", json={"a": 2})
        http.request("PATCH", "lists/a", json={"a": 3})
        http.request("DELETE", "lists/a")

    assert [r.method for r in handler.requests] == ["PUT", "PATCH", "DELETE"]
    assert json.loads(handler.requests[0].content) == {"a": 2}
    assert handler.requests[2].content == b""


def test_raises_for_error_status(handler):
    handler.queue(404, json={"title": "Resource Not Found"})

    with make_http(handler) as http:
        with pytest.raises(httpx.HTTPStatusError) as excinfo:
            http.request("GET", "lists/x")

    assert excinfo.value.response.status_code == 404


def test_returns_response_on_success(handler):
    handler.queue(200, json={"id": "x"})

    with make_http(handler) as http:
        resp = http.request("GET", "lists/x")

    assert resp.json() == {"id": "x"}


def test_follows_redirects(handler):
    handler.queue(301, headers={"Location": "https://us6.api.mailchimp.com/3.0/lists/b"})
    handler.queue(200, json={"id": "b"})

    with make_http(handler) as http:
        resp = http.request("GET", "lists/a")

    assert resp.json() == {"id": "b"}
    assert [r.url.path for r in handler.requests] == ["/3.0/lists/a", "/3.0/lists/b"]


def test_interface_is_abstract():
    with pytest.raises(NotImplementedError):
        MailChimpHTTPClient().request("GET", "lists")

import pytest

from chimplite.api.lists import MailingList, MailingLists
from chimplite.exceptions import CredentialsNotSetException, MailChimpClientException

LISTS_PAYLOAD = {
    "lists": [
        {"id": "a1", "name": "Newsletter", "stats": {"member_count": 12}},
        {"id": "b2", "name": "Customers"},
    ],
    "total_items": 2,
}


def test_find_lists_default_paging(client, handler):
    handler.queue(200, json=LISTS_PAYLOAD)

    assert client.find_lists() == LISTS_PAYLOAD
    assert handler.last.method == "GET"
    assert handler.last.url.path == "/3.0/lists"
    assert dict(handler.last.url.params) == {"limit": "10", "offset": "0"}


def test_find_lists_with_email(client, handler):
    client.find_lists(email="jan+news@example.com", limit=5, offset=20)

    params = handler.last.url.params
    assert params["limit"] == "5"
    assert params["offset"] == "20"
    assert params["email"] == "jan+news@example.com"


def test_get_list(client, handler):
    handler.queue(200, json={"id": "a1", "name": "Newsletter"})

    assert client.get_list("a1") == {"id": "a1", "name": "Newsletter"}
    assert handler.last.url.path == "/3.0/lists/a1"


def test_get_list_does_not_need_default_list(make_client, handler):
    handler.queue(200, json={"id": "a1"})

    assert make_client(list_id=None).get_list("a1") == {"id": "a1"}


def test_get_list_not_found_returns_none(client, handler):
    handler.queue(404, json={"title": "Resource Not Found"})

    assert client.get_list("x") is None


def test_get_list_not_found_raises_in_debug(make_client, handler):
    handler.queue(404, json={"title": "Resource Not Found"})

    with pytest.raises(MailChimpClientException):
        make_client(debug=True).get_list("x")


@pytest.mark.parametrize(
    "call",
    [lambda c: c.find_lists(), lambda c: c.get_list("a1"), lambda c: c.list_ids()],
)
def test_lists_without_api_key(make_client, handler, call):
    with pytest.raises(CredentialsNotSetException):
        call(make_client(api_key=""))

    assert handler.requests == []


def test_list_ids(client, handler):
    handler.queue(200, json=LISTS_PAYLOAD)

    assert client.list_ids() == ["a1", "b2"]


def test_list_ids_empty_on_suppressed_error(client, handler):
    handler.queue(400, json={"title": "Invalid Resource"})

    assert client.list_ids() == []


def test_mailing_lists_from_dict():
    lists = MailingLists.from_dict(LISTS_PAYLOAD)

    assert lists.total_items == 2
    assert lists.lists[0] == MailingList(
        id="a1",
        name="Newsletter",
        member_count=12,
        raw=LISTS_PAYLOAD["lists"][0],
    )
    assert lists.lists[1].member_count == 0
    assert lists.raw == LISTS_PAYLOAD


def test_get_list_follows_redirect(client, handler):
    handler.queue(301, headers={"Location": "https://us6.api.mailchimp.com/3.0/lists/b"})
    handler.queue(200, json={"id": "b"})

    assert client.get_list("a") == {"id": "b"}
    assert handler.last.url.path == "/3.0/lists/b"

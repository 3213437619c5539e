import pytest
import responses

from whatcrm.client import Client
from whatcrm.endpoints import CONNECTION, CONNECTION_STATUS, instance_url
from whatcrm.errors import APIError, WhatcrmError


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


@pytest.fixture
def client():
    with Client(redirect_uri="", header="X-Api-Key", token="token") as c:
        yield c


def test_get_instances_parses_list(rsps, client):
    url = instance_url(CONNECTION, "dom1")
    rsps.add(responses.GET, url, json=[{"id": 1, "chat_key": "a"}, {"id": 2, "chat_key": "b"}])
    instances = client.get_instances("dom1")
    assert [i.id for i in instances] == [1, 2]
    assert rsps.calls[0].request.url == url
    assert rsps.calls[0].request.headers["X-Api-Key"] == "token"


def test_get_instances_null_is_empty(rsps, client):
    rsps.add(responses.GET, instance_url(CONNECTION, "dom1"), body="null")
    assert client.get_instances("dom1") == []


def test_get_instance_found(rsps, client):
    rsps.add(
        responses.GET,
        instance_url(CONNECTION, "dom1"),
        json=[{"id": 1, "chat_key": "a"}, {"id": 2, "chat_key": "b"}],
    )
    instance = client.get_instance("dom1", "b")
    assert instance.id == 2
    assert instance.chat_key == "b"


def test_get_instance_missing(rsps, client):
    rsps.add(responses.GET, instance_url(CONNECTION, "dom1"), json=[{"id": 1, "chat_key": "a"}])
    with pytest.raises(WhatcrmError, match="connection is not found"):
        client.get_instance("dom1", "zzz")


def test_get_instance_empty(rsps, client):
    rsps.add(responses.GET, instance_url(CONNECTION, "dom1"), json=[])
    with pytest.raises(WhatcrmError, match="connection is not found"):
        client.get_instance("dom1", "a")


def test_get_connection_status(rsps, client):
    url = instance_url(CONNECTION_STATUS, "k1")
    rsps.add(responses.GET, url, json={"state": "authorized"})
    assert client.get_connection_status("k1") == "authorized"
    assert rsps.calls[0].request.url == url


def test_server_error_raises_api_error(rsps, client):
    rsps.add(responses.GET, instance_url(CONNECTION_STATUS, "k1"), status=500, body="boom")
    with pytest.raises(APIError) as info:
        client.get_connection_status("k1")
    assert info.value.status_code == 500
    assert str(info.value) == "boom"
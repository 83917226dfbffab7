# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from customerio_track.classify import extract_error_message, parse_response_data, process_response
from customerio_track.errors import ClientError, NetworkError
from customerio_track.http.models import HttpResponse

URL = "https://track.customer.io/api/v1/customers/42"


def test_transport_failure_is_network_error_with_verbatim_details():
    response = HttpResponse(
        ok=False,
        status_code=None,
        url=URL,
        error_message="Could not resolve host",
        error_code="DNS_ERROR",
    )
    with pytest.raises(NetworkError) as info:
        process_response(response)
    assert info.value.message == "Could not resolve host"
    assert info.value.error_code == "DNS_ERROR"
    assert info.value.url == URL


@pytest.mark.parametrize("error_message", ["", None])
def test_network_error_keeps_empty_transport_message(error_message):
    response = HttpResponse(ok=False, url="u", error_message=error_message, error_code="X")
    with pytest.raises(NetworkError) as info:
        process_response(response)
    assert info.value.message == error_message
    assert info.value.error_code == "X"
    assert info.value.url == "u"
    assert str(info.value) == "Customer.io network error: transport failure"


def test_transport_failure_wins_over_status_code():
    response = HttpResponse(ok=False, status_code=200, url=URL, error_message="reset")
    with pytest.raises(NetworkError):
        process_response(response)


@pytest.mark.parametrize("status", [201, 204, 301, 400, 401, 404, 500, 503])
def test_non_200_status_is_client_error(status):
    response = HttpResponse(ok=True, status_code=status, url=URL)
    with pytest.raises(ClientError) as info:
        process_response(response)
    assert not isinstance(info.value, NetworkError)
    assert info.value.status_code == status


@pytest.mark.parametrize("body", ["", "not json{", '{"meta":{"error":"ignored"}}', "[1, 2]"])
def test_status_200_succeeds_regardless_of_body(body):
    assert process_response(HttpResponse(ok=True, status_code=200, text=body)) is True


def test_client_error_extracts_meta_error():
    response = HttpResponse(ok=True, status_code=400, text='{"meta":{"error":"bad email"}}')
    with pytest.raises(ClientError) as info:
        process_response(response)
    assert info.value.message == "bad email"
    assert info.value.data == {"meta": {"error": "bad email"}}
    assert str(info.value) == "Customer.io client error: bad email"


def test_client_error_falls_back_for_unparseable_body():
    response = HttpResponse(ok=True, status_code=500, text="not json{", errors=("server closed stream",))
    with pytest.raises(ClientError) as info:
        process_response(response)
    assert info.value.message == "unknown response"
    assert info.value.data == {}
    assert info.value.errors == ["server closed stream"]


def test_parse_response_data_never_raises():
    assert parse_response_data(None) == {}
    assert parse_response_data("") == {}
    assert parse_response_data("not json{") == {}
    assert parse_response_data(b'{"ok": true}') == {"ok": True}


@pytest.mark.parametrize(
    "data",
    [
        {},
        [],
        "meta",
        {"meta": "error"},
        {"meta": {}},
        {"meta": {"error": ""}},
        {"meta": {"error": None}},
    ],
)
def test_extract_error_message_tolerates_odd_shapes(data):
    assert extract_error_message(data) is None


def test_extract_error_message_stringifies():
    assert extract_error_message({"meta": {"error": 42}}) == "42"

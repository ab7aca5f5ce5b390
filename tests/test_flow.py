from __future__ import annotations

import pytest

from conftest import APP_ID, DEVICE_ID, SEARCH_URL, SHARED_SECRET, TOKEN_URL, search_ok, token_error, token_ok
from nexmo_verify import FlowState, RemoteRejectionError, SearchFlow, VerifyClient
from nexmo_verify.flow import search_parameters, token_parameters


def test_flow_completes_after_search(service) -> None:
    service.respond(TOKEN_URL, token_ok("tok"))
    service.respond(SEARCH_URL, search_ok())
    flow = SearchFlow(VerifyClient(APP_ID, SHARED_SECRET, fetcher=service))

    assert flow.state is FlowState.PENDING
    flow.run({"device_id": DEVICE_ID, "source_ip_address": "127.0.0.1"})

    assert flow.state is FlowState.COMPLETED
    assert flow.token_response is not None
    assert flow.token_response.token == "tok"


def test_flow_fails_in_token_state_on_rejection(service) -> None:
    service.respond(TOKEN_URL, token_error())
    flow = SearchFlow(VerifyClient(APP_ID, SHARED_SECRET, fetcher=service))

    with pytest.raises(RemoteRejectionError) as excinfo:
        flow.run({"device_id": DEVICE_ID})

    assert flow.state is FlowState.FAILED
    assert excinfo.value.response == flow.token_response


def test_flow_is_single_use(service) -> None:
    service.respond(TOKEN_URL, token_ok())
    service.respond(SEARCH_URL, search_ok())
    flow = SearchFlow(VerifyClient(APP_ID, SHARED_SECRET, fetcher=service))
    flow.run({"device_id": DEVICE_ID})

    with pytest.raises(RuntimeError):
        flow.run({"device_id": DEVICE_ID})


def test_token_parameters_only_forward_device_and_ip() -> None:
    params = {"device_id": "d", "source_ip_address": "1.2.3.4", "number": "+1", "country": "MX"}

    assert token_parameters(params) == {"device_id": "d", "source_ip_address": "1.2.3.4"}


def test_search_parameters_copy_and_add_token() -> None:
    params = {"device_id": "d", "number": "+1", "token": "stale"}

    out = search_parameters(params, "fresh")

    assert out == {"device_id": "d", "number": "+1", "token": "fresh"}
    assert params["token"] == "stale"


def test_rejection_without_message_reports_result_code(service) -> None:
    service.respond(TOKEN_URL, {"result_code": 9, "result_message": "", "timestamp": "1"})
    flow = SearchFlow(VerifyClient(APP_ID, SHARED_SECRET, fetcher=service))

    with pytest.raises(RemoteRejectionError) as excinfo:
        flow.run({"device_id": DEVICE_ID})

    assert excinfo.value.result_message == ""
    assert "result_code 9" in str(excinfo.value)
    assert service.requests_to(SEARCH_URL) == []

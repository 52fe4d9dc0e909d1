import json

from adyen_mcp.tools import terminals
from adyen_mcp.tools.base import ToolFailure, ToolSuccess
from tests.conftest import FakeAdyenError, FakeAdyenResult, run


def test_get_terminals_forwards_only_search_query(client, patch_service):
    factory = patch_service(terminals, "AdyenManagementApi")
    response = FakeAdyenResult({"data": [{"id": "P400Plus-275479597"}]})
    api = factory.service.terminals_terminal_level_api
    api.list_terminals.return_value = response

    request = terminals.GetTerminalsRequest.model_validate({"searchQuery": "P400"})
    result = run(terminals.get_terminals(client, request))

    assert result == ToolSuccess(response)
    assert result.payload is response
    api.list_terminals.assert_called_once_with(query_parameters={"searchQuery": "P400"})
    assert factory.clients == [client]


def test_get_terminals_without_filters_sends_empty_query(client, patch_service):
    factory = patch_service(terminals, "AdyenManagementApi")
    api = factory.service.terminals_terminal_level_api

    run(terminals.get_terminals(client, terminals.GetTerminalsRequest()))

    api.list_terminals.assert_called_once_with(query_parameters={})


def test_get_terminals_maps_all_filters_to_api_names(client, patch_service):
    factory = patch_service(terminals, "AdyenManagementApi")
    api = factory.service.terminals_terminal_level_api
    raw = {
        "otpQuery": "otp",
        "countries": "NL,BE",
        "merchantIds": "MA1",
        "storeIds": "ST1",
        "brandModels": "verifone.P400Plus",
        "pageNumber": 2,
        "pageSize": 50,
    }

    run(terminals.get_terminals(client, terminals.GetTerminalsRequest.model_validate(raw)))

    api.list_terminals.assert_called_once_with(
        query_parameters={
            "otpQuery": "otp",
            "countries": "NL%2CBE",
            "merchantIds": "MA1",
            "storeIds": "ST1",
            "brandModels": "verifone.P400Plus",
            "pageNumber": "2",
            "pageSize": "50",
        }
    )


def test_get_terminals_encodes_search_query_as_one_value(client, patch_service):
    factory = patch_service(terminals, "AdyenManagementApi")
    api = factory.service.terminals_terminal_level_api

    request = terminals.GetTerminalsRequest.model_validate({"searchQuery": "P400&pageSize=100"})
    run(terminals.get_terminals(client, request))

    api.list_terminals.assert_called_once_with(query_parameters={"searchQuery": "P400%26pageSize%3D100"})


def test_get_terminals_failure_is_prefixed_and_not_raised(client, patch_service):
    factory = patch_service(terminals, "AdyenManagementApi")
    error = FakeAdyenError("Unauthorized", status_code=401, error_code="000")
    factory.service.terminals_terminal_level_api.list_terminals.side_effect = error

    result = run(terminals.get_terminals(client, terminals.GetTerminalsRequest()))

    assert isinstance(result, ToolFailure)
    assert not result.ok
    assert result.message.startswith("Failed to get terminals. Error: ")
    details = json.loads(result.message[len("Failed to get terminals. Error: "):])
    assert details["type"] == "FakeAdyenError"
    assert details["status_code"] == 401
    assert details["error_code"] == "000"


def test_reassign_terminal_returns_confirmation(client, patch_service):
    factory = patch_service(terminals, "AdyenManagementApi")
    api = factory.service.terminals_terminal_level_api
    api.reassign_terminal.return_value = FakeAdyenResult({}, status_code=200)

    request = terminals.ReassignTerminalRequest.model_validate(
        {"terminalId": "S1F2-000150183300034", "storeId": "ST123"}
    )
    result = run(terminals.reassign_terminal(client, request))

    assert result == ToolSuccess("Terminal S1F2-000150183300034 reassignment initiated successfully.")
    api.reassign_terminal.assert_called_once_with({"storeId": "ST123"}, "S1F2-000150183300034")


def test_reassign_terminal_to_merchant_inventory(client, patch_service):
    factory = patch_service(terminals, "AdyenManagementApi")
    api = factory.service.terminals_terminal_level_api

    request = terminals.ReassignTerminalRequest(terminal_id="T-1", merchant_id="MA1", inventory=False)
    run(terminals.reassign_terminal(client, request))

    api.reassign_terminal.assert_called_once_with({"merchantId": "MA1", "inventory": False}, "T-1")


def test_reassign_terminal_failure(client, patch_service):
    factory = patch_service(terminals, "AdyenManagementApi")
    factory.service.terminals_terminal_level_api.reassign_terminal.side_effect = FakeAdyenError(
        "inventory is required", status_code=422
    )

    result = run(terminals.reassign_terminal(client, terminals.ReassignTerminalRequest(terminal_id="T-1")))

    assert isinstance(result, ToolFailure)
    assert result.prefix == "Failed to reassign terminal. Error: "
    assert "inventory is required" in result.message


def test_get_tools_declares_both_terminal_tools():
    assert [tool.name for tool in terminals.get_tools()] == ["get_terminals", "reassign_terminal"]

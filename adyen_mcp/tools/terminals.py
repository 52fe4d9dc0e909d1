from typing import List, Optional

from Adyen import AdyenClient, AdyenManagementApi

from adyen_mcp.tools.base import ToolDescriptor, ToolRequest, ToolResult, invoke_vendor

GET_TERMINALS_NAME = "get_terminals"
GET_TERMINALS_DESCRIPTION = """Gets a list of payment terminals.

    Args:
        searchQuery (string, optional): Returns terminals with an ID that contains the specified string. If present, other query parameters are ignored.
        otpQuery (string, optional): Returns one or more terminals associated with the one-time passwords specified in the request. If this query parameter is used, other query parameters are ignored.
        countries (string, optional): Returns terminals located in the countries specified by their two-letter country code.
        merchantIds (string, optional): Returns terminals that belong to the merchant accounts specified by their unique merchant account ID.
        storeIds (string, optional): Returns terminals that are assigned to the stores specified by their unique store ID.
        brandModels (string, optional): Returns terminals of the models specified in the format "brand.model".
        pageNumber (integer, optional): The number of the page to fetch.
        pageSize (integer, optional): The number of items to have on a page, maximum 100. The default is 20 items on a page.

    Returns:
        object: The Adyen API response listing the terminals that the API credential has access to and that match the query parameters.

    Notes:
        - Corresponds to the Adyen Management API GET /terminals endpoint.
        - No parameters are required. If the user does not ask for the results to be filtered, do not include any parameters in the request.
        - To make this request, your API credential must have the "Management API - Terminal actions read" role.
        - In the live environment, requests to this endpoint are subject to rate limits.

    Examples:
        get_terminals({"searchQuery": "P400"})
        # Returns the terminals with "P400" in their ID."""

REASSIGN_TERMINAL_NAME = "reassign_terminal"
REASSIGN_TERMINAL_DESCRIPTION = """Reassigns a payment terminal to a different company account, merchant account, or store.

    Args:
        terminalId (string, required): The unique identifier of the payment terminal to reassign.
        companyId (string, optional): The unique identifier of the company account to reassign the terminal to.
        merchantId (string, optional): The unique identifier of the merchant account to reassign the terminal to.
        storeId (string, optional): The unique identifier of the store to reassign the terminal to.
        inventory (boolean, optional): Set to true to reassign the terminal to the inventory of the specified merchant account.

    Returns:
        string: A confirmation message containing the terminal ID.

    Notes:
        - Corresponds to the Adyen Management API POST /terminals/{terminalId}/reassign endpoint.
        - Your API credential must have the "Management API - Assign Terminal" role to make this request.
        - When reassigning to a merchant account, you must specify the inventory field.

    Examples:
        reassign_terminal({"terminalId": "S1F2-000150183300034", "storeId": "YOUR_STORE_ID"})
        # Returns "Terminal S1F2-000150183300034 reassignment initiated successfully." """


class GetTerminalsRequest(ToolRequest):
    search_query: Optional[str] = None
    otp_query: Optional[str] = None
    countries: Optional[str] = None
    merchant_ids: Optional[str] = None
    store_ids: Optional[str] = None
    brand_models: Optional[str] = None
    page_number: Optional[int] = None
    page_size: Optional[int] = None


async def get_terminals(client: AdyenClient, request: GetTerminalsRequest) -> ToolResult:
    management = AdyenManagementApi(client=client)
    return await invoke_vendor(
        "Failed to get terminals. Error: ",
        management.terminals_terminal_level_api.list_terminals,
        query_parameters=request.to_query(),
    )


class ReassignTerminalRequest(ToolRequest):
    terminal_id: str
    company_id: Optional[str] = None
    merchant_id: Optional[str] = None
    store_id: Optional[str] = None
    inventory: Optional[bool] = None


async def reassign_terminal(client: AdyenClient, request: ReassignTerminalRequest) -> ToolResult:
    management = AdyenManagementApi(client=client)
    return await invoke_vendor(
        "Failed to reassign terminal. Error: ",
        management.terminals_terminal_level_api.reassign_terminal,
        request.to_params(exclude=["terminal_id"]),
        request.terminal_id,
        confirmation=f"Terminal {request.terminal_id} reassignment initiated successfully.",
    )


def get_tools() -> List[ToolDescriptor]:
    return [
        ToolDescriptor(
            name=GET_TERMINALS_NAME,
            description=GET_TERMINALS_DESCRIPTION,
            arguments=GetTerminalsRequest,
            invoke=get_terminals,
        ),
        ToolDescriptor(
            name=REASSIGN_TERMINAL_NAME,
            description=REASSIGN_TERMINAL_DESCRIPTION,
            arguments=ReassignTerminalRequest,
            invoke=reassign_terminal,
        ),
    ]

from typing import List

from Adyen import AdyenBalancePlatformApi, AdyenClient

from adyen_mcp.tools.base import ToolDescriptor, ToolRequest, ToolResult, invoke_vendor

GET_ACCOUNT_HOLDER_NAME = "get_account_holder"
GET_ACCOUNT_HOLDER_DESCRIPTION = """Gets the details of an account holder on the balance platform.

    Args:
        id (string, required): The unique identifier of the account holder.

    Returns:
        object: The Adyen API response describing the account holder, including its legal entity, status and capabilities.

    Notes:
        - Corresponds to the Adyen Configuration API GET /accountHolders/{id} endpoint.

    Examples:
        get_account_holder({"id": "AH3227C223222C5GXQXF658WB"})
        # Returns the account holder object."""


class GetAccountHolderRequest(ToolRequest):
    id: str


async def get_account_holder(client: AdyenClient, request: GetAccountHolderRequest) -> ToolResult:
    balance_platform = AdyenBalancePlatformApi(client=client)
    return await invoke_vendor(
        "Failed to get account holder. Error: ",
        balance_platform.account_holders_api.get_account_holder,
        request.id,
    )


def get_tools() -> List[ToolDescriptor]:
    return [
        ToolDescriptor(
            name=GET_ACCOUNT_HOLDER_NAME,
            description=GET_ACCOUNT_HOLDER_DESCRIPTION,
            arguments=GetAccountHolderRequest,
            invoke=get_account_holder,
        ),
    ]

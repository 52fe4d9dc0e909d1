from typing import List, Optional

from Adyen import AdyenClient, AdyenManagementApi

from adyen_mcp.tools.base import ToolDescriptor, ToolRequest, ToolResult, invoke_vendor

LIST_MERCHANT_ACCOUNTS_NAME = "list_merchant_accounts"
LIST_MERCHANT_ACCOUNTS_DESCRIPTION = """Lists the merchant accounts that the API credential has access to.

    Args:
        pageNumber (integer, optional): The number of the page to fetch.
        pageSize (integer, optional): The number of items to have on a page, maximum 100. The default is 10 items on a page.

    Returns:
        object: The Adyen API response with the merchant accounts and pagination links.

    Notes:
        - Corresponds to the Adyen Management API GET /merchants endpoint.
        - Your API credential must have the "Management API - Accounts read" role.

    Examples:
        list_merchant_accounts({"pageSize": 25})
        # Returns the first 25 merchant accounts."""

GET_MERCHANT_ACCOUNT_NAME = "get_merchant_account"
GET_MERCHANT_ACCOUNT_DESCRIPTION = """Gets the details of a merchant account.

    Args:
        merchantId (string, required): The unique identifier of the merchant account.

    Returns:
        object: The Adyen API response describing the merchant account: its company, status, capture delay and default shopper interaction.

    Notes:
        - Corresponds to the Adyen Management API GET /merchants/{merchantId} endpoint.
        - Your API credential must have the "Management API - Accounts read" role.

    Examples:
        get_merchant_account({"merchantId": "YOUR_MERCHANT_ACCOUNT"})
        # Returns the merchant account object."""


class ListMerchantAccountsRequest(ToolRequest):
    page_number: Optional[int] = None
    page_size: Optional[int] = None


async def list_merchant_accounts(client: AdyenClient, request: ListMerchantAccountsRequest) -> ToolResult:
    management = AdyenManagementApi(client=client)
    return await invoke_vendor(
        "Failed to list merchant accounts. Error: ",
        management.account_merchant_level_api.list_merchant_accounts,
        query_parameters=request.to_query(),
    )


class GetMerchantAccountRequest(ToolRequest):
    merchant_id: str


async def get_merchant_account(client: AdyenClient, request: GetMerchantAccountRequest) -> ToolResult:
    management = AdyenManagementApi(client=client)
    return await invoke_vendor(
        "Failed to get merchant account. Error: ",
        management.account_merchant_level_api.get_merchant_account,
        request.merchant_id,
    )


def get_tools() -> List[ToolDescriptor]:
    return [
        ToolDescriptor(
            name=LIST_MERCHANT_ACCOUNTS_NAME,
            description=LIST_MERCHANT_ACCOUNTS_DESCRIPTION,
            arguments=ListMerchantAccountsRequest,
            invoke=list_merchant_accounts,
        ),
        ToolDescriptor(
            name=GET_MERCHANT_ACCOUNT_NAME,
            description=GET_MERCHANT_ACCOUNT_DESCRIPTION,
            arguments=GetMerchantAccountRequest,
            invoke=get_merchant_account,
        ),
    ]

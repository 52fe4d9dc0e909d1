from typing import List, Literal, Optional

from Adyen import AdyenCheckoutApi, AdyenClient

from adyen_mcp.tools.base import ToolDescriptor, ToolRequest, ToolResult, amount, invoke_vendor

CREATE_PAYMENT_LINK_NAME = "create_payment_link"
CREATE_PAYMENT_LINK_DESCRIPTION = """Creates a payment link to a page where the shopper can pay.

    Args:
        merchantAccount (string, required): The merchant account identifier for which the payment link is created.
        currency (string, required): The three-character ISO currency code, for example "EUR".
        value (integer, required): The amount in minor units, for example 1000 for 10.00 EUR.
        reference (string, required): A reference that is used to uniquely identify the payment in future communications.
        description (string, optional): A short description visible on the payment page.
        countryCode (string, optional): The shopper's two-letter country code, used to filter the payment methods shown.
        shopperReference (string, optional): Your unique reference for the shopper.
        shopperLocale (string, optional): The language of the payment page, for example "nl-NL".
        returnUrl (string, optional): The URL the shopper is redirected to after completing the payment.
        expiresAt (string, optional): The ISO 8601 date and time the link expires. Defaults to 24 hours after creation.
        reusable (boolean, optional): Set to true to allow multiple payments with the same link.

    Returns:
        object: The Adyen API response with the payment link `id`, `url`, `status` and `expiresAt`.

    Notes:
        - Corresponds to the Adyen Checkout API POST /paymentLinks endpoint.

    Examples:
        create_payment_link({"merchantAccount": "YOUR_MERCHANT_ACCOUNT", "currency": "EUR", "value": 1000, "reference": "order-1234"})
        # Returns the new payment link."""

GET_PAYMENT_LINK_NAME = "get_payment_link"
GET_PAYMENT_LINK_DESCRIPTION = """Gets the details of a payment link.

    Args:
        linkId (string, required): The unique identifier of the payment link.

    Returns:
        object: The Adyen API response with the payment link, including its `status` (active, completed, expired, paid, paymentPending).

    Notes:
        - Corresponds to the Adyen Checkout API GET /paymentLinks/{linkId} endpoint.

    Examples:
        get_payment_link({"linkId": "PL61C53A8B97E6915A"})
        # Returns the payment link object."""

UPDATE_PAYMENT_LINK_NAME = "update_payment_link"
UPDATE_PAYMENT_LINK_DESCRIPTION = """Updates the status of a payment link. Use this to force the expiry of a link.

    Args:
        linkId (string, required): The unique identifier of the payment link.
        status (string, required): The new status of the link. The only accepted value is "expired".

    Returns:
        object: The Adyen API response with the updated payment link.

    Notes:
        - Corresponds to the Adyen Checkout API PATCH /paymentLinks/{linkId} endpoint.
        - An expired link cannot be reactivated.

    Examples:
        update_payment_link({"linkId": "PL61C53A8B97E6915A", "status": "expired"})
        # Returns the expired payment link."""


class CreatePaymentLinkRequest(ToolRequest):
    merchant_account: str
    currency: str
    value: int
    reference: str
    description: Optional[str] = None
    country_code: Optional[str] = None
    shopper_reference: Optional[str] = None
    shopper_locale: Optional[str] = None
    return_url: Optional[str] = None
    expires_at: Optional[str] = None
    reusable: Optional[bool] = None


async def create_payment_link(client: AdyenClient, request: CreatePaymentLinkRequest) -> ToolResult:
    checkout = AdyenCheckoutApi(client=client)
    body = request.to_params(exclude=["currency", "value"])
    body["amount"] = amount(request.currency, request.value)
    return await invoke_vendor(
        "Failed to create payment link. Error: ",
        checkout.payment_links_api.payment_links,
        body,
    )


class GetPaymentLinkRequest(ToolRequest):
    link_id: str


async def get_payment_link(client: AdyenClient, request: GetPaymentLinkRequest) -> ToolResult:
    checkout = AdyenCheckoutApi(client=client)
    return await invoke_vendor(
        "Failed to get payment link. Error: ",
        checkout.payment_links_api.get_payment_link,
        request.link_id,
    )


class UpdatePaymentLinkRequest(ToolRequest):
    link_id: str
    status: Literal["expired"]


async def update_payment_link(client: AdyenClient, request: UpdatePaymentLinkRequest) -> ToolResult:
    checkout = AdyenCheckoutApi(client=client)
    return await invoke_vendor(
        "Failed to update payment link. Error: ",
        checkout.payment_links_api.update_payment_link,
        {"status": request.status},
        request.link_id,
    )


def get_tools() -> List[ToolDescriptor]:
    return [
        ToolDescriptor(
            name=CREATE_PAYMENT_LINK_NAME,
            description=CREATE_PAYMENT_LINK_DESCRIPTION,
            arguments=CreatePaymentLinkRequest,
            invoke=create_payment_link,
        ),
        ToolDescriptor(
            name=GET_PAYMENT_LINK_NAME,
            description=GET_PAYMENT_LINK_DESCRIPTION,
            arguments=GetPaymentLinkRequest,
            invoke=get_payment_link,
        ),
        ToolDescriptor(
            name=UPDATE_PAYMENT_LINK_NAME,
            description=UPDATE_PAYMENT_LINK_DESCRIPTION,
            arguments=UpdatePaymentLinkRequest,
            invoke=update_payment_link,
        ),
    ]

from typing import List, Optional

from Adyen import AdyenCheckoutApi, AdyenClient

from adyen_mcp.tools.base import ToolDescriptor, ToolRequest, ToolResult, amount, invoke_vendor

CREATE_PAYMENT_SESSION_NAME = "create_payment_session"
CREATE_PAYMENT_SESSION_DESCRIPTION = """Creates a payment session for the Adyen Drop-in or Components checkout.

    Args:
        merchantAccount (string, required): The merchant account identifier that processes the payment.
        currency (string, required): The three-character ISO currency code, for example "EUR".
        value (integer, required): The amount in minor units, for example 1000 for 10.00 EUR.
        reference (string, required): Your reference to uniquely identify the payment.
        returnUrl (string, required): The URL the shopper returns to after a redirect payment method.
        countryCode (string, optional): The shopper's two-letter country code.
        shopperLocale (string, optional): The language of the checkout, for example "en-US".
        shopperReference (string, optional): Your unique reference for the shopper.
        channel (string, optional): The platform where the payment takes place: "Web", "iOS" or "Android".
        expiresAt (string, optional): The ISO 8601 date and time the session expires. Defaults to one hour after creation.

    Returns:
        object: The Adyen API response with the session `id` and `sessionData` to pass to the front end.

    Notes:
        - Corresponds to the Adyen Checkout API POST /sessions endpoint.

    Examples:
        create_payment_session({"merchantAccount": "YOUR_MERCHANT_ACCOUNT", "currency": "EUR", "value": 1000, "reference": "order-1234", "returnUrl": "https://example.com/checkout"})
        # Returns the new session."""

GET_PAYMENT_SESSION_NAME = "get_payment_session"
GET_PAYMENT_SESSION_DESCRIPTION = """Gets the result of a payment session.

    Args:
        sessionId (string, required): The unique identifier of the session.
        sessionResult (string, required): The `sessionResult` value returned by the Drop-in or Components after the payment.

    Returns:
        object: The Adyen API response with the session `id` and its `status` (completed, paymentPending, canceled, expired, active, refused).

    Notes:
        - Corresponds to the Adyen Checkout API GET /sessions/{sessionId} endpoint.

    Examples:
        get_payment_session({"sessionId": "CS12345678", "sessionResult": "X3XtfGC9!H4sIAAAAAAAA..."})
        # Returns the session status."""

GET_PAYMENT_METHODS_NAME = "get_payment_methods"
GET_PAYMENT_METHODS_DESCRIPTION = """Gets the payment methods available for a transaction.

    Args:
        merchantAccount (string, required): The merchant account identifier.
        countryCode (string, optional): The shopper's two-letter country code.
        currency (string, optional): The three-character ISO currency code. Sent only together with value.
        value (integer, optional): The amount in minor units. Sent only together with currency.
        channel (string, optional): The platform where the payment takes place: "Web", "iOS" or "Android".
        shopperLocale (string, optional): The language used for payment method names, for example "de-DE".
        shopperReference (string, optional): Your unique reference for the shopper, to include stored payment methods.

    Returns:
        object: The Adyen API response with the available `paymentMethods` and any `storedPaymentMethods`.

    Notes:
        - Corresponds to the Adyen Checkout API POST /paymentMethods endpoint.

    Examples:
        get_payment_methods({"merchantAccount": "YOUR_MERCHANT_ACCOUNT", "countryCode": "NL", "currency": "EUR", "value": 1000})
        # Returns the payment methods available in the Netherlands for 10.00 EUR."""


class CreatePaymentSessionRequest(ToolRequest):
    merchant_account: str
    currency: str
    value: int
    reference: str
    return_url: str
    country_code: Optional[str] = None
    shopper_locale: Optional[str] = None
    shopper_reference: Optional[str] = None
    channel: Optional[str] = None
    expires_at: Optional[str] = None


async def create_payment_session(client: AdyenClient, request: CreatePaymentSessionRequest) -> ToolResult:
    checkout = AdyenCheckoutApi(client=client)
    body = request.to_params(exclude=["currency", "value"])
    body["amount"] = amount(request.currency, request.value)
    return await invoke_vendor(
        "Failed to create payment session. Error: ",
        checkout.payments_api.sessions,
        body,
    )


class GetPaymentSessionRequest(ToolRequest):
    session_id: str
    session_result: str


async def get_payment_session(client: AdyenClient, request: GetPaymentSessionRequest) -> ToolResult:
    checkout = AdyenCheckoutApi(client=client)
    return await invoke_vendor(
        "Failed to get payment session. Error: ",
        checkout.payments_api.get_result_of_payment_session,
        request.session_id,
        query_parameters=request.to_query(exclude=["session_id"]),
    )


class GetPaymentMethodsRequest(ToolRequest):
    merchant_account: str
    country_code: Optional[str] = None
    currency: Optional[str] = None
    value: Optional[int] = None
    channel: Optional[str] = None
    shopper_locale: Optional[str] = None
    shopper_reference: Optional[str] = None


async def get_payment_methods(client: AdyenClient, request: GetPaymentMethodsRequest) -> ToolResult:
    checkout = AdyenCheckoutApi(client=client)
    body = request.to_params(exclude=["currency", "value"])
    if request.currency is not None and request.value is not None:
        body["amount"] = amount(request.currency, request.value)
    return await invoke_vendor(
        "Failed to get payment methods. Error: ",
        checkout.payments_api.payment_methods,
        body,
    )


def get_tools() -> List[ToolDescriptor]:
    return [
        ToolDescriptor(
            name=CREATE_PAYMENT_SESSION_NAME,
            description=CREATE_PAYMENT_SESSION_DESCRIPTION,
            arguments=CreatePaymentSessionRequest,
            invoke=create_payment_session,
        ),
        ToolDescriptor(
            name=GET_PAYMENT_SESSION_NAME,
            description=GET_PAYMENT_SESSION_DESCRIPTION,
            arguments=GetPaymentSessionRequest,
            invoke=get_payment_session,
        ),
        ToolDescriptor(
            name=GET_PAYMENT_METHODS_NAME,
            description=GET_PAYMENT_METHODS_DESCRIPTION,
            arguments=GetPaymentMethodsRequest,
            invoke=get_payment_methods,
        ),
    ]

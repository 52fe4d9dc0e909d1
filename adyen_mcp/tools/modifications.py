from typing import List, Optional

from Adyen import AdyenCheckoutApi, AdyenClient

from adyen_mcp.tools.base import ToolDescriptor, ToolRequest, ToolResult, amount, invoke_vendor

REFUND_PAYMENT_NAME = "refund_payment"
REFUND_PAYMENT_DESCRIPTION = """Refunds a captured payment, in full or in part.

    Args:
        pspReference (string, required): The PSP reference of the payment to refund.
        merchantAccount (string, required): The merchant account that processed the payment.
        currency (string, required): The three-character ISO currency code of the refund, for example "EUR".
        value (integer, required): The refund amount in minor units, for example 1000 for 10.00 EUR.
        reference (string, optional): Your reference for the refund, for example an order number.

    Returns:
        object: The Adyen API response with the refund's own pspReference and a status of "received".

    Notes:
        - Corresponds to the Adyen Checkout API POST /payments/{paymentPspReference}/refunds endpoint.
        - The refund is processed asynchronously; the final outcome arrives in a REFUND webhook.
        - Only captured payments can be refunded. To stop an uncaptured payment, use cancel_payment.

    Examples:
        refund_payment({"pspReference": "993617895204576J", "merchantAccount": "YOUR_MERCHANT_ACCOUNT", "currency": "EUR", "value": 1000})
        # Returns the refund request acknowledgement."""

CANCEL_PAYMENT_NAME = "cancel_payment"
CANCEL_PAYMENT_DESCRIPTION = """Cancels an authorised payment that has not been captured yet.

    Args:
        pspReference (string, required): The PSP reference of the payment to cancel.
        merchantAccount (string, required): The merchant account that processed the payment.
        reference (string, optional): Your reference for the cancel request.

    Returns:
        object: The Adyen API response with the cancellation's own pspReference and a status of "received".

    Notes:
        - Corresponds to the Adyen Checkout API POST /payments/{paymentPspReference}/cancels endpoint.
        - The cancellation is processed asynchronously; the final outcome arrives in a CANCELLATION webhook.

    Examples:
        cancel_payment({"pspReference": "993617895204576J", "merchantAccount": "YOUR_MERCHANT_ACCOUNT"})
        # Returns the cancel request acknowledgement."""


class RefundPaymentRequest(ToolRequest):
    psp_reference: str
    merchant_account: str
    currency: str
    value: int
    reference: Optional[str] = None


async def refund_payment(client: AdyenClient, request: RefundPaymentRequest) -> ToolResult:
    checkout = AdyenCheckoutApi(client=client)
    body = request.to_params(exclude=["psp_reference", "currency", "value"])
    body["amount"] = amount(request.currency, request.value)
    return await invoke_vendor(
        "Failed to refund payment. Error: ",
        checkout.modifications_api.refund_captured_payment,
        body,
        request.psp_reference,
    )


class CancelPaymentRequest(ToolRequest):
    psp_reference: str
    merchant_account: str
    reference: Optional[str] = None


async def cancel_payment(client: AdyenClient, request: CancelPaymentRequest) -> ToolResult:
    checkout = AdyenCheckoutApi(client=client)
    return await invoke_vendor(
        "Failed to cancel payment. Error: ",
        checkout.modifications_api.cancel_authorised_payment_by_psp_reference,
        request.to_params(exclude=["psp_reference"]),
        request.psp_reference,
    )


def get_tools() -> List[ToolDescriptor]:
    return [
        ToolDescriptor(
            name=REFUND_PAYMENT_NAME,
            description=REFUND_PAYMENT_DESCRIPTION,
            arguments=RefundPaymentRequest,
            invoke=refund_payment,
        ),
        ToolDescriptor(
            name=CANCEL_PAYMENT_NAME,
            description=CANCEL_PAYMENT_DESCRIPTION,
            arguments=CancelPaymentRequest,
            invoke=cancel_payment,
        ),
    ]

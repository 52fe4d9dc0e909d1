from typing import List, Optional

from Adyen import AdyenClient, AdyenLegalEntityManagementApi

from adyen_mcp.tools.base import ToolDescriptor, ToolRequest, ToolResult, invoke_vendor

CREATE_HOSTED_ONBOARDING_LINK_NAME = "create_hosted_onboarding_link"
CREATE_HOSTED_ONBOARDING_LINK_DESCRIPTION = """Creates a link to an Adyen-hosted onboarding page for a legal entity.

    Args:
        legalEntityId (string, required): The unique identifier of the legal entity to onboard.
        redirectUrl (string, optional): The URL the user is redirected to after completing the hosted onboarding flow.
        themeId (string, optional): The unique identifier of the hosted onboarding theme to apply.
        locale (string, optional): The language of the onboarding page, for example "en-US" or "nl-NL".

    Returns:
        object: The Adyen API response containing the onboarding page `url`.

    Notes:
        - Corresponds to the Adyen Legal Entity Management API POST /legalEntities/{id}/onboardingLinks endpoint.
        - The link expires after a few minutes; create a new one each time the user needs it.

    Examples:
        create_hosted_onboarding_link({"legalEntityId": "LE322KL239863H5GLPPJ255S", "redirectUrl": "https://example.com/done"})
        # Returns an object with the onboarding link."""


class CreateHostedOnboardingLinkRequest(ToolRequest):
    legal_entity_id: str
    redirect_url: Optional[str] = None
    theme_id: Optional[str] = None
    locale: Optional[str] = None


async def create_hosted_onboarding_link(
    client: AdyenClient, request: CreateHostedOnboardingLinkRequest
) -> ToolResult:
    legal_entity_management = AdyenLegalEntityManagementApi(client=client)
    return await invoke_vendor(
        "Failed to create hosted onboarding link. Error: ",
        legal_entity_management.hosted_onboarding_api.get_link_to_adyenhosted_onboarding_page,
        request.to_params(exclude=["legal_entity_id"]),
        request.legal_entity_id,
    )


def get_tools() -> List[ToolDescriptor]:
    return [
        ToolDescriptor(
            name=CREATE_HOSTED_ONBOARDING_LINK_NAME,
            description=CREATE_HOSTED_ONBOARDING_LINK_DESCRIPTION,
            arguments=CreateHostedOnboardingLinkRequest,
            invoke=create_hosted_onboarding_link,
        ),
    ]

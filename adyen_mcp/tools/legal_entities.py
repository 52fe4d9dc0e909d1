from typing import List

from Adyen import AdyenClient, AdyenLegalEntityManagementApi

from adyen_mcp.tools.base import ToolDescriptor, ToolRequest, ToolResult, invoke_vendor

GET_LEGAL_ENTITY_NAME = "get_legal_entity"
GET_LEGAL_ENTITY_DESCRIPTION = """Gets the details of a legal entity.

    Args:
        id (string, required): The unique identifier of the legal entity.

    Returns:
        object: The Adyen API response describing the legal entity: its type, the organization or individual details, entity associations and capabilities.

    Notes:
        - Corresponds to the Adyen Legal Entity Management API GET /legalEntities/{id} endpoint.
        - Your API credential must have the "Legal Entity Management API - Legal entities read" role.

    Examples:
        get_legal_entity({"id": "LE322KL239863H5GLPPJ255S"})
        # Returns the legal entity object."""


class GetLegalEntityRequest(ToolRequest):
    id: str


async def get_legal_entity(client: AdyenClient, request: GetLegalEntityRequest) -> ToolResult:
    legal_entity_management = AdyenLegalEntityManagementApi(client=client)
    return await invoke_vendor(
        "Failed to get legal entity. Error: ",
        legal_entity_management.legal_entities_api.get_legal_entity,
        request.id,
    )


def get_tools() -> List[ToolDescriptor]:
    return [
        ToolDescriptor(
            name=GET_LEGAL_ENTITY_NAME,
            description=GET_LEGAL_ENTITY_DESCRIPTION,
            arguments=GetLegalEntityRequest,
            invoke=get_legal_entity,
        ),
    ]

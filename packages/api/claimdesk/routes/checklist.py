# This project was developed with assistance from AI tools.
"""Per-insurer document checklist routes."""

import logging

from fastapi import APIRouter, Query, status

from ..core.errors import ProblemDetailsError
from ..schemas.checklist import (
    ChecklistRequest,
    ChecklistResponse,
    DocumentRequirementCheck,
    PacketReadinessResponse,
    RequiredDocument,
)
from ..services.checklist import (
    check_claim_checklist,
    find_missing_checklist_documents,
    is_document_required,
    list_required_documents,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/required-documents", response_model=list[RequiredDocument])
async def required_documents(
    insurer: str = Query(..., description="Insurer name as recorded on the claim."),
) -> list[RequiredDocument]:
    """List the documents this insurer expects on a claim."""
    return list_required_documents(insurer)


@router.get("/required-documents/{document_type}", response_model=DocumentRequirementCheck)
async def document_requirement(
    document_type: str,
    insurer: str = Query(..., description="Insurer name as recorded on the claim."),
) -> DocumentRequirementCheck:
    """Check whether a single document type is required for this insurer."""
    return DocumentRequirementCheck(
        document_type=document_type,
        insurer=insurer,
        required=is_document_required(document_type, insurer),
    )


@router.post("", response_model=ChecklistResponse)
async def claim_checklist(body: ChecklistRequest) -> ChecklistResponse:
    """Build the document checklist for a claim's uploaded documents."""
    return check_claim_checklist(body.insurer, body.documents)


@router.post("/packet-readiness", response_model=PacketReadinessResponse)
async def packet_readiness(body: ChecklistRequest) -> PacketReadinessResponse:
    """Confirm every required document is uploaded before packet generation.

    A blocked packet is a 400 whose ``errors`` member lists the missing
    document types in checklist order.
    """
    missing = find_missing_checklist_documents(body.insurer, body.documents)
    if missing:
        logger.info(
            "Packet blocked for insurer=%s: %d required document(s) missing",
            body.insurer,
            len(missing),
        )
        raise ProblemDetailsError(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot generate packet: missing required documents",
            errors=[dt.value for dt in missing],
        )
    return PacketReadinessResponse(ready=True)

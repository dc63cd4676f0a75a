# This project was developed with assistance from AI tools.
"""Claim document validation route.

Enforces the request preconditions the validator relies on, so the
service itself only ever sees well-formed input.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from ..core.config import settings
from ..schemas.validation import UploadedDocument, ValidationRequest, ValidationResult
from ..services.validation import validate_claim_documents

logger = logging.getLogger(__name__)

router = APIRouter()


def _require_fields(body: ValidationRequest) -> list[UploadedDocument]:
    """Reject incomplete requests with 400, return the documents otherwise."""
    if not body.insurer_name or not body.claim_type or not body.uploaded_documents:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid request. Required fields: insurerName, claimType, "
            "uploadedDocuments (non-empty array)",
        )
    if any(not doc.name or not doc.type for doc in body.uploaded_documents):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Each document must have name and type properties",
        )
    return [
        UploadedDocument(name=doc.name, type=doc.type, status=doc.status)
        for doc in body.uploaded_documents
    ]


@router.post("/validate", response_model=ValidationResult)
async def validate_documents(body: ValidationRequest) -> ValidationResult:
    """Validate a claim's uploaded documents against insurer requirements."""
    documents = _require_fields(body)
    result = validate_claim_documents(body.insurer_name, body.claim_type, documents)

    logger.info(
        "Validated %d document(s) for insurer=%s claim_type=%s: %s "
        "(missing=%d, issues=%d)",
        len(documents),
        body.insurer_name,
        body.claim_type,
        result.status.value,
        len(result.missing),
        len(result.issues),
    )
    if settings.LOG_VALIDATION_DETAILS:
        logger.info("Validation details: missing=%s issues=%s", result.missing, result.issues)
    return result

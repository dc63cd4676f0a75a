# This project was developed with assistance from AI tools.
"""Per-insurer document checklist service.

Determines which documents an insurer expects on a claim, then compares
against the claim's uploaded documents to build the checklist shown on the
claim detail view and to gate insurer packet generation.
"""

import logging
from collections.abc import Sequence

from ..enums import ChecklistDocumentType
from ..schemas.checklist import (
    ChecklistItem,
    ChecklistResponse,
    ClaimDocument,
    RequiredDocument,
)

logger = logging.getLogger(__name__)

DOCUMENT_TYPE_LABELS: dict[ChecklistDocumentType, str] = {
    ChecklistDocumentType.ADMISSION_FORM: "Hospital Admission Form",
    ChecklistDocumentType.INSURANCE_CARD: "Insurance Card",
    ChecklistDocumentType.ID_PROOF: "ID Proof",
    ChecklistDocumentType.DOCTOR_PRESCRIPTION: "Doctor Prescription",
    ChecklistDocumentType.MEDICAL_REPORTS: "Medical Reports",
}

STANDARD_DOCUMENTS: tuple[ChecklistDocumentType, ...] = (
    ChecklistDocumentType.ADMISSION_FORM,
    ChecklistDocumentType.INSURANCE_CARD,
    ChecklistDocumentType.ID_PROOF,
    ChecklistDocumentType.DOCTOR_PRESCRIPTION,
)

# Insurer name fragments (lowercase) for tiers that skip medical reports
_BASELINE_ONLY_TIERS = ("premium", "gold")


def get_required_documents(insurer: str) -> list[ChecklistDocumentType]:
    """Required document types for a claim with the given insurer."""
    name = insurer.lower()
    if any(tier in name for tier in _BASELINE_ONLY_TIERS):
        return list(STANDARD_DOCUMENTS)
    return [*STANDARD_DOCUMENTS, ChecklistDocumentType.MEDICAL_REPORTS]


def is_document_required(document_type: str, insurer: str) -> bool:
    return document_type in {dt.value for dt in get_required_documents(insurer)}


def list_required_documents(insurer: str) -> list[RequiredDocument]:
    return [
        RequiredDocument(type=dt, label=DOCUMENT_TYPE_LABELS[dt])
        for dt in get_required_documents(insurer)
    ]


def build_document_checklist(
    insurer: str,
    documents: Sequence[ClaimDocument],
) -> list[ChecklistItem]:
    """One checklist item per required type, with the first matching upload."""
    # First upload wins when a type was uploaded more than once
    doc_by_type: dict[str, ClaimDocument] = {}
    for doc in documents:
        doc_by_type.setdefault(doc.document_type, doc)

    items: list[ChecklistItem] = []
    for dt in get_required_documents(insurer):
        doc = doc_by_type.get(dt.value)
        items.append(
            ChecklistItem(
                type=dt,
                label=DOCUMENT_TYPE_LABELS[dt],
                uploaded=doc is not None,
                document=doc,
            )
        )
    return items


def find_missing_checklist_documents(
    insurer: str,
    documents: Sequence[ClaimDocument],
) -> list[ChecklistDocumentType]:
    """Required types with no uploaded document, in checklist order."""
    uploaded = {doc.document_type for doc in documents}
    return [dt for dt in get_required_documents(insurer) if dt.value not in uploaded]


def check_claim_checklist(
    insurer: str,
    documents: Sequence[ClaimDocument],
) -> ChecklistResponse:
    """Build the full checklist summary for a claim."""
    items = build_document_checklist(insurer, documents)
    missing = [item.type for item in items if not item.uploaded]
    provided_count = len(items) - len(missing)

    logger.debug(
        "Checklist for insurer=%s: %d/%d provided", insurer, provided_count, len(items)
    )
    return ChecklistResponse(
        insurer=insurer,
        items=items,
        missing=missing,
        is_complete=not missing,
        provided_count=provided_count,
        required_count=len(items),
    )

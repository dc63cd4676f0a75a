# This project was developed with assistance from AI tools.
"""Claim document validation service.

Checks a claim's uploaded documents against the fixed list of documents
required for cashless hospitalization, classifies per-document quality
problems, and produces a PASS/FAIL verdict with a short summary.

Everything here is a pure function of its arguments. This list is separate
from the insurer-tiered checklist in ``services.checklist``; the two
overlap but disagree, and neither calls the other.
"""

from collections.abc import Sequence

from ..enums import DocumentTypeCode, QualityStatus, RequiredDocumentName, ValidationStatus
from ..schemas.validation import UploadedDocument, ValidationResult

# Required for every claim, in reporting order
REQUIRED_DOCUMENTS: tuple[RequiredDocumentName, ...] = (
    RequiredDocumentName.PATIENT_ID_PROOF,
    RequiredDocumentName.INSURANCE_POLICY_COPY,
    RequiredDocumentName.DOCTORS_ADMISSION_NOTES,
    RequiredDocumentName.DISCHARGE_SUMMARY,
    RequiredDocumentName.FINAL_HOSPITAL_BILL,
    RequiredDocumentName.PAYMENT_RECEIPTS,
    RequiredDocumentName.LAB_DIAGNOSTIC_REPORTS,
)

# Which required document each type code satisfies
DOCUMENT_TYPE_LABELS: dict[DocumentTypeCode, RequiredDocumentName] = {
    DocumentTypeCode.ID_PROOF: RequiredDocumentName.PATIENT_ID_PROOF,
    DocumentTypeCode.INSURANCE_CARD: RequiredDocumentName.INSURANCE_POLICY_COPY,
    DocumentTypeCode.DOCTOR_PRESCRIPTION: RequiredDocumentName.DOCTORS_ADMISSION_NOTES,
    DocumentTypeCode.DISCHARGE_SUMMARY: RequiredDocumentName.DISCHARGE_SUMMARY,
    DocumentTypeCode.HOSPITAL_BILL: RequiredDocumentName.FINAL_HOSPITAL_BILL,
    DocumentTypeCode.PAYMENT_RECEIPT: RequiredDocumentName.PAYMENT_RECEIPTS,
    DocumentTypeCode.MEDICAL_REPORTS: RequiredDocumentName.LAB_DIAGNOSTIC_REPORTS,
}

# Exact, case-sensitive insurer names that never require lab reports
LAB_REPORT_EXEMPT_INSURERS = frozenset({"BasicCare", "MinimalCover", "EssentialHealth"})


def satisfied_label(document: UploadedDocument) -> str:
    """Return the required-document label an uploaded document satisfies.

    Known type codes map to their canonical label. Anything else falls back
    to the document's own file name, which only counts if the file happens
    to be named exactly like a required document.
    """
    try:
        code = DocumentTypeCode(document.type)
    except ValueError:
        return document.name
    label = DOCUMENT_TYPE_LABELS.get(code)
    if label is None:
        return document.name
    return label.value


def is_lab_report_required(insurer_name: str, claim_type: str) -> bool:
    """Whether "Lab/Diagnostic Reports" is required for this claim.

    ``claim_type`` is accepted but does not affect the decision yet.
    """
    return insurer_name not in LAB_REPORT_EXEMPT_INSURERS


def describe_issue(status: str | None) -> str | None:
    """Return the issue text for a quality status, or None if usable."""
    if not status:
        return "document status not provided"
    try:
        quality = QualityStatus(status)
    except ValueError:
        return "unknown issue"

    match quality:
        case QualityStatus.COMPLETE | QualityStatus.VALID:
            return None
        case QualityStatus.UNCLEAR:
            return "document is unclear or illegible"
        case QualityStatus.INCOMPLETE:
            return "document is incomplete"
        case QualityStatus.MISMATCHED:
            return "document information does not match claim details"


def find_missing_documents(
    insurer_name: str,
    claim_type: str,
    uploaded_documents: Sequence[UploadedDocument],
) -> list[str]:
    """Required labels not covered by any uploaded document, in list order."""
    satisfied = {satisfied_label(doc) for doc in uploaded_documents}
    lab_required = is_lab_report_required(insurer_name, claim_type)

    missing: list[str] = []
    for required in REQUIRED_DOCUMENTS:
        if required is RequiredDocumentName.LAB_DIAGNOSTIC_REPORTS and not lab_required:
            continue
        if required.value not in satisfied:
            missing.append(required.value)
    return missing


def find_document_issues(uploaded_documents: Sequence[UploadedDocument]) -> list[str]:
    """Quality issues for every uploaded document, in input order."""
    issues: list[str] = []
    for doc in uploaded_documents:
        reason = describe_issue(doc.status)
        if reason is not None:
            issues.append(f"{doc.name} - {reason}")
    return issues


def summarize(missing_count: int, issue_count: int) -> str:
    if missing_count and issue_count:
        return (
            f"{missing_count} required document(s) missing and "
            f"{issue_count} document(s) have issues."
        )
    if missing_count:
        return f"{missing_count} required document(s) missing."
    if issue_count:
        return f"{issue_count} document(s) have issues."
    return "All required documents are present and valid."


def validate_claim_documents(
    insurer_name: str,
    claim_type: str,
    uploaded_documents: Sequence[UploadedDocument],
) -> ValidationResult:
    """Validate uploaded claim documents against insurer requirements.

    Args:
        insurer_name: Insurer the claim is filed with.
        claim_type: Claim type, e.g. "Cashless Hospitalization".
        uploaded_documents: Documents already uploaded for the claim.

    Returns:
        A fresh ValidationResult. ``status`` is PASS only when nothing is
        missing and no document has a quality issue.
    """
    missing = find_missing_documents(insurer_name, claim_type, uploaded_documents)
    issues = find_document_issues(uploaded_documents)
    status = ValidationStatus.PASS if not missing and not issues else ValidationStatus.FAIL
    return ValidationResult(
        missing=missing,
        issues=issues,
        status=status,
        notes=summarize(len(missing), len(issues)),
    )

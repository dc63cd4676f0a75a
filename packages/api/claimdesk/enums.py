# This project was developed with assistance from AI tools.
"""
Domain enums for hospital claim documents.

Shared by the validation and checklist services and the Pydantic schemas.
"""

import enum


class DocumentTypeCode(str, enum.Enum):
    """Semantic kind of an uploaded claim document."""

    ID_PROOF = "ID_PROOF"
    INSURANCE_CARD = "INSURANCE_CARD"
    DOCTOR_PRESCRIPTION = "DOCTOR_PRESCRIPTION"
    DISCHARGE_SUMMARY = "DISCHARGE_SUMMARY"
    HOSPITAL_BILL = "HOSPITAL_BILL"
    PAYMENT_RECEIPT = "PAYMENT_RECEIPT"
    MEDICAL_REPORTS = "MEDICAL_REPORTS"
    OTHER = "OTHER"


class RequiredDocumentName(str, enum.Enum):
    """Labels of the documents every claim must carry, as shown to users."""

    PATIENT_ID_PROOF = "Patient ID Proof"
    INSURANCE_POLICY_COPY = "Insurance Policy Copy"
    DOCTORS_ADMISSION_NOTES = "Doctor's Admission Notes"
    DISCHARGE_SUMMARY = "Discharge Summary"
    FINAL_HOSPITAL_BILL = "Final Hospital Bill with Breakup"
    PAYMENT_RECEIPTS = "Payment Receipts"
    LAB_DIAGNOSTIC_REPORTS = "Lab/Diagnostic Reports"


class QualityStatus(str, enum.Enum):
    """Per-document usability flag; only VALID and COMPLETE are usable."""

    VALID = "VALID"
    COMPLETE = "COMPLETE"
    UNCLEAR = "UNCLEAR"
    INCOMPLETE = "INCOMPLETE"
    MISMATCHED = "MISMATCHED"


class ValidationStatus(str, enum.Enum):
    PASS = "PASS"
    FAIL = "FAIL"


class ChecklistDocumentType(str, enum.Enum):
    """Document types tracked on a claim's per-insurer checklist."""

    ADMISSION_FORM = "admission_form"
    INSURANCE_CARD = "insurance_card"
    ID_PROOF = "id_proof"
    DOCTOR_PRESCRIPTION = "doctor_prescription"
    MEDICAL_REPORTS = "medical_reports"

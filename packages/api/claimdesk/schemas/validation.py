# This project was developed with assistance from AI tools.
"""Claim document validation request/response schemas."""

from pydantic import BaseModel, ConfigDict, Field

from ..enums import ValidationStatus


class UploadedDocument(BaseModel):
    """A document already uploaded for a claim, as seen by the validator.

    ``type`` is usually a ``DocumentTypeCode`` value but free text is
    accepted. ``status`` is usually a ``QualityStatus`` value; anything else
    is reported as an unknown issue rather than rejected.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    status: str | None = None


class UploadedDocumentIn(BaseModel):
    """Loosely-typed document entry; required fields are checked by the route."""

    name: str | None = None
    type: str | None = None
    status: str | None = None


class ValidationRequest(BaseModel):
    """Body of ``POST /api/validation/validate``."""

    model_config = ConfigDict(populate_by_name=True)

    insurer_name: str | None = Field(default=None, alias="insurerName")
    claim_type: str | None = Field(default=None, alias="claimType")
    uploaded_documents: list[UploadedDocumentIn] | None = Field(
        default=None, alias="uploadedDocuments"
    )


class ValidationResult(BaseModel):
    """Verdict for one set of uploaded claim documents."""

    model_config = ConfigDict(frozen=True)

    missing: list[str]
    issues: list[str]
    status: ValidationStatus
    notes: str

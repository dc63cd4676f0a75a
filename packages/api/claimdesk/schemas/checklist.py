# This project was developed with assistance from AI tools.
"""Per-insurer document checklist schemas."""

from pydantic import BaseModel, Field

from ..enums import ChecklistDocumentType


class ClaimDocument(BaseModel):
    """An uploaded claim document record (metadata only)."""

    document_type: str
    file_name: str
    file_path: str | None = None
    mime_type: str | None = None


class RequiredDocument(BaseModel):
    type: ChecklistDocumentType
    label: str


class ChecklistItem(BaseModel):
    """A single required document with its upload state."""

    type: ChecklistDocumentType
    label: str
    uploaded: bool = False
    document: ClaimDocument | None = None


class ChecklistRequest(BaseModel):
    insurer: str
    documents: list[ClaimDocument] = Field(default_factory=list)


class ChecklistResponse(BaseModel):
    """Checklist summary for one claim."""

    insurer: str
    items: list[ChecklistItem]
    missing: list[ChecklistDocumentType]
    is_complete: bool
    provided_count: int
    required_count: int


class PacketReadinessResponse(BaseModel):
    ready: bool


class DocumentRequirementCheck(BaseModel):
    """Whether one document type is required for an insurer."""

    document_type: str
    insurer: str
    required: bool

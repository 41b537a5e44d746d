"""Pydantic records exchanged with stores and patient repositories."""
from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from ..pedigree import Pedigree


class PedigreeRecord(BaseModel):
    """A persisted pedigree: the JSON document and its SVG drawing."""

    pedigree_id: str = Field(min_length=1, description="Owning family or record id")
    data: dict[str, Any] = Field(description="Pedigree JSON document")
    image: str = Field(default="", description="Rendered SVG; empty when never drawn")
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def to_pedigree(self) -> Pedigree:
        """Build the aggregate for this record.

        Raises:
            InvalidPedigree: if the stored document is empty
        """
        from ..pedigree import Pedigree

        return Pedigree(self.data, self.image)


class PatientRecord(BaseModel):
    """A patient record a pedigree node can link to."""

    patient_id: str = Field(min_length=1)
    external_id: str | None = Field(default=None, description="Lab or clinic identifier")
    name: str | None = None
    pedigree_id: str | None = Field(default=None, description="Family pedigree the patient belongs to")


class LinkResolution(BaseModel):
    """Outcome of resolving one linked id against a patient repository."""

    patient_id: str
    record: PatientRecord | None = None
    error: str | None = None

    @property
    def resolved(self) -> bool:
        return self.record is not None

"""Error taxonomy for pedigree documents, drawings and their collaborators.

No-match conditions (unlinking an unknown id, highlighting with a blank id)
are defined no-ops and never raise.
"""
from __future__ import annotations

from dataclasses import dataclass


class PedigreeError(Exception):
    """Base class for all pedigree-sync errors."""


class InvalidPedigree(PedigreeError):
    """Raised when a pedigree is built from a missing or empty document."""


class MalformedDocument(PedigreeError):
    """Raised when the node list of a pedigree document has the wrong shape.

    Traversal fails loudly rather than treating a broken document as empty.
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        base = super().__str__()
        if self.path:
            return f"{base} (at {self.path})"
        return base


class MalformedMarkup(PedigreeError):
    """Raised when a non-empty SVG image cannot be parsed."""


@dataclass
class PedigreeNotFound(PedigreeError):
    """Raised by a pedigree store when no record exists for an id."""

    pedigree_id: str

    def __str__(self) -> str:
        return f"No pedigree stored under id {self.pedigree_id!r}"


@dataclass
class PatientNotFound(PedigreeError):
    """Raised by a patient repository when an id does not resolve."""

    patient_id: str
    reason: str = "not found"

    def __str__(self) -> str:
        return f"Patient {self.patient_id!r} {self.reason}"

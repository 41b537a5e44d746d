"""Pedigree document and record models."""

from .document import PedigreeDocument, PedigreeNode
from .records import LinkResolution, PatientRecord, PedigreeRecord

__all__ = [
    "PedigreeDocument",
    "PedigreeNode",
    "PedigreeRecord",
    "PatientRecord",
    "LinkResolution",
]

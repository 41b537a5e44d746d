"""Collaborator interfaces consumed around the pedigree core.

Implementations are passed in explicitly; nothing looks them up globally.
Lookups that miss raise instead of returning None.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models.records import PatientRecord, PedigreeRecord


@runtime_checkable
class PedigreeStore(Protocol):
    """Loads and saves pedigree document/drawing pairs."""

    def load(self, pedigree_id: str) -> PedigreeRecord:
        """Raises PedigreeNotFound if nothing is stored under the id."""
        ...

    def save(self, record: PedigreeRecord) -> None: ...

    def exists(self, pedigree_id: str) -> bool: ...


@runtime_checkable
class PatientRepository(Protocol):
    """Resolves patient records by id."""

    def get(self, patient_id: str) -> PatientRecord:
        """Raises PatientNotFound if the id does not resolve."""
        ...

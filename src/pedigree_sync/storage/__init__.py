"""Pedigree stores and patient repositories."""

from .base import PatientRepository, PedigreeStore
from .json_store import JsonFilePedigreeStore
from .memory import InMemoryPatientRepository, InMemoryPedigreeStore

__all__ = [
    "PedigreeStore",
    "PatientRepository",
    "JsonFilePedigreeStore",
    "InMemoryPedigreeStore",
    "InMemoryPatientRepository",
]

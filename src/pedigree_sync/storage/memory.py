from __future__ import annotations

import threading
from collections.abc import Iterable

from ..exceptions import PatientNotFound, PedigreeNotFound
from ..logging import get_logger
from ..models.records import PatientRecord, PedigreeRecord

logger = get_logger(__name__)


class InMemoryPedigreeStore:
    """Dict-backed pedigree store. Records are copied on the way in and out."""

    def __init__(self, records: Iterable[PedigreeRecord] = ()) -> None:
        self._lock = threading.Lock()
        self._records: dict[str, PedigreeRecord] = {}
        for record in records:
            self.save(record)

    def load(self, pedigree_id: str) -> PedigreeRecord:
        with self._lock:
            record = self._records.get(pedigree_id)
        if record is None:
            raise PedigreeNotFound(pedigree_id)
        return record.model_copy(deep=True)

    def save(self, record: PedigreeRecord) -> None:
        with self._lock:
            self._records[record.pedigree_id] = record.model_copy(deep=True)
        logger.debug("store.saved", pedigree_id=record.pedigree_id)

    def exists(self, pedigree_id: str) -> bool:
        with self._lock:
            return pedigree_id in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


class InMemoryPatientRepository:
    """Patient lookup over a fixed set of records."""

    def __init__(self, patients: Iterable[PatientRecord] = ()) -> None:
        self._patients = {p.patient_id: p for p in patients}

    def add(self, patient: PatientRecord) -> None:
        self._patients[patient.patient_id] = patient

    def get(self, patient_id: str) -> PatientRecord:
        try:
            return self._patients[patient_id]
        except KeyError:
            raise PatientNotFound(patient_id) from None

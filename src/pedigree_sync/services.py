"""Pedigree workflows over injected stores and repositories."""
from __future__ import annotations

from .exceptions import PatientNotFound
from .logging import get_logger
from .models.records import LinkResolution
from .pedigree import Pedigree
from .storage.base import PatientRepository, PedigreeStore

logger = get_logger(__name__)


def resolve_linked_patients(pedigree: Pedigree, repository: PatientRepository) -> list[LinkResolution]:
    """Look up the patient record behind every linked node.

    A miss yields a resolution carrying the error instead of a record, so
    callers always see which links are dangling.
    """
    resolutions = []
    for patient_id in pedigree.extract_ids():
        try:
            record = repository.get(patient_id)
        except PatientNotFound as e:
            logger.warning("pedigree.dangling_link", patient_id=patient_id, reason=e.reason)
            resolutions.append(LinkResolution(patient_id=patient_id, error=str(e)))
            continue
        resolutions.append(LinkResolution(patient_id=patient_id, record=record))
    return resolutions


def unlink_patient(store: PedigreeStore, pedigree_id: str, patient_id: str) -> Pedigree:
    """Remove a patient from a stored pedigree and save the result.

    Raises:
        PedigreeNotFound: no pedigree stored under ``pedigree_id``
        InvalidPedigree: the stored document is empty
    """
    pedigree = store.load(pedigree_id).to_pedigree()
    pedigree.remove_link(patient_id)
    store.save(pedigree.to_record(pedigree_id))
    logger.info("pedigree.patient_unlinked", pedigree_id=pedigree_id, patient_id=patient_id)
    return pedigree


def render_for_viewer(store: PedigreeStore, pedigree_id: str, viewer_id: str | None = None) -> str:
    """Load a stored pedigree and return its drawing highlighted for ``viewer_id``."""
    return store.load(pedigree_id).to_pedigree().get_image(viewer_id)

"""File-backed pedigree store: one JSON file per pedigree."""
from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path

from pydantic import ValidationError

from ..exceptions import MalformedDocument, PedigreeNotFound
from ..logging import get_logger
from ..models.records import PedigreeRecord

logger = get_logger(__name__)

_SAFE_ID = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]*")


class JsonFilePedigreeStore:
    """Stores each ``PedigreeRecord`` as ``<root>/<pedigree_id>.json``.

    Writes go to a temporary file in the same directory and are renamed
    into place, so a crash never leaves a half-written record.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)

    def path_for(self, pedigree_id: str) -> Path:
        if not _SAFE_ID.fullmatch(pedigree_id or ""):
            raise ValueError(f"Unsafe pedigree id: {pedigree_id!r}")
        return self.root / f"{pedigree_id}.json"

    def exists(self, pedigree_id: str) -> bool:
        return self.path_for(pedigree_id).exists()

    def load(self, pedigree_id: str) -> PedigreeRecord:
        path = self.path_for(pedigree_id)
        if not path.exists():
            raise PedigreeNotFound(pedigree_id)
        try:
            return PedigreeRecord.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as e:
            raise MalformedDocument(f"Stored pedigree record is invalid: {e}", path=str(path)) from e

    def save(self, record: PedigreeRecord) -> None:
        path = self.path_for(record.pedigree_id)
        payload = record.model_dump_json(indent=2)

        fd, tmp_path = tempfile.mkstemp(prefix=path.name + ".", dir=str(self.root))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
        logger.info("store.saved", pedigree_id=record.pedigree_id, path=str(path))

    def list_ids(self) -> list[str]:
        return sorted(p.stem for p in self.root.glob("*.json"))

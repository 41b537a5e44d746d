"""The pedigree aggregate: one JSON document plus its SVG drawing."""
from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from . import links, svg
from .config import CONFIG, PedigreeConfig
from .exceptions import InvalidPedigree
from .logging import get_logger
from .models.document import PedigreeDocument

if TYPE_CHECKING:
    from .models.records import PedigreeRecord

logger = get_logger(__name__)


class Pedigree:
    """Sole owner of a pedigree document and its drawing.

    All mutation goes through this class so the two never drift apart:
    unlinking a patient edits both the node properties and the drawing.
    Readers get snapshots; the live document is never handed out.

    Not thread-safe. Use one instance per edit session.

    Example:
        >>> pedigree = Pedigree({"GG": [{"id": 0, "prop": {"phenotipsId": "P001"}}]}, svg_text)
        >>> pedigree.extract_ids()
        ['P001']
        >>> pedigree.remove_link("P001")
    """

    def __init__(
        self,
        document: PedigreeDocument | Mapping[str, Any] | None,
        image: str | None = "",
        config: PedigreeConfig = CONFIG,
    ) -> None:
        """Initialize from an existing document/drawing pair.

        Args:
            document: Pedigree JSON, raw or already wrapped
            image: Rendered SVG; None or missing means no drawing yet
            config: Key and attribute conventions

        Raises:
            InvalidPedigree: if the document is missing, empty, or has no nodes
            MalformedDocument: if ``document`` is not a JSON object
        """
        if document is None:
            raise InvalidPedigree("Pedigree document is required")
        if isinstance(document, PedigreeDocument):
            document = document.data
        # Take a private copy; the caller's object is never mutated
        if isinstance(document, Mapping):
            document = copy.deepcopy(dict(document))
        document = PedigreeDocument(document, config=config)
        if document.is_empty:
            raise InvalidPedigree("Pedigree document is empty")

        raw_nodes = document.data.get(config.nodes_key)
        if raw_nodes is None or (isinstance(raw_nodes, list) and not raw_nodes):
            raise InvalidPedigree(f"Pedigree document has no nodes under {config.nodes_key!r}")

        self._document = document
        self._image = image or ""
        self.config = config

    @property
    def data(self) -> dict[str, Any]:
        return self.get_document()

    def get_document(self) -> dict[str, Any]:
        """Return a deep copy of the pedigree JSON."""
        return copy.deepcopy(dict(self._document.data))

    def get_image(self, current_patient_id: str | None = None) -> str:
        """Return the drawing with ``current_patient_id`` highlighted.

        The highlight is computed per call; the stored drawing never
        carries one.
        """
        return svg.apply_current_viewer_style(self._image, current_patient_id, config=self.config)

    @property
    def has_image(self) -> bool:
        return bool(self._image)

    def extract_ids(self) -> list[str]:
        """Linked patient ids in node order, blanks skipped."""
        return links.extract_linked_ids(self._document, config=self.config)

    def extract_linked_properties(self) -> list[dict[str, Any]]:
        """Copies of every non-empty node property bag, in node order."""
        return [copy.deepcopy(dict(p)) for p in links.extract_linked_properties(self._document)]

    def remove_link(self, patient_id: str) -> None:
        """Unlink ``patient_id`` from the drawing and from every node.

        The drawing is updated first, then the document. There is no
        rollback: if the document step raises, the drawing keeps its edit.
        """
        self._image = svg.remove_link(self._image, patient_id, config=self.config)
        removed = links.remove_link(self._document, patient_id, config=self.config)
        logger.info("pedigree.link_removed", patient_id=patient_id, nodes=removed)

    def to_record(self, pedigree_id: str) -> PedigreeRecord:
        from .models.records import PedigreeRecord

        return PedigreeRecord(pedigree_id=pedigree_id, data=self.get_document(), image=self._image)

    def __repr__(self) -> str:
        return f"Pedigree(document={self._document!r}, has_image={self.has_image})"

"""Patient links stored in pedigree node property bags.

Reads return the live property bags so the mutator can edit them in place.
"""
from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from .config import PedigreeConfig
from .logging import get_logger
from .models.document import PedigreeDocument

logger = get_logger(__name__)


def _ids_match(value: Any, external_id: str | None) -> bool:
    if value is None or external_id is None:
        return False
    return str(value).casefold() == external_id.casefold()


def extract_linked_properties(document: PedigreeDocument) -> list[MutableMapping[str, Any]]:
    """Return the non-empty property bags of all nodes, in node order.

    Bags are returned as-is: no copying, reordering or deduplication.

    Raises:
        MalformedDocument: if the node list is missing or wrong-shaped
    """
    return [node.properties for node in document.nodes if node.has_properties]


def extract_linked_ids(document: PedigreeDocument, config: PedigreeConfig | None = None) -> list[str]:
    """Return the linked patient ids in node order.

    Nodes whose id is missing, null or blank are skipped. Values are not
    case-normalized or deduplicated.
    """
    key = (config or document.config).link_key
    ids = []
    for properties in extract_linked_properties(document):
        value = properties.get(key)
        if value is None:
            continue
        text = str(value)
        if text.strip():
            ids.append(text)
    return ids


def remove_link(
    document: PedigreeDocument,
    external_id: str | None,
    config: PedigreeConfig | None = None,
) -> int:
    """Unlink every node pointing at ``external_id``.

    Matching is case-insensitive. Only the link key is deleted; the node
    and the rest of its property bag stay. Unknown ids are a no-op.

    Returns:
        Number of nodes unlinked
    """
    key = (config or document.config).link_key
    if not external_id:
        return 0

    removed = 0
    for properties in extract_linked_properties(document):
        if _ids_match(properties.get(key), external_id):
            del properties[key]
            removed += 1

    if removed:
        logger.info("document.link_removed", external_id=external_id, nodes=removed)
    else:
        logger.debug("document.link_not_found", external_id=external_id)
    return removed

"""Pedigree graph document.

The drawing tool serializes a family tree as a JSON object whose node list
lives under ``"GG"``. Each node may carry a property bag under ``"prop"``,
and one reserved key in that bag (``"phenotipsId"``) links the node to a
patient record. Everything else in the document (ranks, ordering, layout
positions) is kept verbatim so the data round-trips unchanged.
"""
from __future__ import annotations

import json
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

from ..config import CONFIG, PedigreeConfig
from ..exceptions import MalformedDocument


@dataclass
class PedigreeNode:
    """View over one entry of the document's node list.

    Holds a reference to the live node object, not a copy.
    """

    index: int
    raw: MutableMapping[str, Any]
    config: PedigreeConfig = CONFIG

    @property
    def properties(self) -> MutableMapping[str, Any] | None:
        """The node's property bag, or None when the node has none."""
        props = self.raw.get(self.config.properties_key)
        if props is None:
            return None
        if not isinstance(props, MutableMapping):
            raise MalformedDocument(
                f"Property bag must be an object, got {type(props).__name__}",
                path=f"{self.config.nodes_key}[{self.index}].{self.config.properties_key}",
            )
        return props

    @property
    def has_properties(self) -> bool:
        props = self.properties
        return props is not None and len(props) > 0

    @property
    def external_id(self) -> str | None:
        props = self.properties
        if not props:
            return None
        value = props.get(self.config.link_key)
        return None if value is None else str(value)


class PedigreeDocument:
    """Structured representation of a pedigree.

    Construction only checks that the payload is a JSON object. The node
    list is validated each time it is traversed.
    """

    def __init__(self, data: Mapping[str, Any], config: PedigreeConfig = CONFIG) -> None:
        if not isinstance(data, MutableMapping):
            raise MalformedDocument(
                f"Pedigree document must be a JSON object, got {type(data).__name__}"
            )
        self._data = data
        self.config = config

    @classmethod
    def from_json(cls, text: str | bytes, config: PedigreeConfig = CONFIG) -> PedigreeDocument:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedDocument(f"Pedigree document is not valid JSON: {e}") from e
        return cls(data, config=config)

    @property
    def data(self) -> MutableMapping[str, Any]:
        """The raw document, for serialization."""
        return self._data

    @property
    def is_empty(self) -> bool:
        return len(self._data) == 0

    @property
    def has_node_list(self) -> bool:
        return self.config.nodes_key in self._data

    @property
    def nodes(self) -> list[PedigreeNode]:
        """Nodes in document order.

        Raises:
            MalformedDocument: node list missing, not a list, or holding
                non-object entries
        """
        key = self.config.nodes_key
        if key not in self._data:
            raise MalformedDocument(f"Pedigree document has no node list {key!r}")
        raw_nodes = self._data[key]
        if not isinstance(raw_nodes, list):
            raise MalformedDocument(
                f"Node list must be an array, got {type(raw_nodes).__name__}", path=key
            )

        nodes = []
        for i, raw in enumerate(raw_nodes):
            if not isinstance(raw, MutableMapping):
                raise MalformedDocument(
                    f"Node must be an object, got {type(raw).__name__}", path=f"{key}[{i}]"
                )
            nodes.append(PedigreeNode(index=i, raw=raw, config=self.config))
        return nodes

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self._data, indent=indent, ensure_ascii=False)

    def __repr__(self) -> str:
        return f"PedigreeDocument(keys={sorted(self._data)!r})"

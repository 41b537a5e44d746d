"""Minimal SVG document model used to patch pedigree drawings.

The drawing is treated as opaque markup: nothing here understands layout.
Elements carrying the identity attribute (``data-patient-id`` by default)
are "regions" tied to one linked patient. They are found by attribute
value, independent of node order in the pedigree JSON.
"""
from __future__ import annotations

import copy
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from ..config import CONFIG, PedigreeConfig
from ..exceptions import MalformedMarkup

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

XLINK_HREF = f"{{{XLINK_NS}}}href"
HREF_ATTRIBUTES = ("href", XLINK_HREF)

# Everything before the root element: declaration, comments, PIs, DOCTYPE
_PROLOG = re.compile(
    r"\A(?:\s|<\?.*?\?>|<!--.*?-->|<!DOCTYPE[^>\[]*(?:\[.*?\])?\s*>)*",
    re.DOTALL | re.IGNORECASE,
)

# ElementTree invents ns0/ns1 prefixes for unregistered namespaces
_GENERATED_PREFIX = re.compile(r"ns\d+")


class _TreeBuilder(ET.TreeBuilder):
    """TreeBuilder that also records the namespace prefixes declared in the text."""

    def __init__(self) -> None:
        super().__init__(insert_comments=True, insert_pis=True)
        self.namespaces: dict[str, str] = {}

    def start_ns(self, prefix: str, uri: str) -> None:
        self.namespaces.setdefault(prefix, uri)


def _class_tokens(element: ET.Element) -> list[str]:
    return (element.get("class") or "").split()


def _set_class_tokens(element: ET.Element, tokens: list[str]) -> None:
    if tokens:
        element.set("class", " ".join(tokens))
    elif "class" in element.attrib:
        del element.attrib["class"]


def add_class(element: ET.Element, name: str) -> bool:
    """Add a class token once. Returns True if the element changed."""
    tokens = _class_tokens(element)
    if name in tokens:
        return False
    _set_class_tokens(element, [*tokens, name])
    return True


def remove_class(element: ET.Element, name: str) -> bool:
    """Remove every occurrence of a class token. Returns True if the element changed."""
    tokens = _class_tokens(element)
    if name not in tokens:
        return False
    _set_class_tokens(element, [t for t in tokens if t != name])
    return True


@dataclass
class SvgRegion:
    """An element of the drawing linked to one patient."""

    element: ET.Element
    config: PedigreeConfig = CONFIG

    @property
    def identifier(self) -> str:
        return self.element.get(self.config.svg_id_attribute, "")

    def matches(self, identifier: str) -> bool:
        # Case-insensitive, same as the document-side unlink
        return self.identifier.casefold() == identifier.casefold()

    @property
    def is_current(self) -> bool:
        return self.config.svg_current_class in _class_tokens(self.element)

    def unlink(self) -> None:
        """Strip the identity attribute, hyperlinks and link styling."""
        attrib = self.element.attrib
        attrib.pop(self.config.svg_id_attribute, None)
        for name in HREF_ATTRIBUTES:
            attrib.pop(name, None)
        remove_class(self.element, self.config.svg_link_class)
        remove_class(self.element, self.config.svg_current_class)


class SvgMarkup:
    """Parsed SVG drawing.

    Comments and processing instructions are kept. Whatever precedes the
    root element (XML declaration, comments, PIs, DOCTYPE), which
    ElementTree drops, is re-emitted verbatim by ``to_string``. Namespace
    prefixes declared in the source are reused on output.
    """

    def __init__(
        self,
        root: ET.Element,
        prolog: str = "",
        config: PedigreeConfig = CONFIG,
        namespaces: dict[str, str] | None = None,
    ) -> None:
        self.root = root
        self.prolog = prolog
        self.config = config
        self.namespaces = namespaces or {}

    @classmethod
    def parse(cls, text: str, config: PedigreeConfig = CONFIG) -> SvgMarkup:
        """Parse markup text.

        Raises:
            MalformedMarkup: if the text is not well-formed XML
        """
        builder = _TreeBuilder()
        parser = ET.XMLParser(target=builder)
        try:
            root = ET.fromstring(text, parser=parser)
        except ET.ParseError as e:
            raise MalformedMarkup(f"Pedigree image is not well-formed SVG: {e}") from e

        prolog = _PROLOG.match(text).group(0).strip()
        return cls(root, prolog=prolog, config=config, namespaces=builder.namespaces)

    def elements(self) -> list[ET.Element]:
        # Comments and PIs have non-string tags
        return [el for el in self.root.iter() if isinstance(el.tag, str)]

    def regions(self) -> list[SvgRegion]:
        """All elements linked to some patient, in document order."""
        attr = self.config.svg_id_attribute
        return [
            SvgRegion(el, config=self.config)
            for el in self.elements()
            if (el.get(attr) or "").strip()
        ]

    def regions_for(self, identifier: str) -> list[SvgRegion]:
        return [region for region in self.regions() if region.matches(identifier)]

    def linked_ids(self) -> list[str]:
        return [region.identifier for region in self.regions()]

    def current_ids(self) -> list[str]:
        """Ids of regions currently carrying the viewer highlight."""
        return [region.identifier for region in self.regions() if region.is_current]

    def _unprefixed_default(self) -> ET.Element:
        """Copy of the tree with default-namespace tags written bare.

        Unqualified tags then inherit the ``xmlns`` declaration on the root,
        so output keeps ``<svg>`` instead of ``<ns0:svg>``. Left qualified
        when the drawing also has tags outside any namespace.
        """
        default = self.namespaces.get("")
        elements = self.elements()
        if not default or any(not el.tag.startswith("{") for el in elements):
            return self.root

        root = copy.deepcopy(self.root)
        prefix = f"{{{default}}}"
        for el in root.iter():
            if isinstance(el.tag, str) and el.tag.startswith(prefix):
                el.tag = el.tag[len(prefix):]
        attrib = dict(root.attrib)
        root.attrib.clear()
        root.attrib.update({"xmlns": default, **attrib})
        return root

    def to_string(self) -> str:
        for prefix, uri in self.namespaces.items():
            if prefix and not _GENERATED_PREFIX.fullmatch(prefix):
                ET.register_namespace(prefix, uri)
        body = ET.tostring(self._unprefixed_default(), encoding="unicode")
        if self.prolog:
            return f"{self.prolog}\n{body}"
        return body

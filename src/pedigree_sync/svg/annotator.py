"""Patient-specific edits to a pedigree drawing.

Both functions have value semantics: they return the updated markup and
never modify their input. When nothing needs to change the original
string is returned as-is, so untouched drawings keep their formatting.
"""
from __future__ import annotations

from ..config import CONFIG, PedigreeConfig
from ..logging import get_logger
from .markup import SvgMarkup, add_class, remove_class

logger = get_logger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def apply_current_viewer_style(
    markup: str,
    identifier: str | None,
    config: PedigreeConfig = CONFIG,
) -> str:
    """Highlight the regions linked to ``identifier``.

    The highlight class is added at most once per region and removed from
    every other element, so only one patient is ever highlighted. A blank
    identifier leaves the markup untouched, including any existing
    highlight.

    Raises:
        MalformedMarkup: if ``markup`` is non-empty and not well-formed
    """
    if not markup or _is_blank(identifier):
        return markup

    svg = SvgMarkup.parse(markup, config=config)
    current = config.svg_current_class
    attr = config.svg_id_attribute
    wanted = identifier.casefold()

    changed = False
    for element in svg.elements():
        if (element.get(attr) or "").casefold() == wanted:
            changed |= add_class(element, current)
        else:
            changed |= remove_class(element, current)

    if not changed:
        return markup
    logger.debug("image.current_patient_styled", patient_id=identifier)
    return svg.to_string()


def remove_link(markup: str, identifier: str | None, config: PedigreeConfig = CONFIG) -> str:
    """Strip the patient link from every region linked to ``identifier``.

    Regions linked to other patients are left alone. No match is a no-op.

    Raises:
        MalformedMarkup: if ``markup`` is non-empty and not well-formed
    """
    if not markup or _is_blank(identifier):
        return markup

    svg = SvgMarkup.parse(markup, config=config)
    regions = svg.regions_for(identifier)
    if not regions:
        logger.debug("image.link_not_found", patient_id=identifier)
        return markup

    for region in regions:
        region.unlink()
    logger.info("image.link_removed", patient_id=identifier, regions=len(regions))
    return svg.to_string()

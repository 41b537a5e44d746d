"""SVG drawing support: a small DOM and patient-link annotations."""

from .annotator import apply_current_viewer_style, remove_link
from .markup import SVG_NS, XLINK_NS, SvgMarkup, SvgRegion

__all__ = [
    "SvgMarkup",
    "SvgRegion",
    "SVG_NS",
    "XLINK_NS",
    "apply_current_viewer_style",
    "remove_link",
]

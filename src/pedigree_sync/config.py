from __future__ import annotations

import os
from dataclasses import dataclass


def _s(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class PedigreeConfig:
    # Pedigree JSON layout
    nodes_key: str = _s("PEDIGREE_NODES_KEY", "GG")
    properties_key: str = _s("PEDIGREE_PROPERTIES_KEY", "prop")
    link_key: str = _s("PEDIGREE_LINK_KEY", "phenotipsId")

    # SVG conventions shared with the drawing tool
    svg_id_attribute: str = _s("PEDIGREE_SVG_ID_ATTRIBUTE", "data-patient-id")
    svg_link_class: str = _s("PEDIGREE_SVG_LINK_CLASS", "pedigree-patient-link")
    svg_current_class: str = _s("PEDIGREE_SVG_CURRENT_CLASS", "current-patient")

    store_dir: str = _s("PEDIGREE_STORE_DIR", "./data/pedigrees")
    log_level: str = _s("PEDIGREE_LOG_LEVEL", "INFO").upper()


CONFIG = PedigreeConfig()

"""pedigree-sync - Pedigree documents and drawings kept in step.

A pedigree is a family-tree JSON document paired with its rendered SVG.
Nodes can link to patient records; unlinking a patient edits both halves.
"""

__version__ = "0.1.0"

# Lazy imports keep `import pedigree_sync` free of pydantic/structlog setup
def __getattr__(name: str):
    if name == "Pedigree":
        from pedigree_sync.pedigree import Pedigree
        return Pedigree
    if name == "PedigreeDocument":
        from pedigree_sync.models.document import PedigreeDocument
        return PedigreeDocument
    if name in {"PedigreeError", "InvalidPedigree", "MalformedDocument", "MalformedMarkup"}:
        from pedigree_sync import exceptions
        return getattr(exceptions, name)
    if name == "storage":
        from pedigree_sync import storage
        return storage
    if name == "svg":
        from pedigree_sync import svg
        return svg
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

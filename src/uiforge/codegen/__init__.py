"""Tree to source code rendering."""

from .serializer import serialize, render_attribute, render_attributes, EMPTY_TREE

__all__ = ["serialize", "render_attribute", "render_attributes", "EMPTY_TREE"]

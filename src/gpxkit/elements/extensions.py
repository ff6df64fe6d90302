"""Opaque extension content from other schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from xml.sax.saxutils import escape

from gpxkit.config import LINE_TERMINATOR
from gpxkit.elements.base import Element, format_attributes
from gpxkit.schemas import RawNode


@dataclass
class Extensions(Element):
    """Holds the children of ``<extensions>`` untouched.

    The content belongs to foreign namespaces, so it is kept as RawNodes
    and written back out node for node. RawNode keeps a single text value
    per node, so in mixed content that text is written before the child
    elements, wherever it appeared originally.
    """

    tag = "extensions"

    nodes: list[RawNode] = field(default_factory=list)

    @classmethod
    def from_raw(cls, raw: RawNode) -> Extensions:
        return cls(nodes=list(raw.children))

    def render_children(self, out: list[str], level: int) -> None:
        for node in self.nodes:
            self._render_raw(out, node, level + 1)

    def _render_raw(self, out: list[str], node: RawNode, level: int) -> None:
        attributes = format_attributes(node.attributes.items())
        prefix = f"{self.indent(level)}<{node.name}{attributes}"
        if not node.children:
            if node.text is None:
                out.append(f"{prefix}/>{LINE_TERMINATOR}")
            else:
                out.append(f"{prefix}>{escape(node.text)}</{node.name}>{LINE_TERMINATOR}")
            return
        out.append(f"{prefix}>{LINE_TERMINATOR}")
        if node.text is not None:
            out.append(f"{self.indent(level + 1)}{escape(node.text)}{LINE_TERMINATOR}")
        for child in node.children:
            self._render_raw(out, child, level + 1)
        out.append(f"{self.indent(level)}</{node.name}>{LINE_TERMINATOR}")

"""Generic parsed-XML node consumed by element parsers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RawNode(BaseModel):
    """A tokenized XML node, independent of any GPX semantics.

    Attributes:
        name: Tag name, including its namespace prefix when it has one
            (``gpxtpx:hr``).
        attributes: Attribute values keyed by attribute name.
        text: Direct character data of the node, stripped; None when empty.
        children: Child nodes in document order.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    attributes: dict[str, str] = Field(default_factory=dict)
    text: str | None = None
    children: tuple[RawNode, ...] = ()

    def find(self, name: str) -> RawNode | None:
        """Return the first direct child called ``name``."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def find_all(self, name: str) -> list[RawNode]:
        """Return every direct child called ``name``."""
        return [child for child in self.children if child.name == name]


RawNode.model_rebuild()

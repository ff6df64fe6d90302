"""Tokenize GPX/XML text into a generic RawNode tree."""

from __future__ import annotations

from gpxkit.exceptions import ParseError
from gpxkit.schemas import RawNode

try:
    from bs4 import BeautifulSoup
    from bs4.element import CData, NavigableString, PreformattedString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 and lxml are required for XML parsing (pip install beautifulsoup4 lxml)."
    ) from exc


def parse_raw_xml(text: str | bytes) -> RawNode:
    """Parse XML text and return its root element as a RawNode.

    Raises:
        ParseError: If the input contains no element at all.
    """
    soup = BeautifulSoup(text, "xml")
    root = soup.find(True)
    if root is None:
        raise ParseError("XML input has no root element.")
    return _to_raw(root)


def _to_raw(tag: Tag) -> RawNode:
    children: list[RawNode] = []
    text_parts: list[str] = []
    for child in tag.children:
        if isinstance(child, Tag):
            children.append(_to_raw(child))
        elif _is_character_data(child):
            text_parts.append(str(child))
    text = "".join(text_parts).strip()
    return RawNode(
        name=_qualified_name(tag),
        attributes={str(key): _attribute_value(value) for key, value in tag.attrs.items()},
        text=text or None,
        children=tuple(children),
    )


def _qualified_name(tag: Tag) -> str:
    if tag.prefix:
        return f"{tag.prefix}:{tag.name}"
    return tag.name


def _attribute_value(value: str | list[str]) -> str:
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def _is_character_data(node: object) -> bool:
    # Comments, processing instructions and doctypes are PreformattedStrings too.
    if not isinstance(node, NavigableString):
        return False
    return isinstance(node, CData) or not isinstance(node, PreformattedString)

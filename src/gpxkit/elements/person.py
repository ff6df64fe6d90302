"""People and organizations referenced by GPX metadata."""

from __future__ import annotations

from dataclasses import dataclass

from gpxkit.elements.base import ChildItem, Element, Leaf
from gpxkit.elements.email import EmailAddress
from gpxkit.elements.link import Link
from gpxkit.schemas import RawNode


@dataclass
class Person(Element):
    """The author of a GPX file."""

    tag = "author"

    name: str | None = None
    email: EmailAddress | None = None
    link: Link | None = None

    @classmethod
    def from_raw(cls, raw: RawNode) -> Person:
        person = cls()
        for child in raw.children:
            if child.name == "name":
                person.name = child.text
            elif child.name == "email":
                # Email is attribute-only, so it goes through the flat path.
                person.email = EmailAddress.from_dict(child.attributes)
            elif child.name == "link":
                person.link = Link.from_raw(child)
        return person

    def child_items(self) -> list[ChildItem]:
        items: list[ChildItem] = [Leaf("name", self.name)]
        if self.email is not None:
            items.append(self.email)
        if self.link is not None:
            items.append(self.link)
        return items

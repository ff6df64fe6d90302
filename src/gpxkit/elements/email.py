"""Email addresses, stored split to deter harvesting."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from gpxkit.elements.base import SelfClosingElement
from gpxkit.exceptions import EmailFormatError


@dataclass
class EmailAddress(SelfClosingElement):
    """An email address split into its ``id`` and ``domain`` halves.

    GPX 1.1 requires the two halves to be stored separately. A default
    instance holds empty strings rather than None, so it still renders
    both attributes.
    """

    tag = "email"

    local_part: str | None = ""
    domain: str | None = ""

    @classmethod
    def from_address(cls, address: str) -> EmailAddress:
        """Split ``local@domain`` into an EmailAddress.

        Raises:
            EmailFormatError: If the address does not contain exactly one ``@``.
        """
        parts = address.split("@")
        if len(parts) != 2:
            raise EmailFormatError(f"Expected exactly one '@' in email address: {address!r}")
        local_part, domain = parts
        return cls(local_part=local_part, domain=domain)

    @classmethod
    def from_dict(cls, values: Mapping[str, str]) -> EmailAddress:
        return cls(local_part=values.get("id"), domain=values.get("domain"))

    @property
    def address(self) -> str | None:
        """The joined ``local@domain`` form, or None if either half is unset."""
        if self.local_part is None or self.domain is None:
            return None
        return f"{self.local_part}@{self.domain}"

    def attributes(self) -> list[tuple[str, str | None]]:
        return [("id", self.local_part), ("domain", self.domain)]

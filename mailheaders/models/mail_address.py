"""Parsed mailbox address model."""

import re
from dataclasses import dataclass
from email.utils import parseaddr, quote

_SEPARATORS = re.compile(r"[,;]")
_FORBIDDEN = re.compile(r"[\s<>,;]")


class InvalidAddressError(ValueError):
    """Raised when an address token cannot be parsed into a mailbox."""

    pass


@dataclass(frozen=True)
class MailAddress:
    """
    A single mailbox taken from an address header.

    Attributes:
        address: Mailbox in ``local@domain`` form
        display_name: Optional display name (unquoted)
    """

    address: str
    display_name: str = ""

    def __post_init__(self):
        """Validate the mailbox after initialization."""
        if not self.address:
            raise InvalidAddressError("address is required")
        if _FORBIDDEN.search(self.address):
            raise InvalidAddressError(f"Invalid characters in address: {self.address!r}")

        local, at, domain = self.address.rpartition("@")
        if not at or not local or not domain:
            raise InvalidAddressError(f"Invalid address format: {self.address!r}")
        if "@" in local and not (local.startswith('"') and local.endswith('"')):
            raise InvalidAddressError(f"Invalid address format: {self.address!r}")

    @property
    def user(self) -> str:
        return self.address.rpartition("@")[0]

    @property
    def host(self) -> str:
        return self.address.rpartition("@")[2]

    @classmethod
    def parse(cls, text: str) -> "MailAddress":
        """
        Parse a single address token.

        Accepts ``addr``, ``<addr>``, ``Name <addr>``, ``"Name" <addr>`` and
        ``addr (Name)``. A display name holding an unquoted comma or
        semicolon is quoted before parsing so it stays one phrase.

        Args:
            text: Address token

        Returns:
            MailAddress instance

        Raises:
            InvalidAddressError: If the token is not a usable address

        Examples:
            >>> MailAddress.parse('"Doe, John" <john@x.com>')
            MailAddress(address='john@x.com', display_name='Doe, John')
        """
        text = (text or "").strip()
        phrase, bracket, route = text.rpartition("<")
        phrase = phrase.strip()
        if bracket and phrase and not phrase.startswith('"') and _SEPARATORS.search(phrase):
            text = f'"{quote(phrase)}" <{route}'

        name, email_addr = parseaddr(text)
        name = name.strip()
        if len(name) >= 2 and name[0] == name[-1] == "'":
            name = name[1:-1].strip()

        return cls(address=email_addr.strip(), display_name=name)

    def __str__(self) -> str:
        if self.display_name:
            return f'"{self.display_name}" <{self.address}>'
        return self.address

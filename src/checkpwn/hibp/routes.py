"""
Request routes for the HIBP breach, paste and password range endpoints.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass, field
from urllib.parse import quote, urlencode

from checkpwn.errors import InvalidPasswordPrefix, InvalidQueryKind
from checkpwn.hibp.hashing import Digest, HEX_DIGITS, PREFIX_LENGTH

# API endpoints
HIBP_API_BASE = "https://haveibeenpwned.com/api/v3"
PWNED_PASSWORDS_API = "https://api.pwnedpasswords.com"

ACCOUNT_PATH = "/breachedaccount/"
PASTE_PATH = "/pasteaccount/"
RANGE_PATH = "/range/"


@dataclass(frozen=True)
class AccountQuery:
    """Breached account lookup for an email or username."""

    identifier: str
    truncate_response: bool = True
    include_unverified: bool = True


@dataclass(frozen=True)
class PasteQuery:
    """Paste lookup for an email address."""

    identifier: str


@dataclass(frozen=True)
class PasswordQuery:
    """Range lookup for a password digest."""

    digest: Digest | str


Query = AccountQuery | PasteQuery | PasswordQuery


@dataclass(frozen=True)
class Route:
    """Outbound request descriptor."""

    base_url: str
    path_suffix: str
    query_parameters: dict[str, str] = field(default_factory=dict)
    requires_api_key: bool = False
    add_padding: bool = False

    @property
    def url(self) -> str:
        url = f"{self.base_url}{self.path_suffix}"
        if self.query_parameters:
            url += f"?{urlencode(self.query_parameters)}"
        return url


def _encode_identifier(identifier: str) -> str:
    # '/' must not leak into the path
    return quote(identifier, safe="@")


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


def build_route(query: Query) -> Route:
    """Build the request route for a query.

    Password queries only ever carry the first 5 characters of the
    digest, whatever was passed in.

    Raises:
        InvalidQueryKind: the query is not one of the known kinds
        InvalidPasswordPrefix: the digest does not start with 5 hex characters
    """
    if isinstance(query, AccountQuery):
        return Route(
            base_url=HIBP_API_BASE,
            path_suffix=ACCOUNT_PATH + _encode_identifier(query.identifier),
            query_parameters={
                "includeUnverified": _bool_param(query.include_unverified),
                "truncateResponse": _bool_param(query.truncate_response),
            },
            requires_api_key=True,
        )

    if isinstance(query, PasteQuery):
        return Route(
            base_url=HIBP_API_BASE,
            path_suffix=PASTE_PATH + _encode_identifier(query.identifier),
            requires_api_key=True,
        )

    if isinstance(query, PasswordQuery):
        prefix = str(query.digest[:PREFIX_LENGTH]).upper()
        if len(prefix) != PREFIX_LENGTH or not HEX_DIGITS.issuperset(prefix):
            raise InvalidPasswordPrefix(prefix)
        return Route(
            base_url=PWNED_PASSWORDS_API,
            path_suffix=RANGE_PATH + prefix,
            add_padding=True,
        )

    raise InvalidQueryKind(query)

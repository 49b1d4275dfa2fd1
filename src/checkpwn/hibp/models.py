"""
Data models for Have I Been Pwned lookups.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass
from enum import Enum


class RiskLevel(str, Enum):
    """Risk level based on password exposure."""

    SAFE = "safe"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class BreachVerdict(str, Enum):
    """Final outcome of a lookup."""

    BREACHED = "breached"
    NOT_BREACHED = "not_breached"

    @property
    def label(self) -> str:
        return "BREACH FOUND" if self is BreachVerdict.BREACHED else "NO BREACH FOUND"


class StatusKind(str, Enum):
    """Outcome class of a single HIBP request."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    CLIENT_ERROR = "client_error"
    UNAUTHORIZED = "unauthorized"
    OTHER = "other"


@dataclass(frozen=True)
class RemoteStatus:
    """Status of one HIBP request, abstracted from the HTTP code."""

    kind: StatusKind
    code: int

    @classmethod
    def from_http_status(cls, code: int) -> "RemoteStatus":
        """Map an HTTP status code onto a RemoteStatus."""
        kinds = {
            200: StatusKind.FOUND,
            404: StatusKind.NOT_FOUND,
            400: StatusKind.CLIENT_ERROR,
            401: StatusKind.UNAUTHORIZED,
        }
        return cls(kind=kinds.get(code, StatusKind.OTHER), code=code)

    @classmethod
    def found(cls) -> "RemoteStatus":
        return cls(StatusKind.FOUND, 200)

    @classmethod
    def not_found(cls) -> "RemoteStatus":
        return cls(StatusKind.NOT_FOUND, 404)

    @classmethod
    def client_error(cls, code: int = 400) -> "RemoteStatus":
        return cls(StatusKind.CLIENT_ERROR, code)

    @classmethod
    def unauthorized(cls) -> "RemoteStatus":
        return cls(StatusKind.UNAUTHORIZED, 401)

    @classmethod
    def other(cls, code: int) -> "RemoteStatus":
        return cls(StatusKind.OTHER, code)


@dataclass(frozen=True)
class RangeCandidate:
    """One SUFFIX:COUNT line of a range response.

    A count of zero marks a padding entry.
    """

    suffix: str
    occurrence_count: int

    @property
    def is_padding(self) -> bool:
        return self.occurrence_count == 0


@dataclass
class AccountCheckResult:
    """Result of checking an account against breaches and pastes."""

    identifier: str
    verdict: BreachVerdict
    account_status: RemoteStatus
    paste_status: RemoteStatus

    @property
    def is_breached(self) -> bool:
        return self.verdict is BreachVerdict.BREACHED


@dataclass
class PasswordCheckResult:
    """Result of checking a password against Pwned Passwords."""

    verdict: BreachVerdict = BreachVerdict.NOT_BREACHED
    occurrences: int = 0
    # Never store the actual password!
    hash_prefix: str = ""  # Only first 5 chars of SHA-1

    @property
    def is_pwned(self) -> bool:
        """Check if password was found in breaches."""
        return self.verdict is BreachVerdict.BREACHED

    @property
    def risk_level(self) -> RiskLevel:
        """Determine risk level based on occurrences."""
        if self.occurrences == 0:
            return RiskLevel.SAFE
        elif self.occurrences < 10:
            return RiskLevel.LOW
        elif self.occurrences < 100:
            return RiskLevel.MEDIUM
        elif self.occurrences < 10000:
            return RiskLevel.HIGH
        else:
            return RiskLevel.CRITICAL

    @property
    def risk_description(self) -> str:
        """Get human-readable risk description."""
        descriptions = {
            RiskLevel.SAFE: "This password has not been found in any known data breaches.",
            RiskLevel.LOW: f"This password has been seen {self.occurrences} times in data breaches. Consider changing it.",
            RiskLevel.MEDIUM: f"This password has been seen {self.occurrences} times. You should change it.",
            RiskLevel.HIGH: f"This password has been seen {self.occurrences:,} times! Change it immediately.",
            RiskLevel.CRITICAL: f"This password has been seen {self.occurrences:,} times! It's extremely common and must be changed.",
        }
        return descriptions[self.risk_level]

"""
Have I Been Pwned (HIBP) integration module.

Provides breach checking for accounts and password security
validation using the HIBP API with k-anonymity for passwords.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from checkpwn.hibp.models import (
    AccountCheckResult,
    BreachVerdict,
    PasswordCheckResult,
    RangeCandidate,
    RemoteStatus,
    StatusKind,
)
from checkpwn.hibp.hashing import Digest, SecretBuffer, sha1_digest
from checkpwn.hibp.routes import (
    AccountQuery,
    PasswordQuery,
    PasteQuery,
    Route,
    build_route,
)
from checkpwn.hibp.ranges import parse_range_response, range_contains
from checkpwn.hibp.decision import decide_account, decide_password
from checkpwn.hibp.client import BreachChecker

__all__ = [
    "BreachChecker",
    "AccountCheckResult",
    "BreachVerdict",
    "PasswordCheckResult",
    "RangeCandidate",
    "RemoteStatus",
    "StatusKind",
    "Digest",
    "SecretBuffer",
    "sha1_digest",
    "AccountQuery",
    "PasswordQuery",
    "PasteQuery",
    "Route",
    "build_route",
    "parse_range_response",
    "range_contains",
    "decide_account",
    "decide_password",
]

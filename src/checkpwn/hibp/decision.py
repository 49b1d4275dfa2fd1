"""
Breach verdicts from HIBP request outcomes.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging

from checkpwn.errors import (
    InvalidCredential,
    UnrecognizedUpstreamStatus,
    UpstreamRejected,
)
from checkpwn.hibp.models import BreachVerdict, RemoteStatus, StatusKind

logger = logging.getLogger(__name__)


def decide_password(range_match: bool) -> BreachVerdict:
    """Verdict for a password range lookup."""
    return BreachVerdict.BREACHED if range_match else BreachVerdict.NOT_BREACHED


def decide_account(
    account_status: RemoteStatus,
    paste_status: RemoteStatus,
    identifier: str = "",
) -> BreachVerdict:
    """Combine the breached-account and paste outcomes into one verdict.

    Both endpoints have to report nothing found for the account to be
    clean. A Bad Request on the paste endpoint alone is tolerated since
    it rejects usernames that the account endpoint accepts.

    Args:
        account_status: Outcome of the breachedaccount request
        paste_status: Outcome of the pasteaccount request
        identifier: Account, used in error messages

    Raises:
        InvalidCredential: the API key was rejected
        UpstreamRejected: the account endpoint rejected the identifier
        UnrecognizedUpstreamStatus: any status outside the table
    """
    account, paste = account_status.kind, paste_status.kind
    logger.debug(f"Deciding {identifier!r}: account={account_status.code} paste={paste_status.code}")

    if account is StatusKind.UNAUTHORIZED and paste is StatusKind.UNAUTHORIZED:
        raise InvalidCredential()

    if account is StatusKind.FOUND:
        return BreachVerdict.BREACHED

    if account is StatusKind.OTHER:
        raise UnrecognizedUpstreamStatus(account_status.code, "breachedaccount")

    if StatusKind.UNAUTHORIZED in (account, paste):
        raise InvalidCredential()

    if account is StatusKind.CLIENT_ERROR:
        raise UpstreamRejected(identifier)

    # account is NOT_FOUND from here on
    if paste is StatusKind.FOUND:
        return BreachVerdict.BREACHED
    if paste in (StatusKind.NOT_FOUND, StatusKind.CLIENT_ERROR):
        return BreachVerdict.NOT_BREACHED

    raise UnrecognizedUpstreamStatus(paste_status.code, "pasteaccount")

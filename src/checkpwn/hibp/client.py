"""
Have I Been Pwned API client.

Implements the lookups checkpwn performs:
- Account breach lookups (breachedaccount + pasteaccount)
- Password checking with k-anonymity
- Batch account checks from a list
- Fixed-delay rate limiting

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import logging
import time
from typing import AsyncIterator, Iterable

import aiohttp

from checkpwn import __version__
from checkpwn.errors import (
    CheckpwnError,
    ConfigurationMissing,
    InvalidCredential,
    NetworkFailure,
    UnrecognizedUpstreamStatus,
)
from checkpwn.hibp.decision import decide_account, decide_password
from checkpwn.hibp.hashing import SecretBuffer, sha1_digest
from checkpwn.hibp.models import (
    AccountCheckResult,
    PasswordCheckResult,
    RemoteStatus,
    StatusKind,
)
from checkpwn.hibp.ranges import parse_range_response, range_contains, range_occurrences
from checkpwn.hibp.routes import (
    AccountQuery,
    PasswordQuery,
    PasteQuery,
    Query,
    Route,
    build_route,
)

logger = logging.getLogger(__name__)

USER_AGENT = f"checkpwn/{__version__} - utility tool for hibp"


class BreachChecker:
    """Client for checking accounts and passwords against HIBP.

    Requests go through a single session and are spaced at least
    ``rate_limit`` seconds apart, including requests issued concurrently.
    """

    # HIBP allows one request every 1500 milliseconds from any given IP
    DEFAULT_RATE_LIMIT = 1.6  # seconds between requests
    REQUEST_TIMEOUT = 30

    ABORT = "abort"
    SKIP = "skip"

    def __init__(
        self,
        api_key: str | None = None,
        user_agent: str = USER_AGENT,
        rate_limit: float | None = None,
    ):
        """Initialize the checker.

        Args:
            api_key: HIBP API key (required for account lookups)
            user_agent: User-Agent header for requests
            rate_limit: Seconds between requests (default: 1.6)
        """
        self.api_key = api_key
        self.user_agent = user_agent
        self.rate_limit = self.DEFAULT_RATE_LIMIT if rate_limit is None else rate_limit
        self._session: aiohttp.ClientSession | None = None
        self._last_request_time: float = 0
        self._rate_lock = asyncio.Lock()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure HTTP session exists."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "BreachChecker":
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _rate_limit_wait(self) -> None:
        """Wait until the previous request is at least rate_limit old."""
        async with self._rate_lock:
            elapsed = time.monotonic() - self._last_request_time
            if elapsed < self.rate_limit:
                await asyncio.sleep(self.rate_limit - elapsed)
            self._last_request_time = time.monotonic()

    def _headers(self, route: Route) -> dict[str, str]:
        headers = {"User-Agent": self.user_agent}
        if route.requires_api_key:
            if not self.api_key:
                raise ConfigurationMissing(
                    "HIBP API key required. Register one with 'checkpwn register <api_key>' "
                    "or set HIBP_API_KEY."
                )
            headers["hibp-api-key"] = self.api_key
        if route.add_padding:
            headers["Add-Padding"] = "true"
        return headers

    async def _request(self, query: Query) -> tuple[RemoteStatus, str]:
        """Make a rate-limited GET request for a query.

        Returns:
            Tuple of (status, response_text)

        Raises:
            NetworkFailure: the request failed or timed out
        """
        route = build_route(query)
        headers = self._headers(route)

        await self._rate_limit_wait()
        session = await self._ensure_session()

        logger.debug(f"GET {route.base_url}{route.path_suffix}")
        try:
            async with session.get(
                route.url,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.REQUEST_TIMEOUT),
            ) as response:
                if response.status == 429:
                    retry_after = response.headers.get("Retry-After", "?")
                    logger.warning(f"Rate limited. Retry after {retry_after}s")

                status = RemoteStatus.from_http_status(response.status)
                # Undecodable bytes are left for the range parser to reject
                text = await response.text(errors="replace")
        except asyncio.TimeoutError as e:
            raise NetworkFailure(f"Request to {route.base_url} timed out") from e
        except aiohttp.ClientError as e:
            raise NetworkFailure(f"Failed to send request to HIBP: {e}") from e

        return status, text

    # =========================================================================
    # Account Checking
    # =========================================================================

    async def check_account(self, identifier: str) -> AccountCheckResult:
        """Check an account against the breach and paste endpoints.

        Both requests are awaited before the verdict is decided.

        Args:
            identifier: Email address or username

        Returns:
            AccountCheckResult with the verdict
        """
        responses = await asyncio.gather(
            self._request(AccountQuery(identifier)),
            self._request(PasteQuery(identifier)),
            return_exceptions=True,
        )
        for response in responses:
            if isinstance(response, BaseException):
                raise response

        (account_status, _), (paste_status, _) = responses
        verdict = decide_account(account_status, paste_status, identifier)
        logger.info(f"{identifier}: {verdict.label}")

        return AccountCheckResult(
            identifier=identifier,
            verdict=verdict,
            account_status=account_status,
            paste_status=paste_status,
        )

    async def check_accounts(
        self,
        identifiers: Iterable[str],
        on_error: str = ABORT,
    ) -> AsyncIterator[AccountCheckResult | CheckpwnError]:
        """Check accounts one after another.

        Args:
            identifiers: Accounts to check
            on_error: ABORT to raise the first failure, SKIP to log it,
                yield it and carry on

        Yields:
            AccountCheckResult per account, or the error when skipping
        """
        for identifier in identifiers:
            try:
                yield await self.check_account(identifier)
            except CheckpwnError as e:
                if on_error != self.SKIP:
                    raise
                logger.error(f"Skipping {identifier}: {e}")
                yield e

    # =========================================================================
    # Password Checking (K-Anonymity)
    # =========================================================================

    async def check_password(self, password: str | bytes | SecretBuffer) -> PasswordCheckResult:
        """Check if a password has been exposed in data breaches.

        Only the first 5 characters of the SHA-1 hash are sent to the API.
        The password buffer and its digest are zeroed on return.

        Args:
            password: Password to check (NOT stored or logged)

        Returns:
            PasswordCheckResult with verdict and exposure count
        """
        secret = password if isinstance(password, SecretBuffer) else SecretBuffer(password)
        with secret, sha1_digest(secret) as digest:
            prefix = digest.prefix
            status, body = await self._request(PasswordQuery(digest))

            if status.kind is StatusKind.UNAUTHORIZED:
                raise InvalidCredential()
            if status.kind is not StatusKind.FOUND:
                raise UnrecognizedUpstreamStatus(status.code, "range")

            candidates = parse_range_response(body)
            suffix = digest.suffix
            matched = range_contains(candidates, suffix)
            occurrences = range_occurrences(candidates, suffix)

        logger.debug(f"Range {prefix}: {len(candidates)} candidates")

        return PasswordCheckResult(
            verdict=decide_password(matched),
            occurrences=occurrences,
            hash_prefix=prefix,
        )

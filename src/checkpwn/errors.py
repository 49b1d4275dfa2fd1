"""
Exception types raised by checkpwn.

Every failure carries the stage it happened in so the CLI can print a
single diagnostic naming it.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""


class CheckpwnError(Exception):
    """Base class for all checkpwn failures."""

    stage = "checkpwn"


class InvalidQueryKind(CheckpwnError):
    """A query of an unknown kind reached the route builder."""

    stage = "routing"

    def __init__(self, query: object):
        self.query = query
        super().__init__(f"Invalid query kind: {type(query).__name__}")


class InvalidPasswordPrefix(CheckpwnError):
    """A password query does not start with 5 hexadecimal characters."""

    stage = "routing"

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(f"Invalid password hash prefix: {prefix!r}")


class MalformedRangeResponse(CheckpwnError):
    """A password range response line is not SUFFIX:COUNT."""

    stage = "parsing"

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed range response at line {line_number} ({reason}): {line!r}")


class InvalidCredential(CheckpwnError):
    """The API key was rejected by HIBP."""

    stage = "authentication"

    def __init__(self, message: str = "HIBP rejected the API key. Register a valid key with 'checkpwn register'."):
        super().__init__(message)


class UpstreamRejected(CheckpwnError):
    """HIBP answered Bad Request for the account."""

    stage = "decision"

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f"HIBP returned Bad Request on account: {identifier} - make sure it is a valid account."
        )


class UnrecognizedUpstreamStatus(CheckpwnError):
    """HIBP answered with a status code checkpwn does not handle."""

    stage = "decision"

    def __init__(self, code: int, route: str | None = None):
        self.code = code
        self.route = route
        where = f" from {route}" if route else ""
        super().__init__(f"Unrecognized status code {code} received{where}")


class NetworkFailure(CheckpwnError):
    """The request could not be sent or no response arrived."""

    stage = "network"


class ConfigurationMissing(CheckpwnError):
    """No usable API key could be loaded."""

    stage = "configuration"


class InputUnavailable(CheckpwnError):
    """A list file could not be read."""

    stage = "input"

"""Errors raised by the Slack App manifest API gateway.

Every failure of a single API round trip surfaces as exactly one of these.
None of them are retried.
"""


class SlackAppError(Exception):
    """Base class for all Slack App API failures."""


class TransportError(SlackAppError):
    """The connection could not be established or the body could not be read."""


class HTTPError(SlackAppError):
    """Slack answered with a status other than 200.

    The message is the raw response body, verbatim.
    """

    def __init__(self, *, status_code: int, body: str) -> None:
        super().__init__(body)
        self.status_code = status_code
        self.body = body


class RemoteAPIError(SlackAppError):
    """Slack answered 200 but the envelope carries a non-empty `error`.

    The message is the `error` text followed directly by the raw `errors`
    JSON, e.g. `invalid_manifest{"field":"name"}`.
    """

    def __init__(self, *, error: str, errors: str) -> None:
        super().__init__(error + errors)
        self.error = error
        self.errors = errors


class DecodeError(SlackAppError):
    """The response body does not match the shape expected for the method."""

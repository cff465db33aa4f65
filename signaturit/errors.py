# =============================================================================
# signaturit/errors.py  —  Error Taxonomy
# =============================================================================
#
# Every failure a tool call can end in is one of the classes below.  They all
# derive from SignaturitError so the tool server can catch the whole family
# in one place and hand the message to the MCP client unchanged.
#
#   ArgumentError   → bad input from the caller, raised before any HTTP call
#   EncodingError   → the request body could not be serialized to JSON
#   TransportError  → no HTTP response at all (DNS, refused, TLS, timeout)
#   UpstreamError   → a response arrived with a status we don't accept
#   DecodingError   → an accepted status, but the body isn't the expected shape
# =============================================================================


class SignaturitError(Exception):
    """Base class for every error raised by the signaturit package."""


class ArgumentError(SignaturitError):
    """A tool argument is missing, has the wrong type, or fails to parse.

    Attributes:
        field: Name of the offending argument (e.g., "contact_id").
        reason: One of "missing", "wrong_type", "invalid_json", or
            "invalid_value" (right type, but outside the allowed set).
    """

    def __init__(self, field: str, reason: str, detail: str = "") -> None:
        self.field = field
        self.reason = reason
        self.detail = detail
        message = f"Invalid argument '{field}': {reason}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class EncodingError(SignaturitError):
    """The request body could not be serialized to JSON."""


class TransportError(SignaturitError):
    """The HTTP exchange failed before a response was received."""


class UpstreamError(SignaturitError):
    """The API answered with a status code outside the accepted set.

    The raw body is kept verbatim for diagnostics.
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Unexpected status code: {status_code}, body: {body}")


class DecodingError(SignaturitError):
    """The response body does not match the expected schema."""

    # Longest slice of the raw body kept in the message.
    EXCERPT_LENGTH = 200

    def __init__(self, raw_body: str, detail: str = "") -> None:
        self.excerpt = raw_body[: self.EXCERPT_LENGTH]
        self.detail = detail
        message = f"Failed to parse response: {self.excerpt!r}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)

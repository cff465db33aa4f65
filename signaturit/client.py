# =============================================================================
# signaturit/client.py  —  Transport Client for the Signaturit REST API
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Performs ONE authenticated HTTP exchange per call against the Signaturit
#   API and hands back the raw status code and body.  It knows nothing about
#   contacts or signatures; that is the job of contacts.py / signatures.py.
#
# THE FLOW OF A REQUEST:
#   1. Pick the base URL from Settings (sandbox vs production)
#   2. Serialize the body to JSON (if there is one)
#   3. Attach "Authorization: Bearer <token>" + "Content-Type: application/json"
#   4. Send it exactly once, no retries
#   5. Return HttpResult(status_code, body)
#
# The two helpers at the bottom (expect_status, decode_body) are the shared
# CHECK_STATUS and PARSE_BODY steps every domain operation goes through.
# =============================================================================

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Collection, TypeVar
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from signaturit.config import Settings
from signaturit.errors import DecodingError, EncodingError, TransportError, UpstreamError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class HttpResult:
    """Status code and undecoded body of one HTTP exchange."""

    status_code: int
    body: str


class SignaturitClient:
    """Authenticated HTTP client bound to one Signaturit environment.

    Args:
        settings: Credential and environment flag.  Injected so tests can
            point the client at any token/endpoint.
        transport: Optional httpx transport.  Tests pass an
            ``httpx.MockTransport`` here to stub the upstream API.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.base_url = settings.base_url
        self._http = httpx.Client(
            base_url=self.base_url,
            transport=transport,
            headers={
                "Authorization": f"Bearer {settings.secret_token}",
                "Content-Type": "application/json",
            },
        )

    def request(self, method: str, path: str, body: Any = None) -> HttpResult:
        """Send one request and return its status code and raw body.

        Raises:
            EncodingError: ``body`` can't be serialized to JSON.
            TransportError: no response was received.
        """
        content = None
        if body is not None:
            try:
                content = json.dumps(body, allow_nan=False).encode("utf-8")
            except (TypeError, ValueError) as exc:
                raise EncodingError(f"Error marshaling request body: {exc}") from exc

        try:
            response = self._http.request(method, path, content=content)
        except httpx.InvalidURL as exc:
            logger.debug("%s %r is not a valid URL: %s", method, path, exc)
            raise TransportError(f"Error building {method} {path!r}: {exc}") from exc
        except httpx.RequestError as exc:
            logger.debug("%s %s failed: %s", method, path, exc)
            raise TransportError(f"Error executing {method} {path}: {exc}") from exc

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return HttpResult(status_code=response.status_code, body=response.text)

    def get(self, path: str) -> HttpResult:
        return self.request("GET", path)

    def post(self, path: str, body: Any = None) -> HttpResult:
        return self.request("POST", path, body)

    def patch(self, path: str, body: Any = None) -> HttpResult:
        return self.request("PATCH", path, body)

    def delete(self, path: str) -> HttpResult:
        return self.request("DELETE", path)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "SignaturitClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


# -----------------------------------------------------------------------------
# Response interpretation
# -----------------------------------------------------------------------------
OK = frozenset({200})
OK_OR_CREATED = frozenset({200, 201})


def path_segment(value: str) -> str:
    """Percent-encode an ID so it stays a single path segment."""
    return quote(value, safe="")


@lru_cache(maxsize=None)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def expect_status(result: HttpResult, accepted: Collection[int]) -> str:
    """Return the body if the status is accepted, else raise UpstreamError."""
    if result.status_code not in accepted:
        raise UpstreamError(result.status_code, result.body)
    return result.body


def decode_body(result: HttpResult, type_: type[T]) -> T:
    """Validate the JSON body of ``result`` into ``type_``.

    Raises:
        DecodingError: the body is not JSON or doesn't match the schema.
    """
    try:
        return _adapter(type_).validate_json(result.body)
    except ValidationError as exc:
        raise DecodingError(result.body, f"{exc.error_count()} validation error(s)") from exc

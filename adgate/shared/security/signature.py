"""
Signed request verification (HMAC).

Every protected route depends on require_signature. A request must carry
a header of the form

    <identifier> <unix-ms-timestamp>:<hex-digest>

where the digest is HMAC(secret, algorithm) over, in order: the
timestamp string, the HTTP method, the raw request path with its query
string and, when the body is non-empty, the hex MD5 of the body's
compact JSON serialization.

Bodies over the size limit raise RequestTooLargeError (413) before
any verification. Rejections raise SignatureError, which the error
handlers turn into HTTP 401. The route handler is never reached.
"""

import hashlib
import hmac
import json
import logging
import re
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from starlette.requests import Request

from adgate.core.config import Settings
from adgate.shared.request_body import decode_body, media_type, read_limited

logger = logging.getLogger(__name__)

TIMESTAMP_PATTERN = re.compile(r"[0-9]{1,13}")


class SignatureError(Exception):
    """Raised when a request signature is missing, malformed, stale or wrong."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


@dataclass(frozen=True)
class SignatureConfig:
    """Verification parameters, derived once from settings."""

    secret: bytes
    algorithm: str = "sha512"
    header: str = "authorization"
    identifier: str = "APP"
    max_interval: int = 600
    min_interval: int = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> "SignatureConfig":
        return cls(
            secret=settings.hmac_secret.get_secret_value().encode("utf-8"),
            algorithm=settings.hmac_algorithm,
            header=settings.hmac_header,
            identifier=settings.hmac_identifier,
            max_interval=settings.hmac_max_interval,
            min_interval=settings.hmac_min_interval,
        )


def serialize_body(body: Any) -> Optional[str]:
    """Return the canonical text of a parsed body, or None when empty."""
    if body is None or body == "" or body == {} or body == []:
        return None
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


def compute_digest(
    secret: bytes,
    algorithm: str,
    timestamp: str,
    method: str,
    url: str,
    body: Any = None,
) -> bytes:
    """Compute the request signature for the given request parts."""
    mac = hmac.new(secret, digestmod=algorithm)
    mac.update(timestamp.encode("utf-8"))
    mac.update(method.upper().encode("utf-8"))
    mac.update(url.encode("utf-8"))
    serialized = serialize_body(body)
    if serialized is not None:
        body_hash = hashlib.md5(serialized.encode("utf-8")).hexdigest()
        mac.update(body_hash.encode("ascii"))
    return mac.digest()


class SignatureVerifier:
    """Checks signature headers against the shared secret.

    Args:
        config: Verification parameters.
        clock: Returns the current unix time in seconds.
    """

    def __init__(
        self, config: SignatureConfig, clock: Callable[[], float] = time.time
    ) -> None:
        self._config = config
        self._clock = clock

    @property
    def header(self) -> str:
        return self._config.header

    def verify(
        self, header_value: Optional[str], method: str, url: str, body: Any = None
    ) -> None:
        """Validate one request.

        Raises:
            SignatureError: On the first failed check.
        """
        config = self._config
        if not config.secret:
            raise SignatureError("Server secret is not configured")

        if not header_value:
            raise SignatureError(
                f"Header provided not in sent headers. "
                f"Expected {config.header} but not found in request.headers"
            )

        if not header_value.startswith(config.identifier):
            raise SignatureError(
                f"Header did not start with correct identifier. "
                f"Expected {config.identifier} but not found in {config.header}"
            )

        timestamp, _, digest_hex = (
            header_value[len(config.identifier):].strip().partition(":")
        )
        if not TIMESTAMP_PATTERN.fullmatch(timestamp):
            raise SignatureError("Unix timestamp was not present in header")

        time_diff = int(self._clock()) - int(timestamp) // 1000
        if time_diff > config.max_interval or -time_diff > config.min_interval:
            raise SignatureError(
                "Time difference between signature and current time exceeds maxInterval"
            )

        if not digest_hex:
            raise SignatureError("HMAC digest was not present in header")
        try:
            received = bytes.fromhex(digest_hex)
        except ValueError:
            raise SignatureError("HMAC digest was not valid hex") from None

        expected = compute_digest(
            config.secret, config.algorithm, timestamp, method, url, body
        )
        if not hmac.compare_digest(expected, received):
            raise SignatureError("HMAC's did not match")


def request_target(request: Request) -> str:
    """Return the path and query string exactly as the client sent them."""
    raw_path = request.scope.get("raw_path")
    path = raw_path.decode("latin-1").split("?", 1)[0] if raw_path else request.url.path
    query = request.scope.get("query_string", b"").decode("latin-1")
    return f"{path}?{query}" if query else path


async def signed_body(request: Request, max_size: int) -> Any:
    """Return the body as the signing client serialized it.

    JSON bodies are parsed and form bodies decoded into a mapping; any
    other non-empty body is taken as text.

    Raises:
        RequestTooLargeError: When the body exceeds max_size bytes.
    """
    raw = await read_limited(request, max_size)
    if not raw:
        return None
    return decode_body(raw, media_type(request))


async def require_signature(request: Request) -> None:
    """FastAPI dependency guarding every protected route.

    The body size limit is enforced first, so oversized requests are
    refused with 413 before any hashing.
    """
    verifier: SignatureVerifier = request.app.state.signature_verifier
    max_size = request.app.state.settings.max_request_size_bytes
    body = await signed_body(request, max_size)
    try:
        verifier.verify(
            request.headers.get(verifier.header),
            request.method,
            request_target(request),
            body,
        )
    except SignatureError as exc:
        logger.warning(
            "Rejected %s %s: %s", request.method, request.url.path, exc.message
        )
        raise

"""OAuth 1.0a HMAC-SHA1 request signing."""

import base64
import hashlib
import hmac
from urllib.parse import quote

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"


def percent_encode(value: str) -> str:
    """RFC 3986 percent encoding (only unreserved characters are kept)."""
    return quote(str(value), safe="-._~")


def build_parameter_string(params: dict[str, str]) -> str:
    """Join canonical parameters as ``key=value`` pairs separated by ``&``."""
    return "&".join(f"{key}={value}" for key, value in params.items())


def build_base_string(method: str, base_url: str, params: dict[str, str]) -> str:
    """Build the OAuth signature base string."""
    return "&".join(
        (
            method.upper(),
            percent_encode(base_url),
            percent_encode(build_parameter_string(params)),
        )
    )


def sign_request(
    method: str,
    base_url: str,
    params: dict[str, str],
    consumer_secret: str,
) -> str:
    """Return the percent-encoded HMAC-SHA1 signature for a request.

    ``params`` must already be in canonical (sorted) order. The signing key
    is the consumer secret followed by ``&`` since no token secret is used.
    """
    base_string = build_base_string(method, base_url, params)
    hashed = hmac.new(
        f"{consumer_secret}&".encode("utf-8"),
        base_string.encode("utf-8"),
        hashlib.sha1,
    )
    return percent_encode(base64.b64encode(hashed.digest()).decode("utf-8"))

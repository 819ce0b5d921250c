"""Request URL construction."""

from fatsecret_client.services.signing import percent_encode


def build_url(base_url: str, params: dict[str, str]) -> str:
    """Append parameters to the base URL as query arguments."""
    if not params:
        return base_url
    query = "&".join(
        f"{percent_encode(key)}={percent_encode(value)}"
        for key, value in params.items()
    )
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{query}"


def build_signed_url(base_url: str, params: dict[str, str], signature: str) -> str:
    """Append parameters and an already percent-encoded signature."""
    url = build_url(base_url, params)
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}oauth_signature={signature}"

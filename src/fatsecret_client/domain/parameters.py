"""Request parameter storage with OAuth-safe sanitization."""

import re

_DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9_\-.]")


def sanitize_key(value: object) -> str:
    """Strip every character outside ``[A-Za-z0-9_.-]``."""
    return _DISALLOWED_CHARS.sub("", str(value))


class ParameterStore:
    """Holds sanitized request parameters for a single API call."""

    def __init__(self, params: dict[str, object] | None = None) -> None:
        self._params: dict[str, str] = {}
        for key, value in (params or {}).items():
            self.set_parameter(key, value)

    def set_parameter(self, key: str, value: object) -> "ParameterStore":
        """Store a parameter, replacing any previous value for the key."""
        self._params[sanitize_key(key)] = sanitize_key(value)
        return self

    def get_parameters(self) -> dict[str, str]:
        """Return all parameters sorted ascending by key."""
        return dict(sorted(self._params.items()))

    def __len__(self) -> int:
        return len(self._params)

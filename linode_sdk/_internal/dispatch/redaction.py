"""Redaction of secrets from request queries before they are logged."""

from collections.abc import Mapping
from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "api_key",
    "password",
    "token",
    "secret",
    "root_pass",
    "rootpass",
    "root_ssh_key",
    "rootsshkey",
})

REDACTED_VALUE = "[REDACTED]"


def redact_query(query: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``query`` with sensitive values replaced.

    Keys are matched case-insensitively. The original mapping is never mutated.

    Args:
        query: Outgoing query parameters.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    return {
        key: REDACTED_VALUE if str(key).lower() in REDACT_KEYS else value
        for key, value in query.items()
    }

"""Sensitive-value masking for logs and CLI output.

``redact_sensitive_fields`` replaces values whose keys match known sensitive
markers. The resolver uses it before logging a source's mapping and the CLI
uses it before printing resolved settings.
"""

from __future__ import annotations

_MAX_REDACT_DEPTH = 20

# Substring match, case-insensitive, after dropping "_" and "-".
SENSITIVE_KEY_MARKERS: list[str] = [
    "password",
    "secret",
    "token",
    "apikey",
    "credential",
    "authorization",
]

# Keys that contain a marker but carry no secret material.
NON_SENSITIVE_KEYS = frozenset(
    {
        "tokenurl",
        "tokenfile",
        "useridentitytokenendpoint",
        "gfazpluseridentitytokenurl",
        "gfazplworkloadidentitytokenfile",
    }
)


def _normalize_key(key: str) -> str:
    return key.lower().replace("_", "").replace("-", "")


def is_sensitive_key(key: str) -> bool:
    normalized = _normalize_key(key)
    if normalized in NON_SENSITIVE_KEYS:
        return False
    return any(marker in normalized for marker in SENSITIVE_KEY_MARKERS)


def redact_sensitive_fields(
    value: object,
    *,
    mask: str = "***",
    depth: int = 0,
    max_depth: int = _MAX_REDACT_DEPTH,
) -> object:
    """Recursively replace sensitive values in dicts/lists.

    When ``max_depth`` is exceeded the entire sub-tree is replaced with
    *mask*. Empty values are kept so "unset" stays visible.
    """
    if depth >= max_depth:
        return mask
    if isinstance(value, dict):
        redacted: dict[str, object] = {}
        for key, val in value.items():
            if is_sensitive_key(str(key)) and val not in (None, ""):
                redacted[key] = mask
            else:
                redacted[key] = redact_sensitive_fields(
                    val, mask=mask, depth=depth + 1, max_depth=max_depth,
                )
        return redacted
    if isinstance(value, list):
        return [
            redact_sensitive_fields(
                item, mask=mask, depth=depth + 1, max_depth=max_depth,
            )
            for item in value
        ]
    return value

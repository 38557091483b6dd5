"""Key-to-field mapping shared by every configuration source."""

from __future__ import annotations

from collections.abc import Mapping

from azsettings import keys
from azsettings.models import AzureSettings, TokenEndpointSettings, WorkloadIdentitySettings


def _is_true(value: str | None) -> bool:
    # Strict textual match: "TRUE", "1" and "yes" are all False.
    return value == "true"


def _any_present(values: Mapping[str, str], names: tuple[str, ...]) -> bool:
    return any(name in values for name in names)


def _parse_token_endpoint(values: Mapping[str, str]) -> TokenEndpointSettings | None:
    if not _any_present(values, keys.USER_IDENTITY_KEYS):
        return None
    return TokenEndpointSettings(
        client_id=values.get(keys.USER_IDENTITY_CLIENT_ID, ""),
        client_secret=values.get(keys.USER_IDENTITY_CLIENT_SECRET, ""),
        token_url=values.get(keys.USER_IDENTITY_TOKEN_URL, ""),
        username_assertion=values.get(keys.USER_IDENTITY_ASSERTION) == keys.USERNAME_ASSERTION,
    )


def _parse_workload_identity(values: Mapping[str, str]) -> WorkloadIdentitySettings | None:
    if not _any_present(values, keys.WORKLOAD_IDENTITY_KEYS):
        return None
    return WorkloadIdentitySettings(
        client_id=values.get(keys.WORKLOAD_IDENTITY_CLIENT_ID, ""),
        tenant_id=values.get(keys.WORKLOAD_IDENTITY_TENANT_ID, ""),
        token_file=values.get(keys.WORKLOAD_IDENTITY_TOKEN_FILE, ""),
    )


def parse_settings(values: Mapping[str, str]) -> AzureSettings:
    """Build an ``AzureSettings`` from a string-keyed mapping.

    Unknown keys are ignored and missing keys fall back to empty/False.
    This never raises for malformed values.
    """
    return AzureSettings(
        cloud=values.get(keys.AZURE_CLOUD, ""),
        azure_auth_enabled=_is_true(values.get(keys.AZURE_AUTH_ENABLED)),
        managed_identity_enabled=_is_true(values.get(keys.MANAGED_IDENTITY_ENABLED)),
        managed_identity_client_id=values.get(keys.MANAGED_IDENTITY_CLIENT_ID, ""),
        user_identity_enabled=_is_true(values.get(keys.USER_IDENTITY_ENABLED)),
        user_identity_token_endpoint=_parse_token_endpoint(values),
        workload_identity_enabled=_is_true(values.get(keys.WORKLOAD_IDENTITY_ENABLED)),
        workload_identity_settings=_parse_workload_identity(values),
    )

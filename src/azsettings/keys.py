"""Recognized configuration keys.

The same strings are used as keys of a host configuration snapshot and as
process environment variable names.
"""

from __future__ import annotations

AZURE_CLOUD = "GFAZPL_AZURE_CLOUD"
AZURE_AUTH_ENABLED = "GFAZPL_AZURE_AUTH_ENABLED"

MANAGED_IDENTITY_ENABLED = "GFAZPL_MANAGED_IDENTITY_ENABLED"
MANAGED_IDENTITY_CLIENT_ID = "GFAZPL_MANAGED_IDENTITY_CLIENT_ID"

USER_IDENTITY_ENABLED = "GFAZPL_USER_IDENTITY_ENABLED"
USER_IDENTITY_CLIENT_ID = "GFAZPL_USER_IDENTITY_CLIENT_ID"
USER_IDENTITY_CLIENT_SECRET = "GFAZPL_USER_IDENTITY_CLIENT_SECRET"
USER_IDENTITY_TOKEN_URL = "GFAZPL_USER_IDENTITY_TOKEN_URL"
USER_IDENTITY_ASSERTION = "GFAZPL_USER_IDENTITY_ASSERTION"

WORKLOAD_IDENTITY_ENABLED = "GFAZPL_WORKLOAD_IDENTITY_ENABLED"
WORKLOAD_IDENTITY_CLIENT_ID = "GFAZPL_WORKLOAD_IDENTITY_CLIENT_ID"
WORKLOAD_IDENTITY_TENANT_ID = "GFAZPL_WORKLOAD_IDENTITY_TENANT_ID"
WORKLOAD_IDENTITY_TOKEN_FILE = "GFAZPL_WORKLOAD_IDENTITY_TOKEN_FILE"

# Cloud names
AZURE_PUBLIC = "AzureCloud"
AZURE_CHINA = "AzureChinaCloud"
AZURE_US_GOVERNMENT = "AzureUSGovernment"

# Only this assertion value switches the token endpoint to username assertion.
USERNAME_ASSERTION = "username"

USER_IDENTITY_KEYS: tuple[str, ...] = (
    USER_IDENTITY_CLIENT_ID,
    USER_IDENTITY_CLIENT_SECRET,
    USER_IDENTITY_TOKEN_URL,
    USER_IDENTITY_ASSERTION,
)

WORKLOAD_IDENTITY_KEYS: tuple[str, ...] = (
    WORKLOAD_IDENTITY_CLIENT_ID,
    WORKLOAD_IDENTITY_TENANT_ID,
    WORKLOAD_IDENTITY_TOKEN_FILE,
)

ALL_KEYS: tuple[str, ...] = (
    AZURE_CLOUD,
    AZURE_AUTH_ENABLED,
    MANAGED_IDENTITY_ENABLED,
    MANAGED_IDENTITY_CLIENT_ID,
    USER_IDENTITY_ENABLED,
    *USER_IDENTITY_KEYS,
    WORKLOAD_IDENTITY_ENABLED,
    *WORKLOAD_IDENTITY_KEYS,
)

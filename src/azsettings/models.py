"""Normalized Azure authentication settings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from azsettings.keys import AZURE_PUBLIC


class TokenEndpointSettings(BaseModel):
    """Token endpoint used by the user identity flow.

    SECURITY: client_secret is excluded from repr() and must never be logged.
    """

    model_config = ConfigDict(frozen=True)

    client_id: str = ""
    client_secret: str = Field(default="", repr=False)
    token_url: str = ""
    username_assertion: bool = False


class WorkloadIdentitySettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    client_id: str = ""
    tenant_id: str = ""
    token_file: str = ""


class AzureSettings(BaseModel):
    """Immutable result of a settings resolution.

    The nested ``user_identity_token_endpoint`` and
    ``workload_identity_settings`` are ``None`` when none of their keys were
    configured, which is distinct from a nested object with empty fields.
    """

    model_config = ConfigDict(frozen=True)

    cloud: str = ""
    azure_auth_enabled: bool = False
    managed_identity_enabled: bool = False
    managed_identity_client_id: str = ""
    user_identity_enabled: bool = False
    user_identity_token_endpoint: TokenEndpointSettings | None = None
    workload_identity_enabled: bool = False
    workload_identity_settings: WorkloadIdentitySettings | None = None

    @property
    def has_user_identity(self) -> bool:
        return self.user_identity_enabled and self.user_identity_token_endpoint is not None

    @property
    def has_workload_identity(self) -> bool:
        return self.workload_identity_enabled and self.workload_identity_settings is not None

    def is_public_cloud(self) -> bool:
        """Return True when the cloud is the Azure public cloud."""
        return self.cloud == AZURE_PUBLIC

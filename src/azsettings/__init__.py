"""Azure authentication settings resolution.

Settings come from a host configuration snapshot attached to the current
context when one is present, otherwise from environment variables.
"""

from azsettings.context import (
    HostConfig,
    get_host_config_optional,
    host_config_scope,
    read_from_context,
    reset_host_config,
    set_host_config,
)
from azsettings.errors import AzureSettingsError
from azsettings.models import AzureSettings, TokenEndpointSettings, WorkloadIdentitySettings
from azsettings.parser import parse_settings
from azsettings.resolver import default_sources, read_settings
from azsettings.sources import (
    ConfigSource,
    ContextSource,
    EnvironmentSource,
    FileSource,
    read_from_env,
)

__version__ = "0.1.0"

__all__ = [
    "AzureSettings",
    "AzureSettingsError",
    "ConfigSource",
    "ContextSource",
    "EnvironmentSource",
    "FileSource",
    "HostConfig",
    "TokenEndpointSettings",
    "WorkloadIdentitySettings",
    "default_sources",
    "get_host_config_optional",
    "host_config_scope",
    "parse_settings",
    "read_from_context",
    "read_from_env",
    "read_settings",
    "reset_host_config",
    "set_host_config",
    "__version__",
]

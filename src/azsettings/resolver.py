"""Settings resolution: context snapshot first, environment as fallback."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from contextvars import Context

from azsettings.config import Settings, load_settings
from azsettings.models import AzureSettings
from azsettings.parser import parse_settings
from azsettings.sources import ConfigSource, ContextSource, EnvironmentSource, FileSource
from azsettings.utils.masking import redact_sensitive_fields

logger = logging.getLogger(__name__)


def default_sources(ctx: Context | None = None) -> list[ConfigSource]:
    """Return the default chain: context, optional file, environment."""
    try:
        settings = load_settings()
    except RuntimeError as exc:
        logger.warning("Ignoring azsettings configuration, using defaults: %s", exc)
        settings = Settings()

    sources: list[ConfigSource] = [ContextSource(ctx)]
    if settings.sources.config_file:
        sources.append(FileSource(settings.sources.config_file))
    if settings.sources.use_environment:
        sources.append(EnvironmentSource(dotenv_path=settings.sources.dotenv_path))
    return sources


def read_settings(
    ctx: Context | None = None,
    sources: Sequence[ConfigSource] | None = None,
) -> AzureSettings:
    """Resolve Azure settings from the first source that has configuration.

    A non-empty context snapshot always wins over the environment, even if
    it holds no Azure keys. Malformed values degrade to empty/False, and an invalid
    ``AZSETTINGS_*`` setting falls back to the default chain. The only error
    is ``AzureSettingsError`` from a ``FileSource`` (including the one added
    by ``AZSETTINGS_CONFIG_FILE``) whose file is unreadable or malformed.
    """
    chain = default_sources(ctx) if sources is None else sources

    for source in chain:
        values, found = source.fetch()
        if not found:
            continue
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Resolved Azure settings from %s source: %s",
                source.name,
                redact_sensitive_fields(dict(sorted(values.items()))),
            )
        return parse_settings(values)

    logger.debug("No configuration source reported settings, using defaults")
    return AzureSettings()

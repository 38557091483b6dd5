"""Configuration sources that feed the settings parser.

Every source exposes ``fetch() -> (values, found)``. The resolver walks an
ordered list of sources and parses the first one that reports ``found``.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import yaml
from dotenv import dotenv_values

from azsettings.context import ContextSource  # noqa: F401  re-exported
from azsettings.errors import AzureSettingsError
from azsettings.keys import ALL_KEYS

logger = logging.getLogger(__name__)


@runtime_checkable
class ConfigSource(Protocol):
    name: str

    def fetch(self) -> tuple[dict[str, str], bool]:
        ...


def read_from_env(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Collect the recognized keys that are set in the environment."""
    env = os.environ if environ is None else environ
    return {key: env[key] for key in ALL_KEYS if key in env}


class EnvironmentSource:
    """Process environment, optionally layered over a dotenv file.

    The dotenv file is read with ``dotenv_values`` so the process environment
    is never modified. Real environment variables win over the file.
    """

    name = "environment"

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        dotenv_path: str | Path | None = None,
    ) -> None:
        self._environ = environ
        self._dotenv_path = Path(dotenv_path) if dotenv_path else None

    def fetch(self) -> tuple[dict[str, str], bool]:
        values: dict[str, str] = {}
        if self._dotenv_path is not None:
            if self._dotenv_path.is_file():
                file_values = dotenv_values(self._dotenv_path)
                values.update(
                    {
                        key: value
                        for key, value in file_values.items()
                        if key in ALL_KEYS and value is not None
                    }
                )
            else:
                logger.debug("Dotenv file %s not found, skipping", self._dotenv_path)
        values.update(read_from_env(self._environ))
        # The environment is the last resort and always counts as found.
        return values, True


_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def _substitute_env_vars(value: str) -> str:
    """Substitute ${VAR} patterns with environment variables.

    Bare ``$VAR`` is left alone so secrets containing ``$`` stay intact.
    """

    def replace(match: re.Match[str]) -> str:
        return os.environ.get(match.group(1), match.group(0))

    return _ENV_VAR_PATTERN.sub(replace, value)


def _stringify(key: str, value: Any, path: Path) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return _substitute_env_vars(value)
    raise AzureSettingsError(
        f"Value for {key} in {path} must be a scalar, got {type(value).__name__}",
        code="invalid_file",
    )


class FileSource:
    """YAML file holding a flat mapping of recognized keys."""

    name = "file"

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def fetch(self) -> tuple[dict[str, str], bool]:
        if not self.path.is_file():
            return {}, False
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise AzureSettingsError(
                f"Failed to read settings file {self.path}: {exc}",
                code="unreadable_file",
            ) from exc
        try:
            # BaseLoader keeps every scalar as its literal text: "TRUE", "yes"
            # and "0123" must reach the parser unchanged.
            data = yaml.load(raw, Loader=yaml.BaseLoader)
        except yaml.YAMLError as exc:
            raise AzureSettingsError(
                f"Invalid YAML in settings file {self.path}: {exc}",
                code="invalid_file",
            ) from exc

        if data is None:
            return {}, False
        if not isinstance(data, dict):
            raise AzureSettingsError(
                f"Settings file {self.path} must contain a mapping, got {type(data).__name__}",
                code="invalid_file",
            )

        values = {str(key): _stringify(str(key), value, self.path) for key, value in data.items()}
        return values, bool(values)

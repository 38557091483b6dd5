"""Request-scoped host configuration snapshot."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import Context, ContextVar, Token
from dataclasses import dataclass, field
from types import MappingProxyType

from azsettings.models import AzureSettings
from azsettings.parser import parse_settings


@dataclass(frozen=True)
class HostConfig:
    """
    Immutable configuration snapshot injected by a host process.

    ``HostConfig()`` carries an empty mapping, ``HostConfig(None)`` carries no
    mapping at all. Both are treated as "no settings" by the readers.

    SECURITY: values may hold client secrets, so repr() only lists key names.
    """

    config: Mapping[str, str] | None = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        # Defensive copy to prevent external mutations from leaking into context.
        if self.config is not None:
            object.__setattr__(self, "config", MappingProxyType(dict(self.config)))

    def __repr__(self) -> str:
        if self.config is None:
            return "HostConfig(config=None)"
        return f"HostConfig(keys={sorted(self.config)!r})"

    def __str__(self) -> str:
        return self.__repr__()

    def get(self, key: str, default: str = "") -> str:
        if self.config is None:
            return default
        return self.config.get(key, default)


_host_config: ContextVar[HostConfig | None] = ContextVar(
    "host_config",
    default=None,
)


def set_host_config(cfg: HostConfig | None) -> Token[HostConfig | None]:
    """Attach a snapshot to the current context and return reset token."""
    return _host_config.set(cfg)


def reset_host_config(token: Token[HostConfig | None]) -> None:
    """Reset context using token from set_host_config()."""
    _host_config.reset(token)


def get_host_config_optional(ctx: Context | None = None) -> HostConfig | None:
    """Get the snapshot attached to ``ctx`` (default: current context) or None."""
    if ctx is None:
        return _host_config.get()
    return ctx.get(_host_config)


@contextmanager
def host_config_scope(cfg: HostConfig | None) -> Iterator[HostConfig | None]:
    """Attach ``cfg`` for the duration of a ``with`` block."""
    token = set_host_config(cfg)
    try:
        yield cfg
    finally:
        reset_host_config(token)


class ContextSource:
    """Host configuration snapshot attached to a context."""

    name = "context"

    def __init__(self, ctx: Context | None = None) -> None:
        self._ctx = ctx

    def fetch(self) -> tuple[dict[str, str], bool]:
        cfg = get_host_config_optional(self._ctx)
        if cfg is None or not cfg.config:
            return {}, False
        return dict(cfg.config), True


def read_from_context(ctx: Context | None = None) -> tuple[AzureSettings, bool]:
    """Parse the attached snapshot.

    Returns ``(AzureSettings(), False)`` when there is no snapshot or its
    mapping is missing or empty. Any non-empty mapping yields ``True``, even
    when it holds no Azure keys.
    """
    values, found = ContextSource(ctx).fetch()
    if not found:
        return AzureSettings(), False
    return parse_settings(values), True

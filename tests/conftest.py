from __future__ import annotations

import pytest

from azsettings import config
from azsettings.keys import ALL_KEYS


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    # Tests must not see Azure keys or library knobs from the host shell.
    for key in ALL_KEYS:
        monkeypatch.delenv(key, raising=False)
    for key in config.ENV_KEYS.values():
        monkeypatch.delenv(key, raising=False)
    config._load_settings_cached.cache_clear()
    yield
    config._load_settings_cached.cache_clear()

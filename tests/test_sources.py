from __future__ import annotations

import os
from pathlib import Path

import pytest

from azsettings import keys
from azsettings.context import HostConfig, host_config_scope
from azsettings.errors import AzureSettingsError
from azsettings.resolver import read_settings
from azsettings.sources import (
    ConfigSource,
    ContextSource,
    EnvironmentSource,
    FileSource,
    _substitute_env_vars,
    read_from_env,
)


def test_read_from_env_includes_only_set_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(keys.AZURE_CLOUD, keys.AZURE_PUBLIC)
    monkeypatch.setenv(keys.USER_IDENTITY_CLIENT_ID, "")
    monkeypatch.setenv("UNRELATED_VARIABLE", "x")

    values = read_from_env()

    assert values == {keys.AZURE_CLOUD: keys.AZURE_PUBLIC, keys.USER_IDENTITY_CLIENT_ID: ""}


def test_read_from_env_with_explicit_mapping() -> None:
    environ = {keys.WORKLOAD_IDENTITY_TENANT_ID: "tenant", "PATH": "/usr/bin"}

    assert read_from_env(environ) == {keys.WORKLOAD_IDENTITY_TENANT_ID: "tenant"}


def test_read_from_env_does_not_modify_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(keys.AZURE_CLOUD, keys.AZURE_PUBLIC)
    before = dict(os.environ)

    read_from_env()

    assert dict(os.environ) == before


def test_sources_satisfy_protocol(tmp_path: Path) -> None:
    for source in (ContextSource(), EnvironmentSource(), FileSource(tmp_path / "x.yaml")):
        assert isinstance(source, ConfigSource)


def test_context_source_reports_found_only_for_non_empty_snapshot() -> None:
    assert ContextSource().fetch() == ({}, False)

    with host_config_scope(HostConfig({})):
        assert ContextSource().fetch() == ({}, False)

    with host_config_scope(HostConfig({keys.AZURE_CLOUD: keys.AZURE_PUBLIC})):
        assert ContextSource().fetch() == ({keys.AZURE_CLOUD: keys.AZURE_PUBLIC}, True)


def test_environment_source_always_found() -> None:
    assert EnvironmentSource(environ={}).fetch() == ({}, True)


def test_environment_source_layers_dotenv_under_environment(tmp_path: Path) -> None:
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text(
        f"{keys.AZURE_CLOUD}=DOTENV_CLOUD\n"
        f"{keys.MANAGED_IDENTITY_CLIENT_ID}=DOTENV_MI\n"
        "UNRELATED=ignored\n",
        encoding="utf-8",
    )
    source = EnvironmentSource(
        environ={keys.AZURE_CLOUD: "ENV_CLOUD"},
        dotenv_path=dotenv_file,
    )

    values, found = source.fetch()

    assert found is True
    assert values == {
        keys.AZURE_CLOUD: "ENV_CLOUD",
        keys.MANAGED_IDENTITY_CLIENT_ID: "DOTENV_MI",
    }


def test_environment_source_dotenv_does_not_touch_process_env(tmp_path: Path) -> None:
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text(f"{keys.AZURE_CLOUD}=DOTENV_CLOUD\n", encoding="utf-8")

    EnvironmentSource(dotenv_path=dotenv_file).fetch()

    assert keys.AZURE_CLOUD not in os.environ


def test_environment_source_missing_dotenv_is_skipped(tmp_path: Path) -> None:
    source = EnvironmentSource(environ={}, dotenv_path=tmp_path / "missing.env")

    assert source.fetch() == ({}, True)


def test_file_source_missing_file_not_found(tmp_path: Path) -> None:
    assert FileSource(tmp_path / "missing.yaml").fetch() == ({}, False)


def test_file_source_empty_file_not_found(tmp_path: Path) -> None:
    path = tmp_path / "azure.yaml"
    path.write_text("", encoding="utf-8")

    assert FileSource(path).fetch() == ({}, False)


def test_file_source_keeps_scalar_text(tmp_path: Path) -> None:
    path = tmp_path / "azure.yaml"
    path.write_text(
        "\n".join(
            [
                f"{keys.AZURE_CLOUD}: AzureCloud",
                f"{keys.MANAGED_IDENTITY_ENABLED}: true",
                f"{keys.USER_IDENTITY_ENABLED}: false",
                f"{keys.WORKLOAD_IDENTITY_CLIENT_ID}: 12345",
                f"{keys.WORKLOAD_IDENTITY_TENANT_ID}:",
            ]
        ),
        encoding="utf-8",
    )

    values, found = FileSource(path).fetch()

    assert found is True
    assert values == {
        keys.AZURE_CLOUD: "AzureCloud",
        keys.MANAGED_IDENTITY_ENABLED: "true",
        keys.USER_IDENTITY_ENABLED: "false",
        keys.WORKLOAD_IDENTITY_CLIENT_ID: "12345",
        keys.WORKLOAD_IDENTITY_TENANT_ID: "",
    }


def test_file_source_substitutes_env_vars(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("TEST_UI_SECRET", "from-env")
    path = tmp_path / "azure.yaml"
    path.write_text(f'{keys.USER_IDENTITY_CLIENT_SECRET}: "${{TEST_UI_SECRET}}"\n', encoding="utf-8")

    values, _ = FileSource(path).fetch()

    assert values[keys.USER_IDENTITY_CLIENT_SECRET] == "from-env"


def test_file_source_keeps_dollar_in_secret(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("HOME", "/home/someone")
    path = tmp_path / "azure.yaml"
    path.write_text(f"{keys.USER_IDENTITY_CLIENT_SECRET}: abc$HOMEdef$HOME\n", encoding="utf-8")

    values, _ = FileSource(path).fetch()

    assert values[keys.USER_IDENTITY_CLIENT_SECRET] == "abc$HOMEdef$HOME"


@pytest.mark.parametrize("raw", ["TRUE", "True", "yes", "on", "1"])
def test_file_source_booleans_stay_strict(tmp_path: Path, raw: str) -> None:
    path = tmp_path / "azure.yaml"
    path.write_text(f"{keys.MANAGED_IDENTITY_ENABLED}: {raw}\n", encoding="utf-8")

    values, found = FileSource(path).fetch()
    settings = read_settings(sources=[FileSource(path)])

    assert found is True
    assert values[keys.MANAGED_IDENTITY_ENABLED] == raw
    assert settings.managed_identity_enabled is False


@pytest.mark.parametrize("raw", ["0123", "0x1F", "1e3", "00042", "1_000"])
def test_file_source_keeps_numeric_looking_text(tmp_path: Path, raw: str) -> None:
    path = tmp_path / "azure.yaml"
    path.write_text(f"{keys.MANAGED_IDENTITY_CLIENT_ID}: {raw}\n", encoding="utf-8")

    settings = read_settings(sources=[FileSource(path)])

    assert settings.managed_identity_client_id == raw


def test_substitute_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEST_VAR", "value-1")
    assert _substitute_env_vars("${TEST_VAR}") == "value-1"
    assert _substitute_env_vars("${MISSING_VAR}") == "${MISSING_VAR}"
    assert _substitute_env_vars("pa$TEST_VAR") == "pa$TEST_VAR"


def test_file_source_rejects_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "azure.yaml"
    path.write_text("key: [unclosed\n", encoding="utf-8")

    with pytest.raises(AzureSettingsError, match="Invalid YAML") as exc_info:
        FileSource(path).fetch()
    assert exc_info.value.code == "invalid_file"


def test_file_source_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "azure.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(AzureSettingsError, match="must contain a mapping"):
        FileSource(path).fetch()


def test_file_source_rejects_nested_values(tmp_path: Path) -> None:
    path = tmp_path / "azure.yaml"
    path.write_text(f"{keys.AZURE_CLOUD}:\n  nested: value\n", encoding="utf-8")

    with pytest.raises(AzureSettingsError, match="must be a scalar"):
        FileSource(path).fetch()


def test_file_source_unreadable_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "azure.yaml"
    path.write_text(f"{keys.AZURE_CLOUD}: AzureCloud\n", encoding="utf-8")

    def boom(self: Path, *args: object, **kwargs: object) -> str:
        raise PermissionError("denied")

    monkeypatch.setattr(Path, "read_text", boom)

    with pytest.raises(AzureSettingsError) as exc_info:
        FileSource(path).fetch()
    assert exc_info.value.code == "unreadable_file"

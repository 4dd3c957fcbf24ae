from __future__ import annotations

from pathlib import Path

import pytest

from texroot.core.config import BUILD_DIR_ENV, TexRootConfig, config_from_env, load_config
from texroot.core.exceptions import ConfigurationError
from texroot.core.resolver import DEFAULT_MAX_DEPTH


def test_defaults() -> None:
    config = TexRootConfig()

    assert config.build_dir == ""
    assert config.quickfix_ignore_all_warnings is False
    assert config.quickfix_ignored_warnings == []
    assert config.max_depth == DEFAULT_MAX_DEPTH
    assert config.deprecation_messages() == []


def test_load_config_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "texroot.yml"
    path.write_text(
        "build_dir: build\n"
        "quickfix_ignored_warnings:\n"
        "  - Underfull\n"
        "  - Overfull\n"
        "max_depth: 8\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.build_dir == "build"
    assert config.quickfix_ignored_warnings == ["Underfull", "Overfull"]
    assert config.max_depth == 8


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "absent.yml") == TexRootConfig()
    assert load_config(None) == TexRootConfig()


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == TexRootConfig()


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("build_dir: [unterminated\n", "Invalid YAML"),
        ("- build\n", "must contain a mapping"),
        ("unknown_option: 1\n", "Invalid configuration"),
        ("max_depth: 0\n", "Invalid configuration"),
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "bad.yml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError, match=message):
        load_config(path)


def test_deprecated_options_are_recorded_and_ignored() -> None:
    config = TexRootConfig.model_validate(
        {"build_dir": "out", "errorformat_ignore_warnings": ["Font"]}
    )

    assert config.deprecated_options == ("errorformat_ignore_warnings",)
    assert config.quickfix_ignored_warnings == []
    assert config.deprecation_messages() == [
        "Deprecated option: errorformat_ignore_warnings. Please use: quickfix_ignored_warnings"
    ]


def test_with_overrides_skips_none_and_keeps_deprecations() -> None:
    config = TexRootConfig.model_validate({"errorformat_show_warnings": 0})

    assert config.with_overrides(build_dir=None) is config
    updated = config.with_overrides(build_dir=Path("latex.out"))
    assert updated.build_dir == "latex.out"
    assert updated.deprecated_options == ("errorformat_show_warnings",)


def test_config_from_env() -> None:
    base = TexRootConfig(build_dir="build")

    assert config_from_env(base, {BUILD_DIR_ENV: "out"}).build_dir == "out"
    assert config_from_env(base, {BUILD_DIR_ENV: ""}).build_dir == "build"
    assert config_from_env(base, {}).build_dir == "build"


def test_config_from_env_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(BUILD_DIR_ENV, "_build")

    assert config_from_env().build_dir == "_build"

"""Tests for unix_toolchain/config.py — YAML and environment configuration."""

from __future__ import annotations

import sys

import pytest

from unix_toolchain.config import (
    ToolchainConfig,
    config_from_env,
    load_config,
    make_fallback,
)
from unix_toolchain.darwin import XcrunFallback
from unix_toolchain.errors import ConfigError


class TestLoadConfig:
    def test_full_config(self, tmp_path):
        cfg = tmp_path / "toolchain.yaml"
        cfg.write_text("executable_dir: /opt/swift/usr/bin\nfallback: none\n")
        config = load_config(str(cfg))
        assert config == ToolchainConfig(executable_dir="/opt/swift/usr/bin", fallback="none")

    def test_empty_file_gives_defaults(self, tmp_path):
        cfg = tmp_path / "toolchain.yaml"
        cfg.write_text("")
        assert load_config(str(cfg)) == ToolchainConfig()

    def test_partial_config(self, tmp_path):
        cfg = tmp_path / "toolchain.yaml"
        cfg.write_text("fallback: xcrun\n")
        config = load_config(str(cfg))
        assert config.executable_dir is None
        assert config.fallback == "xcrun"

    def test_non_mapping_rejected(self, tmp_path):
        cfg = tmp_path / "toolchain.yaml"
        cfg.write_text("- executable_dir\n")
        with pytest.raises(ConfigError, match="expected mapping"):
            load_config(str(cfg))

    def test_unknown_key_rejected(self, tmp_path):
        cfg = tmp_path / "toolchain.yaml"
        cfg.write_text("search_paths: [/a]\n")
        with pytest.raises(ConfigError, match="search_paths"):
            load_config(str(cfg))

    def test_bad_fallback_rejected(self, tmp_path):
        cfg = tmp_path / "toolchain.yaml"
        cfg.write_text("fallback: brew\n")
        with pytest.raises(ConfigError, match="brew"):
            load_config(str(cfg))

    def test_bad_executable_dir_rejected(self, tmp_path):
        cfg = tmp_path / "toolchain.yaml"
        cfg.write_text("executable_dir: [1, 2]\n")
        with pytest.raises(ConfigError):
            load_config(str(cfg))

    def test_invalid_yaml(self, tmp_path):
        cfg = tmp_path / "toolchain.yaml"
        cfg.write_text("executable_dir: [unterminated\n")
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_config(str(cfg))

    def test_config_error_is_value_error(self, tmp_path):
        cfg = tmp_path / "toolchain.yaml"
        cfg.write_text("42\n")
        with pytest.raises(ValueError):
            load_config(str(cfg))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))


class TestConfigFromEnv:
    def test_empty_env_gives_defaults(self):
        assert config_from_env({}) == ToolchainConfig()

    def test_env_overrides(self):
        env = {
            "UNIX_TOOLCHAIN_EXECUTABLE_DIR": "/opt/bin",
            "UNIX_TOOLCHAIN_FALLBACK": "none",
        }
        assert config_from_env(env) == ToolchainConfig(executable_dir="/opt/bin", fallback="none")

    def test_file_then_overrides(self, tmp_path):
        cfg = tmp_path / "toolchain.yaml"
        cfg.write_text("executable_dir: /from/file\nfallback: xcrun\n")
        env = {
            "UNIX_TOOLCHAIN_CONFIG": str(cfg),
            "UNIX_TOOLCHAIN_FALLBACK": "none",
        }
        config = config_from_env(env)
        assert config.executable_dir == "/from/file"
        assert config.fallback == "none"

    def test_bad_env_fallback(self):
        with pytest.raises(ConfigError, match="UNIX_TOOLCHAIN_FALLBACK"):
            config_from_env({"UNIX_TOOLCHAIN_FALLBACK": "maybe"})

    def test_reads_os_environ_by_default(self, monkeypatch, clean_toolchain_env):
        monkeypatch.setenv("UNIX_TOOLCHAIN_EXECUTABLE_DIR", "/env/bin")
        assert config_from_env().executable_dir == "/env/bin"


class TestMakeFallback:
    def test_none(self):
        assert make_fallback("none") is None

    def test_xcrun(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")
        assert isinstance(make_fallback("xcrun", {}), XcrunFallback)

    def test_auto_follows_platform(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")
        assert make_fallback("auto", {}) is None
        monkeypatch.setattr(sys, "platform", "darwin")
        assert isinstance(make_fallback("auto", {}), XcrunFallback)

    def test_unknown(self):
        with pytest.raises(ConfigError):
            make_fallback("brew")

"""Tests for config.py — env loading and constants."""

import pytest

from readme_stats_action import config

_KNOWN_ENV_KEYS = list(config._ENV_KEYS)


class TestLoadEnv:
    @pytest.fixture(autouse=True)
    def _clean_environ(self, monkeypatch):
        """Remove known keys from os.environ so file-parsing tests are isolated."""
        for key in _KNOWN_ENV_KEYS:
            monkeypatch.delenv(key, raising=False)

    def test_basic_key_value(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("FOO=bar\nBAZ=qux\n")
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        assert config.load_env() == {"FOO": "bar", "BAZ": "qux"}

    def test_skips_comments_and_blanks(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("# comment\n\nKEY=val\n")
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        assert config.load_env() == {"KEY": "val"}

    def test_value_with_equals_sign(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("GRS_BASE_URL=https://x.test/?a=b\n")
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        assert config.load_env() == {"GRS_BASE_URL": "https://x.test/?a=b"}

    def test_missing_file_returns_empty(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "ENV_PATH", str(tmp_path / "nonexistent"))
        assert config.load_env() == {}

    def test_os_environ_fallback(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "ENV_PATH", str(tmp_path / "nonexistent"))
        monkeypatch.setenv("GITHUB_REPOSITORY_OWNER", "octocat")
        assert config.load_env()["GITHUB_REPOSITORY_OWNER"] == "octocat"

    def test_env_file_takes_precedence(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("GRS_BASE_URL=http://from-file\n")
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        monkeypatch.setenv("GRS_BASE_URL", "http://from-environ")
        assert config.load_env()["GRS_BASE_URL"] == "http://from-file"

    def test_unknown_keys_not_pulled_from_environ(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "ENV_PATH", str(tmp_path / "nonexistent"))
        monkeypatch.setenv("RANDOM_KEY", "should-not-appear")
        assert "RANDOM_KEY" not in config.load_env()


class TestEnvParsers:
    def test_env_int_bad_value_returns_default(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"K": "not_a_number"})
        assert config._env_int("K", 30) == 30

    def test_env_int_valid(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"K": "42"})
        assert config._env_int("K", 10) == 42

    def test_env_float_empty_returns_default(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"K": ""})
        assert config._env_float("K", 2.5) == 2.5

    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_env_bool_truthy(self, monkeypatch, raw):
        monkeypatch.setattr(config, "env", {"K": raw})
        assert config._env_bool("K") is True

    def test_env_bool_missing_default(self, monkeypatch):
        monkeypatch.setattr(config, "env", {})
        assert config._env_bool("K", True) is True


class TestConstants:
    def test_card_types(self):
        assert config.CARD_TYPES == ("stats", "top-langs", "pin", "wakatime", "gist")

    def test_default_output(self):
        assert config.DEFAULT_OUTPUT_DIR == "profile"
        assert config.OUTPUT_EXTENSION == ".svg"

    def test_version_format(self):
        assert len(config.VERSION.split(".")) == 3

"""Tests for configuration loading and logging setup."""

import logging

import tomli_w

from config import Config, get_config_path, load_config
from logger import setup_logging


class TestLoadConfig:
    """Tests for load_config."""

    def test_env_override_for_config_path(self, tmp_path, monkeypatch):
        config_path = tmp_path / "custom.toml"
        monkeypatch.setenv("POCKETLEDGER_CONFIG", str(config_path))

        assert get_config_path() == config_path

    def test_creates_default_config(self, tmp_path, monkeypatch):
        config_path = tmp_path / "conf" / "pocketledger.toml"
        monkeypatch.setenv("POCKETLEDGER_CONFIG", str(config_path))

        config = load_config()

        assert config_path.exists()
        assert config == Config.default()

    def test_reads_sections(self, tmp_path, monkeypatch):
        config_path = tmp_path / "pocketledger.toml"
        monkeypatch.setenv("POCKETLEDGER_CONFIG", str(config_path))
        with open(config_path, "wb") as f:
            tomli_w.dump(
                {
                    "base_dir": str(tmp_path / "data"),
                    "database": {"filename": "ledger.db"},
                    "logging": {"level": "WARNING"},
                    "ledger": {"allow_archived_categories": False},
                },
                f,
            )

        config = load_config()

        assert config.db_path == tmp_path / "data" / "db" / "ledger.db"
        assert config.log_dir == tmp_path / "data" / "logs"
        assert config.log_level == "WARNING"
        assert config.allow_archived_categories is False


def test_setup_logging_writes_dated_file(test_config):
    logger = setup_logging(test_config)
    logger.info("hello ledger")

    for handler in logger.handlers:
        handler.flush()

    log_files = list(test_config.log_dir.glob("pocketledger-*.log"))
    assert len(log_files) == 1
    assert "hello ledger" in log_files[0].read_text()
    assert logger.level == logging.DEBUG

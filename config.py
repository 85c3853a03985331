"""Configuration management for pocketledger.

Settings live in a TOML file (~/.config/pocketledger.toml unless
POCKETLEDGER_CONFIG points elsewhere). A file with defaults is written on
first run.
"""

import os
from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w

CONFIG_ENV_VAR = "POCKETLEDGER_CONFIG"


def _default_base_dir() -> Path:
    return Path.home() / "data" / "pocketledger"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        base_dir: Root for data files.
        db_data_dir: Directory holding the SQLite database.
        db_filename: Database file name.
        log_level: Level name for the pocketledger logger.
        log_dir: Directory for dated log files.
        db_timeout: Seconds a connection waits on a locked database.
        allow_archived_categories: Whether archived categories may still be
            assigned to new or updated transactions.
    """

    base_dir: Path
    db_data_dir: Path
    db_filename: str
    log_level: str
    log_dir: Path
    db_timeout: float = 5.0
    allow_archived_categories: bool = True

    @property
    def db_path(self) -> Path:
        return self.db_data_dir / self.db_filename

    @classmethod
    def default(cls) -> "Config":
        return cls.from_dict({})

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Build a Config from parsed TOML, filling in defaults for missing keys."""
        base_dir = Path(data.get("base_dir", _default_base_dir()))
        database = data.get("database", {})
        logging_section = data.get("logging", {})
        ledger = data.get("ledger", {})

        return cls(
            base_dir=base_dir,
            db_data_dir=Path(database.get("data_dir", base_dir / "db")),
            db_filename=database.get("filename", "pocketledger.db"),
            db_timeout=float(database.get("timeout", 5.0)),
            log_level=logging_section.get("level", "INFO"),
            log_dir=Path(logging_section.get("log_dir", base_dir / "logs")),
            allow_archived_categories=bool(
                ledger.get("allow_archived_categories", True)
            ),
        )

    def to_dict(self) -> dict:
        """Convert config to the TOML file structure."""
        return {
            "base_dir": str(self.base_dir),
            "database": {
                "data_dir": str(self.db_data_dir),
                "filename": self.db_filename,
                "timeout": self.db_timeout,
            },
            "logging": {
                "level": self.log_level,
                "log_dir": str(self.log_dir),
            },
            "ledger": {
                "allow_archived_categories": self.allow_archived_categories,
            },
        }


def get_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".config" / "pocketledger.toml"


def get_migrations_dir() -> Path:
    """Get the path to the SQL migrations shipped with the code."""
    return Path(__file__).parent / "db" / "migrations"


def load_config() -> Config:
    """Load configuration from file, creating a default file if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    if not config_path.exists():
        config = Config.default()
        save_config(config)
        return config

    with open(config_path, "rb") as f:
        return Config.from_dict(tomllib.load(f))


def save_config(config: Config) -> None:
    """Write config to the config file, creating its directory if needed."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config.to_dict(), f)

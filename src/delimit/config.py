from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from delimit.splitter import Splitter
from delimit.map_splitter import MapSplitter
from delimit.constants import (
    DEFAULT_TARGET_COLUMN,
    DEFAULT_DROP_TARGET_COLUMN,
    DEFAULT_EXPAND_PAIRS,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_FILE_LOG_LEVEL,
    DEFAULT_LOG_DIR,
)
from delimit.exceptions import ConfigurationError, DelimitError
from delimit.logging import check_level, configure


def _splitter_from_config(cfg, section: str):
    if isinstance(cfg, Splitter):
        return cfg
    if cfg is None:
        return None
    if isinstance(cfg, str):
        # Shorthand: a bare separator string.
        return Splitter.on(cfg)
    if isinstance(cfg, dict):
        if cfg.get("type", "None") in ("None", None):
            return None
        return Splitter.from_dict(cfg)
    raise ConfigurationError(
        f"{section} config must be a dictionary, got {type(cfg).__name__}",
        {"config_type": type(cfg).__name__, "suggestion": f"Use dict format or omit the {section} section entirely"}
    )


@dataclass
class SplittingConfig:
    """Configuration for the entry splitter."""
    splitter: Optional[Splitter] = field(default=None)

    def validate(self):
        if self.splitter is None:
            raise ConfigurationError(
                "A splitter is required.",
                {"suggestion": "Add a 'splitting' section, e.g. {type: char, separator: ','}"}
            )
        if not isinstance(self.splitter, Splitter):
            raise ConfigurationError(
                "splitter must be a Splitter instance.",
                {"splitter_type": type(self.splitter).__name__}
            )

    @classmethod
    def from_config(cls, cfg):
        return cls(splitter=_splitter_from_config(cfg, "splitting"))

    def to_dict(self) -> dict:
        return self.splitter.to_dict() if self.splitter else {"type": "None"}


@dataclass
class KeyValueConfig:
    """Configuration for the optional key/value separator."""
    separator: Optional[Splitter] = field(default=None)

    def validate(self):
        if self.separator is not None and not isinstance(self.separator, Splitter):
            raise ConfigurationError(
                "separator must be a Splitter instance or None.",
                {"separator_type": type(self.separator).__name__, "suggestion": "Use a Splitter or None for plain token splitting"}
            )

    @classmethod
    def from_config(cls, cfg):
        return cls(separator=_splitter_from_config(cfg, "key_value"))

    def to_dict(self) -> dict:
        return self.separator.to_dict() if self.separator else {"type": "None"}


@dataclass
class DataConfig:
    """Configuration for splitting a DataFrame column."""
    target_column: str = DEFAULT_TARGET_COLUMN
    drop_target_column: bool = DEFAULT_DROP_TARGET_COLUMN
    expand_pairs: bool = DEFAULT_EXPAND_PAIRS

    def validate(self):
        if not isinstance(self.target_column, str) or not self.target_column:
            raise ConfigurationError(
                "target_column must be a non-empty string.",
                {"target_column": self.target_column, "suggestion": "Provide a valid column name"}
            )
        if not isinstance(self.drop_target_column, bool):
            raise ConfigurationError(
                "drop_target_column must be a boolean.",
                {"drop_target_column": self.drop_target_column, "suggestion": "Use True or False"}
            )
        if not isinstance(self.expand_pairs, bool):
            raise ConfigurationError(
                "expand_pairs must be a boolean.",
                {"expand_pairs": self.expand_pairs, "suggestion": "Use True or False"}
            )

    def to_dict(self) -> dict:
        return {
            "target_column": self.target_column,
            "drop_target_column": self.drop_target_column,
            "expand_pairs": self.expand_pairs,
        }

    @classmethod
    def from_config(cls, cfg):
        if cfg is None:
            cfg = {}
        elif not isinstance(cfg, dict):
            raise ConfigurationError(
                f"Data config must be a dictionary, got {type(cfg).__name__}",
                {"config_type": type(cfg).__name__, "suggestion": "Use dict format or omit data section entirely"}
            )
        return cls(
            target_column=cfg.get("target_column", DEFAULT_TARGET_COLUMN),
            drop_target_column=cfg.get("drop_target_column", DEFAULT_DROP_TARGET_COLUMN),
            expand_pairs=cfg.get("expand_pairs", DEFAULT_EXPAND_PAIRS),
        )


@dataclass
class LoggingConfig:
    """Configuration for the delimit log handlers. Disabled unless a logging section is given."""
    enabled: bool = False
    console_level: str = DEFAULT_CONSOLE_LOG_LEVEL
    file_dir: str = str(DEFAULT_LOG_DIR)
    file_name: Optional[str] = None
    file_level: str = DEFAULT_FILE_LOG_LEVEL

    def validate(self):
        if not isinstance(self.enabled, bool):
            raise ConfigurationError(
                "logging.enabled must be a boolean.",
                {"enabled": self.enabled, "suggestion": "Use True or False"}
            )
        check_level("console_level", self.console_level)
        check_level("file_level", self.file_level)
        if self.file_name is not None and (not isinstance(self.file_name, str) or not self.file_name):
            raise ConfigurationError(
                "file_name must be a non-empty string or None.",
                {"file_name": self.file_name, "suggestion": "Omit file_name for console-only logging"}
            )

    def apply(self) -> bool:
        """Install the configured handlers. Returns False when disabled or already configured."""
        if not self.enabled:
            return False
        return configure(
            console_level=self.console_level,
            file_dir=self.file_dir,
            file_name=self.file_name,
            file_level=self.file_level,
        )

    def to_dict(self) -> dict:
        return {
            "enabled": self.enabled,
            "console_level": self.console_level,
            "file_dir": self.file_dir,
            "file_name": self.file_name,
            "file_level": self.file_level,
        }

    @classmethod
    def from_config(cls, cfg):
        if cfg is None:
            return cls()
        if not isinstance(cfg, dict):
            raise ConfigurationError(
                f"Logging config must be a dictionary, got {type(cfg).__name__}",
                {"config_type": type(cfg).__name__, "suggestion": "Use dict format or omit logging section entirely"}
            )
        return cls(
            enabled=cfg.get("enabled", True),
            console_level=cfg.get("console_level", DEFAULT_CONSOLE_LOG_LEVEL),
            file_dir=str(cfg.get("file_dir", DEFAULT_LOG_DIR)),
            file_name=cfg.get("file_name"),
            file_level=cfg.get("file_level", DEFAULT_FILE_LOG_LEVEL),
        )


@dataclass
class DelimitConfig:
    """Top-level configuration: entry splitter, optional key/value separator, data and logging options."""
    splitting: SplittingConfig
    key_value: KeyValueConfig = field(default_factory=KeyValueConfig)
    data: DataConfig = field(default_factory=DataConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        self.validate()

    def validate(self):
        self.splitting.validate()
        self.key_value.validate()
        self.data.validate()
        self.logging.validate()

    @property
    def has_key_value(self) -> bool:
        return self.key_value.separator is not None

    def build_splitter(self) -> Splitter:
        return self.splitting.splitter

    def build_map_splitter(self) -> MapSplitter:
        if not self.has_key_value:
            raise ConfigurationError(
                "No key/value separator configured.",
                {"suggestion": "Add a 'key_value' section to the config"}
            )
        return self.splitting.splitter.with_key_value_separator(self.key_value.separator)

    def to_config_dict(self) -> dict:
        """Return a dictionary suitable for saving as a YAML config."""
        d = {
            "splitting": self.splitting.to_dict(),
            "data": self.data.to_dict(),
        }
        if self.has_key_value:
            d["key_value"] = self.key_value.to_dict()
        if self.logging.enabled:
            d["logging"] = self.logging.to_dict()
        return d

    def to_yaml(self, path: Path) -> None:
        with open(path, "w") as f:
            yaml.safe_dump(self.to_config_dict(), f, sort_keys=False)

    @classmethod
    def from_yaml(cls, path: Path) -> "DelimitConfig":
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(
                f"YAML config file does not exist: {path}",
                {"file_path": str(path), "suggestion": "Check the file path or create the config file"}
            )
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Failed to parse YAML config file: {path}",
                {"file_path": str(path), "parse_error": str(e)}
            ) from e
        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DelimitConfig":
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config must be a dictionary, got {type(data).__name__}",
                {"config_type": type(data).__name__}
            )
        try:
            splitting = SplittingConfig.from_config(data.get("splitting"))
            key_value = KeyValueConfig.from_config(data.get("key_value"))
            data_cfg = DataConfig.from_config(data.get("data"))
            logging_cfg = LoggingConfig.from_config(data.get("logging"))
            return cls(splitting=splitting, key_value=key_value, data=data_cfg, logging=logging_cfg)
        except ConfigurationError:
            raise
        except DelimitError as e:
            raise ConfigurationError(f"Failed to load DelimitConfig from dict: {e}", {"error": str(e)}) from e

    @staticmethod
    def from_any(config_like) -> "DelimitConfig":
        if isinstance(config_like, DelimitConfig):
            return config_like
        elif isinstance(config_like, (str, Path)):
            return DelimitConfig.from_yaml(Path(config_like))
        elif isinstance(config_like, dict):
            return DelimitConfig.from_dict(config_like)
        else:
            raise ConfigurationError(
                f"Cannot build a DelimitConfig from {type(config_like).__name__}",
                {"config_type": type(config_like).__name__, "suggestion": "Pass a DelimitConfig, a dict, or a YAML path"}
            )

"""Application configuration stored in ``config/config.toml``.

Only process-level knobs live here (store location, log file, scan and
thumbnail tuning). The library root, directory template and type labels are
user data kept in the metadata store.
"""
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from sharaku.config.paths import default_config_path
from sharaku.platform.logging import logger

SCAN_PROGRESS_INTERVAL_DEFAULT = 50
THUMBNAIL_MAX_WIDTH_DEFAULT = 200
THUMBNAIL_MAX_HEIGHT_DEFAULT = 280
THUMBNAIL_QUALITY_DEFAULT = 65

_HEADER = "# Sharaku Configuration File"


def _optional_path(*help_lines: str) -> Any:
    """Field for an optional filesystem path; blank values load as None."""

    return field(default=None, metadata={"path": True, "help": help_lines})


def _setting(default: int, *help_lines: str) -> Any:
    return field(default=default, metadata={"help": help_lines})


@dataclass
class Config:
    """Application configuration."""

    db_path: Path | None = _optional_path(
        "SQLite metadata store (optional)",
        "Defaults to <repo_root>/.data/sharaku.db or $SHARAKU_DATA_DIR/sharaku.db",
        'Example: db_path = "/path/to/sharaku.db"',
    )
    log_file: Path | None = _optional_path(
        "Log file path (optional)",
        'Example: log_file = "/path/to/logs/sharaku.log"',
    )
    scan_progress_interval: int = _setting(
        SCAN_PROGRESS_INTERVAL_DEFAULT,
        "Folder discovery reports progress every N directories",
    )
    thumbnail_max_width: int = _setting(
        THUMBNAIL_MAX_WIDTH_DEFAULT,
        "Thumbnails fit inside this box and are encoded as WebP",
    )
    thumbnail_max_height: int = _setting(THUMBNAIL_MAX_HEIGHT_DEFAULT)
    thumbnail_quality: int = _setting(THUMBNAIL_QUALITY_DEFAULT, "WebP quality, 1-100")

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self) -> None:
        """Write the configuration, with a comment block per key."""

        target = default_config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self._render_toml(), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)

    def _render_toml(self) -> str:
        values = asdict(self)
        lines: list[str] = [_HEADER, ""]
        for f in fields(self):
            help_lines: tuple[str, ...] = f.metadata.get("help", ())
            lines.extend(f"# {text}" for text in help_lines)
            value = values[f.name]
            # TOML has no null; unset optional keys are left out.
            if value is not None:
                lines.append(f"{f.name} = {self._format_toml_value(value)}")
            if help_lines or value is None:
                lines.append("")
        return "\n".join(lines).rstrip("\n") + "\n"

    @staticmethod
    def _format_toml_value(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def _from_toml(cls, raw: dict[str, Any]) -> "Config":
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(raw) - set(known))
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        values: dict[str, Any] = {}
        for name, value in raw.items():
            spec = known.get(name)
            if spec is None:
                continue
            if spec.metadata.get("path", False) and not (isinstance(value, str) and value.strip()):
                value = None
            values[name] = value
        return cls(**values)

    @classmethod
    def load(cls) -> "Config":
        """Return the shared configuration, creating the file on first use."""

        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()
        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    instance = cls._from_toml(tomllib.load(f))
                logger.debug("Configuration loaded from %s", config_file)
            else:
                instance = cls()
                instance.save()
                logger.info("Created default configuration at %s", config_file)
        except (OSError, tomllib.TOMLDecodeError, TypeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


# Global configuration instance
config = Config.load()

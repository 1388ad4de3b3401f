"""
Runtime settings, read from the environment once by the CLI layer and passed
explicitly into the pipeline. Nothing inside the pipeline reads os.environ.
"""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


@dataclass
class Settings:
    output_dir: Path
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    font_path: Path | None = None
    log_level: str = "INFO"
    seed: int | None = None


def _env_int(name: str, default: int | None) -> int | None:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def load_settings() -> Settings:
    """
    Build Settings from TEAM_BUILDER_* environment variables.
    Unset variables fall back to defaults (output dir: ./output, 10 MiB upload cap).
    """
    font = os.environ.get("TEAM_BUILDER_FONT_PATH", "").strip()
    return Settings(
        output_dir=Path(os.environ.get("TEAM_BUILDER_OUTPUT_DIR", "") or "output"),
        max_upload_bytes=_env_int("TEAM_BUILDER_MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES),
        font_path=Path(font) if font else None,
        log_level=os.environ.get("TEAM_BUILDER_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        seed=_env_int("TEAM_BUILDER_SEED", None),
    )

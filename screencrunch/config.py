"""Environment-driven settings for screencrunch."""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Runtime settings. Nothing is read from disk."""

    ffmpeg_path: str = "ffmpeg"
    ffprobe_path: str = "ffprobe"
    log_level: str = "WARNING"
    output_suffix: str = "-vc"


def load_config(environ: dict[str, str] | None = None) -> Config:
    """Build a Config from ``SCREENCRUNCH_*`` environment variables."""
    env = os.environ if environ is None else environ

    log_level = env.get("SCREENCRUNCH_LOG_LEVEL", "WARNING").upper()
    if log_level not in LOG_LEVELS:
        logger.warning(f"Unknown log level {log_level!r}, using WARNING")
        log_level = "WARNING"

    return Config(
        ffmpeg_path=env.get("SCREENCRUNCH_FFMPEG", "ffmpeg"),
        ffprobe_path=env.get("SCREENCRUNCH_FFPROBE", "ffprobe"),
        log_level=log_level,
        output_suffix=env.get("SCREENCRUNCH_SUFFIX", "-vc"),
    )

"""FFmpeg/ffprobe subprocess helpers."""

import json
import logging
import shlex
import shutil
import subprocess
from pathlib import Path

from screencrunch.models import Stream, StreamInfo

logger = logging.getLogger(__name__)


class FFmpegNotFoundError(RuntimeError):
    pass


class ProbeFailure(ValueError):
    """Raised when ffprobe output has no usable video frame rate."""
    pass


def check_ffmpeg(ffmpeg: str = "ffmpeg", ffprobe: str = "ffprobe") -> None:
    """Raise FFmpegNotFoundError if ffmpeg/ffprobe are not on PATH."""
    for cmd in (ffmpeg, ffprobe):
        if shutil.which(cmd) is None:
            raise FFmpegNotFoundError(f"{cmd} not found on PATH")


def parse_frame_rate(rate: str) -> float:
    """Parse an ffprobe rate such as ``"30000/1001"`` or ``"24"``."""
    parts = str(rate).strip().split("/")
    try:
        if len(parts) == 1:
            return float(parts[0])
        if len(parts) == 2:
            return float(parts[0]) / float(parts[1])
    except (ValueError, ZeroDivisionError):
        raise ProbeFailure(f"Cannot parse frame rate {rate!r}") from None
    raise ProbeFailure(f"Cannot parse frame rate {rate!r}")


def _known_rate(rate: str | None) -> bool:
    """False for missing rates and ffprobe's ``"0/0"`` (unknown) style values."""
    if not rate:
        return False
    parts = str(rate).strip().split("/")
    return not (len(parts) == 2 and parts[1].strip() in ("0", "0.0"))


def _stream_rate(s: dict) -> str | None:
    # ffprobe always writes avg_frame_rate, as "0/0" when it cannot tell
    for key in ("avg_frame_rate", "r_frame_rate"):
        if _known_rate(s.get(key)):
            return s[key]
    return None


def parse_probe_output(stdout: str) -> StreamInfo:
    """Turn ``ffprobe -show_streams`` JSON into a StreamInfo.

    The first video stream decides the frame rate; later ones are ignored.
    """
    try:
        data = json.loads(stdout)
    except (TypeError, json.JSONDecodeError):
        raise ProbeFailure("ffprobe returned no readable stream data") from None

    raw_streams = data.get("streams") if isinstance(data, dict) else None
    if not raw_streams:
        raise ProbeFailure("ffprobe returned no streams")

    streams = [
        Stream(
            codec_type=s.get("codec_type", ""),
            frame_rate=_stream_rate(s),
        )
        for s in raw_streams
    ]

    video = next((s for s in streams if s.codec_type == "video"), None)
    if video is None:
        raise ProbeFailure("No video stream found")
    if not video.frame_rate:
        raise ProbeFailure("Video stream has no usable frame rate")

    return StreamInfo(streams=streams, fps=parse_frame_rate(video.frame_rate))


def probe(input_path: str | Path, ffprobe: str = "ffprobe") -> StreamInfo:
    """Read stream metadata of *input_path* via ffprobe."""
    cmd = [
        ffprobe,
        "-v", "quiet",
        "-print_format", "json",
        "-show_streams",
        str(input_path),
    ]
    logger.debug(f"Probing: {shlex.join(cmd)}")
    result = subprocess.run(cmd, capture_output=True, text=True)
    if result.returncode != 0:
        logger.debug(f"ffprobe exited with {result.returncode}")

    info = parse_probe_output(result.stdout)
    logger.debug(f"Probed {input_path}: {len(info.streams)} streams, {info.fps:.3f} fps")
    return info


def run_ffmpeg(cmd: list[str]) -> int:
    """Run an ffmpeg command in the foreground and return its exit code.

    Output streams are inherited so ffmpeg's own progress stays visible.
    """
    logger.debug(f"Running: {shlex.join(cmd)}")
    result = subprocess.run(cmd)
    logger.debug(f"ffmpeg exited with {result.returncode}")
    return result.returncode

"""Shared data types used across screencrunch."""

from dataclasses import dataclass, field
from enum import IntEnum


class PresetKind(IntEnum):
    """Quality tiers, selected by number on the command line or prompt."""

    OK = 1
    BETTER = 2
    BEST = 3
    CUSTOM = 4


@dataclass(frozen=True)
class QualityPreset:
    """Encoder knobs derived from a quality selection."""

    kind: PresetKind
    audio_bitrate: str
    audio_channels: int
    crf: float
    max_fps: float


@dataclass
class TrimRange:
    """Optional start/end time expressions, passed to ffmpeg verbatim."""

    start: str | None = None
    end: str | None = None


@dataclass
class Stream:
    codec_type: str
    frame_rate: str | None = None


@dataclass
class StreamInfo:
    """The part of ffprobe's output needed to plan an encode."""

    streams: list[Stream]
    fps: float


@dataclass
class InvocationPlan:
    """ffmpeg arguments split into ordered segments.

    ``args`` always yields the overwrite flag, then trim, input, codec,
    passthrough and output, in that order. Trim flags sit before ``-i`` so
    ffmpeg seeks on the input before decoding.
    """

    input: list[str]
    output: list[str]
    trim: list[str] = field(default_factory=list)
    codec: list[str] = field(default_factory=list)
    passthrough: list[str] = field(default_factory=list)

    @property
    def args(self) -> list[str]:
        return [
            "-y",
            *self.trim,
            *self.input,
            *self.codec,
            *self.passthrough,
            *self.output,
        ]

    def command(self, ffmpeg: str = "ffmpeg") -> list[str]:
        return [ffmpeg, *self.args]

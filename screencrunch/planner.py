"""Turn a preset, a measured frame rate and trim bounds into ffmpeg arguments."""

from pathlib import Path

from screencrunch.models import InvocationPlan, QualityPreset, TrimRange

# Sources within 1% of the cap are left alone; their rate only differs by
# float imprecision (e.g. 30.00003 vs 30).
FPS_TOLERANCE = 1.01


def needs_fps_cap(fps: float, max_fps: float) -> bool:
    return fps > max_fps * FPS_TOLERANCE


def codec_args(preset: QualityPreset, fps: float) -> list[str]:
    """Audio/CRF flags, plus an fps filter when the source is faster than the cap."""
    args = [
        "-b:a", preset.audio_bitrate,
        "-ac", str(preset.audio_channels),
        "-crf", f"{preset.crf:g}",
    ]
    if needs_fps_cap(fps, preset.max_fps):
        args += ["-filter:v", f"fps={preset.max_fps:g}:round=near"]
    return args


def trim_args(trim: TrimRange) -> list[str]:
    args: list[str] = []
    if trim.start:
        args += ["-ss", trim.start]
    if trim.end:
        args += ["-to", trim.end]
    return args


def default_output_path(input_path: str | Path, suffix: str = "-vc") -> str:
    """``clip.mp4`` -> ``clip-vc.mp4``; ``clip`` -> ``clip-vc``.

    The suffix goes before the file name's last dot, so ``clip.`` becomes
    ``clip-vc.`` and ``.mp4`` becomes ``-vc.mp4``. Dots in directory names
    are left alone.
    """
    p = Path(input_path)
    name = p.name
    dot = name.rfind(".")
    if dot == -1:
        return str(p.with_name(name + suffix))
    return str(p.with_name(name[:dot] + suffix + name[dot:]))


def build_plan(
    input_path: str | Path,
    output_path: str | Path,
    preset: QualityPreset,
    fps: float,
    trim: TrimRange | None = None,
    extra: list[str] | None = None,
) -> InvocationPlan:
    return InvocationPlan(
        trim=trim_args(trim or TrimRange()),
        input=["-i", str(input_path)],
        codec=codec_args(preset, fps),
        passthrough=list(extra or []),
        output=[str(output_path)],
    )

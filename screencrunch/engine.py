"""Orchestrator — probes the source, plans the encode and runs ffmpeg."""

import logging
import shlex
from dataclasses import dataclass, field
from pathlib import Path

from rich.markup import escape

from screencrunch import ffutil
from screencrunch.config import Config
from screencrunch.models import InvocationPlan, QualityPreset, TrimRange
from screencrunch.planner import build_plan
from screencrunch.prompt import console

logger = logging.getLogger(__name__)


@dataclass
class Job:
    """Everything resolved from arguments and prompts for one run."""

    input: Path
    output: Path
    preset: QualityPreset
    trim: TrimRange = field(default_factory=TrimRange)
    extra: list[str] = field(default_factory=list)


@dataclass
class EngineResult:
    command: list[str]
    fps: float
    returncode: int | None = None


def compress(job: Job, config: Config | None = None, dry_run: bool = False) -> EngineResult:
    """Probe, build the ffmpeg command, echo it and run it.

    Raises ProbeFailure before anything is executed if the input has no
    usable video stream. With *dry_run* the command is printed only.
    """
    config = config or Config()

    info = ffutil.probe(job.input, ffprobe=config.ffprobe_path)
    console.print(f"Source frame rate: {info.fps:.2f} fps")

    plan: InvocationPlan = build_plan(
        job.input, job.output, job.preset, info.fps, trim=job.trim, extra=job.extra
    )
    cmd = plan.command(config.ffmpeg_path)

    console.print()
    console.print(escape(shlex.join(cmd)), soft_wrap=True)
    console.print()

    if dry_run:
        logger.info("Dry run, not starting ffmpeg")
        return EngineResult(command=cmd, fps=info.fps)

    returncode = ffutil.run_ffmpeg(cmd)
    return EngineResult(command=cmd, fps=info.fps, returncode=returncode)

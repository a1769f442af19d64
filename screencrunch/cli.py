"""Thin CLI entry point — resolves a Job and calls the engine."""

import argparse
import logging
import shlex
import sys
from pathlib import Path

from rich.markup import escape

from screencrunch import ffutil
from screencrunch.config import Config, load_config
from screencrunch.engine import Job, compress
from screencrunch.ffutil import FFmpegNotFoundError, ProbeFailure
from screencrunch.models import TrimRange
from screencrunch.planner import default_output_path
from screencrunch.presets import (
    InvalidPresetValue,
    InvalidQualitySelector,
    print_menu,
    select_preset,
)
from screencrunch.prompt import Asker, err_console, resolve

DEFAULT_QUALITY = "1"


class MissingInputError(ValueError):
    pass


class InvalidExtraOptions(ValueError):
    """Raised when extra ffmpeg options cannot be split like a shell would."""
    pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="screencrunch",
        description="Compress a screen recording with ffmpeg using simple quality presets.",
        epilog="Anything after '--' is passed to ffmpeg unchanged, just before the output file.",
    )
    parser.add_argument("input", nargs="?", help="Recording to compress")
    parser.add_argument("--output", "-o", help="Output file (default: input name with -vc added)")
    parser.add_argument("--quality", "-q", type=int, help="1=OK, 2=BETTER, 3=BEST, 4=CUSTOM")
    parser.add_argument("--start", "-ss", help="Trim start, any ffmpeg time expression")
    parser.add_argument("--end", "-to", help="Trim end, any ffmpeg time expression")

    custom = parser.add_argument_group("custom quality (-q 4)")
    custom.add_argument("--audio-bitrate", help="Audio bitrate, e.g. 64k")
    custom.add_argument("--audio-channels", help="Audio channel count")
    custom.add_argument("--crf", help="Constant rate factor")
    custom.add_argument("--max-fps", help="Frame rate cap")

    parser.add_argument("--yes", "-y", action="store_true", help="Never prompt; use defaults")
    parser.add_argument("--dry-run", action="store_true", help="Print the ffmpeg command without running it")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def split_passthrough(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first ``--`` into (own args, ffmpeg args)."""
    if "--" in argv:
        i = argv.index("--")
        return argv[:i], argv[i + 1:]
    return argv, []


def resolve_job(
    args: argparse.Namespace,
    extra: list[str],
    config: Config,
    ask: Asker | None = None,
) -> Job:
    """Fill in every parameter, prompting for the ones not given on the command line."""
    interactive = not args.yes

    input_path = resolve(args.input, "input file", "Input file", ask=ask, interactive=interactive)
    if not input_path:
        raise MissingInputError("No input file given")

    output_path = resolve(
        args.output, "output file", "Output file",
        default_output_path(input_path, config.output_suffix),
        ask=ask, interactive=interactive,
    )

    quality = resolve(
        args.quality, "quality", "Quality (1-4)", DEFAULT_QUALITY,
        explain=print_menu, ask=ask, interactive=interactive,
    )
    preset = select_preset(
        quality,
        ask=ask,
        interactive=interactive,
        audio_bitrate=args.audio_bitrate,
        audio_channels=args.audio_channels,
        crf=args.crf,
        max_fps=args.max_fps,
    )

    start = resolve(
        args.start, "trim start", "Start at (blank for beginning)", ask=ask, interactive=interactive
    )
    end = resolve(
        args.end, "trim end", "End at (blank for end of file)", ask=ask, interactive=interactive
    )
    extra_opts = resolve(
        shlex.join(extra), "extra ffmpeg options", "Extra ffmpeg options",
        ask=ask, interactive=interactive,
    )

    try:
        extra_args = shlex.split(extra_opts)
    except ValueError as e:
        raise InvalidExtraOptions(f"Cannot read extra ffmpeg options {extra_opts!r}: {e}") from None

    return Job(
        input=Path(input_path),
        output=Path(output_path),
        preset=preset,
        trim=TrimRange(start=start or None, end=end or None),
        extra=extra_args,
    )


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else list(argv)
    own_args, extra = split_passthrough(argv)
    args = build_parser().parse_args(own_args)

    config = load_config()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        ffutil.check_ffmpeg(config.ffmpeg_path, config.ffprobe_path)
        job = resolve_job(args, extra, config)
        result = compress(job, config, dry_run=args.dry_run)
    except (
        MissingInputError,
        InvalidExtraOptions,
        InvalidQualitySelector,
        InvalidPresetValue,
        ProbeFailure,
        FFmpegNotFoundError,
    ) as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)

    if result.returncode:
        sys.exit(result.returncode)

"""Tests for ffmpeg argument planning."""

import pytest

from screencrunch.models import PresetKind, QualityPreset, TrimRange
from screencrunch.planner import (
    build_plan,
    codec_args,
    default_output_path,
    needs_fps_cap,
    trim_args,
)
from screencrunch.presets import PRESETS

OK = PRESETS[PresetKind.OK]


class TestFpsCap:
    def test_exactly_one_percent_over_is_not_capped(self):
        assert not needs_fps_cap(20 * 1.01, 20)

    def test_just_past_tolerance_is_capped(self):
        assert needs_fps_cap(20 * 1.0101, 20)

    def test_ntsc_source_under_30_cap(self):
        assert not needs_fps_cap(30000 / 1001, 30)

    def test_slower_source(self):
        assert not needs_fps_cap(15, 20)


class TestCodecArgs:
    def test_ok_preset_at_30fps(self):
        assert codec_args(OK, 30.0) == [
            "-b:a", "32k",
            "-ac", "1",
            "-crf", "35",
            "-filter:v", "fps=20:round=near",
        ]

    def test_no_filter_when_under_cap(self):
        args = codec_args(PRESETS[PresetKind.BEST], 30.0)
        assert "-filter:v" not in args
        assert args == ["-b:a", "64k", "-ac", "1", "-crf", "25"]

    def test_fractional_crf(self):
        p = QualityPreset(PresetKind.CUSTOM, "64k", 1, 23.5, 30)
        assert codec_args(p, 30.0)[4:6] == ["-crf", "23.5"]

    def test_whole_crf_has_no_decimal(self):
        p = QualityPreset(PresetKind.CUSTOM, "64k", 1, 28.0, 30)
        assert codec_args(p, 30.0)[4:6] == ["-crf", "28"]

    def test_fractional_cap(self):
        p = QualityPreset(PresetKind.CUSTOM, "64k", 2, 28, 29.97)
        assert codec_args(p, 60.0)[-1] == "fps=29.97:round=near"


class TestTrimArgs:
    def test_start_only(self):
        assert trim_args(TrimRange(start="00:10")) == ["-ss", "00:10"]

    def test_end_only(self):
        assert trim_args(TrimRange(end="1:00")) == ["-to", "1:00"]

    def test_both(self):
        assert trim_args(TrimRange(start="5", end="65")) == ["-ss", "5", "-to", "65"]

    def test_none(self):
        assert trim_args(TrimRange()) == []


class TestDefaultOutputPath:
    @pytest.mark.parametrize(
        "given, expected",
        [
            ("clip.mp4", "clip-vc.mp4"),
            ("clip", "clip-vc"),
            ("rec.2024.mkv", "rec.2024-vc.mkv"),
            ("clip.", "clip-vc."),
            (".mp4", "-vc.mp4"),
            ("takes.v2/clip", "takes.v2/clip-vc"),
        ],
    )
    def test_suffix_before_extension(self, given, expected):
        assert default_output_path(given) == expected

    def test_custom_suffix(self):
        assert default_output_path("clip.mp4", "_small") == "clip_small.mp4"


class TestBuildPlan:
    def test_trim_precedes_input(self):
        plan = build_plan("a.mov", "a-vc.mov", OK, 30.0, trim=TrimRange(start="00:10"))
        args = plan.args
        assert plan.trim == ["-ss", "00:10"]
        assert "-to" not in args
        assert args.index("-ss") < args.index("-i")

    def test_full_order(self):
        plan = build_plan(
            "a.mov", "out.mp4", OK, 30.0,
            trim=TrimRange(start="1", end="2"),
            extra=["-preset", "slow"],
        )
        assert plan.command() == [
            "ffmpeg", "-y",
            "-ss", "1", "-to", "2",
            "-i", "a.mov",
            "-b:a", "32k", "-ac", "1", "-crf", "35",
            "-filter:v", "fps=20:round=near",
            "-preset", "slow",
            "out.mp4",
        ]

    def test_no_trim_no_extra(self):
        plan = build_plan("a.mov", "b.mov", PRESETS[PresetKind.BEST], 24.0)
        assert plan.args == [
            "-y", "-i", "a.mov", "-b:a", "64k", "-ac", "1", "-crf", "25", "b.mov",
        ]

"""Quality presets and the interactive custom preset."""

from rich import box
from rich.markup import escape
from rich.table import Table

from screencrunch.models import PresetKind, QualityPreset
from screencrunch.prompt import Asker, console, err_console, is_set, resolve


class InvalidQualitySelector(ValueError):
    """Raised when the quality selector is not one of the menu numbers."""
    pass


class InvalidPresetValue(ValueError):
    """Raised when a custom knob that must be numeric is not."""
    pass


PRESETS: dict[PresetKind, QualityPreset] = {
    PresetKind.OK: QualityPreset(
        kind=PresetKind.OK, audio_bitrate="32k", audio_channels=1, crf=35, max_fps=20
    ),
    PresetKind.BETTER: QualityPreset(
        kind=PresetKind.BETTER, audio_bitrate="48k", audio_channels=1, crf=30, max_fps=25
    ),
    PresetKind.BEST: QualityPreset(
        kind=PresetKind.BEST, audio_bitrate="64k", audio_channels=1, crf=25, max_fps=30
    ),
}

# Custom prompts start from the BEST tier.
CUSTOM_DEFAULTS = PRESETS[PresetKind.BEST]

_DESCRIPTIONS = {
    PresetKind.OK: "smallest files, fine for long recordings",
    PresetKind.BETTER: "balanced size and quality",
    PresetKind.BEST: "sharpest text and smoothest motion",
    PresetKind.CUSTOM: "enter each setting yourself",
}


def print_menu() -> None:
    """Print the numbered quality menu: fixed tiers first, custom last."""
    table = Table(box=box.SIMPLE_HEAD, padding=(0, 1))
    table.add_column("#", justify="right")
    table.add_column("Quality")
    table.add_column("Audio")
    table.add_column("CRF", justify="right")
    table.add_column("Max fps", justify="right")
    table.add_column("Notes")

    for kind in PresetKind:
        desc = _DESCRIPTIONS[kind]
        if kind is PresetKind.CUSTOM:
            table.add_row(str(kind.value), kind.name, "?", "?", "?", desc)
            continue
        p = PRESETS[kind]
        table.add_row(
            str(kind.value),
            kind.name,
            f"{p.audio_bitrate} x{p.audio_channels}",
            f"{p.crf:g}",
            f"{p.max_fps:g}",
            desc,
        )
    console.print(table)


def parse_selector(selector) -> PresetKind:
    """Map a menu number (int or string) to a PresetKind."""
    try:
        return PresetKind(int(str(selector).strip()))
    except ValueError:
        raise InvalidQualitySelector(
            f"Invalid quality {selector!r}; choose one of "
            + ", ".join(str(k.value) for k in PresetKind)
        ) from None


def _to_number(name: str, raw, convert):
    try:
        return convert(str(raw).strip())
    except ValueError:
        raise InvalidPresetValue(f"{name} must be a number, got {raw!r}") from None


def custom_preset(
    audio_bitrate: str | None = None,
    audio_channels: int | None = None,
    crf: float | None = None,
    max_fps: float | None = None,
    ask: Asker | None = None,
    interactive: bool = True,
) -> QualityPreset:
    """Build a CUSTOM preset, prompting for every knob not supplied.

    Values are not range-checked; ffmpeg has the final say on what it accepts.
    """
    d = CUSTOM_DEFAULTS
    bitrate = resolve(
        audio_bitrate, "audio bitrate", "Audio bitrate", d.audio_bitrate,
        ask=ask, interactive=interactive,
    )
    channels = resolve(
        audio_channels, "audio channels", "Audio channels", str(d.audio_channels),
        ask=ask, interactive=interactive,
    )
    crf_value = resolve(
        crf, "CRF", "CRF (lower is better quality)", f"{d.crf:g}",
        ask=ask, interactive=interactive,
    )
    fps = resolve(
        max_fps, "max fps", "Max frame rate", f"{d.max_fps:g}",
        ask=ask, interactive=interactive,
    )

    return QualityPreset(
        kind=PresetKind.CUSTOM,
        audio_bitrate=str(bitrate).strip(),
        audio_channels=_to_number("Audio channels", channels, int),
        crf=_to_number("CRF", crf_value, float),
        max_fps=_to_number("Max fps", fps, float),
    )


def select_preset(
    selector,
    ask: Asker | None = None,
    interactive: bool = True,
    **custom,
) -> QualityPreset:
    """Return the preset for *selector*, prompting for knobs if it is CUSTOM.

    Extra keyword arguments pre-fill custom knobs (see ``custom_preset``).
    """
    kind = parse_selector(selector)
    if kind is PresetKind.CUSTOM:
        return custom_preset(ask=ask, interactive=interactive, **custom)

    ignored = sorted(name for name, value in custom.items() if is_set(value))
    if ignored:
        names = ", ".join("--" + name.replace("_", "-") for name in ignored)
        err_console.print(
            f"[yellow]Warning:[/yellow] {escape(names)} only apply to quality 4 (CUSTOM); "
            f"using the {kind.name} preset as is",
            soft_wrap=True,
        )
    return PRESETS[kind]

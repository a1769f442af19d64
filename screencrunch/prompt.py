"""Resolve parameters from supplied values or an interactive prompt."""

from typing import Callable

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

Asker = Callable[[str], str]


def _rich_ask(text: str) -> str:
    return Prompt.ask(text, default="", show_default=False, console=console)


def is_set(value) -> bool:
    """True for anything other than None, empty strings/lists and zero."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return value != 0


def resolve(
    supplied,
    name: str,
    prompt: str,
    default: str = "",
    explain: Callable[[], None] | None = None,
    ask: Asker | None = None,
    interactive: bool = True,
):
    """Return *supplied* if it is set, otherwise ask for a value.

    A supplied value is echoed back as ``Using <name>: <value>`` instead of
    prompting. When prompting, *explain* runs first and the default is shown
    in square brackets; an empty answer means the default. With
    ``interactive=False`` the default is taken without reading input.
    """
    if is_set(supplied):
        console.print(f"Using {escape(name)}: {escape(str(supplied))}")
        return supplied

    if not interactive:
        console.print(f"Using {escape(name)}: {escape(default)}")
        return default

    if explain is not None:
        explain()

    ask = ask or _rich_ask
    answer = ask(f"{escape(prompt)} {escape(f'[{default}]')}")
    answer = (answer or "").strip()
    return answer if answer else default

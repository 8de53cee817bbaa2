"""Choose which policy sort key to fetch."""

import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.prompt import IntPrompt
from tabulate import tabulate

from .errors import SelectionError
from .sort_keys import STATE_MARKER
from .utils import debug_print

PROMPT_LABEL = "Select a sort key to inspect"


class LatestStateSelector:
    """Always pick the STATE item without asking.

    The option list is not consulted, so a policy without a STATE item
    yields an empty record.
    """

    def select(self, options: Sequence[str]) -> str:
        debug_print(f"Auto-selecting {STATE_MARKER} out of {len(options)} sort keys")
        return STATE_MARKER


class PromptSelector:
    """Show a numbered menu on stderr and ask the operator for a choice."""

    def __init__(self, console: Optional[Console] = None, label: str = PROMPT_LABEL):
        self.console = console or Console(stderr=True)
        self.label = label

    def render_menu(self, options: Sequence[str]) -> str:
        rows = [(index, option) for index, option in enumerate(options, start=1)]
        return tabulate(rows, headers=["#", "Sort key"], tablefmt="simple")

    def select(self, options: Sequence[str]) -> str:
        if not options:
            raise SelectionError("Failed to run prompt or no sort key selected: no sort keys to choose from")

        print(self.render_menu(options), file=sys.stderr)

        try:
            choice = IntPrompt.ask(
                self.label,
                console=self.console,
                choices=[str(index) for index in range(1, len(options) + 1)],
                show_choices=False,
            )
        except (EOFError, KeyboardInterrupt) as e:
            raise SelectionError(
                f"Failed to run prompt or no sort key selected: {type(e).__name__}"
            )

        if choice is None:
            raise SelectionError("Failed to run prompt or no sort key selected")

        selected = options[choice - 1]
        if not selected:
            raise SelectionError("Failed to run prompt or no sort key selected: empty sort key")
        return selected


def build_selector(auto_select_latest_state: bool, console: Optional[Console] = None):
    """Return the selector matching the --latest flag"""
    if auto_select_latest_state:
        return LatestStateSelector()
    return PromptSelector(console=console)

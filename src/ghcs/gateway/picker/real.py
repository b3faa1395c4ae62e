"""Interactive picker rendering a numbered table and prompting for a number."""

from collections.abc import Callable, Sequence

import click
from rich.console import Console
from rich.table import Table

from ghcs.gateway.picker.abc import Picker
from ghcs.output import user_output


class PromptPicker(Picker):
    """Production picker using a rich table and click.prompt."""

    def __init__(self, title: str = "Codespaces") -> None:
        self._title = title

    def choose(self, keys: Sequence[str], annotate: Callable[[str], str]) -> str | None:
        console = Console(stderr=True)

        table = Table(show_header=True, header_style="bold", box=None, title=self._title)
        table.add_column("#", style="dim", no_wrap=True)
        table.add_column("codespace", style="cyan", no_wrap=True)
        table.add_column("details", style="dim")

        for i, key in enumerate(keys, 1):
            table.add_row(str(i), key, annotate(key))

        console.print(table)
        user_output("")

        try:
            selection = click.prompt(
                "Select codespace number",
                type=click.IntRange(1, len(keys)),
                err=True,
            )
        except (KeyboardInterrupt, click.Abort):
            return None
        return keys[selection - 1]

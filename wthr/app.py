"""The interactive prompt application."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from typing import TextIO

from .commands import Environment, register_commands
from .interface import Interface


class App:
    """A prompt with every command registered and fresh selection state."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        datasets_dir: str | os.PathLike[str] = "datasets",
    ) -> None:
        self.env = Environment(
            interface=Interface(stdin=stdin, stdout=stdout), datasets_dir=datasets_dir
        )
        register_commands(self.env)

    def run(self) -> bool:
        """Handle one line of input; False once the application should stop."""
        try:
            self.env.interface.run("> ")
        except EOFError:
            return False
        return not self.env.exit_pending


def main(argv: Sequence[str] | None = None) -> int:
    """Run the prompt until the user exits or input ends."""
    parser = argparse.ArgumentParser(
        prog="wthr", description="Browse and chart hourly temperature datasets."
    )
    parser.add_argument(
        "--datasets",
        default="datasets",
        help="directory holding the dataset files (default: datasets)",
    )
    options = parser.parse_args(argv)

    app = App(datasets_dir=options.datasets)
    while app.run():
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
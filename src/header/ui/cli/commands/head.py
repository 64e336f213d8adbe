"""Where: src/header/ui/cli/commands/head.py
What: Execute a head run for parsed CLI arguments.
Why: Keep argument parsing apart from the feature's request wiring.
"""

from __future__ import annotations

from typing import final

from header.features.head import FileResult, HeadRequest, HeadRunner
from header.features.head.adapters import LocalInputOpener
from header.ui.cli.args.options import HeadArgs


@final
class HeadCommand:
    """Command that copies the leading part of each input to stdout."""

    def __init__(self, args: HeadArgs, runner: HeadRunner | None = None) -> None:
        self.args = args
        self.runner = runner or HeadRunner(opener=LocalInputOpener())

    def execute(self) -> list[FileResult]:
        """Execute the head command."""

        request = HeadRequest(
            files=tuple(self.args.files),
            line_count=self.args.lines,
            byte_count=self.args.bytes,
        )
        return self.runner.run(request)

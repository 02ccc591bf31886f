"""Prettier-backed source formatting.

Every generated file (entry index, entry modifier and the aggregate index) is
piped through ``prettier`` so the output matches the style of hand-written
boilerplates.  The formatter reads from stdin, which keeps it free of any
temporary files.
"""

from __future__ import annotations

from boilertowns.config import PrettierConfig
from boilertowns.errors import FormatterError
from boilertowns.utils import run_command


class PrettierFormatter:
    """Formats JavaScript/TypeScript source with the ``prettier`` CLI."""

    def __init__(self, config: PrettierConfig | None = None) -> None:
        self.config = config or PrettierConfig()

    async def format(self, source: str, filepath: str = "index.ts") -> str:
        """Return *source* formatted by prettier.

        Args:
            source: Unformatted source text.
            filepath: Name reported to prettier via ``--stdin-filepath``; it is
                used for config resolution and error messages only.

        Raises:
            FormatterError: If prettier is not installed, exits non-zero, or
                exceeds the configured timeout.
        """
        cmd = [*self.config.cli_args(), "--stdin-filepath", filepath]
        try:
            returncode, stdout, stderr = await run_command(
                cmd, input_text=source, timeout=self.config.timeout
            )
        except FileNotFoundError as exc:
            raise FormatterError(
                f"Formatter executable not found: {self.config.command[0]}"
            ) from exc

        if returncode != 0:
            detail = stderr or f"exit code {returncode}"
            raise FormatterError(f"prettier failed for {filepath}: {detail}")
        return stdout

"""Boilertowns "add a boilerplate" orchestrator.

Runs the command as a short sequence of stages:

COLLECTING_INPUT -- Ask for name, stack, repository and npm scripts.
RENDERING        -- Render both entry templates and the aggregate index.
WRITING_FILES    -- Create the boilerplate directory and write all files.
DONE             -- Report the new boilerplate.

Every file is rendered before anything touches the disk, so a missing
template or a formatter failure never leaves a half-created boilerplate.

Usage::

    boilertowns-add
    python -m boilertowns.pipeline
"""

from __future__ import annotations

import asyncio
import sys
from enum import Enum
from pathlib import Path

from boilertowns.config import Config
from boilertowns.errors import BoilertownsError, PromptCancelledError
from boilertowns.formatter import PrettierFormatter
from boilertowns.prompts import AnswerSet, collect_answers
from boilertowns.scaffolder import (
    IndexBuilder,
    RenderedFiles,
    TemplateRenderer,
    write_boilerplate,
)
from boilertowns.utils import create_progress, print_error, print_success, print_welcome

WELCOME_MESSAGE = "🎉 Welcome & thank you for contributing to Boilertowns!"


class Stage(str, Enum):
    COLLECTING_INPUT = "collecting input"
    RENDERING = "rendering"
    WRITING_FILES = "writing files"
    DONE = "done"
    FAILED = "failed"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class AddBoilerplateError(BoilertownsError):
    """Raised when a stage fails irrecoverably."""

    def __init__(self, stage: Stage, message: str) -> None:
        self.stage = stage
        super().__init__(message)


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class BoilerplateAdder:
    """Drives one run of the "add a boilerplate" command.

    Attributes:
        config: Generator configuration shared by every stage.
        stage: The stage currently executing (``FAILED`` after an error).
    """

    def __init__(self, config: Config, formatter: PrettierFormatter | None = None) -> None:
        self.config = config
        self.formatter = formatter or PrettierFormatter(config.prettier)
        self.renderer = TemplateRenderer(config.templates_dir, self.formatter)
        self.index_builder = IndexBuilder(config, self.formatter)
        self.stage = Stage.COLLECTING_INPUT

    async def render(self, answers: AnswerSet) -> RenderedFiles:
        """Render every file for *answers* without writing anything."""
        self.stage = Stage.RENDERING
        entry_index = await self.renderer.render(
            self.config.entry_index_filename, answers.context()
        )
        entry_modifier = await self.renderer.render(
            self.config.entry_modifier_filename, {"repo": answers.repo}
        )
        aggregate_index = await self.index_builder.build(pending=[answers.name])
        return RenderedFiles(
            entry_index=entry_index,
            entry_modifier=entry_modifier,
            aggregate_index=aggregate_index,
        )

    async def generate(self, answers: AnswerSet) -> list[Path]:
        """Render and write a boilerplate for already-collected *answers*.

        Raises:
            AddBoilerplateError: Wrapping the first failure, tagged with the
                stage in which it happened.
        """
        try:
            with create_progress() as progress:
                progress.add_task(f"Rendering {answers.name}...", total=None)
                files = await self.render(answers)
                self.stage = Stage.WRITING_FILES
                written = await write_boilerplate(self.config, answers.name, files)
        except Exception as exc:
            failed_in = self.stage
            self.stage = Stage.FAILED
            raise AddBoilerplateError(failed_in, str(exc)) from exc

        self.stage = Stage.DONE
        return written

    def run(self) -> AnswerSet:
        """Ask the questions, then render and write the new boilerplate."""
        print_welcome(WELCOME_MESSAGE)
        self.stage = Stage.COLLECTING_INPUT
        try:
            answers = collect_answers(self.config)
        except Exception as exc:
            self.stage = Stage.FAILED
            raise AddBoilerplateError(Stage.COLLECTING_INPUT, str(exc)) from exc

        try:
            asyncio.run(self.generate(answers))
        except KeyboardInterrupt as exc:
            interrupted_in = self.stage
            self.stage = Stage.FAILED
            raise AddBoilerplateError(interrupted_in, str(PromptCancelledError())) from exc
        return answers


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """CLI entry point for ``boilertowns-add``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Add a new boilerplate to Boilertowns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Run from the repository root; boilerplates live in ./src/boilerplates.\n"
            "Environment overrides:\n"
            "  BOILERTOWNS_BOILERPLATES_DIR  boilerplates root\n"
            "  BOILERTOWNS_TEMPLATES_DIR     template directory\n"
            "  BOILERTOWNS_PRETTIER          formatter command (e.g. 'npx prettier')\n"
        ),
    )
    parser.parse_args()

    try:
        answers = BoilerplateAdder(Config.from_env()).run()
    except Exception as exc:
        print_error(f"❌ {exc}")
        sys.exit(1)

    print_success(f"👍 Awesome!, {answers.name} was added.")


if __name__ == "__main__":
    main()

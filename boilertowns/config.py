"""Boilertowns generator configuration.

Centralised, typed configuration for the "add a boilerplate" command. All
settings use Pydantic v2 models so they can be validated at construction time
and built from environment variables without boiler-plate.  Every component
receives a ``Config`` explicitly instead of reading the working directory.
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

_PACKAGE_TEMPLATE_DIR = Path(__file__).parent / "scaffolder" / "templates"


class PrettierConfig(BaseModel):
    """Options passed to the ``prettier`` formatter for every generated file."""

    command: list[str] = Field(default_factory=lambda: ["prettier"])
    parser: str = Field(default="babel", description="Parser that keeps block comments intact")
    semi: bool = Field(default=True)
    single_quote: bool = Field(default=True)
    use_tabs: bool = Field(default=True)
    tab_width: int = Field(default=2, ge=1)
    trailing_comma: str = Field(default="all")
    timeout: int = Field(default=60, ge=1, description="Per-file formatting timeout in seconds")

    def cli_args(self) -> list[str]:
        """Return the prettier command line (without the stdin file path)."""
        args = [*self.command, "--parser", self.parser]
        args.append("--semi" if self.semi else "--no-semi")
        if self.single_quote:
            args.append("--single-quote")
        if self.use_tabs:
            args.append("--use-tabs")
        args.extend(["--tab-width", str(self.tab_width)])
        args.extend(["--trailing-comma", self.trailing_comma])
        return args


class Config(BaseModel):
    """Global generator configuration.

    Instances are typically created once by the CLI entry point (see
    :meth:`from_env`) and then passed to the prompt collector, renderer,
    index builder and writer.
    """

    boilerplates_dir: Path = Field(default_factory=lambda: Path.cwd() / "src" / "boilerplates")
    templates_dir: Path = Field(default=_PACKAGE_TEMPLATE_DIR)
    index_filename: str = Field(default="index.ts")
    entry_index_filename: str = Field(default="index.ts")
    entry_modifier_filename: str = Field(default="modifier.ts")
    import_extension: str = Field(
        default=".js", description="Suffix appended to ./<dir>/index in aggregate imports"
    )
    add_command: str = Field(default="pnpm run boilerplate:add")
    stack_max_length: int = Field(default=100, ge=1)
    github_prefix: str = Field(default="https://github.com")
    prettier: PrettierConfig = Field(default_factory=PrettierConfig)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def index_path(self) -> Path:
        """Path to the aggregate index file at the boilerplates root."""
        return self.boilerplates_dir / self.index_filename

    def entry_dir(self, name: str) -> Path:
        """Directory of the boilerplate called *name*."""
        return self.boilerplates_dir / name

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            BOILERTOWNS_BOILERPLATES_DIR, BOILERTOWNS_TEMPLATES_DIR,
            BOILERTOWNS_PRETTIER (a shell-style command, e.g. ``npx prettier``),
            BOILERTOWNS_PRETTIER_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("BOILERTOWNS_BOILERPLATES_DIR"):
            kwargs["boilerplates_dir"] = Path(os.environ["BOILERTOWNS_BOILERPLATES_DIR"])
        if os.environ.get("BOILERTOWNS_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(os.environ["BOILERTOWNS_TEMPLATES_DIR"])

        prettier_kwargs: dict[str, Any] = {}
        if os.environ.get("BOILERTOWNS_PRETTIER"):
            prettier_kwargs["command"] = shlex.split(os.environ["BOILERTOWNS_PRETTIER"])
        if os.environ.get("BOILERTOWNS_PRETTIER_TIMEOUT"):
            prettier_kwargs["timeout"] = int(os.environ["BOILERTOWNS_PRETTIER_TIMEOUT"])

        return cls(prettier=PrettierConfig(**prettier_kwargs), **kwargs)

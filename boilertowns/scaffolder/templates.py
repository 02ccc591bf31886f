"""Jinja2 template rendering for boilerplate entry files.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``boilertowns/scaffolder/templates/`` directory (or any configured template
directory) and renders them with answer data.  Rendered output is passed
through the code formatter before it is returned.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from boilertowns.errors import MissingTemplateError
from boilertowns.formatter import PrettierFormatter
from boilertowns.scaffolder.index_builder import to_identifier

_TEMPLATE_SUFFIX = ".j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders ``<name>.j2`` templates for a new boilerplate.

    Templates use ``{{ field }}`` placeholders; the context normally holds the
    operator's answers (``name``, ``stack``, ``repo``, ``scripts``).
    """

    def __init__(
        self,
        template_dir: str | Path,
        formatter: PrettierFormatter | None = None,
    ) -> None:
        self.template_dir = Path(template_dir)
        self.formatter = formatter or PrettierFormatter()
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["camel_case"] = _camel_case_filter

    def template_path(self, template_name: str) -> Path:
        """Return the on-disk path of *template_name*."""
        return self.template_dir / f"{template_name}{_TEMPLATE_SUFFIX}"

    def render_source(self, template_name: str, context: dict[str, Any]) -> str:
        """Substitute *context* into the template without formatting it.

        Raises:
            MissingTemplateError: If the template file does not exist.
        """
        try:
            template = self.env.get_template(f"{template_name}{_TEMPLATE_SUFFIX}")
        except TemplateNotFound as exc:
            raise MissingTemplateError(str(self.template_path(template_name))) from exc
        return template.render(**context)

    async def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render and format a single template.

        Args:
            template_name: Name of the generated file (e.g. ``"index.ts"``);
                the template is read from ``<template_dir>/<name>.j2``.
            context: Dictionary of variables available inside the template.

        Returns:
            The formatted source text.
        """
        source = self.render_source(template_name, context)
        return await self.formatter.format(source, filepath=template_name)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------


def _camel_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    return to_identifier(value)

"""Boilertowns scaffolder -- renders and writes a new boilerplate.

Quick usage::

    from boilertowns.config import Config
    from boilertowns.scaffolder import IndexBuilder, TemplateRenderer

    config = Config.from_env()
    renderer = TemplateRenderer(config.templates_dir)
    source = await renderer.render("modifier.ts", {"repo": "https://github.com/foo/bar"})
    index = await IndexBuilder(config).build()
"""

from boilertowns.scaffolder.index_builder import (
    IndexBuilder,
    build_index_source,
    list_boilerplate_directories,
    to_identifier,
)
from boilertowns.scaffolder.templates import TemplateRenderer
from boilertowns.scaffolder.writer import RenderedFiles, write_boilerplate

__all__ = [
    "IndexBuilder",
    "RenderedFiles",
    "TemplateRenderer",
    "build_index_source",
    "list_boilerplate_directories",
    "to_identifier",
    "write_boilerplate",
]

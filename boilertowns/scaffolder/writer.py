"""Filesystem writes for a new boilerplate.

Creates the boilerplate directory, then writes the two entry files and the
aggregate index concurrently.  There is no rollback: if one write fails the
others may already be on disk.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from pydantic import BaseModel

from boilertowns.config import Config
from boilertowns.errors import BoilerplateExistsError
from boilertowns.utils import write_text_file


class RenderedFiles(BaseModel):
    """Formatted source text for every file a run writes."""

    entry_index: str
    entry_modifier: str
    aggregate_index: str


async def create_entry_dir(config: Config, name: str) -> Path:
    """Create ``<boilerplates_dir>/<name>``.

    Raises:
        BoilerplateExistsError: If the directory is already present.
        OSError: For any other creation failure (e.g. permission denied).
    """
    target = config.entry_dir(name)
    try:
        await asyncio.to_thread(target.mkdir)
    except FileExistsError as exc:
        raise BoilerplateExistsError(str(target)) from exc
    return target


async def write_boilerplate(config: Config, name: str, files: RenderedFiles) -> list[Path]:
    """Create the boilerplate directory and write all three files.

    The aggregate index is truncated and replaced, never appended to.

    Returns:
        The written paths: entry index, entry modifier, aggregate index.
    """
    entry_dir = await create_entry_dir(config, name)
    return list(
        await asyncio.gather(
            asyncio.to_thread(
                write_text_file, entry_dir / config.entry_index_filename, files.entry_index
            ),
            asyncio.to_thread(
                write_text_file, entry_dir / config.entry_modifier_filename, files.entry_modifier
            ),
            asyncio.to_thread(write_text_file, config.index_path, files.aggregate_index),
        )
    )

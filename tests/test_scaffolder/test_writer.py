"""Tests for boilerplate filesystem writes (boilertowns.scaffolder.writer)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from boilertowns.config import Config
from boilertowns.errors import BoilerplateExistsError
from boilertowns.scaffolder.writer import RenderedFiles, create_entry_dir, write_boilerplate

pytestmark = pytest.mark.unit


@pytest.fixture
def files() -> RenderedFiles:
    return RenderedFiles(
        entry_index="export default { name: 'gamma' };\n",
        entry_modifier="export default async function modifier() {}\n",
        aggregate_index="export default [gamma];\n",
    )


class TestCreateEntryDir:
    async def test_creates_directory(self, config: Config):
        path = await create_entry_dir(config, "gamma")
        assert path == config.entry_dir("gamma")
        assert path.is_dir()

    async def test_existing_directory_raises(self, config: Config):
        with pytest.raises(BoilerplateExistsError):
            await create_entry_dir(config, "alpha")

    async def test_missing_root_raises_os_error(self, tmp_path: Path):
        config = Config(boilerplates_dir=tmp_path / "missing")
        with pytest.raises(OSError):
            await create_entry_dir(config, "gamma")


class TestWriteBoilerplate:
    async def test_writes_all_three_files(self, config: Config, files: RenderedFiles):
        written = await write_boilerplate(config, "gamma", files)

        entry = config.entry_dir("gamma")
        assert written == [entry / "index.ts", entry / "modifier.ts", config.index_path]
        assert (entry / "index.ts").read_text(encoding="utf-8") == files.entry_index
        assert (entry / "modifier.ts").read_text(encoding="utf-8") == files.entry_modifier

    async def test_aggregate_index_is_replaced_not_appended(self, config: Config, files):
        await write_boilerplate(config, "gamma", files)
        assert config.index_path.read_text(encoding="utf-8") == files.aggregate_index

    async def test_failed_write_propagates_without_rollback(self, config: Config, files):
        def flaky_write(path: Path, content: str) -> Path:
            if path.name == "modifier.ts":
                raise PermissionError(f"denied: {path}")
            path.write_text(content, encoding="utf-8")
            return path

        with patch("boilertowns.scaffolder.writer.write_text_file", side_effect=flaky_write):
            with pytest.raises(PermissionError):
                await write_boilerplate(config, "gamma", files)

        assert config.entry_dir("gamma").is_dir()
        assert not (config.entry_dir("gamma") / "modifier.ts").exists()

    async def test_existing_directory_writes_nothing(self, config: Config, files):
        before = config.index_path.read_text(encoding="utf-8")
        with pytest.raises(BoilerplateExistsError):
            await write_boilerplate(config, "alpha", files)
        assert config.index_path.read_text(encoding="utf-8") == before

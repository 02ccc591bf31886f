"""Tests for the Jinja2 template renderer (boilertowns.scaffolder.templates)."""

from __future__ import annotations

from pathlib import Path

import pytest

from boilertowns.config import Config
from boilertowns.errors import MissingTemplateError
from boilertowns.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit


@pytest.fixture
def renderer(formatter) -> TemplateRenderer:
    return TemplateRenderer(Config().templates_dir, formatter)


@pytest.fixture
def entry_context() -> dict:
    return {
        "name": "my-stack",
        "stack": "node",
        "repo": "https://github.com/foo/bar",
        "scripts": ["build", "test"],
    }


class TestPackagedTemplates:
    def test_entry_index_substitutes_answers(self, renderer, entry_context):
        source = renderer.render_source("index.ts", entry_context)
        assert 'name: "my-stack"' in source
        assert 'stack: "node"' in source
        assert 'repo: "https://github.com/foo/bar"' in source
        assert 'scripts: ["build", "test"]' in source
        assert "const myStack = {" in source
        assert "export default myStack;" in source

    def test_entry_modifier_uses_repo_only(self, renderer):
        source = renderer.render_source("modifier.ts", {"repo": "https://github.com/foo/bar"})
        assert 'repo: "https://github.com/foo/bar"' in source
        assert "export default async function modifier" in source

    def test_entry_modifier_comment_never_contains_repo(self, renderer):
        repo = "https://github.com/foo/bar*/evil"
        source = renderer.render_source("modifier.ts", {"repo": repo})
        comment, _, body = source.partition("*/")
        assert repo not in comment
        assert 'repo: "https://github.com/foo/bar*/evil"' in body

    def test_quotes_in_answers_stay_valid_strings(self, renderer, entry_context):
        entry_context["stack"] = "it's \"quoted\""
        source = renderer.render_source("index.ts", entry_context)
        assert "it\\u0027s \\\"quoted\\\"" in source


class TestRender:
    async def test_render_passes_output_through_formatter(self, renderer, formatter, entry_context):
        result = await renderer.render("index.ts", entry_context)
        assert result == renderer.render_source("index.ts", entry_context)
        assert formatter.calls[0][0] == "index.ts"

    async def test_missing_template_raises_file_not_found(self, tmp_path: Path, formatter):
        renderer = TemplateRenderer(tmp_path, formatter)
        with pytest.raises(MissingTemplateError) as excinfo:
            await renderer.render("index.ts", {})
        assert isinstance(excinfo.value, FileNotFoundError)
        assert str(tmp_path / "index.ts.j2") in str(excinfo.value)
        assert formatter.calls == []

    async def test_custom_template_dir(self, tmp_path: Path, formatter):
        (tmp_path / "readme.md.j2").write_text("# {{ name }}\n", encoding="utf-8")
        renderer = TemplateRenderer(tmp_path, formatter)
        assert await renderer.render("readme.md", {"name": "gamma"}) == "# gamma\n"

    def test_camel_case_filter(self, tmp_path: Path, formatter):
        (tmp_path / "ident.j2").write_text("{{ name | camel_case }}", encoding="utf-8")
        renderer = TemplateRenderer(tmp_path, formatter)
        assert renderer.render_source("ident", {"name": "vite-react_ts"}) == "viteReactTs"


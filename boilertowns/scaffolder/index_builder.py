"""Aggregate index generation.

The aggregate index (``src/boilerplates/index.ts``) imports every boilerplate
descriptor and re-exports them as one list.  It is rebuilt from the directory
listing on every run, so it always mirrors the boilerplate folders on disk.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from boilertowns.config import Config
from boilertowns.formatter import PrettierFormatter

INDEX_NOTICE = """\
/**
 * DO NOT UPDATE THIS FILE MANUALLY!!!
 *
 * This file has been automatically generated. If you want to add a new
 * boilerplate, please run the command below and follow the instructions:
 *
 * ```
 * {command}
 * ```
 */
"""

_WORD_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+")

# Names that cannot be used as an import binding in an ES module.
RESERVED_WORDS = frozenset(
    {
        "await", "break", "case", "catch", "class", "const", "continue",
        "debugger", "default", "delete", "do", "else", "enum", "export",
        "extends", "false", "finally", "for", "function", "if", "implements",
        "import", "in", "instanceof", "interface", "let", "new", "null",
        "package", "private", "protected", "public", "return", "static",
        "super", "switch", "this", "throw", "true", "try", "typeof", "var",
        "void", "while", "with", "yield", "arguments", "eval",
    }
)


# ---------------------------------------------------------------------------
# Directory traversal and naming
# ---------------------------------------------------------------------------


def list_boilerplate_directories(
    root: str | Path, exclude: Iterable[str] = ()
) -> list[str]:
    """Return the boilerplate directory names under *root*, sorted by name.

    Files (including the aggregate index itself), hidden entries and any name
    in *exclude* are skipped.

    Raises:
        FileNotFoundError: If *root* does not exist.
    """
    skipped = set(exclude)
    return sorted(
        entry.name
        for entry in Path(root).iterdir()
        if entry.is_dir() and not entry.name.startswith(".") and entry.name not in skipped
    )


def to_identifier(dir_name: str) -> str:
    """Camel-case a directory name into a JavaScript identifier.

    Examples::

        to_identifier("my-boilerplate")  -> "myBoilerplate"
        to_identifier("vite_react-ts")   -> "viteReactTs"
        to_identifier("foo2bar")         -> "foo2Bar"
        to_identifier("3d-engine")       -> "_3dEngine"
    """
    words = _WORD_RE.findall(dir_name)
    if not words:
        return "_"
    # A leading number keeps the word glued to it lower-cased ("3d").
    if words[0].isdigit() and len(words) > 1 and dir_name.startswith(words[0] + words[1]):
        words = [words[0] + words[1].lower(), *words[2:]]
    identifier = words[0].lower() + "".join(w[:1].upper() + w[1:].lower() for w in words[1:])
    if identifier[0].isdigit():
        identifier = f"_{identifier}"
    return identifier


def build_index_source(
    names: Iterable[str],
    add_command: str = "pnpm run boilerplate:add",
    import_extension: str = ".js",
) -> str:
    """Build the unformatted aggregate index for *names*, preserving order."""
    names = list(names)
    lines = [INDEX_NOTICE.format(command=add_command)]
    for name in names:
        lines.append(f"import {to_identifier(name)} from './{name}/index{import_extension}';")

    exported = "".join(f"\t{to_identifier(name)},\n" for name in names)
    lines.append("")
    lines.append(f"export default [\n{exported}];")
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# IndexBuilder
# ---------------------------------------------------------------------------


class IndexBuilder:
    """Produces the formatted aggregate index for the configured root."""

    def __init__(self, config: Config, formatter: PrettierFormatter | None = None) -> None:
        self.config = config
        self.formatter = formatter or PrettierFormatter(config.prettier)

    def entry_names(self, pending: Iterable[str] = ()) -> list[str]:
        """List the boilerplates on disk plus *pending* ones not created yet."""
        names = set(
            list_boilerplate_directories(
                self.config.boilerplates_dir, exclude=[self.config.index_filename]
            )
        )
        names.update(pending)
        return sorted(names)

    async def build(self, pending: Iterable[str] = ()) -> str:
        """Return the formatted aggregate index source.

        Args:
            pending: Boilerplate names that will exist once the current run
                writes them, so the index can be rendered before any write.
        """
        source = build_index_source(
            self.entry_names(pending),
            add_command=self.config.add_command,
            import_extension=self.config.import_extension,
        )
        return await self.formatter.format(source, filepath=self.config.index_filename)

"""Interactive questions for a new boilerplate.

Asks the operator for the boilerplate name, featured stack, GitHub repository
and npm scripts.  Each answer is checked by a pure validator that returns an
error message (or ``None``); an invalid answer is reported and the same
question is asked again.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict
from rich.markup import escape
from rich.prompt import Prompt

from boilertowns.config import Config
from boilertowns.errors import PromptCancelledError
from boilertowns.scaffolder.index_builder import (
    RESERVED_WORDS,
    list_boilerplate_directories,
    to_identifier,
)
from boilertowns.utils import console

_SSH_MARKERS = ("git@", "ssh://")


class AnswerSet(BaseModel):
    """Validated and normalised answers for one run."""

    model_config = ConfigDict(frozen=True)

    name: str
    stack: str
    repo: str
    scripts: tuple[str, ...] = ()

    def context(self) -> dict[str, object]:
        """Template context for the entry index."""
        return {
            "name": self.name,
            "stack": self.stack,
            "repo": self.repo,
            "scripts": list(self.scripts),
        }


# ---------------------------------------------------------------------------
# Validators and normalisers
# ---------------------------------------------------------------------------


def validate_name(value: str, config: Config) -> str | None:
    """Reject names that cannot become a new boilerplate directory.

    A name is refused when it is empty, matches an existing entry ignoring
    case, or camel-cases to a reserved word or to the identifier of an
    existing boilerplate (the aggregate index imports every entry by it).
    """
    if not value.strip():
        return "Please enter a boilerplate name."
    try:
        existing = list_boilerplate_directories(config.boilerplates_dir)
    except FileNotFoundError:
        existing = []
    taken = {name.lower() for name in existing}
    if value.lower() in taken or config.entry_dir(value.lower()).exists():
        return "This boilerplate name has been used."

    identifier = to_identifier(value)
    if identifier in RESERVED_WORDS:
        return (
            f"[bold]{escape(value)}[/bold] is a reserved word in JavaScript, "
            "please pick another name."
        )
    clashes = [name for name in existing if to_identifier(name) == identifier]
    if clashes:
        return (
            f"This name would be imported as [bold]{identifier}[/bold], "
            f"which is already used by {escape(clashes[0])}."
        )
    return None


def validate_stack(value: str, max_length: int = 100) -> str | None:
    if len(value) > max_length:
        return f"Please briefly describe the stack, max [italic]{max_length} characters[/italic]."
    return None


def normalize_stack(value: str) -> str:
    return value.lower()


def validate_repo(value: str) -> str | None:
    """Reject SSH remotes such as ``git@github.com:owner/repo.git``."""
    if any(marker in value for marker in _SSH_MARKERS):
        return "Please use https url or format [bold]github-user/repo-name[/bold]."
    return None


def normalize_repo(value: str, prefix: str = "https://github.com") -> str:
    """Turn ``owner/repo`` or an HTTPS URL into a canonical GitHub URL.

    Examples::

        normalize_repo("foo/bar")                        -> "https://github.com/foo/bar"
        normalize_repo("https://github.com/foo/bar.git") -> "https://github.com/foo/bar"
    """
    result = value.strip()
    if not result.startswith(prefix):
        result = f"{prefix}/{result}"
    if result.endswith(".git"):
        result = result[: -len(".git")]
    return result


def parse_scripts(value: str) -> tuple[str, ...]:
    """Split a comma-separated list, trimming items and dropping empties."""
    return tuple(item.strip() for item in value.split(",") if item.strip())


# ---------------------------------------------------------------------------
# Question flow
# ---------------------------------------------------------------------------


@dataclass
class Question:
    """One prompt with its validator and normaliser."""

    name: str
    message: str
    validate: Callable[[str], str | None] = lambda value: None
    result: Callable[[str], object] = lambda value: value


def build_questions(config: Config) -> list[Question]:
    """Return the four questions in the order they are asked."""
    return [
        Question(
            name="name",
            message="Boilerplate name (ex. my-boilerplate)",
            validate=lambda value: validate_name(value, config),
        ),
        Question(
            name="stack",
            message="Featured stack (ex. Typescript, React, ...)",
            validate=lambda value: validate_stack(value, config.stack_max_length),
            result=normalize_stack,
        ),
        Question(
            name="repo",
            message="GitHub repository",
            validate=validate_repo,
            result=lambda value: normalize_repo(value, config.github_prefix),
        ),
        Question(
            name="scripts",
            message='NPM "scripts" (comma-separated)',
            result=parse_scripts,
        ),
    ]


def ask(question: Question, prompt: Callable[[str], str] | None = None) -> object:
    """Ask *question* until its validator accepts the answer.

    Raises:
        PromptCancelledError: On Ctrl-C or end of input.
    """
    prompt = prompt or _rich_prompt
    while True:
        try:
            raw = prompt(question.message)
        except (KeyboardInterrupt, EOFError) as exc:
            raise PromptCancelledError() from exc

        error = question.validate(raw)
        if error is None:
            return question.result(raw)
        console.print(f"[red]{error}[/red]")


def collect_answers(
    config: Config, prompt: Callable[[str], str] | None = None
) -> AnswerSet:
    """Ask every question in order and return the validated answers.

    Args:
        config: Generator configuration (boilerplates root, limits).
        prompt: Callable that displays a message and returns the raw reply;
            defaults to ``rich.prompt.Prompt.ask``.
    """
    answers = {q.name: ask(q, prompt) for q in build_questions(config)}
    return AnswerSet(**answers)


def _rich_prompt(message: str) -> str:
    return Prompt.ask(
        f"[cyan]?[/cyan] [bold]{escape(message)}[/bold]",
        console=console,
        default="",
        show_default=False,
    )

"""Boilertowns exception hierarchy.

All generator-specific exceptions inherit from BoilertownsError so the CLI
entry point can report them through a single handler.
"""


class BoilertownsError(Exception):
    """Base exception for all Boilertowns generator errors."""


class PromptCancelledError(BoilertownsError):
    """The operator aborted the question sequence."""

    def __init__(self, message: str = "Operation cancelled by user.") -> None:
        super().__init__(message)


class MissingTemplateError(BoilertownsError, FileNotFoundError):
    """A template file required for rendering does not exist."""

    def __init__(self, template_path: str) -> None:
        self.template_path = template_path
        super().__init__(f"Template not found: {template_path}")


class FormatterError(BoilertownsError):
    """The code formatter is missing, failed, or timed out."""


class BoilerplateExistsError(BoilertownsError, FileExistsError):
    """The target boilerplate directory already exists on disk."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Boilerplate directory already exists: {path}")

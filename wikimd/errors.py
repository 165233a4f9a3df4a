"""Exceptions raised while converting a document."""

from __future__ import annotations


class WikiMdError(Exception):
    """Base class for conversion failures that abort a document."""


class UnresolvedVariableError(WikiMdError):
    """A ``$name`` reference has no definition in the variable block."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Cannot find variable `{name}`")


class UnknownDirectiveError(WikiMdError):
    """A directive marker used a token outside the accepted vocabulary."""

    def __init__(self, kind: str, token: str) -> None:
        self.kind = kind
        self.token = token
        if kind == "attribute":
            message = f"HTML attribute `{token}` unknown"
        else:
            message = f"Element type `{token}` unknown"
        super().__init__(message)


class InvalidArgumentsError(WikiMdError):
    """Arguments passed by the vimwiki plugin do not follow its convention."""

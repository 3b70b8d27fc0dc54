"""
Error taxonomy for the style processing pipeline.

All of these describe authoring or configuration defects in a mapping
document. None are retried; each aborts the process call that raised it and
carries enough path information to locate the defect in the source document.
"""

from __future__ import annotations

from collections.abc import Sequence


def format_path(path: Sequence[str]) -> str:
    """Render a path tuple as a slash separated locator."""
    return "/".join(str(part) for part in path)


class StyleProcessingError(Exception):
    """Base class for every error raised by the processor."""


class SchemaError(StyleProcessingError):
    """The mapping document is structurally invalid."""

    def __init__(self, message: str, path: Sequence[str] = ()) -> None:
        self.message = message
        self.path = tuple(path)
        location = f" at {format_path(self.path)}" if self.path else ""
        super().__init__(f"Invalid mapping{location}: {message}")


class ResolutionError(StyleProcessingError):
    """A token reference could not be resolved."""

    reason = "unresolvable token"

    def __init__(self, token: str, path: Sequence[str] = ()) -> None:
        self.token = token
        self.path = tuple(path)
        super().__init__(self._describe())

    def _describe(self) -> str:
        location = f" at {format_path(self.path)}" if self.path else ""
        return f"{self.reason} '{self.token}'{location}"

    def with_path(self, path: Sequence[str]) -> ResolutionError:
        """Return a copy of this error located at ``path``."""
        return type(self)(self.token, path)


class UnknownToken(ResolutionError):
    """Reference to a token name missing from the token table."""

    reason = "Unknown token"


class CyclicReference(ResolutionError):
    """Reference chain that loops back on itself."""

    reason = "Cyclic token reference"

    def __init__(
        self,
        token: str,
        path: Sequence[str] = (),
        chain: Sequence[str] = (),
    ) -> None:
        self.chain = tuple(chain) or (token,)
        super().__init__(token, path)

    def _describe(self) -> str:
        return f"{super()._describe()} ({' -> '.join(self.chain)})"

    def with_path(self, path: Sequence[str]) -> CyclicReference:
        return CyclicReference(self.token, path, self.chain)


class CacheConsistencyError(StyleProcessingError):
    """A cache lookup returned an entry stored under a different key."""

    def __init__(self, expected_key: str, actual_key: str) -> None:
        self.expected_key = expected_key
        self.actual_key = actual_key
        super().__init__(
            f"Cache entry for '{expected_key}' was stored under '{actual_key}'"
        )

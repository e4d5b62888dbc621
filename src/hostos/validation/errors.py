"""Exceptions and the violation accumulator."""

from typing import Iterator, List, Optional


class HostOSError(Exception):
    """Base exception for hostos."""


class HostOSConfigError(HostOSError, ValueError):
    """Host OS configuration failed validation."""

    def __init__(self, violations: List[str]):
        self.violations = list(violations)
        super().__init__(Violations.SEPARATOR.join(self.violations))

    def __reduce__(self):
        return (type(self), (self.violations,))


class ManifestError(HostOSError):
    """A manifest or tool configuration file could not be loaded."""


class Violations:
    """Ordered collection of violation messages.

    Checks append to it in evaluation order; ``raise_if_any`` turns the
    collected messages into a single :class:`HostOSConfigError`.
    """

    SEPARATOR = "; "

    def __init__(self):
        self._messages: List[str] = []
        self.fatal = False

    def add(self, message: Optional[str]):
        """Record a violation message. ``None`` is ignored."""
        if message:
            self._messages.append(message)

    def extend(self, messages: List[str]):
        for message in messages:
            self.add(message)

    def add_fatal(self, message: str):
        """Record a violation that stops any further checks."""
        self.add(message)
        self.fatal = True

    @property
    def messages(self) -> List[str]:
        return list(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __str__(self) -> str:
        return self.SEPARATOR.join(self._messages)

    def raise_if_any(self):
        """Raise HostOSConfigError when anything was recorded."""
        if self._messages:
            raise HostOSConfigError(self._messages)


def format_list(items: List[str]) -> str:
    """Render items the way error messages list them: ``[a, b, c]``."""
    return "[" + ", ".join(items) + "]"

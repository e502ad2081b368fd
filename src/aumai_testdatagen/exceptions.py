"""Exception hierarchy for aumai-testdatagen."""

from __future__ import annotations


class DataGenError(Exception):
    """Base class for every error raised by aumai-testdatagen."""


class TemplateNotFoundError(DataGenError, LookupError):
    """No template is registered or loadable under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Template not found: {name!r}")
        self.name = name


class TemplateLoadError(DataGenError, ValueError):
    """A template file exists but could not be read, parsed, or validated."""


class ExportError(DataGenError, OSError):
    """Generated records could not be written to disk."""


class FixtureLoadError(DataGenError, ValueError):
    """A previously exported fixture file could not be read back."""


__all__ = [
    "ExportError",
    "FixtureLoadError",
    "TemplateLoadError",
    "TemplateNotFoundError",
    "DataGenError",
]

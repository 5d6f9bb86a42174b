"""Error kinds raised while turning a staramr report into sample metadata."""

from typing import Optional


class StarAMRUpdaterError(Exception):
    """Base class for every error this package raises on purpose."""


class SchemaError(StarAMRUpdaterError):
    """The report does not have the expected column or row layout."""


class ReportIOError(StarAMRUpdaterError, OSError):
    """The report could not be located, opened or decoded."""


class WorkflowNotFoundError(StarAMRUpdaterError):
    """The analysis workflow could not be resolved to a version."""


class CardinalityError(StarAMRUpdaterError):
    """An update was requested for anything other than exactly one sample."""


class StorageError(StarAMRUpdaterError):
    """A metadata service failed to merge or persist sample metadata."""


class PostProcessingError(StarAMRUpdaterError):
    """Wraps any of the above for callers of ``StarAMRUpdater.update``."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
        self.__cause__ = cause

    @property
    def kind(self) -> str:
        """Class name of the wrapped error, e.g. ``SchemaError``."""
        return type(self.cause).__name__ if self.cause is not None else ""

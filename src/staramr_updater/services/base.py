"""Abstract base classes for the services an updater talks to."""

from abc import ABC, abstractmethod
from typing import Dict

from staramr_updater.models import PipelineMetadataEntry

Metadata = Dict[str, PipelineMetadataEntry]


class WorkflowResolver(ABC):
    @abstractmethod
    def resolve_workflow_version(self, workflow_id: str) -> str:
        """Return the version string of a workflow. Raises WorkflowNotFoundError."""
        ...


class MetadataResolver(ABC):
    @abstractmethod
    def resolve_and_merge(self, existing: Metadata, entries: Metadata) -> Metadata:
        """Turn string keys into canonical fields and merge them over ``existing``.

        Must return a new mapping and leave ``existing`` untouched.
        Raises StorageError.
        """
        ...


class SampleStore(ABC):
    @abstractmethod
    def update_metadata(self, sample_id: str, metadata: Metadata) -> None:
        """Persist the full metadata mapping of a sample. Raises StorageError."""
        ...

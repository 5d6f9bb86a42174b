"""Service seams an updater depends on, plus the workflow resolvers shipped here."""

from staramr_updater.services.base import MetadataResolver, SampleStore, WorkflowResolver
from staramr_updater.services.workflows import HttpWorkflowResolver, StaticWorkflowResolver

__all__ = [
    "HttpWorkflowResolver",
    "MetadataResolver",
    "SampleStore",
    "StaticWorkflowResolver",
    "WorkflowResolver",
]

"""Write staramr results from a finished analysis into sample metadata."""

import logging
from typing import Collection, Dict, Optional

from staramr_updater.exceptions import (
    CardinalityError,
    PostProcessingError,
    ReportIOError,
    SchemaError,
    StarAMRUpdaterError,
    StorageError,
    WorkflowNotFoundError,
)
from staramr_updater.keys import versioned_values
from staramr_updater.models import (
    AMRResult,
    AnalysisHandle,
    PipelineMetadataEntry,
    Sample,
    UpdateResult,
)
from staramr_updater.report import read_summary
from staramr_updater.services.base import MetadataResolver, SampleStore, WorkflowResolver

logger = logging.getLogger(__name__)

STARAMR_SUMMARY = "staramr-summary.tsv"
ANALYSIS_TYPE = "STAR_AMR"

_FAILURE_MESSAGES = {
    SchemaError: "Error parsing staramr results",
    ReportIOError: "Error reading staramr results",
    WorkflowNotFoundError: "Workflow is not found",
    CardinalityError: "Wrong number of samples",
    StorageError: "Error saving sample metadata",
}


def build_entries(
    result: AMRResult, version: str, analysis_id: Optional[str] = None
) -> Dict[str, PipelineMetadataEntry]:
    """Wrap every report value as a text entry under its versioned key."""
    return {
        key: PipelineMetadataEntry(value=value, type="text", analysis_id=analysis_id)
        for key, value in versioned_values(result, version).items()
    }


class StarAMRUpdater:
    analysis_type = ANALYSIS_TYPE

    def __init__(
        self,
        metadata_resolver: MetadataResolver,
        sample_store: SampleStore,
        workflow_resolver: WorkflowResolver,
    ):
        self._metadata_resolver = metadata_resolver
        self._sample_store = sample_store
        self._workflow_resolver = workflow_resolver

    def update(self, samples: Collection[Sample], analysis: AnalysisHandle) -> UpdateResult:
        """Merge the analysis' staramr results into its one sample. Must not raise.

        Failures come back as an UpdateResult with status "error" whose
        ``error`` is a PostProcessingError wrapping the original cause.
        Nothing is persisted unless every earlier step succeeded.
        """
        sample_id = None
        try:
            sample = self._single_sample(samples, analysis)
            sample_id = sample.id
            logger.info("Updating sample %s from analysis %s", sample.id, analysis.id)

            version = self._workflow_resolver.resolve_workflow_version(analysis.workflow_id)
            report_path = analysis.get_output_file(STARAMR_SUMMARY)
            result = read_summary(report_path)
            entries = build_entries(result, version, analysis.id)

            merged = self._metadata_resolver.resolve_and_merge(dict(sample.metadata), entries)
            self._sample_store.update_metadata(sample.id, merged)
            sample.metadata = merged
        except StarAMRUpdaterError as exc:
            logger.error("Got %s for analysis %s", type(exc).__name__, analysis.id, exc_info=True)
            prefix = _FAILURE_MESSAGES.get(type(exc), "Error updating sample")
            message = f"{prefix} for analysis [id={analysis.id}]: {exc}"
            return UpdateResult(
                sample_id=sample_id,
                analysis_id=analysis.id,
                status="error",
                error=PostProcessingError(message, cause=exc),
            )

        logger.info("Wrote %d staramr fields to sample %s", len(entries), sample.id)
        return UpdateResult(
            sample_id=sample.id,
            analysis_id=analysis.id,
            metadata_keys=sorted(entries),
        )

    @staticmethod
    def _single_sample(samples: Collection[Sample], analysis: AnalysisHandle) -> Sample:
        if len(samples) != 1:
            raise CardinalityError(
                f"Expected one sample; got '{len(samples)}' for analysis [id={analysis.id}]"
            )
        return next(iter(samples))

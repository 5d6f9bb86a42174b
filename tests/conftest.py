"""Shared fixtures for staramr-updater tests."""

import pytest

from staramr_updater.exceptions import StorageError
from staramr_updater.models import AnalysisHandle, Sample
from staramr_updater.services.base import MetadataResolver, SampleStore
from staramr_updater.services.workflows import StaticWorkflowResolver
from staramr_updater.updater import STARAMR_SUMMARY, StarAMRUpdater

WORKFLOW_ID = "4ef5a1ad-435f-4835-b289-deddf0c3f98e"

SUMMARY_HEADER = "\t".join([
    "Isolate ID",
    "Quality Module",
    "Genotype",
    "Predicted Phenotype",
    "Plasmid",
    "Scheme",
    "Sequence Type",
    "Genome Length",
    "N50 value",
    "Number of Contigs Greater Than Or Equal To 300 bp",
    "Quality Module Feedback",
])

SUMMARY_ROW = "\t".join([
    "SRR1952908",
    "Passed",
    "aadA1, blaTEM-57, tet(A)",
    "streptomycin, ampicillin, tetracycline",
    "ColpVC, IncFIB(S), IncFII(S)",
    "senterica",
    "11",
    "4776108",
    "256009",
    "54",
    "",
])


# --- In-memory services ---

class InMemoryMetadataResolver(MetadataResolver):
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []

    def resolve_and_merge(self, existing, entries):
        self.calls.append(dict(entries))
        if self.fail:
            raise StorageError("metadata template service unavailable")
        merged = dict(existing)
        merged.update(entries)
        return merged


class InMemorySampleStore(SampleStore):
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.saved = {}

    def update_metadata(self, sample_id, metadata):
        if self.fail:
            raise StorageError(f"could not save sample {sample_id}")
        self.saved[sample_id] = dict(metadata)


@pytest.fixture
def summary_text():
    return f"{SUMMARY_HEADER}\n{SUMMARY_ROW}\n"


@pytest.fixture
def write_report(tmp_path):
    """Write report text to a file and return its path."""
    def _write(text, name=STARAMR_SUMMARY):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def report_path(write_report, summary_text):
    return write_report(summary_text)


@pytest.fixture
def metadata_resolver():
    return InMemoryMetadataResolver()


@pytest.fixture
def sample_store():
    return InMemorySampleStore()


@pytest.fixture
def workflow_resolver():
    return StaticWorkflowResolver({WORKFLOW_ID: "0.10.0"})


@pytest.fixture
def updater(metadata_resolver, sample_store, workflow_resolver):
    return StarAMRUpdater(metadata_resolver, sample_store, workflow_resolver)


@pytest.fixture
def sample():
    return Sample(id="sample-1", name="SRR1952908")


@pytest.fixture
def analysis(report_path):
    return AnalysisHandle(
        id="analysis-7",
        workflow_id=WORKFLOW_ID,
        output_files={STARAMR_SUMMARY: report_path},
    )

"""Records passed between the report reader, key builder and updater."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from staramr_updater.exceptions import PostProcessingError, ReportIOError

# Zero-based positions in the staramr summary.tsv data row.
# Column 0 (Isolate ID) is not carried into metadata.
RESULT_COLUMNS = {
    "quality_module": 1,
    "genotype": 2,
    "drug_class": 3,
    "plasmid": 4,
    "scheme": 5,
    "sequence_type": 6,
    "genome_length": 7,
    "n50": 8,
    "num_contigs": 9,
    "quality_module_feedback": 10,
}

SUMMARY_COLUMN_COUNT = 11


@dataclass
class AMRResult:
    quality_module: str
    genotype: str
    drug_class: str
    plasmid: str
    scheme: str
    sequence_type: str
    genome_length: str
    n50: str
    num_contigs: str
    quality_module_feedback: str

    @classmethod
    def from_row(cls, tokens: List[str]) -> "AMRResult":
        """Pick the named fields out of a full summary row by position."""
        return cls(**{name: tokens[index] for name, index in RESULT_COLUMNS.items()})

    def to_dict(self) -> Dict[str, str]:
        """Return the fields in summary column order."""
        return {name: getattr(self, name) for name in RESULT_COLUMNS}


@dataclass
class PipelineMetadataEntry:
    value: str
    type: str = "text"
    analysis_id: Optional[str] = None  # None for entries built outside an analysis


@dataclass(eq=False)
class Sample:
    id: str
    name: str = ""
    metadata: Dict[str, PipelineMetadataEntry] = field(default_factory=dict)


@dataclass
class AnalysisHandle:
    id: str
    workflow_id: str
    output_files: Dict[str, Union[str, Path]] = field(default_factory=dict)

    def get_output_file(self, name: str) -> Path:
        """Resolve a named analysis output to its path on disk."""
        try:
            return Path(self.output_files[name])
        except KeyError:
            raise ReportIOError(
                f"Analysis [id={self.id}] has no output file named [{name}]"
            ) from None


@dataclass
class UpdateResult:
    sample_id: Optional[str]
    analysis_id: str
    status: str = "success"
    metadata_keys: List[str] = field(default_factory=list)
    error: Optional[PostProcessingError] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"

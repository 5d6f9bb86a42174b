"""Versioned metadata key names for staramr results."""

from typing import Dict

from staramr_updater.models import AMRResult

NAMESPACE = "staramr"

# AMRResult attribute -> namespaced metadata field name
METADATA_FIELDS = {
    "genotype": f"{NAMESPACE}/gene",
    "drug_class": f"{NAMESPACE}/drug-class",
    "quality_module": f"{NAMESPACE}/quality-module",
    "plasmid": f"{NAMESPACE}/plasmid",
    "scheme": f"{NAMESPACE}/scheme",
    "sequence_type": f"{NAMESPACE}/sequence-type",
    "genome_length": f"{NAMESPACE}/genome-length",
    "n50": f"{NAMESPACE}/N50",
    "num_contigs": f"{NAMESPACE}/num-contigs",
    "quality_module_feedback": f"{NAMESPACE}/quality-module-feedback",
}


def append_version(name: str, version: str) -> str:
    """Join a metadata field name and a pipeline version, e.g. staramr/gene/1.2.3."""
    return name + "/" + version


def versioned_values(result: AMRResult, version: str) -> Dict[str, str]:
    """Map every versioned metadata key to its value from the report."""
    return {
        append_version(name, version): getattr(result, attr)
        for attr, name in METADATA_FIELDS.items()
    }

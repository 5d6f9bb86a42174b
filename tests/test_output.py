import csv

from staramr_updater.models import PipelineMetadataEntry
from staramr_updater.output import OUTPUT_COLUMNS, entries_to_bytes, write_csv, write_tsv


def _sample_entries():
    return {
        "staramr/gene/0.10.0": PipelineMetadataEntry(value="aadA1, blaTEM-57", analysis_id="a1"),
        "staramr/N50/0.10.0": PipelineMetadataEntry(value="256009", analysis_id="a1"),
    }


def test_write_tsv(tmp_path):
    path = tmp_path / "out.tsv"
    write_tsv(_sample_entries(), str(path))

    with open(path, newline="") as fh:
        rows = list(csv.DictReader(fh, delimiter="\t"))
    assert len(rows) == 2
    assert rows[0] == {"key": "staramr/N50/0.10.0", "value": "256009", "type": "text"}
    assert rows[1]["value"] == "aadA1, blaTEM-57"


def test_write_csv(tmp_path):
    path = tmp_path / "out.csv"
    write_csv(_sample_entries(), str(path))

    with open(path, newline="") as fh:
        rows = list(csv.DictReader(fh))
    assert len(rows) == 2
    assert list(rows[0].keys()) == OUTPUT_COLUMNS
    assert rows[1]["value"] == "aadA1, blaTEM-57"


def test_entries_to_bytes_tsv():
    data = entries_to_bytes(_sample_entries(), fmt="tsv")
    lines = data.decode("utf-8").strip().split("\n")
    assert len(lines) == 3  # header + 2 rows
    assert lines[0].rstrip("\r") == "key\tvalue\ttype"

"""
Tests for the background table writers.
"""

import pandas as pd
import pyarrow.parquet as pq
import pytest

from plexquant.core.write_queue import WriteCSVTask, WriteParquetTask, create_write_task


def frame(start):
    return pd.DataFrame({"ProteinName": [f"P{start}", f"P{start + 1}"], "Intensity": [1.0, 2.0]})


class TestWriteTasks:
    """Tests for CSV and Parquet writer threads."""

    def test_csv_header_written_once(self, tmp_path):
        task = create_write_task(tmp_path / "proteins", "csv")
        task.write(frame(0))
        task.write(frame(2))
        task.close()

        df = pd.read_csv(tmp_path / "proteins.csv")
        assert df["ProteinName"].tolist() == ["P0", "P1", "P2", "P3"]

    def test_csv_write_options(self, tmp_path):
        task = create_write_task(tmp_path / "proteins.tsv", "csv", write_options={"sep": "\t"})
        task.write(frame(0))
        task.close()

        assert task.path.endswith("proteins.csv")
        df = pd.read_csv(task.path, sep="\t")
        assert df.shape == (2, 2)

    def test_parquet_with_metadata(self, tmp_path):
        task = create_write_task(tmp_path / "proteins", "parquet", metadata={"software": "plexquant"})
        assert isinstance(task, WriteParquetTask)
        task.write(frame(0))
        task.write(frame(2))
        task.close()

        table = pq.read_table(tmp_path / "proteins.parquet")
        assert table.num_rows == 4
        assert pq.read_metadata(tmp_path / "proteins.parquet").metadata[b"software"] == b"plexquant"

    def test_unknown_format(self, tmp_path):
        with pytest.raises(ValueError):
            create_write_task(tmp_path / "proteins", "xlsx")

    def test_error_raised_on_close(self, tmp_path):
        task = WriteCSVTask(str(tmp_path / "proteins"))
        task.start()
        task.write("not a table")

        with pytest.raises(AttributeError):
            task.close()

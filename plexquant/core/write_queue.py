"""
Asynchronous table writing for the plexquant package.

Snapshot tables are handed to a writer thread through a queue so that the
quantification pipeline keeps running while files are written. Calling
``close()`` is the single synchronisation point: it drains the queue, joins
the thread and re-raises any error the thread hit.
"""

import os
import time
from queue import Queue
from threading import Thread
from typing import Any, Optional

import pandas as pd
import pyarrow as pa
from pyarrow import parquet as pq

from plexquant.core.logger import get_logger

logger = get_logger("plexquant.write_queue")


class _WriteTask(Thread):
    """
    Base thread consuming DataFrames from a queue until a ``None`` sentinel.

    Subclasses implement ``_write`` for a single table and may override
    ``_close`` to finalise the file.
    """

    extension = ""

    path: str
    error: Optional[BaseException]

    _queue: Queue

    def __init__(self, path: str, daemon: bool = True):
        super().__init__(daemon=daemon)
        path, _ext = os.path.splitext(str(path))
        self.path = path + self.extension
        self.error = None
        self._queue = Queue()

    def write(self, table: pd.DataFrame):
        """
        Queue a DataFrame for writing.

        Parameters
        ----------
        table : pd.DataFrame
            Table to append to the output file.
        """
        logger.debug("Queuing %d rows for writing to %s", len(table), self.path)
        self._queue.put(table)

    def close(self):
        """
        Finish writing and wait for the thread.

        Raises
        ------
        Exception
            Whatever error the writer thread raised while writing.
        """
        logger.debug("Closing writer queue for %s", self.path)
        self._queue.put(None)
        self.join()
        if self.error is not None:
            raise self.error

    def _write(self, table: pd.DataFrame):
        raise NotImplementedError

    def _close(self):
        logger.debug("Closing writer for %s", self.path)

    def run(self):
        """Process the queue until the sentinel arrives, then close the file."""
        while True:
            table: pd.DataFrame = self._queue.get(True)
            if table is None:
                break
            if self.error is not None:
                continue
            start_time = time.time()
            try:
                self._write(table)
            except Exception as e:
                logger.error("Error writing to %s: %s", self.path, str(e))
                self.error = e
                continue
            elapsed = time.time() - start_time
            logger.debug("Wrote %d rows to %s in %.2f seconds", len(table), self.path, elapsed)

        if self.error is None:
            try:
                self._close()
            except Exception as e:
                logger.error("Error closing %s: %s", self.path, str(e))
                self.error = e


class WriteCSVTask(_WriteTask):
    """
    Thread writing queued DataFrames to a single CSV file.

    The header is written with the first table; later tables are appended.

    Attributes
    ----------
    path : str
        Output path, always ending in ``.csv``.
    write_options : dict[str, Any]
        Extra keyword arguments for :meth:`pandas.DataFrame.to_csv`.
    """

    extension = ".csv"

    write_options: dict[str, Any]

    _wrote_header: bool

    def __init__(self, path: str, daemon: bool = True, write_options: dict = None, **kwargs):
        super().__init__(path, daemon=daemon)
        if write_options is None:
            write_options = {}
        self.write_options = write_options | kwargs
        self._wrote_header = False

    def _write(self, table: pd.DataFrame):
        table.to_csv(
            self.path,
            header=not self._wrote_header,
            mode="a" if self._wrote_header else "w",
            index=False,
            **self.write_options,
        )
        self._wrote_header = True


class WriteParquetTask(_WriteTask):
    """
    Thread writing queued DataFrames to a single Parquet file.

    The schema is taken from the first table.

    Attributes
    ----------
    path : str
        Output path, always ending in ``.parquet``.
    metadata : dict[str, Any]
        Key/value metadata stored in the Parquet footer.
    """

    extension = ".parquet"

    metadata: dict[str, Any]

    _schema: Optional[pa.Schema]
    _writer: Optional[pq.ParquetWriter]

    def __init__(self, path: str, daemon: bool = True, metadata: dict = None, **kwargs):
        super().__init__(path, daemon=daemon)
        if metadata is None:
            metadata = {}
        self.metadata = metadata | kwargs
        self._schema = None
        self._writer = None

    def _write(self, table: pd.DataFrame):
        if self._schema is None:
            self._schema = pa.Schema.from_pandas(table, preserve_index=False)
            self._writer = pq.ParquetWriter(self.path, schema=self._schema)
            logger.debug("Initialized Parquet writer for %s", self.path)

        arrow_table = pa.Table.from_pandas(table, schema=self._schema, preserve_index=False)
        self._writer.write_table(arrow_table)

    def _close(self):
        super()._close()
        if self._writer is None:
            return
        if self.metadata:
            self._writer.add_key_value_metadata(
                {str(k): str(v) for k, v in self.metadata.items()}
            )
        self._writer.close()


def create_write_task(path: str, output_format: str = "csv", **kwargs) -> _WriteTask:
    """
    Create and start a writer thread for ``output_format``.

    Raises
    ------
    ValueError
        If the format is neither ``csv`` nor ``parquet``.
    """
    output_format = output_format.lower()
    if output_format == "csv":
        task = WriteCSVTask(path, **kwargs)
    elif output_format == "parquet":
        task = WriteParquetTask(path, **kwargs)
    else:
        raise ValueError(f"Unsupported output format: {output_format}. Use csv or parquet")
    task.start()
    return task

"""Module to write analysis rows to comma-separated text files."""

import os

import numpy as np

from numusel.utils.globals import INF_SENTINEL

__all__ = ["CSVWriter"]


class CSVWriter:
    """Writes rows of values to a comma-separated text file.

    The file is opened once when the writer is built and kept open until it
    is explicitly closed. Rows have no header; each row may be prefixed with a
    tag which identifies the kind of row. Every field, including the last one,
    is followed by a comma.

    Typical configuration should look like:

    .. code-block:: yaml

        reporter:
          file_name: output_mc.log
          overwrite: true
          precision: 6
    """

    name = "csv"

    def __init__(
        self, file_name="output.csv", overwrite=False, append=False, precision=6
    ):
        """Initialize the basics of the output file.

        Parameters
        ----------
        file_name : str, default 'output.csv'
            Name of the output CSV file
        overwrite : bool, default False
            If True, overwrite the output file if it already exists
        append : bool, default False
            If True, add more rows to an existing CSV file
        precision : int, default 6
            Number of decimals used to represent floating point values
        """
        # Check that output file does not already exist, if requested
        if not overwrite and not append and os.path.isfile(file_name):
            raise FileExistsError(f"File with name {file_name} already exists.")

        if append and not os.path.isfile(file_name):
            raise FileNotFoundError(
                f"File not found at path: {file_name}. When using "
                "`append=True` in CSVWriter, the file must exist at "
                "the prescribed path before data is written to it."
            )

        assert precision >= 0, "The floating point precision must be positive."

        # Store persistent attributes, open the file
        self.file_name = file_name
        self.append_file = append
        self.precision = precision
        self.num_rows = 0
        self.out_file = open(
            self.file_name, "a" if append else "w", encoding="utf-8"
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    @property
    def closed(self):
        """Whether the underlying file is closed.

        Returns
        -------
        bool
            `True` if no more rows can be written
        """
        return self.out_file.closed

    def format(self, value):
        """Converts one value to its text representation.

        Infinite values are replaced by a sentinel, as they cannot be parsed
        by most downstream tools. Not-a-number values are written as is.

        Parameters
        ----------
        value : object
            Value to format

        Returns
        -------
        str
            Text representation of the value
        """
        if isinstance(value, (bool, np.bool_)):
            return str(int(value))

        if isinstance(value, (int, np.integer)):
            return str(value)

        if isinstance(value, (float, np.floating)):
            if np.isinf(value):
                return str(INF_SENTINEL)
            if np.isnan(value):
                return "nan"
            return f"{value:.{self.precision}f}"

        return str(value)

    def append(self, values, tag=None):
        """Append one row to the CSV file.

        Parameters
        ----------
        values : List[object]
            Ordered list of values to store in the row
        tag : str, optional
            Label written at the beginning of the row
        """
        assert not self.closed, f"The file {self.file_name} is already closed."

        fields = [] if tag is None else [str(tag)]
        fields.extend(self.format(v) for v in values)
        self.out_file.write("".join(f"{field}," for field in fields) + "\n")
        self.num_rows += 1

    def flush(self):
        """Flushes the buffered rows to disk."""
        self.out_file.flush()

    def close(self):
        """Flushes and closes the output file."""
        if not self.closed:
            self.out_file.close()

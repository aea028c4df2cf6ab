"""Base class of all analysis scripts."""

from abc import ABC, abstractmethod

from numusel.io.write import CSVWriter
from numusel.utils.logger import logger


class AnaBase(ABC):
    """Parent class of all analysis scripts.

    This base class performs the following functions:
    - Ensures that the necessary methods exist
    - Owns the output writers and closes them when the script is closed
    - Runs the script on one spill at a time

    Attributes
    ----------
    name : str
        Name of the analysis script (to call it from a configuration file)
    writers : Dict[str, CSVWriter]
        Output writers, indexed by name
    """

    # Name of the analysis script (as specified in the configuration)
    name = None

    def __init__(self, overwrite=False, append=False, precision=6):
        """Initialize default analysis script object properties.

        Parameters
        ----------
        overwrite : bool, default False
            If True and an output file exists, overwrite it
        append : bool, default False
            If True, appends existing output files instead of creating new ones
        precision : int, default 6
            Number of decimals used to represent floating point values
        """
        # Store the writer parameters
        self.overwrite_file = overwrite
        self.append_file = append
        self.precision = precision

        # Initialize a writer dictionary to be filled by the children classes
        self.writers = {}

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def initialize_writer(self, name, file_name):
        """Adds a CSV writer to the list of writers for this script.

        Parameters
        ----------
        name : str
            Name of the writer
        file_name : str
            Path to the output file
        """
        assert len(name) > 0, "Must provide a non-empty name."
        assert name not in self.writers, f"Writer `{name}` already exists."
        self.writers[name] = CSVWriter(
                file_name, overwrite=self.overwrite_file,
                append=self.append_file, precision=self.precision)

        logger.debug("Analysis script `%s` writing to %s", self.name, file_name)

    def append(self, name, values, tag=None):
        """Append a row to one of the output files.

        Parameters
        ----------
        name : str
            Name of the writer
        values : List[object]
            Ordered list of values to store
        tag : str, optional
            Label written at the beginning of the row
        """
        self.writers[name].append(values, tag)

    def close(self):
        """Flushes and closes all the output files."""
        for writer in self.writers.values():
            writer.close()

    def __call__(self, spill):
        """Runs the analysis script on one spill.

        Parameters
        ----------
        spill : Spill
            Spill record

        Returns
        -------
        object
            Output of the :meth:`process` function
        """
        return self.process(spill)

    @abstractmethod
    def process(self, spill):
        """Place-holder method to be defined in each analysis script.

        Parameters
        ----------
        spill : Spill
            Spill record
        """
        raise NotImplementedError('Must define the `process` function')

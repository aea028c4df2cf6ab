"""Driver class.

Takes care of everything in one centralized place:
- Configuration processing
- Reporter initialization
- Looping over the spills provided by the host framework
"""

import yaml

from .ana import Reporter
from .data import Spill
from .utils.logger import logger
from .version import __version__

__all__ = ["Driver"]


class Driver:
    """Central driver.

    Processes the global configuration and runs the reporter on each spill
    it is provided with. It takes a configuration dictionary of the form:

    .. code-block:: yaml

        base:
          <Base driver configuration>
        reporter:
          <Reporter configuration>

    The spills themselves are produced by the host framework, which either
    calls :meth:`process` on each of them or hands an iterable of spills
    to :meth:`run`.
    """

    def __init__(self, cfg):
        """Initializes the class attributes.

        Parameters
        ----------
        cfg : dict
            Global configuration dictionary
        """
        # Process the full configuration dictionary and store it
        base, reporter = self.process_config(**cfg)

        # Initialize the base driver configuration parameters
        self.initialize_base(**base)

        # Initialize the reporter
        self.reporter = Reporter(**reporter)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def process_config(self, base=None, reporter=None):
        """Reads the configuration and dumps it to the logger.

        Parameters
        ----------
        base : dict, optional
            Base driver configuration dictionary
        reporter : dict, optional
            Reporter configuration dictionary

        Returns
        -------
        dict
            Processed configuration
        """
        # If there is no base or reporter configuration, use defaults
        base = dict(base) if base is not None else {}
        reporter = dict(reporter) if reporter is not None else {}

        # Set the verbosity of the logger
        verbosity = base.get("verbosity", "info")
        logger.setLevel(verbosity.upper())

        # Rebuild global configuration dictionary
        self.cfg = {"base": base, "reporter": reporter}

        # Log environment and configuration information
        logger.info("Release version: %s\n", __version__)
        logger.info(yaml.dump(self.cfg, default_flow_style=None, sort_keys=False))

        return base, reporter

    def initialize_base(self, verbosity="info", iterations=-1, log_step=100):
        """Initialize the base driver parameters.

        Parameters
        ----------
        verbosity : str, default 'info'
            Verbosity level to pass to the `logging` module. Pick one of
            'debug', 'info', 'warning', 'error', 'critical'.
        iterations : int, default -1
            Number of spills to process (-1 means all spills)
        log_step : int, default 100
            Number of spills between two progress messages
        """
        assert iterations is None or iterations >= -1, (
                f"`iterations` must be -1 (all) or positive, got {iterations}.")
        assert log_step > 0, f"`log_step` must be positive, got {log_step}."

        self.verbosity = verbosity
        self.iterations = iterations if iterations is not None else -1
        self.log_step = log_step
        self.counter = 0

    def process(self, spill):
        """Process one spill.

        Parameters
        ----------
        spill : Union[Spill, dict]
            Spill record, or its dictionary representation

        Returns
        -------
        List[float]
            Place-holder returned by the reporter
        """
        if isinstance(spill, dict):
            spill = Spill.from_dict(spill)

        result = self.reporter(spill)
        self.counter += 1

        return result

    def run(self, spills):
        """Loop over the spills, process them, close the output.

        Parameters
        ----------
        spills : Iterable[Union[Spill, dict]]
            Spills provided by the host framework

        Returns
        -------
        int
            Number of spills processed
        """
        try:
            for iteration, spill in enumerate(spills):
                if self.iterations > -1 and iteration >= self.iterations:
                    break

                self.process(spill)
                if (iteration + 1) % self.log_step == 0:
                    logger.info("Processed %d spill(s)", iteration + 1)

        finally:
            self.close()

        logger.info("Done processing %d spill(s)", self.counter)

        return self.counter

    def close(self):
        """Close the reporter output."""
        self.reporter.close()

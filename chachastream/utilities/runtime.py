from tqdm import tqdm
from os import urandom
import logging

log = logging.getLogger(__name__)


class RuntimeConfiguration(object):
    """
    Global runtime configuration. Allows for the dynamic configuration of the library's behavior.
    """

    def __init__(self):
        self.random               = lambda size: urandom(size)
        self.enable_progress_bars = False
        self.min_progress_length  = 1 << 20


    def __repr__(self):
        return f"<RuntimeConfiguration: enable_progress_bars={self.enable_progress_bars}, min_progress_length={self.min_progress_length}>"


    def __str__(self):
        return self.__repr__()


    def report_progress(self, iterable, total: int=None, **kwargs):
        """
        Wraps `iterable` in a progress bar if progress bars are enabled.

        Parameters:
            iterable (iterable): Iterable to track.
            total         (int): Number of expected items.
            **kwargs   (kwargs): Keyword arguments passed through to tqdm.

        Returns:
            iterable: Either `iterable` or a tqdm wrapper around it.
        """
        if self.enable_progress_bars:
            return tqdm(iterable, total=total, **kwargs)

        return iterable


    def set_log_level(self, level: int):
        """
        Sets the log level of every logger in the package.

        Parameters:
            level (int): Logging level (e.g. `logging.DEBUG`).
        """
        logging.getLogger('chachastream').setLevel(level)
        log.debug(f"Log level set to {logging.getLevelName(level)}")



RUNTIME = RuntimeConfiguration()

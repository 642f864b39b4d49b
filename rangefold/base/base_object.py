import logging
import os
import sys
from abc import ABC

import coloredlogs

LOG_FORMAT = '%(asctime)s %(module)-20s %(levelname)-5s %(message)s'
DEBUG_ENV = 'RF_DEBUG'
DEBUG_LEVELS = [logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG]


class BaseObject(ABC):
    def __init__(self):
        self.log: logging.Logger = logging.getLogger(self.__class__.__name__)
        level = self._get_debug_level()
        if not self.log.handlers:
            # must be off before installing, otherwise coloredlogs takes over a parent's handler
            self.log.propagate = False
            coloredlogs.install(level=level, logger=self.log, fmt=LOG_FORMAT, stream=sys.stdout)
        self.log.setLevel(level)
        for handler in self.log.handlers:
            handler.setLevel(level)

    def _get_debug_level(self) -> int:
        """
        RF_DEBUG holds comma separated entries, either a bare digit applying to every class or
        `ClassName:digit` applying to one. Digits 0..3 map to ERROR, WARNING, INFO and DEBUG.
        """
        level = logging.ERROR
        for entry in os.getenv(DEBUG_ENV, '0').split(","):
            name, _, digit = entry.strip().rpartition(":")
            if not digit.isnumeric():
                print(f"incorrect debug specification {entry}", file=sys.stderr)
                continue
            if name in ("", self.__class__.__name__):
                level = DEBUG_LEVELS[min(int(digit), len(DEBUG_LEVELS) - 1)]
        return level

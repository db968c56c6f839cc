# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class InvalidChange(ValueError):
    """Raised for malformed change records, or changes that don't fit the target.

    The offending record, when known, is kept as `change`.
    """

    def __init__(self, message, change=None):
        super(InvalidChange, self).__init__(message)
        self.change = change


_log_format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'


def init_logging(level=logging.INFO):
    """Sets up logging for applications embedding yajsondiff.

    Sets the level of the yajsondiff logger to `level`, unless
    `level` is given as `None`, and installs a root handler using
    the yajsondiff format if none is configured yet.
    """
    if level is not None:
        logger.setLevel(level)
    logging.basicConfig(format=_log_format, level=level)
    logging.captureWarnings(True)


def set_yajsondiff_log_level(level, set_main=True):
    """Set a log level for the yajsondiff logger, and optionally the root logger."""
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


logger = logging.getLogger('yajsondiff')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical

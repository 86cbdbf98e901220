"""Module for initializing settings related to the built-in artledger logger
Functions:
-get_logger"""

import logging, coloredlogs
import os

from artledger import config

VALID_LVLS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def _level_from_env():
    lvl = os.getenv('LOG_LEVEL', config.DEFAULT_LOG_LEVEL)
    assert lvl in VALID_LVLS, "Log level {} not in valid levels {}".format(lvl, VALID_LVLS)
    return getattr(logging, lvl)


_LOG_LVL = _level_from_env()

format = '%(asctime)s.%(msecs)03d %(name)s[%(process)d][%(processName)s] <{}> %(levelname)-2s %(message)s'.format(
    os.getenv('HOST_NAME', 'Ledger'))

"""
Custom Styling
"""

LEVEL_STYLES = {
    'critical': {'color': 'white', 'bold': True, 'background': 'red'},
    'error': {'color': 'red'},
    'warning': {'color': 'yellow'},
    'info': {'color': 'white'},
    'debug': {'color': 'green'},
}

FIELD_STYLES = {
    'asctime': {'color': 'green'},
    'hostname': {'color': 'magenta'},
    'levelname': {'color': 'black', 'bright': True},
    'name': {'color': 'blue'},
    'programname': {'color': 'cyan'}
}


class ColoredStreamHandler(logging.StreamHandler):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setFormatter(
            coloredlogs.ColoredFormatter(format, level_styles=LEVEL_STYLES, field_styles=FIELD_STYLES)
        )


def get_logger(name=''):
    log = logging.getLogger(name)
    log.setLevel(_LOG_LVL)

    if not log.handlers:
        log.addHandler(ColoredStreamHandler())

        filename = os.getenv('LOG_FILE')
        if filename:
            filehandler = logging.FileHandler(filename, delay=True)
            filehandler.setFormatter(logging.Formatter(format))
            log.addHandler(filehandler)

        log.propagate = False

    return log

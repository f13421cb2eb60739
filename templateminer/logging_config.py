"""Logging configuration for templateminer."""

import logging.config

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        },
    },
    'handlers': {
        'default': {
            'level': 'DEBUG',
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stderr',
        },
    },
    'loggers': {
        'templateminer': {
            'handlers': ['default'],
            'level': 'WARNING',
            'propagate': False
        },
    }
}


def setup_logging(verbose: bool = False):
    """Set up logging; stdout stays reserved for the template dump."""
    logging.config.dictConfig(LOGGING_CONFIG)
    if verbose:
        logging.getLogger('templateminer').setLevel(logging.DEBUG)

# -*- coding: utf-8 -*-
"""Top-level package for jpweather."""
import logging

__author__ = """jpweather developers"""
__version__ = '0.1.0'

# Log messages go to stderr so they never mix with the forecast tables
ch = logging.StreamHandler()
# create formatter and add it to the handlers
ch.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))


def configure_logging(verbose=False):
    """ Attach the console handler to the root logger

    :param verbose: when True, DEBUG messages are shown as well
    """
    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger('')
    root.setLevel(level)
    ch.setLevel(level)
    if ch not in root.handlers:
        root.addHandler(ch)

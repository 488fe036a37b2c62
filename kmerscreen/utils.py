"""
Helpers shared by the command line tools.
"""

import argparse
import logging

LOG_LEVELS = ["debug", "info", "warning"]


def positive_int(value):
    k = int(value)
    if k < 1:
        raise argparse.ArgumentTypeError("{} is not a positive integer".format(value))
    return k


def add_log_argument(parser):
    parser.add_argument(
        "-log",
        choices=LOG_LEVELS,
        default="info",
        help="logging level",
    )


def setup_logging(level="info"):
    """Send log messages to stderr, stdout is reserved for reports."""
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%d-%m-%Y %H:%M:%S",
        level=getattr(logging, level.upper()),
    )
    return logging.getLogger("kmerscreen")

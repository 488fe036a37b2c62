"""
Plot k-mer abundance spectra: for every multiplicity m, how many
distinct k-mers occur exactly m times.
"""

import argparse
import logging
import sys
from collections import Counter

import matplotlib.pyplot as plt

from .errors import KmerScreenError
from .kmers import index_file
from .utils import add_log_argument, positive_int, setup_logging

logger = logging.getLogger(__name__)

FILE_COLORS = [
    (213, 94, 0),
    (0, 114, 178),
    (0, 158, 115),
    (230, 159, 0),
    (86, 180, 233),
]
FILE_COLORS = [tuple([(y / 255) for y in color]) for color in FILE_COLORS]


def abundance_spectrum(index):
    """Sorted (multiplicity, number of distinct k-mers) pairs."""
    return sorted(Counter(index.values()).items())


def plot_spectra(named_indexes, k, outfile):
    """Draw the spectrum of every (name, index) pair into one figure."""
    plt.figure()

    for fidx, (name, index) in enumerate(named_indexes):
        spectrum = abundance_spectrum(index)
        if not spectrum:
            logger.warning("No k-mers in %s, nothing to plot", name)
            continue

        multiplicities = [x[0] for x in spectrum]
        kmers = [x[1] for x in spectrum]

        plt.scatter(multiplicities, kmers, label=str(name), color=FILE_COLORS[fidx % len(FILE_COLORS)])

    plt.title("{}-mer abundance spectrum".format(k))
    plt.xlabel("multiplicity")
    plt.ylabel("distinct k-mers")
    plt.yscale('log')
    plt.legend()
    plt.savefig(outfile)
    plt.close()

    logger.info("Saved spectrum plot to %s", outfile)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Plot the k-mer abundance spectra of FASTQ files.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("-o", "--output", required=True, help="image file to write")
    parser.add_argument("-k", type=positive_int, default=16, help="k-mer length")
    parser.add_argument("-p", "--prefix", default="", help="only count k-mers starting with this sequence")
    parser.add_argument("files", nargs='+', help="FASTQ files")
    add_log_argument(parser)
    args = parser.parse_args(argv)

    setup_logging(args.log)

    try:
        indexes = [(fname, index_file(fname, args.k, args.prefix)) for fname in args.files]
        plot_spectra(indexes, args.k, args.output)
    except (OSError, ValueError, KmerScreenError) as err:
        logger.error("Application error: %s", err)
        return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())

"""
Compare the prefixed k-mers of a target FASTQ file against a reference.

Usage:

    kmer-compare target.fastq reference.fastq 16 ATCG

prints how many of each file's k-mers (distinct and with multiplicity)
are also found in the other file.
"""

import argparse
import logging
import sys

from .errors import KmerScreenError
from .kmers import SHORT_POLICIES, index_file
from .report import count_table_path, print_report, write_counts
from .stats import KmerStats, intersect
from .utils import add_log_argument, positive_int, setup_logging

logger = logging.getLogger(__name__)

DEFAULT_K = 16
DEFAULT_PREFIX = "ATCG"


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        description="Find k-mers starting with a given prefix in two FASTQ files and compare them.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("filename", help="target FASTQ file")
    parser.add_argument("filedb", help="reference FASTQ file")
    parser.add_argument("k", nargs="?", type=positive_int, default=DEFAULT_K, help="k-mer length")
    parser.add_argument(
        "prefix", nargs="?", default=DEFAULT_PREFIX,
        help="only count k-mers starting with this sequence"
    )
    parser.add_argument(
        "--short-reads", choices=SHORT_POLICIES, default="ignore",
        help="what to do with reads shorter than k"
    )
    parser.add_argument(
        "--dump-counts", action="store_true",
        help="write the k-mer counts of each file to <file>.<k>.count"
    )
    parser.add_argument("--plot", default=None, help="save the k-mer abundance spectra to this image")
    add_log_argument(parser)

    return parser.parse_args(argv)


def run(args):
    kmersTarget = index_file(args.filename, args.k, args.prefix, args.short_reads)
    kmersRef = index_file(args.filedb, args.k, args.prefix, args.short_reads)

    kstatTarget = KmerStats.from_index(kmersTarget)
    kstatRef = KmerStats.from_index(kmersRef)
    logger.info("%s: %s", args.filename, kstatTarget)
    logger.info("%s: %s", args.filedb, kstatRef)

    match = intersect(kmersTarget, kmersRef)

    print_report(args.k, [(args.filename, kstatTarget), (args.filedb, kstatRef)], match)

    if args.dump_counts:
        write_counts(kmersTarget, count_table_path(args.filename, args.k))
        write_counts(kmersRef, count_table_path(args.filedb, args.k))

    if args.plot:
        # matplotlib is only loaded when a plot is requested
        from .plot_spectra import plot_spectra
        plot_spectra([(args.filename, kmersTarget), (args.filedb, kmersRef)], args.k, args.plot)


def main(argv=None):
    args = parse_arguments(argv)
    setup_logging(args.log)

    try:
        run(args)
    except (OSError, ValueError, KmerScreenError) as err:
        logger.error("Application error: %s", err)
        return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())

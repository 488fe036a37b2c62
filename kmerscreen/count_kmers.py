"""
Count the k-mers of a single FASTQ file and write them to <file>.<k>.count
"""

import argparse
import logging
import sys

from .errors import KmerScreenError
from .kmers import SHORT_POLICIES, index_file
from .report import count_table_path, write_counts
from .stats import KmerStats
from .utils import add_log_argument, positive_int, setup_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Count the k-mers of a FASTQ file.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("filename", help="FASTQ file")
    parser.add_argument("k", type=positive_int, help="k-mer length")
    parser.add_argument("-p", "--prefix", default="", help="only count k-mers starting with this sequence")
    parser.add_argument("--short-reads", choices=SHORT_POLICIES, default="ignore")
    parser.add_argument("-o", "--output", default=None, help="output file, defaults to <filename>.<k>.count")
    add_log_argument(parser)
    args = parser.parse_args(argv)

    setup_logging(args.log)

    outfile = args.output or count_table_path(args.filename, args.k)

    try:
        kmerCounts = index_file(args.filename, args.k, args.prefix, args.short_reads)
        write_counts(kmerCounts, outfile)
    except (OSError, ValueError, KmerScreenError) as err:
        logger.error("Application error: %s", err)
        return 2

    logger.info("%s: %s", args.filename, KmerStats.from_index(kmerCounts))
    return 0


if __name__ == '__main__':
    sys.exit(main())

"""
Text output: the comparison report and per-file count tables.
"""

import logging

logger = logging.getLogger(__name__)

HEADER = "({}-mers)\tUnique\tRedundant\tIntersection_unique\tIntersection"


def percentage(part, total):
    # an empty index has nothing to compare, same output as 0/0 in float math
    if total == 0:
        return "NaN%"
    return "{:.2f}%".format(100 * part / total)


def report_row(name, stats, intersection):
    return "\t".join([
        str(name),
        str(stats.unique),
        str(stats.redundant),
        percentage(intersection.unique, stats.unique),
        percentage(intersection.redundant, stats.redundant),
    ])


def format_report(k, rows, intersection):
    """Render the comparison report.

    Args:
        k: k-mer length, shown in the header
        rows: (filename, KmerStats) pairs, one report line each
        intersection: Intersection between the compared indexes

    Returns:
        the report lines, header first
    """
    lines = [HEADER.format(k)]
    for name, stats in rows:
        lines.append(report_row(name, stats, intersection))
    return lines


def print_report(k, rows, intersection, file=None):
    for line in format_report(k, rows, intersection):
        print(line, file=file)


def count_table_path(filename, k):
    return str(filename) + "." + str(k) + ".count"


def write_counts(index, outfile):
    """Write one `kmer<TAB>count` line per k-mer, most frequent first."""
    with open(outfile, 'w') as fout:
        for kmer, count in index.most_common():
            print(kmer, count, sep="\t", file=fout)

    logger.info("Wrote %d k-mer counts to %s", len(index), outfile)

"""
K-mer extraction and counting.

An index is a Counter mapping each k-mer to the number of times it was
seen. Only k-mers starting with a given prefix are kept, which keeps
the index small for large read sets.
"""

import logging
from collections import Counter

from .errors import ShortRecordError
from .fastq import is_well_formed, open_records, to_record

logger = logging.getLogger(__name__)

SHORT_POLICIES = ("ignore", "warn", "error")


def _check_args(k, short_policy):
    if k < 1:
        raise ValueError("k must be a positive integer, got {}".format(k))
    if short_policy not in SHORT_POLICIES:
        raise ValueError(
            "unknown short-record policy {!r}, expected one of {}".format(
                short_policy, ", ".join(SHORT_POLICIES)
            )
        )


def extract_kmers(record, k, prefix, index=None, short_policy="ignore"):
    """Count the overlapping k-mers of `record` that start with `prefix`.

    Args:
        record: a SeqRecord (anything with a `seq` and an `id`)
        k: k-mer length, >= 1
        prefix: required leading characters, "" admits every k-mer
        index: Counter updated in place, a new one is created when None
        short_policy: what to do with records shorter than k,
            "ignore" (nothing), "warn" (log a warning) or "error"
            (raise ShortRecordError)

    Returns:
        the updated index
    """
    _check_args(k, short_policy)

    if index is None:
        index = Counter()

    seq = str(record.seq)
    n = len(seq)

    if n < k:
        if short_policy == "error":
            raise ShortRecordError(record.id, n, k)
        if short_policy == "warn":
            logger.warning("Record %s (length %d) is shorter than k=%d", record.id, n, k)
        return index

    for i in range(0, n - k + 1):
        kseq = seq[i:i + k]

        if kseq.startswith(prefix):
            index[kseq] += 1

    return index


def build_index(reads, k, prefix, short_policy="ignore"):
    """Fold extract_kmers over a whole stream of (title, seq, qual) reads.

    Reads failing is_well_formed are dropped before extraction.
    """
    _check_args(k, short_policy)

    kmerCounts = Counter()
    seenSeqs = 0
    skippedSeqs = 0

    for read in reads:

        if not is_well_formed(read):
            skippedSeqs += 1
            logger.debug("Skipping malformed record %r", read[0])
            continue

        seenSeqs += 1
        extract_kmers(to_record(read), k, prefix, kmerCounts, short_policy)

    logger.info(
        "Indexed %d records (%d malformed skipped), %d distinct %d-mers",
        seenSeqs, skippedSeqs, len(kmerCounts), k
    )

    return kmerCounts


def index_file(path, k, prefix, short_policy="ignore"):
    """Build the k-mer index of a FASTQ file."""
    logger.info("Reading %s", path)

    with open_records(path) as reads:
        return build_index(reads, k, prefix, short_policy)

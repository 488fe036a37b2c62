"""
Reading FASTQ files.

Records are framed as four lines (header, sequence, separator, quality)
and handed out as raw (title, seq, qual) tuples, the same shape Biopython's
FastqGeneralIterator produces. Unlike Biopython's parsers, framing does
not validate the record, so a bad read can be dropped on its own with
is_well_formed instead of ending the whole stream. Well-formed reads are
turned into SeqRecords with to_record.
"""

from contextlib import contextmanager
from itertools import islice

from Bio.Seq import Seq
from Bio.SeqIO.QualityIO import SANGER_SCORE_OFFSET
from Bio.SeqRecord import SeqRecord


def read_fastq(handle):
    """Yield (title, seq, qual) for every four-line record in `handle`.

    Raises ValueError when the header or separator line is missing, since
    the stream can no longer be split into records after that.
    """
    while True:
        lines = [line.rstrip("\r\n") for line in islice(handle, 4)]

        # end of file, possibly after trailing blank lines
        if not any(lines):
            return

        if not lines[0].startswith("@"):
            raise ValueError("Expected '@' at the start of a FASTQ record, got {!r}".format(lines[0]))

        lines += [""] * (4 - len(lines))
        title, seq, sep, qual = lines

        if not sep.startswith("+"):
            raise ValueError("Expected '+' separator line in FASTQ record {!r}, got {!r}".format(title, sep))

        yield title[1:], seq, qual


@contextmanager
def open_records(path):
    """Yield the raw record stream of the FASTQ file at `path`.

    The file handle is closed when the `with` block exits, also when
    the reader or the consumer raises.
    """
    with open(path, 'r') as fin:
        yield read_fastq(fin)


def is_well_formed(read):
    """Basic sanity check of a framed (title, seq, qual) record.

    A record needs an identifier, ASCII sequence and quality strings,
    and exactly one quality value per symbol.
    """
    title, seq, qual = read

    if not title.split():
        return False

    if not (seq.isascii() and qual.isascii()):
        return False

    return len(seq) == len(qual)


def to_record(read):
    """SeqRecord with Sanger/Phred+33 qualities for a well-formed read."""
    title, seq, qual = read
    recordId = title.split(None, 1)[0]

    return SeqRecord(
        Seq(seq),
        id=recordId,
        name=recordId,
        description=title,
        letter_annotations={"phred_quality": [ord(c) - SANGER_SCORE_OFFSET for c in qual]},
    )

"""
Write a synthetic FASTQ file of random reads ending in a poly-A tail.
"""

import argparse
import random
import sys

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

# '&' in Sanger encoding
FAKE_QUALITY = 5


def fake_read(rng, name, read_len=(500, 1000), polya_len=(100, 300)):
    """A random ACGT stretch with a length drawn from `read_len`
    followed by a run of A's with a length drawn from `polya_len`
    (both ranges inclusive).
    """
    body = "".join(rng.choice("ATCG") for _ in range(rng.randint(*read_len)))
    seq = body + "A" * rng.randint(*polya_len)

    return SeqRecord(
        Seq(seq), id=name, description="",
        letter_annotations={"phred_quality": [FAKE_QUALITY] * len(seq)},
    )


def fake_reads(count, rng=None, **lengths):
    rng = rng or random.Random()
    for i in range(0, count):
        yield fake_read(rng, "seq{}".format(i), **lengths)


def write_fake_reads(fout, count, rng=None, **lengths):
    """Write `count` fake reads to the open file `fout`, returns the count written."""
    return SeqIO.write(fake_reads(count, rng, **lengths), fout, "fastq")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate fake FASTQ reads.")
    parser.add_argument("output", help="FASTQ file to write")
    parser.add_argument("count", type=int, help="number of reads")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    with open(args.output, 'w') as fout:
        write_fake_reads(fout, args.count, random.Random(args.seed))

    return 0


if __name__ == '__main__':
    sys.exit(main())

import io
import random

import pytest

from kmerscreen.fake_sequences import write_fake_reads
from kmerscreen.fastq import read_fastq, to_record


@pytest.fixture
def parse_fastq():
    def _parse(text):
        return [to_record(read) for read in read_fastq(io.StringIO(text))]
    return _parse


@pytest.fixture
def write_fastq(tmp_path):
    def _write(name, reads):
        path = tmp_path / name
        with open(path, 'w') as fout:
            for i, seq in enumerate(reads):
                print("@read{}".format(i), seq, "+", "!" * len(seq), sep="\n", file=fout)
        return path
    return _write


@pytest.fixture
def fake_fastq(tmp_path):
    def _write(name, count, seed=0):
        path = tmp_path / name
        with open(path, 'w') as fout:
            write_fake_reads(fout, count, random.Random(seed), read_len=(20, 40), polya_len=(10, 20))
        return path
    return _write

import io
import random

import pytest
from Bio import SeqIO

from kmerscreen import compare_kmers, count_kmers, fake_sequences, plot_spectra


def test_compare(write_fastq, capsys):
    target = write_fastq("target.fastq", ["AATTAAGGAACC"])
    reference = write_fastq("db.fastq", ["AAGGAACCTT"])

    assert compare_kmers.main([str(target), str(reference), "4", "AA"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "(4-mers)\tUnique\tRedundant\tIntersection_unique\tIntersection",
        "{}\t3\t3\t66.67%\t66.67%".format(target),
        "{}\t2\t2\t100.00%\t100.00%".format(reference),
    ]


def test_compare_defaults():
    args = compare_kmers.parse_arguments(["a.fastq", "b.fastq"])

    assert args.k == 16
    assert args.prefix == "ATCG"
    assert args.short_reads == "ignore"


def test_compare_requires_both_files():
    with pytest.raises(SystemExit) as excinfo:
        compare_kmers.main(["a.fastq"])
    assert excinfo.value.code == 2


def test_compare_rejects_non_positive_k():
    with pytest.raises(SystemExit):
        compare_kmers.main(["a.fastq", "b.fastq", "0"])


def test_compare_missing_file(write_fastq, tmp_path, capsys):
    target = write_fastq("target.fastq", ["AATTAAGGAACC"])

    assert compare_kmers.main([str(target), str(tmp_path / "missing.fastq"), "4", "AA"]) == 2
    assert capsys.readouterr().out == ""


def test_compare_short_reads_error(write_fastq, capsys):
    target = write_fastq("target.fastq", ["AATTAAGGAACC", "AAT"])
    reference = write_fastq("db.fastq", ["AAGGAACCTT"])

    assert compare_kmers.main([str(target), str(reference), "4", "AA", "--short-reads", "error"]) == 2
    assert capsys.readouterr().out == ""


def test_compare_dump_counts(write_fastq, capsys):
    target = write_fastq("target.fastq", ["AATTAAGGAACC"])
    reference = write_fastq("db.fastq", ["AAGGAACCTT", "AAGG"])

    assert compare_kmers.main([str(target), str(reference), "4", "AA", "--dump-counts"]) == 0

    assert (target.parent / "db.fastq.4.count").read_text() == "AAGG\t2\nAACC\t1\n"
    assert (target.parent / "target.fastq.4.count").exists()


def test_count_kmers(write_fastq):
    reads = write_fastq("reads.fastq", ["ACGTACGT"])

    assert count_kmers.main([str(reads), "4"]) == 0

    lines = (reads.parent / "reads.fastq.4.count").read_text().splitlines()
    assert lines[0] == "ACGT\t2"
    assert sorted(lines[1:]) == ["CGTA\t1", "GTAC\t1", "TACG\t1"]


def test_fake_reads():
    fout = io.StringIO()
    fake_sequences.write_fake_reads(fout, 5, random.Random(1), read_len=(20, 30), polya_len=(10, 15))

    fout.seek(0)
    records = list(SeqIO.parse(fout, "fastq"))

    assert [r.id for r in records] == ["seq{}".format(i) for i in range(5)]
    for r in records:
        seq = str(r.seq)
        assert 30 <= len(seq) <= 45
        assert seq.endswith("A" * 10)
        assert set(seq) <= set("ACGT")


def test_fake_reads_main(tmp_path):
    outfile = tmp_path / "fake.fastq"

    assert fake_sequences.main([str(outfile), "3", "--seed", "7"]) == 0

    with open(outfile) as fin:
        assert len(list(SeqIO.parse(fin, "fastq"))) == 3


def test_abundance_spectrum():
    index = {"AA": 1, "AC": 1, "AG": 3, "AT": 7, "CC": 3}
    assert plot_spectra.abundance_spectrum(index) == [(1, 2), (3, 2), (7, 1)]


def test_plot_spectra_main(write_fastq, tmp_path):
    reads = write_fastq("reads.fastq", ["AATTAAGGAACCAATT", "GGAACC"])
    outfile = tmp_path / "spectrum.png"

    assert plot_spectra.main(["-o", str(outfile), "-k", "3", str(reads)]) == 0
    assert outfile.stat().st_size > 0


def test_compare_skips_malformed_reads(tmp_path, capsys):
    reads = tmp_path / "mixed.fastq"
    reads.write_text(
        "@good\nAATTAAGG\n+\n!!!!!!!!\n"
        "@bad\nAACCAACC\n+\n!!!\n"
        "@good2\nAAGG\n+\n!!!!\n"
    )

    assert compare_kmers.main([str(reads), str(reads), "4", "AA"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[1] == "{}\t2\t3\t100.00%\t100.00%".format(reads)


def test_compare_fake_reads_against_themselves(fake_fastq, capsys):
    reads = fake_fastq("fake.fastq", 10, seed=3)

    assert compare_kmers.main([str(reads), str(reads), "8", ""]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[1].endswith("\t100.00%\t100.00%")
    assert out[2].endswith("\t100.00%\t100.00%")

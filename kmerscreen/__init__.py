"""Prefix-filtered k-mer counting and comparison of FASTQ files."""

from .errors import KmerScreenError, ShortRecordError
from .kmers import build_index, extract_kmers, index_file
from .stats import Intersection, KmerStats, intersect, intersect_counters, intersect_keys

__version__ = "0.1.0"

"""Exceptions raised by kmerscreen."""


class KmerScreenError(Exception):
    pass


class ShortRecordError(KmerScreenError):
    """A record is shorter than k and the short-record policy is "error"."""

    def __init__(self, record_id, length, k):
        self.record_id = record_id
        self.length = length
        self.k = k
        super().__init__(
            "record {} has length {} which is shorter than k={}".format(record_id, length, k)
        )

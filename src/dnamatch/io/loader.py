# Reading nucleotide sequences from files


import logging
from dataclasses import dataclass

import numpy as np

from dnamatch.config import MAX_SEQUENCE_LENGTH
from dnamatch.errors import SequenceReadError
from dnamatch.genome.sequence import Sequence

logger = logging.getLogger(__name__)

_NUCLEOTIDE_CODES = np.frombuffer(Sequence.ALPHABET.encode("ascii"), dtype=np.uint8)


@dataclass(frozen=True)
class LoadResult:
    sequence: Sequence
    truncated: bool = False

    def __len__(self):
        return len(self.sequence)


def sanitize(raw: bytes) -> np.ndarray:
    """
    Uppercases `raw` and keeps only A, T, C and G.
    Any other byte (whitespace, N, digits, ...) is silently dropped.
    """
    codes = np.frombuffer(raw.upper(), dtype=np.uint8)
    return codes[np.isin(codes, _NUCLEOTIDE_CODES)]


def read_sequence(path, max_length: int = MAX_SEQUENCE_LENGTH) -> LoadResult:
    """
    Reads the first line of `path` as a nucleotide sequence.
    :param path: File to read from.
    :param max_length: Nucleotides beyond this limit are discarded and
                       the result is flagged as truncated.
    """
    try:
        with open(path, 'rb') as f:
            line = f.readline()
    except OSError as e:
        raise SequenceReadError(path, e.strerror or e) from e

    codes = sanitize(line.rstrip(b"\r\n"))
    truncated = len(codes) > max_length
    if truncated:
        logger.warning("Sequence may have been truncated: %s holds more than %d nucleotides", path, max_length)
        codes = codes[:max_length]

    logger.debug("Read %d nucleotides from %s", len(codes), path)
    return LoadResult(Sequence(codes), truncated)

# Pattern matching strategies - how to count pattern occurrences in a sequence

import logging
from abc import ABC, abstractmethod

from dnamatch.config import MOD
from dnamatch.errors import DegenerateInputError
from dnamatch.genome.sequence import as_code_buffer, check_length
from dnamatch.matching.hasher import RollingHasher

logger = logging.getLogger(__name__)


class Matcher(ABC):
    """
    Abstract Base Class for all matching strategies.
    Counts every start offset at which the pattern occurs in the text,
    overlapping occurrences included.
    """
    name = None

    def count(self, text, pattern, text_len: int = None, pattern_len: int = None) -> int:
        """
        :param text: The sequence to search in (Sequence, NumPy array, bytes or str).
        :param pattern: The pattern to search for.
        :param text_len: Number of leading text symbols to search (default: all).
        :param pattern_len: Number of leading pattern symbols to use (default: all).
        :return: The number of matches.
        """
        text = as_code_buffer(text)
        pattern = as_code_buffer(pattern)
        text_len = check_length(text, text_len, "text")
        pattern_len = check_length(pattern, pattern_len, "pattern")
        if pattern_len == 0:
            raise DegenerateInputError("Empty pattern")

        matches = self._search(text, pattern, text_len, pattern_len)
        logger.debug("%s: %d matches (text length %d, pattern length %d)",
                     self.name, matches, text_len, pattern_len)
        return matches

    @abstractmethod
    def _search(self, text, pattern, text_len: int, pattern_len: int) -> int:
        pass


def verify_match(text, pattern, pos: int, pattern_len: int) -> bool:
    """True if pattern[0..pattern_len) equals text[pos..pos+pattern_len)."""
    for j in range(pattern_len):
        if text[pos + j] != pattern[j]:
            return False
    return True


class ExactScanMatcher(Matcher):
    """
    Brute force: compare the pattern against every window,
    stopping at the first mismatching symbol.
    """
    name = "bf"

    def _search(self, text, pattern, text_len, pattern_len):
        matches = 0
        # Empty range when the pattern is longer than the text
        for i in range(text_len - pattern_len + 1):
            j = 0
            while j < pattern_len and text[i + j] == pattern[j]:
                j += 1
            if j == pattern_len:
                matches += 1
        return matches


class HashScanMatcher(Matcher):
    """
    Karp-Rabin: windows whose rolling hash equals the pattern hash are
    candidates, and each candidate is verified symbol by symbol.
    Hash equality alone is never counted as a match.
    """
    name = "kr"

    def __init__(self, hasher: RollingHasher = None, modulus: int = MOD):
        self.hasher = hasher if hasher is not None else RollingHasher(modulus)

    def _search(self, text, pattern, text_len, pattern_len):
        if pattern_len > text_len:
            return 0

        pattern_hash = self.hasher.hash(pattern, pattern_len)
        matches = 0
        collisions = 0

        for offset, window_hash in enumerate(self.hasher.window_hashes(text, pattern_len, text_len)):
            if window_hash != pattern_hash:
                continue
            if verify_match(text, pattern, offset, pattern_len):
                matches += 1
            else:
                collisions += 1

        if collisions:
            logger.debug("kr: rejected %d hash collisions", collisions)
        return matches

# Karp-Rabin rolling hash over raw character codes
#
#   hash(s[0..m)) = s[0]*2^(m-1) + s[1]*2^(m-2) + ... + s[m-1]*2^0   (mod MOD)
#
# Sliding the window one position to the right:
#   rehash(a, h, b) = ((h - a*2^(m-1)) * 2 + b)   (mod MOD)


from dnamatch.config import MOD
from dnamatch.errors import ConfigError
from dnamatch.genome.sequence import as_code_buffer, check_length


class RollingHasher:
    """
    Polynomial base-2 hash of a fixed-width window, updatable in O(1)
    as the window moves one symbol to the right.
    The hasher keeps no per-search state besides the high-order weight
    2^(m-1) mod MOD of the last window length used, so one instance can be shared.
    """

    def __init__(self, modulus: int = MOD):
        if modulus <= 1:
            raise ConfigError(f"modulus must be greater than 1, got {modulus}")
        self.modulus = modulus
        self._last_weight = (1, 1)

    def hash(self, buffer, length: int = None) -> int:
        """
        Hashes the first `length` symbols of `buffer` (all of it by default).
        :return: An int in [0, modulus).
        """
        buffer = as_code_buffer(buffer)
        length = check_length(buffer, length, "buffer")
        mod = self.modulus

        value = 0
        power = 1
        # Least significant symbol first; the power only advances between symbols
        for i in range(length - 1, -1, -1):
            value = (value + (buffer[i] * power) % mod) % mod
            if i > 0:
                power = (power * 2) % mod
        return value

    def high_order_weight(self, window_len: int) -> int:
        """2^(window_len-1) mod modulus, the weight of the leading symbol."""
        cached_len, weight = self._last_weight
        if cached_len != window_len:
            weight = pow(2, max(window_len - 1, 0), self.modulus)
            self._last_weight = (window_len, weight)
        return weight

    def slide(self, old_symbol: int, old_hash: int, new_symbol: int, window_len: int) -> int:
        """
        Drops `old_symbol` from the front of the window and appends `new_symbol`.
        :param old_symbol: Code of the symbol leaving the window.
        :param old_hash: Hash of the current window.
        :param new_symbol: Code of the symbol entering the window.
        :param window_len: Width of the window.
        :return: Hash of the window advanced by one position.
        """
        mod = self.modulus
        new_hash = old_hash - (int(old_symbol) * self.high_order_weight(window_len)) % mod
        # Correct a negative intermediate explicitly rather than relying on
        # the sign convention of %, which differs between languages
        if new_hash < 0:
            new_hash += mod
        return (new_hash * 2 + int(new_symbol)) % mod

    def window_hashes(self, text, window_len: int, text_len: int = None):
        """
        Yields the hash of every window of `window_len` symbols in `text`,
        from offset 0 to text_len - window_len, rolling instead of recomputing.
        """
        text = as_code_buffer(text)
        text_len = check_length(text, text_len, "text")
        return self._roll(text, window_len, text_len)

    def _roll(self, text, window_len, text_len):
        if window_len <= 0 or window_len > text_len:
            return

        current = self.hash(text, window_len)
        yield current
        for offset in range(1, text_len - window_len + 1):
            current = self.slide(text[offset - 1], current, text[offset + window_len - 1], window_len)
            yield current

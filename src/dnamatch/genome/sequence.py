# Sequence representation (NumPy arrays of raw character codes)


import numpy as np

from dnamatch.errors import DegenerateInputError


def _encode_ascii(text: str) -> bytes:
    try:
        return text.encode("ascii")
    except UnicodeEncodeError as e:
        raise DegenerateInputError(f"Sequence strings must be ASCII, got {text[e.start:e.end]!r} at {e.start}") from e


def _checked_codes(array: np.ndarray) -> np.ndarray:
    """Casts `array` to uint8, refusing values that would wrap around."""
    if array.dtype == np.uint8:
        return array
    if array.size and (array.dtype.kind not in "iu" or array.min() < 0 or array.max() > 255):
        raise DegenerateInputError(f"Symbol codes must be integers in [0, 255], got dtype {array.dtype}")
    return array.astype(np.uint8)


class Sequence:
    """
    An immutable run of nucleotides.
    Symbols are stored as their raw character codes (ord('A') == 65, ...)
    in a 1-D uint8 array, since the Karp-Rabin hash is defined over them.
    """
    ALPHABET = "ATCG"

    def __init__(self, data):
        array = _checked_codes(np.asarray(data)).reshape(-1).copy()
        array.setflags(write=False)
        self.data = array

    @classmethod
    def from_string(cls, text: str):
        """Builds a Sequence from a DNA string, e.g. 'ACGT'."""
        return cls(np.frombuffer(_encode_ascii(text), dtype=np.uint8))

    def to_string(self) -> str:
        """Converts the code array back into a DNA string."""
        return self.data.tobytes().decode("latin-1")

    def __len__(self):
        return len(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def __eq__(self, other):
        if not isinstance(other, Sequence):
            return NotImplemented
        return np.array_equal(self.data, other.data)

    def __hash__(self):
        return hash(self.data.tobytes())

    def __repr__(self):
        text = self.to_string()
        if len(text) > 20:
            text = text[:17] + "..."
        return f"Sequence('{text}', length={len(self)})"


def as_code_buffer(seq):
    """
    Returns a read-only view of `seq` whose items are plain Python ints.
    Accepts a Sequence, a NumPy array, bytes-like objects, a str or a list of codes.
    uint8 NumPy arrays and bytes inputs are viewed without copying; wider integer
    arrays are copied, and rejected if a code falls outside [0, 255].
    """
    if isinstance(seq, Sequence):
        seq = seq.data
    if isinstance(seq, str):
        return memoryview(_encode_ascii(seq))
    if isinstance(seq, np.ndarray):
        if seq.ndim != 1:
            raise DegenerateInputError(f"Sequences must be 1-D, got an array of shape {seq.shape}")
        return memoryview(np.ascontiguousarray(_checked_codes(seq)))
    if isinstance(seq, (bytes, bytearray, memoryview)):
        return memoryview(seq).cast("B")
    return seq


def check_length(buffer, length, label: str) -> int:
    """Returns `length`, defaulting to len(buffer); it must fit inside the buffer."""
    if length is None:
        return len(buffer)
    if length < 0 or length > len(buffer):
        raise DegenerateInputError(f"{label} length {length} outside buffer of size {len(buffer)}")
    return length

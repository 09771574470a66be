# Exception hierarchy shared by the library and the CLI


class DnaMatchError(Exception):
    """Base class for every error raised by dnamatch."""


class ConfigError(DnaMatchError, ValueError):
    """Invalid or unreadable configuration."""


class SequenceReadError(DnaMatchError):
    """A sequence source could not be opened or read."""

    def __init__(self, path, reason):
        super().__init__(f"Cannot open file {path}: {reason}")
        self.path = path


class SequenceTooLargeError(DnaMatchError):
    """A sequence exceeded the configured maximum length."""

    def __init__(self, label: str, max_length: int):
        super().__init__(f"{label} too large (limit: {max_length} nucleotides)")
        self.label = label
        self.max_length = max_length


class DegenerateInputError(DnaMatchError, ValueError):
    """Pattern is empty, or a length does not fit its buffer."""


class InvalidAlgorithmError(DnaMatchError, ValueError):
    """Unknown matcher name."""

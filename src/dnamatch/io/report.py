# Reporting match results - console lines and CSV run logs


import time
from pathlib import Path

import pandas as pd


def format_result(matches: int, algorithm: str = None) -> str:
    line = f"The pattern was found: {matches} times"
    if algorithm is not None:
        return f"[{algorithm}] {line}"
    return line


class RunRecorder:
    """
    Times matcher runs and collects one row per run.
    Rows are appended to a CSV file on `save`, so repeated CLI runs
    build up a single comparison table.
    """
    COLUMNS = ["algorithm", "text_length", "pattern_length", "matches", "elapsed_seconds"]

    def __init__(self, output_path=None):
        self.output_path = Path(output_path) if output_path is not None else None
        self.history = []

    def run(self, matcher, text, pattern) -> int:
        start = time.perf_counter()
        matches = matcher.count(text, pattern)
        elapsed = time.perf_counter() - start

        self.history.append({
            "algorithm": matcher.name,
            "text_length": len(text),
            "pattern_length": len(pattern),
            "matches": matches,
            "elapsed_seconds": elapsed,
        })
        return matches

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.history, columns=self.COLUMNS)

    def save(self):
        if self.output_path is None or not self.history:
            return
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        write_header = not self.output_path.exists()
        self.to_frame().to_csv(self.output_path, mode='a', header=write_header, index=False)

import pandas as pd
import pytest

from dnamatch.cli import AlgorithmMismatchError, main, run_matching
from dnamatch.config import load_config
from dnamatch.errors import DegenerateInputError, SequenceTooLargeError


@pytest.fixture
def inputs(write_file):
    return write_file("dna.txt", "aaaa\n"), write_file("pattern.txt", "AA\n")


@pytest.mark.parametrize("flag", ["-bf", "-kr"])
def test_single_algorithm(inputs, flag, capsys):
    main([flag, *inputs])
    assert capsys.readouterr().out.strip().splitlines()[-1] == "The pattern was found: 3 times"


def test_compare_prints_every_algorithm(inputs, capsys):
    main(["--compare", *inputs])
    out = capsys.readouterr().out
    assert "[bf] The pattern was found: 3 times" in out
    assert "[kr] The pattern was found: 3 times" in out


def test_report_written(inputs, tmp_path):
    report = tmp_path / "runs.csv"
    main(["--compare", *inputs, "--report", str(report)])
    df = pd.read_csv(report)
    assert list(df["algorithm"]) == ["bf", "kr"]


@pytest.mark.parametrize("argv", [
    [],
    ["-bf"],
    ["-bf", "a.txt"],
    ["-xx", "a.txt", "b.txt"],
    ["-bf", "-kr", "a.txt", "b.txt"],
])
def test_invalid_arguments_exit_1(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 1


def test_missing_file_exits_1(write_file, tmp_path, capsys):
    pattern = write_file("pattern.txt", "AA")
    with pytest.raises(SystemExit) as exc:
        main(["-kr", str(tmp_path / "missing.txt"), pattern])
    assert exc.value.code == 1
    assert "Cannot open file" in capsys.readouterr().out


def test_empty_pattern_exits_1(write_file, capsys):
    dna = write_file("dna.txt", "ACGT")
    pattern = write_file("pattern.txt", "nnnn\n")
    with pytest.raises(SystemExit) as exc:
        main(["-bf", dna, pattern])
    assert exc.value.code == 1
    assert "Empty pattern" in capsys.readouterr().out


def test_oversized_dna_exits_1(write_file, capsys):
    dna = write_file("dna.txt", "ACGTACGT")
    pattern = write_file("pattern.txt", "AC")
    conf = write_file("conf.yaml", "max_length: 4\n")
    with pytest.raises(SystemExit) as exc:
        main(["-bf", dna, pattern, "--config", conf])
    assert exc.value.code == 1
    assert "DNA sequence too large" in capsys.readouterr().out


def test_bad_log_level_exits_1(inputs):
    with pytest.raises(SystemExit) as exc:
        main(["-bf", *inputs, "--log-level", "chatty"])
    assert exc.value.code == 1


def test_run_matching_raises(write_file):
    conf = load_config()
    dna = write_file("dna.txt", "ACGT")
    with pytest.raises(DegenerateInputError):
        run_matching(conf, dna, write_file("empty.txt", ""), ["bf"])

    conf["max_length"] = 2
    with pytest.raises(SequenceTooLargeError, match="Pattern sequence"):
        run_matching(conf, write_file("short.txt", "AC"), dna, ["bf"])


def test_run_matching_detects_disagreement(inputs, monkeypatch):
    from dnamatch.matching.matcher import HashScanMatcher
    monkeypatch.setattr(HashScanMatcher, "_search", lambda self, *args: 0)
    with pytest.raises(AlgorithmMismatchError):
        run_matching(load_config(), *inputs, ["bf", "kr"])


def test_modulus_of_one_exits_1(inputs, write_file, capsys):
    conf = write_file("conf.yaml", "modulus: 1\n")
    with pytest.raises(SystemExit) as exc:
        main(["-kr", *inputs, "--config", conf])
    assert exc.value.code == 1
    assert "'modulus' must be greater than 1" in capsys.readouterr().out

import pytest

from dnamatch.config import load_config
from dnamatch.errors import InvalidAlgorithmError
from dnamatch.matching.matcher import ExactScanMatcher, HashScanMatcher
from dnamatch.matching.matcher_registry import MatcherRegistry


@pytest.mark.parametrize("name, cls", [
    ("bf", ExactScanMatcher),
    ("-bf", ExactScanMatcher),
    ("brute_force", ExactScanMatcher),
    ("KR", HashScanMatcher),
    ("-kr", HashScanMatcher),
    ("karp_rabin", HashScanMatcher),
])
def test_get(name, cls):
    assert isinstance(MatcherRegistry.get(name), cls)


def test_unknown_algorithm():
    with pytest.raises(InvalidAlgorithmError, match="Available"):
        MatcherRegistry.get("-xx")


def test_matcher_params_pass_modulus():
    conf = load_config()
    conf["modulus"] = 101
    matcher = MatcherRegistry.get("kr", **MatcherRegistry.matcher_params("kr", conf))
    assert matcher.hasher.modulus == 101
    assert MatcherRegistry.matcher_params("bf", conf) == {}


def test_short_names():
    assert MatcherRegistry.short_names() == ["bf", "kr"]
    assert MatcherRegistry.describe("kr") == "Karp-Rabin algorithm"

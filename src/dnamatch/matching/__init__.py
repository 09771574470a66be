from dnamatch.matching.hasher import RollingHasher
from dnamatch.matching.matcher import Matcher, ExactScanMatcher, HashScanMatcher
from dnamatch.matching.matcher_registry import MatcherRegistry

__all__ = ["RollingHasher", "Matcher", "ExactScanMatcher", "HashScanMatcher", "MatcherRegistry"]

# Used for creating Matcher strategies from string


from dnamatch.errors import InvalidAlgorithmError
from dnamatch.matching.matcher import ExactScanMatcher, HashScanMatcher


class MatcherRegistry:

    _models = {
        "bf": ExactScanMatcher,
        "brute_force": ExactScanMatcher,
        "kr": HashScanMatcher,
        "karp_rabin": HashScanMatcher,
    }

    _descriptions = {
        "bf": "Brute Force algorithm",
        "kr": "Karp-Rabin algorithm",
    }

    @classmethod
    def get(cls, name, **params):
        # Accept CLI spellings such as '-bf' or '--KR'
        model_name = name.lstrip("-").lower()

        if model_name in cls._models:
            return cls._models[model_name](**params)

        raise InvalidAlgorithmError(f"Unknown algorithm: {name}. Available: {list(cls._models.keys())}")

    @classmethod
    def matcher_params(cls, name, conf):
        """Builds constructor arguments for `name` from the loaded configuration."""
        if cls._models.get(name.lstrip("-").lower()) is HashScanMatcher:
            return {"modulus": conf["modulus"]}
        return {}

    @classmethod
    def short_names(cls):
        return list(cls._descriptions.keys())

    @classmethod
    def describe(cls, name):
        return cls._descriptions[name]

import argparse
import logging
import sys

from dnamatch.color import fg
from dnamatch.config import load_config, validate_config
from dnamatch.errors import ConfigError, DegenerateInputError, DnaMatchError, SequenceTooLargeError
from dnamatch.io.loader import read_sequence
from dnamatch.io.report import RunRecorder, format_result
from dnamatch.matching.matcher_registry import MatcherRegistry

logger = logging.getLogger(__name__)


class AlgorithmMismatchError(DnaMatchError):
    """The matchers disagreed on the same input."""


class MatchArgumentParser(argparse.ArgumentParser):
    """Reports usage errors with exit status 1 instead of argparse's 2."""

    def error(self, message):
        print(fg.RED, f"Error: {message}", fg.RESET)
        self.print_usage(sys.stdout)
        sys.exit(1)


def build_parser():
    parser = MatchArgumentParser(
        description="DNAMATCH: count pattern occurrences in a DNA sequence",
        epilog="Where alg can be: -bf (Brute Force algorithm), -kr (Karp-Rabin algorithm)",
    )
    alg = parser.add_mutually_exclusive_group(required=True)
    for name in MatcherRegistry.short_names():
        alg.add_argument(f"-{name}", dest="algorithms", action="store_const", const=[name],
                         help=MatcherRegistry.describe(name))
    alg.add_argument("--compare", dest="algorithms", action="store_const", const=MatcherRegistry.short_names(),
                     help="Run every algorithm and check that they agree")
    parser.add_argument("dna_file", help="File holding the DNA sequence on its first line")
    parser.add_argument("pattern_file", help="File holding the pattern on its first line")
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument("--report", help="Append timing rows to this CSV file")
    parser.add_argument("--log-level", help="Logging level (overrides the config file)")
    return parser


def load_inputs(dna_path, pattern_path, max_length):
    """Reads and validates the DNA sequence and the pattern."""
    dna = read_sequence(dna_path, max_length)
    if dna.truncated:
        raise SequenceTooLargeError("DNA sequence", max_length)

    pattern = read_sequence(pattern_path, max_length)
    if pattern.truncated:
        raise SequenceTooLargeError("Pattern sequence", max_length)
    if len(pattern) == 0:
        raise DegenerateInputError("Empty pattern")

    return dna.sequence, pattern.sequence


def run_matching(conf, dna_path, pattern_path, algorithms, report_path=None):
    """
    Runs the selected algorithms on the two files.
    Reusable outside of the CLI; errors are raised, not printed.
    :return: Dict of algorithm name -> number of matches.
    """
    text, pattern = load_inputs(dna_path, pattern_path, conf['max_length'])
    logger.info("Searching %d nucleotides for a %d-nucleotide pattern with %s",
                len(text), len(pattern), ", ".join(algorithms))
    recorder = RunRecorder(report_path)

    results = {}
    for name in algorithms:
        matcher = MatcherRegistry.get(name, **MatcherRegistry.matcher_params(name, conf))
        results[name] = recorder.run(matcher, text, pattern)

    recorder.save()

    if len(set(results.values())) > 1:
        raise AlgorithmMismatchError(f"Algorithms disagree: {results}")
    return results


def main(argv=None):
    """
    CLI Entry point
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        conf = load_config(args.config)
        if args.log_level:
            conf['log_level'] = args.log_level
            validate_config(conf)
    except ConfigError as e:
        print(fg.RED, f"Error: {e}", fg.RESET)
        sys.exit(1)

    logging.basicConfig(level=conf['log_level'], format="%(levelname)s %(name)s: %(message)s")

    try:
        results = run_matching(conf, args.dna_file, args.pattern_file, args.algorithms, args.report)
    except DnaMatchError as e:
        print(fg.RED, f"Error: {e}", fg.RESET)
        sys.exit(1)

    for name, matches in results.items():
        print(format_result(matches, name if len(results) > 1 else None))


if __name__ == "__main__":
    main()

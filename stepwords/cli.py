"""Command-line interface."""

import argparse
from multiprocessing import cpu_count


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="stepwords",
        description="Explore anagram ladders and suggest Stepwords starting words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Longest chain below a word
  %(prog)s chain stepword --wordlist XwiWordList.txt

  # Previous words, anagrams and next words
  %(prog)s explore powers --wordlist XwiWordList.txt

  # Suggest a 9-letter starting word with a chain of at least 6
  %(prog)s suggest --wordlist XwiWordList.txt --target-length 9 --min-chain-length 6 -v

  # Use the top 50000 wordfreq words instead of a word list file
  %(prog)s suggest --top-n 50000 --seed 7

  # Using JSON config (CLI args override JSON values)
  %(prog)s suggest --config config.json -j 4

Word list lines are formatted as word;score. Words scoring below the cutoff
are ignored.

Example config.json:
{
  "wordlist": "~/XwiWordList.txt",
  "score_cutoff": 30,
  "target_length": 10,
  "min_chain_length": 5,
  "max_attempts": 1000,
  "jobs": 4,
  "verbose": true
}
        """,
    )

    parser.add_argument(
        "command",
        choices=["chain", "explore", "suggest"],
        help="chain: longest ladder below WORD; explore: neighbors of WORD; "
        "suggest: find a starting word",
    )
    parser.add_argument("word", nargs="?", help="Word to search from")

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Word sources
    parser.add_argument("-w", "--wordlist", type=str, help="Word list file (word;score lines)")
    parser.add_argument("--top-n", type=int, help="Pull top N most common English words")
    parser.add_argument(
        "--score-cutoff", type=int, help="Minimum score for a word to be used (default: 30)"
    )

    # Search caps
    parser.add_argument(
        "--max-chain-length", type=int, help="Stop a search at this chain length (default: 15)"
    )
    parser.add_argument(
        "--max-expansions", type=int, help="Paths expanded per search (default: 1000)"
    )
    parser.add_argument(
        "--max-attempts", type=int, help="Candidates tested by suggest (default: 1000)"
    )

    # Suggestion
    parser.add_argument(
        "-l", "--target-length", type=int, help="Length of suggested words (default: 10)"
    )
    parser.add_argument(
        "-m",
        "--min-chain-length",
        type=int,
        help="Chain length a suggestion must reach (default: 5)",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducible suggestions")
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        help=f"Number of parallel workers for suggest (default: 1, max useful: {cpu_count()})",
    )

    # Output
    parser.add_argument("--report", type=str, help="Write the result as JSON to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output (implies --verbose)")

    return parser

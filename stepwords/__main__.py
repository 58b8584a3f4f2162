"""Main entry point for the stepwords package."""

import sys

from loguru import logger

from stepwords.cli import create_parser
from stepwords.core import DataSourceError, load_config
from stepwords.processing import run_command
from stepwords.utils.logging import setup_logger


def _print_startup_banner(verbose: bool) -> None:
    """Print startup banner if verbose."""
    if verbose:
        logger.info("=" * 60)
        logger.info("stepwords - Anagram Ladder Explorer")
        logger.info("=" * 60)
        logger.info("")


def _print_config_summary(config) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Command: {config.command}")
        if config.word:
            logger.info(f"  Word: {config.word}")
        if config.wordlist:
            logger.info(f"  Word list: {config.wordlist}")
        if config.top_n:
            logger.info(f"  Top N words: {config.top_n}")
        logger.info(f"  Score cutoff: {config.score_cutoff}")
        if config.command == "suggest":
            logger.info(f"  Target length: {config.target_length}")
            logger.info(f"  Min chain length: {config.min_chain_length}")
            logger.info(f"  Workers: {config.jobs}")
        logger.info("")


def _run_command_with_error_handling(config) -> None:
    """Run command with proper error handling."""
    try:
        run_command(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Completed successfully")
            logger.info("=" * 60)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Command failed")
            logger.error("=" * 60)
        raise


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    _print_startup_banner(config.verbose)
    _print_config_summary(config)

    try:
        _run_command_with_error_handling(config)
    except DataSourceError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""CLI package for the planner calendar tool."""

import logging
import sys

from planner.config import PlannerConfig

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_LOG_FORMAT = "%(levelname)s: %(message)s"


def _console_level(verbose: bool, quiet: bool) -> int:
    # Missing-holiday notices are warnings, so they show by default
    if quiet:
        return logging.ERROR
    return logging.INFO if verbose else logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: PlannerConfig | None = None
) -> None:
    """Send everything to the log file and a filtered view to stderr.

    Args:
        verbose: Show info messages on stderr
        quiet: Show only errors on stderr (wins over verbose)
        config: Where the log file lives; read from the environment if omitted
    """
    config = config or PlannerConfig.from_env()
    config.log_dir.mkdir(parents=True, exist_ok=True)

    log_file = logging.FileHandler(config.log_dir / config.log_filename)
    log_file.setLevel(logging.DEBUG)
    log_file.setFormatter(logging.Formatter(FILE_LOG_FORMAT))

    stderr = logging.StreamHandler(sys.stderr)
    stderr.setLevel(_console_level(verbose, quiet))
    stderr.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))

    # force=True closes handlers left by an earlier call
    logging.basicConfig(level=logging.DEBUG, handlers=[log_file, stderr], force=True)


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]

"""Main entry point for the square root averaging tool.

Loads the input values from configuration, averages their square roots
and prints the result.
"""

import logging
import sys

from .config import DEFAULT_LOG_FORMAT, Config, ConfigError
from .models import format_average
from .processing import aggregate


def setup_logging(config: Config) -> None:
    """Configure logging based on config settings."""
    logging_config = config.get_logging_config()

    level_name = logging_config.get("level", "INFO")
    level = getattr(logging, str(level_name).upper(), logging.INFO)

    log_format = logging_config.get("format", DEFAULT_LOG_FORMAT)

    logging.basicConfig(level=level, format=log_format)


def run(config: Config) -> int:
    """
    Average the configured values and print the result.

    Args:
        config: Application configuration

    Returns:
        Exit code (0 for success)
    """
    logger = logging.getLogger(__name__)

    values = config.get_values()
    logger.info(f"Averaging square roots of {len(values)} values")

    result = aggregate(values)
    if result is not None:
        logger.info(f"Result: {result}")

    print(format_average(result))
    return 0


def main() -> int:
    """Main application entry point."""
    try:
        # Load configuration
        config_path = sys.argv[1] if len(sys.argv) > 1 else None
        config = Config(config_path)

        # Setup logging
        setup_logging(config)

        return run(config)

    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

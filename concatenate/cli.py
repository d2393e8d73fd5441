"""CLI: python -m concatenate"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from concatenate.adapters.storage.config_loader import find_config_directory, list_config_names
from concatenate.config import SUPPORTED_SETUP_FORMATS, AppConfig, __version__
from concatenate.domain.errors import ConcatenateError
from concatenate.infrastructure.logger import ConsoleLogger
from concatenate.runner import CommandRunner
from concatenate.setup_runner import SetupRunner


def build_run_parser(config: AppConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="concatenate",
        description="Run the shell actions of a configuration in series or in parallel",
        epilog="Use `concatenate init` to create the default configurations.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help=f"Configuration name inside {config.config_dirname}/ (default: {config.default_config_name})",
    )
    parser.add_argument(
        "-i",
        "--id",
        dest="ids",
        action="append",
        default=None,
        help="Only run the action with this id (repeat the option to select several)",
    )
    parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help=f"List the configurations available in {config.config_dirname}/ and exit",
    )
    return parser


def build_init_parser(config: AppConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="concatenate init",
        description=f"Write the default configurations into {config.config_dirname}/",
    )
    parser.add_argument(
        "--format",
        dest="extension",
        choices=list(SUPPORTED_SETUP_FORMATS),
        default=config.setup_format,
        help=f"File format (default: {config.setup_format})",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    config = AppConfig.from_env()
    logger = ConsoleLogger()

    try:
        if argv and argv[0] == "init":
            args = build_init_parser(config).parse_args(argv[1:])
            SetupRunner(Path.cwd() / config.config_dirname, logger).run(args.extension)
            return 0

        args = build_run_parser(config).parse_args(argv)
        if args.list:
            names = list_config_names(find_config_directory(dirname=config.config_dirname))
            if not names:
                logger.warn("No configuration found, run `concatenate init` first")
            for name in names:
                print(name)
            return 0

        runner = CommandRunner(config=config, logger=logger)
        asyncio.run(runner.run(args.config, args.ids or []))
        return 0
    except ConcatenateError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())

"""
setup-air CLI argument parser.

This module implements the command-line interface for setup-air using argparse.
"""

import argparse
import importlib
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

# Get version from package
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("setup-air")
except PackageNotFoundError:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """setup-air command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="setup-air",
            description="setup-air - Install the Air formatter into a tool cache",
            epilog='Use "setup-air COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"setup-air {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./setup-air.yaml)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_install_command(subparsers)
        self._add_resolve_command(subparsers)
        self._add_cache_command(subparsers)

        return parser

    @staticmethod
    def _add_version_options(parser):
        parser.add_argument(
            "--air-version",
            metavar="SPEC",
            help='Version to install: "latest", an explicit version or a range '
            "(e.g. 0.4.x) [default: latest]",
        )
        parser.add_argument(
            "--github-token",
            metavar="TOKEN",
            help="GitHub token for release queries and downloads "
            "[default: $GITHUB_TOKEN]",
        )

    def _add_install_command(self, subparsers):
        """Add 'install' subcommand."""
        parser = subparsers.add_parser(
            "install",
            help="Install Air into the tool cache",
            description="Resolve, download and cache Air, then expose it to "
            "later GitHub Actions steps",
        )
        self._add_version_options(parser)
        parser.add_argument(
            "--platform",
            metavar="PLATFORM",
            help="Target platform tag (e.g. unknown-linux-gnu) [default: detected]",
        )
        parser.add_argument(
            "--arch",
            metavar="ARCH",
            help="Target architecture tag (e.g. x86_64) [default: detected]",
        )
        parser.add_argument(
            "--tool-cache",
            metavar="DIR",
            help="Tool cache directory [default: $RUNNER_TOOL_CACHE]",
        )
        parser.add_argument(
            "--no-actions",
            action="store_true",
            help="Do not write GITHUB_PATH / GITHUB_OUTPUT",
        )

    def _add_resolve_command(self, subparsers):
        """Add 'resolve' subcommand."""
        parser = subparsers.add_parser(
            "resolve",
            help="Print the release a version specifier resolves to",
            description="Resolve a version specifier against published releases",
        )
        self._add_version_options(parser)

    def _add_cache_command(self, subparsers):
        """Add 'cache' subcommand."""
        parser = subparsers.add_parser(
            "cache",
            help="Inspect the tool cache",
            description="Inspect Air versions in the tool cache",
        )
        parser.add_argument(
            "cache_command",
            choices=["list"],
            metavar="ACTION",
            help="Cache action (list)",
        )
        parser.add_argument(
            "--arch",
            metavar="ARCH",
            help="Architecture tag [default: detected]",
        )
        parser.add_argument(
            "--tool-cache",
            metavar="DIR",
            help="Tool cache directory [default: $RUNNER_TOOL_CACHE]",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (default: sys.argv[1:])

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (default: sys.argv[1:])

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        # Configure logging
        self._configure_logging(parsed_args)

        # Check if command specified
        if not parsed_args.command:
            self.parser.print_help()
            return 1

        # Dispatch to command handler
        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "install": "setup_air.cli.commands.install",
            "resolve": "setup_air.cli.commands.resolve",
            "cache": "setup_air.cli.commands.cache",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()

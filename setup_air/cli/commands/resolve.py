"""
Resolve command implementation.

Prints the release tag a version specifier resolves to.
"""

import logging

from setup_air.cli.utils import (
    build_releases_client,
    get_github_token,
    get_version_input,
    load_config_for_args,
    print_error,
)
from setup_air.core.exceptions import VersionNotFoundError
from setup_air.install.resolver import resolve_version

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the resolve command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = load_config_for_args(args)
    version_input = get_version_input(args, config)

    try:
        version = resolve_version(
            version_input,
            get_github_token(args),
            client=build_releases_client(args, config),
        )
    except VersionNotFoundError as e:
        print_error(str(e))
        return 1

    print(version)
    return 0

"""
Install command implementation.

Resolves, downloads and caches Air, then exposes it to later workflow steps.
"""

import logging

from setup_air.cli.utils import (
    build_releases_client,
    build_tool_cache,
    get_github_token,
    get_version_input,
    load_config_for_args,
    print_error,
)
from setup_air.constants import OUTPUT_VERSION
from setup_air.core.actions import add_path, set_output
from setup_air.core.exceptions import VersionNotFoundError
from setup_air.install.setup import setup_air

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the install command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = load_config_for_args(args)
    version_input = get_version_input(args, config)
    logger.debug(f"Requested Air version: {version_input}")

    try:
        result = setup_air(
            version_input,
            get_github_token(args),
            platform=args.platform,
            arch=args.arch,
            tool_cache=build_tool_cache(args, config),
            client=build_releases_client(args, config),
        )
    except VersionNotFoundError as e:
        print_error(
            str(e),
            "Published releases: https://github.com/posit-dev/air/releases",
        )
        return 1

    if not args.no_actions:
        add_path(result.install_path)
        set_output(OUTPUT_VERSION, result.version)

    source = "tool cache" if result.was_cached else "download"
    logger.info(f"Air {result.version} ready at {result.install_path} ({source})")
    print(result.install_path)

    return 0

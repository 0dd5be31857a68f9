"""
Cache command implementation.

Lists the Air versions available in the tool cache.
"""

import logging

from setup_air.cli.utils import build_tool_cache, load_config_for_args
from setup_air.constants import TOOL_CACHE_NAME
from setup_air.core.platform import get_arch
from setup_air.core.versions import sort_versions

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the cache command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = load_config_for_args(args)
    tool_cache = build_tool_cache(args, config)
    arch = args.arch or get_arch()

    versions = sort_versions(tool_cache.find_all_versions(TOOL_CACHE_NAME, arch))
    if not versions:
        logger.info(f"No cached Air versions for {arch} in {tool_cache.cache_root}")
        return 0

    for version in versions:
        print(f"{version}\t{tool_cache.find(TOOL_CACHE_NAME, version, arch)}")

    return 0

"""
Shared utilities for CLI commands.

Settings come from four places, highest priority first: command-line flags,
environment variables, the setup-air.yaml config file, built-in defaults.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from setup_air.constants import CONFIG_FILE_NAME
from setup_air.core.github import GitHubReleasesClient
from setup_air.core.tool_cache import ToolCache
from setup_air.install.resolver import LATEST

logger = logging.getLogger(__name__)

CONFIG_KEYS = ("version", "tool_cache", "temp_dir", "api_url")


# ============================================================================
# Configuration Management
# ============================================================================


def load_yaml_config(config_file: Path, required: bool = False) -> Dict[str, Any]:
    """
    Load and parse a YAML configuration file.

    Args:
        config_file: Path to YAML configuration file
        required: If True, raise error if file doesn't exist

    Returns:
        Configuration dictionary (empty dict if file doesn't exist and not required)

    Raises:
        FileNotFoundError: If required=True and file doesn't exist
        ValueError: If YAML parsing fails or the document is not a mapping

    Example:
        >>> config = load_yaml_config(Path("setup-air.yaml"))
        >>> config.get("version", "latest")
    """
    if not config_file.exists():
        if required:
            raise FileNotFoundError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML: {e}")
        raise ValueError(f"Invalid YAML in {config_file}: {e}") from e

    config = config or {}
    if not isinstance(config, dict):
        raise ValueError(f"Invalid configuration in {config_file}: expected a mapping")

    unknown = sorted(set(config) - set(CONFIG_KEYS))
    if unknown:
        logger.warning(f"Ignoring unknown configuration keys: {', '.join(unknown)}")

    return config


def load_config_for_args(args) -> Dict[str, Any]:
    """
    Load the config file named by --config, or ./setup-air.yaml if present.
    """
    config_path = getattr(args, "config", None)
    if config_path:
        return load_yaml_config(Path(config_path), required=True)
    return load_yaml_config(Path.cwd() / CONFIG_FILE_NAME)


def resolve_setting(
    cli_value: Optional[str],
    env_var: Optional[str],
    config: Dict[str, Any],
    key: str,
    default: Optional[str] = None,
) -> Optional[str]:
    """
    Pick a setting by priority: flag, environment, config file, default.

    Example:
        >>> resolve_setting(None, "RUNNER_TOOL_CACHE", {"tool_cache": "/cache"}, "tool_cache")
        '/cache'  # when RUNNER_TOOL_CACHE is unset
    """
    if cli_value:
        return cli_value
    if env_var and os.environ.get(env_var):
        return os.environ[env_var]
    value = config.get(key)
    if value is not None:
        return str(value)
    return default


def get_github_token(args) -> Optional[str]:
    """Token from --github-token, else GITHUB_TOKEN."""
    token = getattr(args, "github_token", None) or os.environ.get("GITHUB_TOKEN")
    if not token:
        logger.debug("No GitHub token provided; API requests are rate limited")
    return token


# ============================================================================
# User Interface / Output Formatting
# ============================================================================


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)


# ============================================================================
# Collaborator Construction
# ============================================================================


def build_tool_cache(args, config: Dict[str, Any]) -> ToolCache:
    """Create the tool cache from --tool-cache, the environment and config."""
    cache_root = resolve_setting(
        getattr(args, "tool_cache", None), "RUNNER_TOOL_CACHE", config, "tool_cache"
    )
    temp_root = resolve_setting(None, "RUNNER_TEMP", config, "temp_dir")
    return ToolCache(
        cache_root=Path(cache_root) if cache_root else None,
        temp_root=Path(temp_root) if temp_root else None,
    )


def build_releases_client(args, config: Dict[str, Any]) -> GitHubReleasesClient:
    """Create the releases API client from the token and API URL settings."""
    api_url = resolve_setting(None, "GITHUB_API_URL", config, "api_url")
    return GitHubReleasesClient(token=get_github_token(args), api_url=api_url)


def get_version_input(args, config: Dict[str, Any]) -> str:
    """Version specifier from --air-version, config file, or 'latest'."""
    return resolve_setting(
        getattr(args, "air_version", None), None, config, "version", LATEST
    )

"""
Fixed identifiers for the Air release host and tool cache.
"""

OWNER = "posit-dev"
REPO = "air"
TOOL_CACHE_NAME = "air"

GITHUB_HOST = "https://github.com"
DEFAULT_API_URL = "https://api.github.com"

# Platform that ships .zip artifacts instead of .tar.gz
WINDOWS_PLATFORM = "pc-windows-msvc"

OUTPUT_VERSION = "air-version"
CONFIG_FILE_NAME = "setup-air.yaml"

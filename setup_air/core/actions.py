"""
GitHub Actions runner integration.

Writes to the runner's environment files so later workflow steps see the
installed tool on PATH and the resolved version as a step output. When the
environment files are not set, only PATH of this process changes.
"""

import logging
import os
import uuid
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


def _append(env_var: str, text: str) -> Optional[Path]:
    file_path = os.environ.get(env_var)
    if not file_path:
        logger.debug(f"{env_var} not set, skipping")
        return None

    path = Path(file_path)
    with open(path, "a", encoding="utf-8") as f:
        f.write(text)
    return path


def add_path(directory: Union[str, Path]) -> bool:
    """
    Prepend a directory to PATH for this process and later workflow steps.

    Returns:
        True if the directory was written to GITHUB_PATH
    """
    directory = str(directory)
    os.environ["PATH"] = os.pathsep.join([directory, os.environ.get("PATH", "")])

    written = _append("GITHUB_PATH", f"{directory}\n")
    if written:
        logger.info(f"Added {directory} to the path")
    return written is not None


def set_output(name: str, value: str) -> bool:
    """
    Set a step output.

    Multi-line values use the heredoc form of the output file.

    Returns:
        True if the output was written to GITHUB_OUTPUT
    """
    if "\n" in value:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        text = f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
    else:
        text = f"{name}={value}\n"

    written = _append("GITHUB_OUTPUT", text)
    if written:
        logger.debug(f"Set output {name}={value}")
    return written is not None


__all__ = ["add_path", "set_output"]

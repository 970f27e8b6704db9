"""Output directory assembly.

This module handles:
- Creating the output directory if it is missing
- Copying the project manifest into it
- Writing the static launcher script

Only the manifest and the launcher are managed here. Anything else in the
output directory (e.g. the compiled server tree) is left untouched.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

# Server entry point, relative to the output directory
SERVER_ENTRY = "./server/index.js"
LAUNCHER_MODE = 0o755

LAUNCHER_SCRIPT = f"""#!/usr/bin/env node
require('{SERVER_ENTRY}');
"""


class BundleError(Exception):
    """Raised when assembling the output directory fails."""

    def __init__(self, message: str, code: str = "bundle_error") -> None:
        super().__init__(message)
        self.code = code


def ensure_dist_dir(dist_dir: Path) -> Path:
    """Create the output directory if absent.

    An existing directory is reused as is, whatever it contains.

    Args:
        dist_dir: Output directory path.

    Returns:
        The output directory path.

    Raises:
        BundleError: If the directory cannot be created.
    """
    try:
        dist_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise BundleError(
            f"Failed to create output directory {dist_dir}: {e}",
            code="dist_dir_error",
        ) from e
    logger.debug("Output directory ready: %s", dist_dir)
    return dist_dir


def copy_manifest(manifest_path: Path, dist_dir: Path) -> Path:
    """Copy the manifest file into the output directory, overwriting.

    Args:
        manifest_path: Source manifest file.
        dist_dir: Output directory.

    Returns:
        Path of the copied manifest.

    Raises:
        BundleError: If the manifest is missing or the copy fails.
    """
    if not manifest_path.is_file():
        raise BundleError(
            f"Manifest not found: {manifest_path}",
            code="manifest_missing",
        )

    dest = dist_dir / manifest_path.name
    try:
        shutil.copyfile(manifest_path, dest)
    except OSError as e:
        raise BundleError(
            f"Failed to copy {manifest_path} to {dest}: {e}",
            code="manifest_copy_error",
        ) from e

    logger.info("Copied manifest to %s", dest)
    return dest


def write_launcher(dist_dir: Path, name: str = "start.js") -> Path:
    """Write the launcher script into the output directory, overwriting.

    Args:
        dist_dir: Output directory.
        name: Launcher file name.

    Returns:
        Path of the written launcher.

    Raises:
        BundleError: If the file cannot be written.
    """
    dest = dist_dir / name
    try:
        dest.write_text(LAUNCHER_SCRIPT, encoding="utf-8", newline="")
        dest.chmod(LAUNCHER_MODE)
    except OSError as e:
        raise BundleError(
            f"Failed to write launcher {dest}: {e}",
            code="launcher_write_error",
        ) from e

    logger.info("Wrote launcher to %s", dest)
    return dest


__all__ = [
    "LAUNCHER_MODE",
    "LAUNCHER_SCRIPT",
    "SERVER_ENTRY",
    "BundleError",
    "copy_manifest",
    "ensure_dist_dir",
    "write_launcher",
]

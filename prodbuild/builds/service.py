"""Build service module.

This module provides the high-level build API:
- build_production(): run client and server builds, then assemble the
  output directory

Steps run strictly in order. The first failure propagates and nothing
after it runs; partial output is left in place.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from prodbuild.builds.bundle import copy_manifest, ensure_dist_dir, write_launcher
from prodbuild.builds.runner import run_step
from prodbuild.config import get_settings
from prodbuild.types import BuildPhase, BuildSummary

if TYPE_CHECKING:
    from prodbuild.config import Settings

logger = logging.getLogger(__name__)

StatusReporter = Callable[[str], None]


def build_production(
    settings: Settings | None = None,
    report: StatusReporter | None = None,
) -> BuildSummary:
    """Run a full production build.

    Args:
        settings: Settings to use; loaded from environment if not provided.
        report: Callback receiving human-readable status lines.
            Defaults to logging them at INFO.

    Returns:
        BuildSummary describing the assembled output directory.

    Raises:
        StepExecutionError: If the client or server build fails.
        BundleError: If assembling the output directory fails.
    """
    if settings is None:
        settings = get_settings()
    if report is None:
        report = logger.info

    project_root = settings.project_root
    started_at = datetime.now(timezone.utc)

    report("Creating production build...")

    report("Building client...")
    client = run_step(BuildPhase.CLIENT.value, settings.client_command, project_root)

    report("Building server...")
    server = run_step(BuildPhase.SERVER.value, settings.server_command, project_root)

    report("Assembling output directory...")
    dist_dir = ensure_dist_dir(settings.dist_dir)
    manifest_path = copy_manifest(settings.manifest_path, dist_dir)
    launcher_path = write_launcher(dist_dir, settings.launcher_name)

    report("Build completed successfully!")

    return BuildSummary(
        dist_dir=dist_dir,
        manifest_path=manifest_path,
        launcher_path=launcher_path,
        started_at=started_at,
        finished_at=datetime.now(timezone.utc),
        steps=[client, server],
    )


__all__ = ["StatusReporter", "build_production"]

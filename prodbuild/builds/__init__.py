"""Build orchestration module.

This module handles:
- Running the client and server sub-builds
- Assembling the output directory (manifest copy, launcher script)
- Sequencing both into a single production build
"""

from prodbuild.builds.bundle import BundleError
from prodbuild.builds.runner import StepExecutionError

__all__ = ["BundleError", "StepExecutionError"]

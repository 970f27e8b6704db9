"""Allow running as ``python -m prodbuild``."""

from prodbuild.cli import app

app(prog_name="prodbuild")

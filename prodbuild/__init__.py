"""prodbuild - Production build orchestration for Node client/server projects.

This package runs the client and server sub-builds and assembles a
deploy-ready output directory with the manifest and a launcher script.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

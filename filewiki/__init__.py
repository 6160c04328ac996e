"""FileWiki — versioned Markdown pages behind a small HTTP API."""

from filewiki._version import __version__

__all__ = ["__version__"]

"""FileWiki version string.

Installed: the ``filewiki`` distribution's metadata.  Source checkout: the
``version`` line of the neighbouring pyproject.toml.  Anything else: 0.0.0.
"""
from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def _read_version() -> str:
    try:
        return version("filewiki")
    except PackageNotFoundError:
        pass
    try:
        text = _PYPROJECT.read_text(encoding="utf-8")
    except OSError:
        return "0.0.0"
    match = re.search(r'^version\s*=\s*"([^"]+)"', text, re.MULTILINE)
    return match.group(1) if match else "0.0.0"


__version__: str = _read_version()

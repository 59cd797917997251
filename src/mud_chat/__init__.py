"""PipeWorks MUD Chat — translatable chat components.

Formatted-text component trees for MUD chat output.  A component renders
either to plain text or to *legacy* text (a flat string with inline
``§`` style markers), and translatable components look their text up by
key in a locale dictionary, substituting argument components into the
template's placeholders.

Version Management
------------------
``__version__`` is read from the installed package metadata at import time.
The single source of truth is the ``version`` field in ``pyproject.toml``.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("mud_chat")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

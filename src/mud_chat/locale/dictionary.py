"""Locale dictionaries — translation key → template string.

Rendering only needs one capability from a locale: :meth:`lookup`, which
returns the template for a key or ``None`` when the locale has no entry.
Anything with that method satisfies :class:`LocaleDictionary`.

Files
-----
:func:`load_locale_dictionary` reads a flat key → template mapping from

- ``.json``: a single JSON object;
- ``.yaml`` / ``.yml``: a single YAML mapping;
- ``.lang`` / ``.properties``: ``key=value`` lines, ``#``/``!`` comments,
  no escape processing.

Values must be strings.  A missing file raises :exc:`FileNotFoundError`;
malformed content raises :exc:`LocaleLoadError`.

Process-wide default
--------------------
Components that are not given a dictionary explicitly render against
:func:`get_default_dictionary`.  It is loaded lazily on first use from the
configured ``locale.path``, or from the locale bundled with the package
for ``locale.name``, and is read-only afterwards.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Protocol, runtime_checkable

import yaml

from mud_chat.config import config

logger = logging.getLogger(__name__)

#: Locale shipped with the package and used when nothing else is available.
BASELINE_LOCALE = "en_US"

_LANG_SUFFIXES = frozenset({".lang", ".properties"})
_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class LocaleLoadError(ValueError):
    """A locale file exists but its content is not a flat string mapping."""


@runtime_checkable
class LocaleDictionary(Protocol):
    """Read-only key → template lookup."""

    def lookup(self, key: str) -> str | None:
        """Return the template for *key*, or ``None`` if there is no entry."""
        ...


class MappingLocaleDictionary:
    """A :class:`LocaleDictionary` backed by an immutable in-memory mapping.

    Attributes:
        locale: Locale name (e.g. ``"en_US"``), informational.
    """

    def __init__(self, entries: Mapping[str, str], *, locale: str = BASELINE_LOCALE) -> None:
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries))
        self.locale = locale

    def lookup(self, key: str) -> str | None:
        return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MappingLocaleDictionary(locale={self.locale!r}, entries={len(self._entries)})"


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_locale_dictionary(path: Path, *, locale: str | None = None) -> MappingLocaleDictionary:
    """Load a locale file into a :class:`MappingLocaleDictionary`.

    Args:
        path:   Locale file; the format is chosen by suffix (JSON is assumed
                for unknown suffixes).
        locale: Locale name; defaults to the file's stem (``en_US.json`` →
                ``"en_US"``).

    Raises:
        FileNotFoundError: If *path* does not exist.
        LocaleLoadError:   If the content is not a flat mapping of strings.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Locale file not found: {path}")

    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix in _LANG_SUFFIXES:
        entries = _parse_lang(text, source=str(path))
    elif suffix in _YAML_SUFFIXES:
        entries = _parse_yaml(text, source=str(path))
    else:
        entries = _parse_json(text, source=str(path))

    name = locale or path.stem
    logger.info("Loaded locale %s from %s (%d keys)", name, path, len(entries))
    return MappingLocaleDictionary(entries, locale=name)


def load_bundled_dictionary(name: str = BASELINE_LOCALE) -> MappingLocaleDictionary:
    """Load a locale shipped in ``mud_chat/locale/locales/``.

    Raises:
        FileNotFoundError: If no bundled locale called *name* exists.
    """
    resource = resources.files("mud_chat.locale") / "locales" / f"{name}.json"
    if not resource.is_file():
        raise FileNotFoundError(f"No bundled locale named {name!r}")
    entries = _parse_json(resource.read_text(encoding="utf-8"), source=f"bundled:{name}")
    return MappingLocaleDictionary(entries, locale=name)


def _validated(raw: object, *, source: str) -> dict[str, str]:
    if not isinstance(raw, dict):
        raise LocaleLoadError(f"{source}: locale must be a mapping at the top level.")
    entries: dict[str, str] = {}
    for key, value in raw.items():
        if not isinstance(value, str):
            raise LocaleLoadError(
                f"{source}: value for {key!r} must be a string, got {type(value).__name__}."
            )
        entries[str(key)] = value
    return entries


def _parse_json(text: str, *, source: str) -> dict[str, str]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LocaleLoadError(f"{source}: invalid JSON: {exc}") from exc
    return _validated(raw, source=source)


def _parse_yaml(text: str, *, source: str) -> dict[str, str]:
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise LocaleLoadError(f"{source}: invalid YAML: {exc}") from exc
    if raw is None:
        return {}
    return _validated(raw, source=source)


def _parse_lang(text: str, *, source: str) -> dict[str, str]:
    entries: dict[str, str] = {}
    for line_no, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped[0] in "#!":
            continue
        key, sep, value = line.partition("=")
        if not sep or not key.strip():
            raise LocaleLoadError(f"{source}:{line_no}: expected 'key=value', got {line!r}.")
        entries[key.strip()] = value
    return entries


# ---------------------------------------------------------------------------
# Process-wide default
# ---------------------------------------------------------------------------

_default_dictionary: LocaleDictionary | None = None


def _load_configured() -> LocaleDictionary:
    locale_path = config.locale.absolute_path
    if locale_path is not None:
        if locale_path.exists():
            return load_locale_dictionary(locale_path, locale=config.locale.name)
        logger.warning(
            "Configured locale file %s does not exist; using bundled locale", locale_path
        )

    try:
        return load_bundled_dictionary(config.locale.name)
    except FileNotFoundError:
        logger.warning(
            "No bundled locale %r; falling back to %s", config.locale.name, BASELINE_LOCALE
        )
        return load_bundled_dictionary(BASELINE_LOCALE)


def get_default_dictionary() -> LocaleDictionary:
    """Return the process-wide locale dictionary, loading it on first use."""
    global _default_dictionary
    if _default_dictionary is None:
        _default_dictionary = _load_configured()
    return _default_dictionary


def set_default_dictionary(dictionary: LocaleDictionary | None) -> None:
    """Replace the process-wide dictionary (``None`` reloads it lazily from config)."""
    global _default_dictionary
    _default_dictionary = dictionary


class use_locale_dictionary:
    """
    Context manager that installs a dictionary as the process-wide default.

    Usage:
        from mud_chat.locale import MappingLocaleDictionary, use_locale_dictionary

        def test_greeting():
            with use_locale_dictionary(MappingLocaleDictionary({"greet": "Hi %s"})):
                assert TranslatableComponent("greet", "Mira").to_plain_text() == "Hi Mira"

    Args:
        dictionary: Dictionary to use while the block runs.
    """

    def __init__(self, dictionary: LocaleDictionary):
        self.dictionary = dictionary
        self.original: LocaleDictionary | None = None

    def __enter__(self) -> LocaleDictionary:
        """Install the dictionary."""
        self.original = _default_dictionary
        set_default_dictionary(self.dictionary)
        return self.dictionary

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Restore whatever was installed before."""
        set_default_dictionary(self.original)
        return None

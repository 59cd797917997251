"""Locale dictionaries consumed by translatable chat components."""

from mud_chat.locale.dictionary import (
    LocaleDictionary,
    LocaleLoadError,
    MappingLocaleDictionary,
    get_default_dictionary,
    load_bundled_dictionary,
    load_locale_dictionary,
    set_default_dictionary,
    use_locale_dictionary,
)

__all__ = [
    "LocaleDictionary",
    "LocaleLoadError",
    "MappingLocaleDictionary",
    "get_default_dictionary",
    "load_bundled_dictionary",
    "load_locale_dictionary",
    "set_default_dictionary",
    "use_locale_dictionary",
]

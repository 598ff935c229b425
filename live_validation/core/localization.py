"""
Translated text for validation feedback.

Rule texts and descriptions are plain callables taking the evaluation context,
so translation is just one way of writing them. `trans_text` builds such a
callable from a translation key, resolved when the validator runs (i.e. in the
locale active at that moment, not when the rule set was declared).

Translations are JSON files named `<locale>.json` inside `LOCALE_PATH`:

    {"password": {"too_short": "Use at least {min} characters"}}

Usage:
    from live_validation.core.localization import __, trans_text, set_locale

    __('password.too_short', {'min': 8})
    Rule(key="length", test=..., invalid=trans_text('password.too_short', {'min': 8}))
    set_locale('es')
"""

import json
import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

from live_validation import config

logger = logging.getLogger(__name__)

_translations: Dict[str, Dict[str, Any]] = {}
_locale_path_override: Optional[str] = None
_current_locale: ContextVar[Optional[str]] = ContextVar('locale', default=None)

Parameters = Union[Mapping[str, Any], Callable[[Any], Mapping[str, Any]]]


def _get_nested(data: Dict[str, Any], key: str) -> Optional[Any]:
    current: Any = data
    for part in key.split('.'):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def _locale_dir() -> Path:
    return Path(_locale_path_override or config.locale_path())


def _load_locale(locale: str) -> Dict[str, Any]:
    """Read `<locale>.json` once; missing or unreadable files count as empty."""
    if locale in _translations:
        return _translations[locale]

    locale_file = _locale_dir() / f"{locale}.json"
    translations: Dict[str, Any] = {}

    if locale_file.exists():
        try:
            with locale_file.open(encoding='utf-8') as f:
                translations = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"[LOCALIZATION] Could not read `{locale_file}`: {e}")

    _translations[locale] = translations
    return translations


def __(key: str, parameters: Optional[Mapping[str, Any]] = None,
       default: Optional[str] = None, locale: Optional[str] = None) -> str:
    """
    Translate `key` in the current (or given) locale.

    Lookup order: requested locale, fallback locale, `default`, the key itself.
    `{name}` placeholders are filled from `parameters`; a template that does not
    match its parameters is returned unformatted.
    """
    current_locale = locale or get_locale()
    fallback_locale = config.locale_fallback()

    translation = _get_nested(_load_locale(current_locale), key)
    if translation is None and current_locale != fallback_locale:
        translation = _get_nested(_load_locale(fallback_locale), key)
    if translation is None:
        translation = default or key

    if parameters and isinstance(translation, str):
        try:
            translation = translation.format(**parameters)
        except (KeyError, IndexError, ValueError):
            logger.debug(f"[LOCALIZATION] Parameters {dict(parameters)} do not fit `{key}`")

    return str(translation)


trans = __


def trans_choice(key: str, count: int, parameters: Optional[Mapping[str, Any]] = None,
                 locale: Optional[str] = None) -> str:
    """Pick `<key>_plural` when `count != 1` and such a translation exists, else `key`."""
    params = dict(parameters or {})
    params['count'] = count

    if count != 1:
        plural_key = f"{key}_plural"
        plural = __(plural_key, params, locale=locale)
        if plural != plural_key:
            return plural

    return __(key, params, locale=locale)


def trans_text(key: str, parameters: Optional[Parameters] = None,
               default: Optional[str] = None) -> Callable[[Any], str]:
    """
    Text provider for `Rule.valid_text`, `Rule.invalid_text` or `RuleSet.description`.

    `parameters` may be a mapping or a callable receiving the evaluation context
    and returning one, so messages can quote values the rules compare against.
    """
    def provider(context: Any) -> str:
        params = parameters(context) if callable(parameters) else parameters
        return __(key, params, default=default)

    provider.__qualname__ = f"trans_text({key!r})"
    return provider


def set_locale(locale: Optional[str]) -> None:
    """Switch the locale for the current context; None goes back to `LOCALE_DEFAULT`."""
    _current_locale.set(locale)


def get_locale() -> str:
    return _current_locale.get() or config.locale_default()


def clear_cache() -> None:
    _translations.clear()


def set_locale_path(path: Optional[str]) -> None:
    """Override `LOCALE_PATH` at runtime (None restores the environment value)."""
    global _locale_path_override
    _locale_path_override = path
    clear_cache()


__all__ = [
    "__",
    "trans",
    "trans_choice",
    "trans_text",
    "set_locale",
    "get_locale",
    "clear_cache",
    "set_locale_path",
]

"""
Culture-aware value formatting.

Why:
    Bound values are redisplayed in form controls; a decimal bound under
    ``de-DE`` must render as ``1234,5`` while ``en-GB`` renders ``1234.5``.
    The culture is always passed explicitly; the process locale is never
    consulted.

Behavior:
    - ``None`` formats to ``None`` so callers can omit the attribute.
    - Numbers: no grouping separators, no precision loss.
    - Dates, datetimes, times: Babel's ``short`` format unless a pattern is
      given.
    - Enums: member name. Bools: ``True``/``False``. Strings pass through.
"""

from __future__ import annotations

import datetime as dt
import decimal
import functools
import numbers
from enum import Enum
from typing import Any, Optional

from babel import Locale, UnknownLocaleError
from babel.dates import format_date, format_datetime, format_time
from babel.numbers import format_decimal

from .exceptions import ConfigurationError
from .ports import Culture

# Number pattern without grouping; precision follows the value.
_NUMBER_PATTERN = "0.###"

DEFAULT_CULTURE = "en-GB"

# HTML number inputs always expect a dot decimal separator.
INVARIANT_CULTURE = "en"


@functools.lru_cache(maxsize=64)
def _parse_locale(tag: str) -> Locale:
    return Locale.parse(tag.replace("-", "_"))


def resolve_culture(culture: Culture) -> Locale:
    """Return a Babel ``Locale`` for ``"en-GB"``, ``"de_DE"`` or a Locale."""
    if isinstance(culture, Locale):
        return culture
    if not culture or not isinstance(culture, str):
        raise ConfigurationError(f"Invalid culture: {culture!r}")
    try:
        return _parse_locale(culture.strip())
    except (ValueError, UnknownLocaleError) as exc:
        raise ConfigurationError(f"Unknown culture: {culture!r}") from exc


def culture_tag(culture: Culture) -> str:
    """BCP 47 style tag, e.g. ``en-GB``."""
    return str(resolve_culture(culture)).replace("_", "-")


def format_value(value: Any, culture: Culture, fmt: Optional[str] = None) -> Optional[str]:
    """Format ``value`` for display in the given culture.

    Parameters:
        value: Bound property value.
        culture: Culture tag or Babel Locale.
        fmt: Optional Babel number or date pattern (e.g. ``"0.00"``,
            ``"yyyy-MM-dd"``).
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, Enum):
        return value.name

    locale = resolve_culture(culture)
    # datetime is a subclass of date
    if isinstance(value, dt.datetime):
        return format_datetime(value, format=fmt or "short", locale=locale)
    if isinstance(value, dt.date):
        return format_date(value, format=fmt or "short", locale=locale)
    if isinstance(value, dt.time):
        return format_time(value, format=fmt or "short", locale=locale)
    if isinstance(value, (numbers.Integral, numbers.Real, decimal.Decimal)):
        return format_decimal(
            value,
            format=fmt or _NUMBER_PATTERN,
            locale=locale,
            decimal_quantization=fmt is not None,
        )
    return str(value)


# Scalar types whose no-argument constructor yields the "empty" value.
_DEFAULTABLE_TYPES = (bool, int, float, complex, decimal.Decimal, str, bytes, dt.time, dt.timedelta)


def is_default_value(value: Any) -> bool:
    """True for ``None`` and for scalars equal to their type's default.

    Only the exact scalar types above are compared; dates, enums, models and
    other objects are never treated as a default.
    """
    if value is None:
        return True
    value_type = type(value)
    if value_type not in _DEFAULTABLE_TYPES:
        return False
    return value == value_type()


__all__ = [
    "DEFAULT_CULTURE",
    "INVARIANT_CULTURE",
    "resolve_culture",
    "culture_tag",
    "format_value",
    "is_default_value",
]

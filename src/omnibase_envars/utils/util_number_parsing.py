# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Culture-aware numeric grammar.

Environment values are normalized to the canonical ASCII form Python's
``int``, ``float`` and ``Decimal`` constructors accept. The grammar is
deliberately narrower than those constructors: underscores, hexadecimal and
the ``inf``/``nan`` spellings Python would accept are all rejected, and the
culture decides which characters separate groups and decimals.

Grammar (after stripping surrounding whitespace)::

    number   := [sign] integral [decimal digits*] [exponent]
    integral := digit{1,3} (group digit{3})+ | digit*
    exponent := ("e" | "E") [sign] digit+

Group separators are accepted only in well-formed groups of three, so
``"3,14"`` is not a number under the invariant culture while ``"1,000.5"``
is. Integers accept neither a decimal part nor an exponent.

Example:
    >>> from omnibase_envars.models import ModelCulture
    >>> normalize_float("1.234,5", ModelCulture.from_locale("de_DE"))
    '1234.5'
    >>> normalize_integer("-42", ModelCulture.invariant())
    '-42'
"""

from __future__ import annotations

import functools
import math
import re

from omnibase_envars.models.model_culture import ModelCulture

_ASCII_SIGNS = ("+", "-")


@functools.lru_cache(maxsize=64)
def _number_pattern(
    group_symbol: str,
    decimal_symbol: str,
    allow_fraction: bool,
) -> re.Pattern[str]:
    group = re.escape(group_symbol)
    integral = rf"(?P<int>[0-9]{{1,3}}(?:{group}[0-9]{{3}})+|[0-9]*)"
    body = integral
    if allow_fraction:
        decimal = re.escape(decimal_symbol)
        body += rf"(?:{decimal}(?P<frac>[0-9]*))?(?:[eE](?P<exp>[+-]?[0-9]+))?"
    return re.compile(rf"(?P<sign>[+-])?{body}")


def _normalize_sign(text: str, culture: ModelCulture) -> str:
    if not text.startswith(_ASCII_SIGNS):
        if text.startswith(culture.minus_sign):
            return "-" + text[len(culture.minus_sign) :]
        if text.startswith(culture.plus_sign):
            return "+" + text[len(culture.plus_sign) :]
    return text


def _normalize(value: str, culture: ModelCulture, *, allow_fraction: bool) -> str:
    text = _normalize_sign(value.strip(), culture)
    pattern = _number_pattern(
        culture.group_symbol, culture.decimal_symbol, allow_fraction
    )
    match = pattern.fullmatch(text)
    if match is None:
        raise ValueError(f"'{value}' does not match the numeric grammar")

    integral = match.group("int").replace(culture.group_symbol, "")
    fraction = match.group("frac") if allow_fraction else None
    exponent = match.group("exp") if allow_fraction else None
    if not integral and not fraction:
        raise ValueError(f"'{value}' contains no digits")

    canonical = (match.group("sign") or "") + (integral or "0")
    if fraction:
        canonical += "." + fraction
    if exponent:
        canonical += "e" + exponent
    return canonical


def normalize_integer(value: str, culture: ModelCulture) -> str:
    """Return the canonical ``[-+]digits`` form of an integer string.

    Raises:
        ValueError: If ``value`` is not an integer under ``culture``.
    """
    return _normalize(value, culture, allow_fraction=False)


def normalize_float(value: str, culture: ModelCulture) -> str:
    """Return the canonical ``[-+]digits[.digits][e[-+]digits]`` form.

    Raises:
        ValueError: If ``value`` is not a number under ``culture``.
    """
    return _normalize(value, culture, allow_fraction=True)


def match_special_float(value: str, culture: ModelCulture) -> float | None:
    """Map the culture's (or the invariant) infinity/NaN tokens to floats.

    Matching is case-insensitive. Returns None when ``value`` is not a
    special token.
    """
    text = value.strip().casefold()
    if not text:
        return None
    invariant = ModelCulture.invariant()
    for candidate in {culture, invariant}:
        if text == candidate.nan_symbol.casefold():
            return math.nan
        if text == candidate.negative_infinity_symbol.casefold():
            return -math.inf
        if text in (
            candidate.positive_infinity_symbol.casefold(),
            (candidate.plus_sign + candidate.positive_infinity_symbol).casefold(),
        ):
            return math.inf
    return None


__all__ = [
    "match_special_float",
    "normalize_float",
    "normalize_integer",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Culture model for locale-aware parsing.

A culture bundles the conventions the type converter needs: the decimal and
group symbols, sign symbols, the special tokens for infinity and NaN, and the
locale whose short date / medium time patterns decide field order when a
value is not ISO-8601.

Cultures are built from CLDR data through Babel::

    >>> german = ModelCulture.from_locale("de-DE")
    >>> german.decimal_symbol, german.group_symbol
    (',', '.')

The invariant culture is the default. It is independent of the host
locale so the same environment parses identically everywhere::

    >>> ModelCulture.invariant().decimal_symbol
    '.'
"""

from __future__ import annotations

import functools
from collections.abc import Mapping

from babel import Locale, UnknownLocaleError
from pydantic import BaseModel, ConfigDict, Field

from omnibase_envars.errors import EnvarDeclarationError, ModelEnvarErrorContext

_INVARIANT_LOCALE_ID = "en_US"


class ModelCulture(BaseModel):
    """Locale conventions used during numeric and temporal parsing.

    Attributes:
        name: Culture identifier ("" for the invariant culture)
        decimal_symbol: Separator between integral and fractional digits
        group_symbol: Digit grouping separator (thousands)
        plus_sign: Positive sign symbol
        minus_sign: Negative sign symbol
        positive_infinity_symbol: Token parsed as +inf for float targets
        negative_infinity_symbol: Token parsed as -inf for float targets
        nan_symbol: Token parsed as NaN for float targets
        locale_id: Babel locale whose date/time patterns give field order
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    name: str = Field(
        default="",
        description="Culture identifier; empty for the invariant culture",
    )
    decimal_symbol: str = Field(default=".", min_length=1)
    group_symbol: str = Field(default=",", min_length=1)
    plus_sign: str = Field(default="+", min_length=1)
    minus_sign: str = Field(default="-", min_length=1)
    positive_infinity_symbol: str = Field(default="Infinity", min_length=1)
    negative_infinity_symbol: str = Field(default="-Infinity", min_length=1)
    nan_symbol: str = Field(default="NaN", min_length=1)
    locale_id: str = Field(
        default=_INVARIANT_LOCALE_ID,
        description="Babel locale identifier used for date and time patterns",
    )

    @property
    def is_invariant(self) -> bool:
        return self.name == ""

    @classmethod
    def invariant(cls) -> ModelCulture:
        """Return the invariant culture (dot decimal, comma grouping, en_US dates)."""
        return _INVARIANT_CULTURE

    @classmethod
    def from_locale(cls, identifier: str) -> ModelCulture:
        """Build a culture from a locale identifier such as ``"de_DE"`` or ``"fr-FR"``.

        Raises:
            EnvarDeclarationError: If the identifier is malformed or unknown.
        """
        return _culture_for_locale(identifier)

    @classmethod
    def resolve(cls, culture: ModelCulture | str | None) -> ModelCulture:
        """Coerce a culture argument: None is invariant, strings are locale ids."""
        if culture is None:
            return _INVARIANT_CULTURE
        if isinstance(culture, ModelCulture):
            return culture
        return _culture_for_locale(culture)


def _number_symbols(locale: Locale) -> Mapping[str, str]:
    symbols = locale.number_symbols
    numbering_system = getattr(locale, "default_numbering_system", "latn")
    # Babel 2.14+ keys the symbol table by numbering system
    if numbering_system in symbols:
        return symbols[numbering_system]
    if "latn" in symbols:
        return symbols["latn"]
    return symbols


@functools.lru_cache(maxsize=64)
def _culture_for_locale(identifier: str) -> ModelCulture:
    try:
        locale = Locale.parse(identifier.strip().replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise EnvarDeclarationError(
            f"Unknown culture '{identifier}'",
            context=ModelEnvarErrorContext(operation="resolve_culture"),
        ) from e

    symbols = _number_symbols(locale)
    minus_sign = symbols.get("minusSign", "-")
    infinity = symbols.get("infinity", "∞")
    return ModelCulture(
        name=str(locale),
        decimal_symbol=symbols.get("decimal", "."),
        group_symbol=symbols.get("group", ","),
        plus_sign=symbols.get("plusSign", "+"),
        minus_sign=minus_sign,
        positive_infinity_symbol=infinity,
        negative_infinity_symbol=f"{minus_sign}{infinity}",
        nan_symbol=symbols.get("nan", "NaN"),
        locale_id=str(locale),
    )


_INVARIANT_CULTURE = ModelCulture()

__all__ = ["ModelCulture"]

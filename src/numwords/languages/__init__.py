"""Built-in locale rule tables, one module per language family.

Every module exports ``TABLES``, a tuple of LocaleRuleTable objects. The
default registry is built from ``builtin_tables()``.
"""

from __future__ import annotations

from itertools import chain

from numwords.language import LocaleRuleTable
from numwords.languages import (
    amharic,
    baltic,
    east_asian,
    english,
    finnish,
    germanic,
    greek,
    hindi,
    hungarian,
    indic,
    nordic,
    persian,
    romance,
    semitic,
    slavic,
    southeast_asian,
    swahili,
    turkic,
    west_african,
)

FAMILIES = (
    english,
    germanic,
    nordic,
    romance,
    slavic,
    baltic,
    greek,
    hungarian,
    finnish,
    turkic,
    semitic,
    persian,
    hindi,
    indic,
    east_asian,
    southeast_asian,
    swahili,
    amharic,
    west_african,
)


def builtin_tables() -> tuple[LocaleRuleTable, ...]:
    """Every built-in rule table."""
    return tuple(chain.from_iterable(family.TABLES for family in FAMILIES))


__all__ = ["FAMILIES", "builtin_tables"]

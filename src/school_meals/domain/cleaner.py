"""Menu text cleanup."""

import re

# Allergen reference numbers, e.g. "1.2.5.6."
_ALLERGEN_CODES = re.compile(r"[0-9.]+")

# ECMAScript WhiteSpace and LineTerminator code points; str.strip() differs.
_TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def clean_menu_item(raw: str) -> str:
    """Strip allergen codes anywhere in a dish name and trim the ends.

    Interior whitespace left behind by a removed code is kept as is.
    """
    return _ALLERGEN_CODES.sub("", raw).strip(_TRIM_CHARS)

# Alphabet
# (character categories)
#

import string

UPPER = string.ascii_uppercase
LOWER = string.ascii_lowercase
NUMBER = string.digits
SYMBOL = string.punctuation

#: Categories in the order they are concatenated
CATEGORIES = (
    ('upper', UPPER),
    ('lower', LOWER),
    ('number', NUMBER),
    ('symbol', SYMBOL),
)

#: Size of the printable universe assumed for blind entropy.
#: Changing it changes every blind entropy figure ever reported.
GENERIC_ALPHABET_SIZE = len(UPPER + LOWER + NUMBER + SYMBOL)  # 94


def dedup(chars: str) -> str:
    """Remove repeated characters, keep order of first occurrence."""
    return ''.join(dict.fromkeys(chars))


def compose(upper=False, lower=False, number=False, symbol=False) -> str:
    """Concatenate selected categories into single alphabet.

    >>> compose(upper=True, number=True)
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789'

    """
    selected = {'upper': upper, 'lower': lower, 'number': number, 'symbol': symbol}
    return ''.join(chars for name, chars in CATEGORIES if selected[name])

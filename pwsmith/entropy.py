# Entropy
# (blind and seen entropy estimates)
#
# Blind: the attacker sees only the rendered password.
# Seen: the attacker knows the exact generation parameters,
# but not the random choices.
#

import math

from .alphabet import GENERIC_ALPHABET_SIZE, NUMBER
from .result import CharacterResult, PassphraseResult, EntropyReport

CASE_CHOICES = 2  # word is either upper-cased or kept as is


def bits(count: int, choices: int) -> float:
    """Entropy of `count` independent uniform draws from `choices` options.

    Zero draws give zero bits without looking at `choices`,
    so an empty set not being used is fine.

    """
    if count == 0:
        return 0.0
    return count * math.log2(choices)


def blind_entropy(result) -> float:
    if isinstance(result, CharacterResult):
        return bits(result.length, result.alphabet_size)
    return bits(len(result.password), GENERIC_ALPHABET_SIZE)


def seen_entropy(result) -> float:
    if isinstance(result, CharacterResult):
        # the alphabet is public either way
        return blind_entropy(result)
    if not isinstance(result, PassphraseResult):
        raise TypeError(f"Unsupported result type: {type(result).__name__}")
    w = result.word_count
    return (bits(w, result.word_pool_size)
            + bits(w, CASE_CHOICES)
            + bits(result.prefix_symbol_count + result.suffix_symbol_count,
                   result.symbol_set_size)
            + bits(result.prefix_digit_count + result.suffix_digit_count,
                   len(NUMBER))
            + bits(1, result.separator_set_size))


def estimate(result) -> EntropyReport:
    """Compute both entropy figures for `result`."""
    return EntropyReport(blind=blind_entropy(result), seen=seen_entropy(result))

# PasswordResult
# (generated password with its structural parameters)
#

from typing import NamedTuple


class CharacterResult(NamedTuple):
    password: str
    length: int
    alphabet_size: int


class PassphraseResult(NamedTuple):
    password: str
    word_pool_size: int
    word_count: int
    prefix_symbol_count: int
    suffix_symbol_count: int
    symbol_set_size: int
    prefix_digit_count: int
    suffix_digit_count: int
    separator_set_size: int
    separator: str


class EntropyReport(NamedTuple):
    blind: float
    seen: float

import itertools
import random

import pytest

from pwsmith.wordbank import WordBank


def _make_words(length, count, letters='abcdefgh'):
    combos = itertools.product(letters, repeat=length)
    return [''.join(c) for c in itertools.islice(combos, count)]


@pytest.fixture()
def make_words():
    """Factory returning `count` distinct words of given `length`."""
    return _make_words


@pytest.fixture()
def wordbank():
    """Word bank with 150 words in each bucket 3..10."""
    return WordBank({length: _make_words(length, 150) for length in range(3, 11)})


@pytest.fixture()
def rng():
    return random.Random(1234)

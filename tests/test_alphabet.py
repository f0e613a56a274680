from pwsmith import alphabet


def test_compose():
    assert alphabet.compose() == ''
    assert alphabet.compose(upper=True, lower=True, number=True) == \
        alphabet.UPPER + alphabet.LOWER + alphabet.NUMBER
    assert len(alphabet.compose(upper=True, lower=True, number=True)) == 62
    # order is fixed, regardless of argument order
    assert alphabet.compose(symbol=True, upper=True) == alphabet.UPPER + alphabet.SYMBOL


def test_dedup():
    assert alphabet.dedup('') == ''
    assert alphabet.dedup('aabbca') == 'abc'
    assert alphabet.dedup('-_-_.') == '-_.'


def test_generic_alphabet_size():
    assert alphabet.GENERIC_ALPHABET_SIZE == 94
    assert len(alphabet.SYMBOL) == 32

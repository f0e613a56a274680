import json
import urllib.error
import urllib.request
from pathlib import Path

import pytest

from pwsmith import wordbank
from pwsmith.wordbank import WordBank, WordBankError


def test_build():
    bank = WordBank.build(["apple\n", "Pear", "pear", "it's", "fig", "x-ray", "  kiwi ", ""])
    assert bank.lengths() == (3, 4, 5)
    assert bank[5] == ('apple',)
    assert bank[4] == ('pear', 'kiwi')
    assert bank[3] == ('fig',)
    assert bank[7] == ()
    assert len(bank) == 4
    for length in bank.lengths():
        assert all(len(word) == length for word in bank[length])


def test_pool():
    bank = WordBank({3: ['abc', 'def'], 4: ['abcd'], 6: ['abcdef']})
    assert bank.pool(3, 4) == ('abc', 'def', 'abcd')
    assert bank.pool(4, 10) == ('abcd', 'abcdef')
    assert bank.pool(5, 5) == ()
    assert bank.pool(5, 4) == ()


def test_bucket_invariant():
    with pytest.raises(WordBankError):
        WordBank({3: ['abcd']})


def test_save_load(tmp_path, make_words):
    filename = tmp_path / 'sub' / 'wordbank.json'
    bank = WordBank({length: make_words(length, 20) for length in (3, 5)})
    bank.save(filename)
    assert json.loads(filename.read_text())['3'][0] == 'aaa'
    loaded = WordBank.load(filename)
    assert loaded.lengths() == (3, 5)
    assert loaded.pool(1, 10) == bank.pool(1, 10)


@pytest.mark.parametrize('content', [
    'not json',
    '["abc"]',
    '{"3": ["abcd"]}',
    '{"three": ["abc"]}',
    '{"3": 5}',
    '{"3": ["abc", 5]}',
])
def test_load_corrupted(tmp_path, content):
    filename = tmp_path / 'wordbank.json'
    filename.write_text(content)
    with pytest.raises(WordBankError):
        WordBank.load(filename)


def test_read_wordlist(tmp_path):
    filename = tmp_path / 'words'
    filename.write_text("one\ntwo\nthree\nO'Neil\n")
    assert wordbank.read_wordlist(filename) == ('one', 'two', 'three')
    with pytest.raises(WordBankError):
        wordbank.read_wordlist(tmp_path / 'missing')


def test_load_wordlist_fallback(monkeypatch, tmp_path):
    cache_path = tmp_path / 'words'
    cache_path.write_text("alpha\nbeta\n")
    monkeypatch.setattr(wordbank, 'WORDLIST_SYSTEM_PATH', Path('/does/not/exist'))
    monkeypatch.setattr(wordbank, 'WORDLIST_CACHE_PATH', cache_path)
    wordbank.load_wordlist.cache_clear()  # clear lru_cache
    try:
        assert wordbank.load_wordlist() == ('alpha', 'beta')
    finally:
        wordbank.load_wordlist.cache_clear()


def test_load_wordbank(monkeypatch, tmp_path, capsys, make_words):
    filename = tmp_path / 'wordbank.json'
    monkeypatch.setattr(wordbank, 'load_wordlist', lambda: tuple(make_words(4, 10)))
    bank = wordbank.load_wordbank(filename)
    assert filename.exists()
    assert "Building word bank" in capsys.readouterr().out
    assert len(bank) == 10
    # second time loaded from file
    monkeypatch.setattr(wordbank, 'load_wordlist', lambda: ())
    assert wordbank.load_wordbank(filename).pool(4, 4) == bank.pool(4, 4)


def test_load_unreadable(tmp_path):
    with pytest.raises(WordBankError):
        WordBank.load(tmp_path)  # a directory
    filename = tmp_path / 'wordbank.json'
    filename.write_bytes(b'\xff\xfe{')
    with pytest.raises(WordBankError):
        WordBank.load(filename)


def test_save_unwritable(tmp_path):
    blocker = tmp_path / 'file'
    blocker.write_text('')
    with pytest.raises(WordBankError):
        WordBank({3: ['abc']}).save(blocker / 'wordbank.json')


class _Response:

    def __init__(self, content):
        self._content = content

    def __enter__(self):
        return self

    def __exit__(self, *_args):
        return False

    def read(self):
        return self._content


@pytest.fixture()
def no_local_wordlist(monkeypatch, tmp_path):
    cache_path = tmp_path / 'cache' / 'words'
    monkeypatch.setattr(wordbank, 'WORDLIST_SYSTEM_PATH', Path('/does/not/exist'))
    monkeypatch.setattr(wordbank, 'WORDLIST_CACHE_PATH', cache_path)
    wordbank.load_wordlist.cache_clear()  # clear lru_cache
    yield cache_path
    wordbank.load_wordlist.cache_clear()


def test_web_wordlist(monkeypatch, no_local_wordlist, capsys):
    urls = []

    def urlopen(url):
        urls.append(url)
        return _Response(b"gamma\ndelta\nit's\n")

    monkeypatch.setattr(urllib.request, 'urlopen', urlopen)
    assert not no_local_wordlist.exists()
    assert wordbank.load_wordlist() == ('gamma', 'delta')  # downloaded and saved to disk
    assert urls == [wordbank.WORDLIST_WEB_URL]
    assert no_local_wordlist.read_bytes() == b"gamma\ndelta\nit's\n"
    assert "Downloading word list" in capsys.readouterr().out
    wordbank.load_wordlist.cache_clear()
    monkeypatch.setattr(urllib.request, 'urlopen', None)
    assert wordbank.load_wordlist() == ('gamma', 'delta')  # loaded from disk cache


def test_web_wordlist_failure(monkeypatch, no_local_wordlist):
    def urlopen(url):
        raise urllib.error.URLError('no network')

    monkeypatch.setattr(urllib.request, 'urlopen', urlopen)
    with pytest.raises(WordBankError):
        wordbank.load_wordlist()
    monkeypatch.setattr(urllib.request, 'urlopen', lambda url: _Response(b'\xff\xfe'))
    with pytest.raises(WordBankError):
        wordbank.load_wordlist()
    assert not no_local_wordlist.exists()


def test_system_wordlist_undecodable(monkeypatch, tmp_path):
    system_path = tmp_path / 'words'
    system_path.write_bytes(b'caf\xe9\n')
    monkeypatch.setattr(wordbank, 'WORDLIST_SYSTEM_PATH', system_path)
    wordbank.load_wordlist.cache_clear()
    try:
        with pytest.raises(WordBankError):
            wordbank.load_wordlist()
    finally:
        wordbank.load_wordlist.cache_clear()

# WordBank
# (dictionary words bucketed by length)
#

import json
import functools
from pathlib import Path

# Prefer system wordlist, fallback to cached web download
# See: https://en.wikipedia.org/wiki/Words_(Unix)
WORDLIST_SYSTEM_PATH = Path('/usr/share/dict/words')
WORDLIST_CACHE_PATH = Path('~/.pwsmith/words').expanduser()
WORDLIST_WEB_URL = 'https://users.cs.duke.edu/~ola/ap/linuxwords'

DEFAULT_WORDBANK_PATH = Path('~/.pwsmith/wordbank.json')


class WordBankError(RuntimeError):

    def __init__(self, msg):
        RuntimeError.__init__(self, msg)


def filter_wordlist(words) -> tuple:
    """Strip and normalize raw words.

    Drops words with apostrophe (possessives) and anything that is not
    purely alphabetic. Remaining words are lowercased.

    """
    words = (w.strip() for w in words if "'" not in w)
    return tuple(w.lower() for w in words if w.isalpha())


def _read_lines(filename) -> tuple:
    with open(filename, 'r', encoding='utf-8') as f:
        return filter_wordlist(f.readlines())


@functools.lru_cache(maxsize=None)
def load_wordlist() -> tuple:
    """Load and return a raw word list."""
    # Try system dict/words, then cached downloaded words
    for path in (WORDLIST_SYSTEM_PATH, WORDLIST_CACHE_PATH):
        try:
            return _read_lines(path)
        except FileNotFoundError:
            pass
        except (OSError, UnicodeDecodeError) as e:
            raise WordBankError(f"Cannot read word list {str(path)!r}: {e}")
    # Try web download
    import urllib.request
    print(f"Downloading word list from {WORDLIST_WEB_URL}...")
    try:
        with urllib.request.urlopen(WORDLIST_WEB_URL) as f:
            content = f.read()
        words = content.decode('utf-8').splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise WordBankError(f"Cannot download word list: {e}")
    try:
        WORDLIST_CACHE_PATH.parent.mkdir(0o700, exist_ok=True)
        with open(WORDLIST_CACHE_PATH, 'wb') as f:
            f.write(content)
    except OSError as e:
        print(f"Warning: Cannot cache word list: {e}")
    return filter_wordlist(words)


def read_wordlist(filename) -> tuple:
    """Read raw word list from a file, one word per line."""
    try:
        return _read_lines(filename)
    except (OSError, UnicodeDecodeError) as e:
        raise WordBankError(f"Cannot read word list: {e}")


class WordBank:

    """Words bucketed by their length.

    Each bucket is a tuple of unique words, all of them having
    exactly the bucket's length. The bank is read-only once built.

    """

    def __init__(self, buckets=None):
        self._buckets = {}
        for length, words in (buckets or {}).items():
            length = int(length)
            words = tuple(words)
            for word in words:
                if not isinstance(word, str) or len(word) != length:
                    raise WordBankError(
                        f"Word {word!r} does not belong to bucket {length}")
            if words:
                self._buckets[length] = words

    def __repr__(self):
        return "{}({})".format(self.__class__.__name__, ', '.join(
            f'{length}: {len(words)}' for length, words in sorted(self._buckets.items())))

    def __len__(self):
        return sum(len(words) for words in self._buckets.values())

    def __getitem__(self, length):
        return self._buckets.get(length, ())

    def lengths(self) -> tuple:
        return tuple(sorted(self._buckets))

    @classmethod
    def build(cls, words):
        """Bucket raw `words` by length.

        Words are filtered (see :func:`filter_wordlist`) and deduplicated,
        order of first occurrence is kept.

        """
        buckets = {}
        for word in dict.fromkeys(filter_wordlist(words)):
            buckets.setdefault(len(word), []).append(word)
        return cls(buckets)

    def pool(self, min_length: int, max_length: int) -> tuple:
        """Return all words with length in range [min_length, max_length]."""
        pool = ()
        for length in range(min_length, max_length + 1):
            pool += self[length]
        return pool

    def save(self, filename):
        filename = Path(filename).expanduser()
        data = {str(length): list(words)
                for length, words in sorted(self._buckets.items())}
        try:
            filename.parent.mkdir(0o700, parents=True, exist_ok=True)
            with open(filename, 'w', encoding='utf-8') as f:
                json.dump(data, f)
        except OSError as e:
            raise WordBankError(f"Cannot write word bank {str(filename)!r}: {e}")

    @classmethod
    def load(cls, filename):
        filename = Path(filename).expanduser()
        try:
            with open(filename, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise WordBankError(f"Cannot read word bank {str(filename)!r}: {e}")
        except ValueError as e:  # JSONDecodeError, UnicodeDecodeError
            raise WordBankError(f"Corrupted word bank {str(filename)!r}: {e}")
        if not isinstance(data, dict):
            raise WordBankError(f"Corrupted word bank {str(filename)!r}: expected JSON object")
        try:
            return cls(data)
        except (ValueError, TypeError):
            raise WordBankError(f"Corrupted word bank {str(filename)!r}: bad bucket")


def load_wordbank(filename=DEFAULT_WORDBANK_PATH) -> WordBank:
    """Load persisted word bank, build and save it on first use."""
    filename = Path(filename).expanduser()
    if filename.exists():
        return WordBank.load(filename)
    print(f"Building word bank {str(filename)!r}...")
    bank = WordBank.build(load_wordlist())
    bank.save(filename)
    return bank

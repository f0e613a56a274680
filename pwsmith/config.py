# Config
# (generation specs and defaults)
#

import configparser
from pathlib import Path
from typing import NamedTuple

from .alphabet import compose, dedup, NUMBER
from .wordbank import DEFAULT_WORDBANK_PATH

DATA_DIR = Path('~/.pwsmith')
DEFAULT_CONFIG_FILE = DATA_DIR / 'pwsmith.conf'

MIN_LENGTH = 4
MAX_LENGTH = 255
MAX_WORD_LENGTH = 64


class GenerationError(ValueError):
    pass


class InvalidConfiguration(GenerationError):
    pass


class CharacterSpec(NamedTuple):
    length: int
    alphabet: str

    def validate(self):
        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            raise InvalidConfiguration(
                f"Length must be in range {MIN_LENGTH}..{MAX_LENGTH}, got {self.length}")
        if not self.alphabet:
            raise InvalidConfiguration("Alphabet is empty")
        return self


class PassphraseSpec(NamedTuple):
    word_count: int
    min_length: int
    max_length: int
    prefix_digits: int = 0
    suffix_digits: int = 0
    prefix_symbols: int = 0
    suffix_symbols: int = 0
    symbols: str = ''
    separators: str = '-'

    def validate(self):
        for field in ('word_count', 'prefix_digits', 'suffix_digits',
                      'prefix_symbols', 'suffix_symbols'):
            if getattr(self, field) < 0:
                raise InvalidConfiguration(f"{field} must not be negative")
        if not 1 <= self.min_length <= MAX_WORD_LENGTH:
            raise InvalidConfiguration(
                f"Minimum word length must be in range 1..{MAX_WORD_LENGTH}")
        if self.max_length < self.min_length:
            raise InvalidConfiguration(
                f"Maximum word length ({self.max_length}) is less than "
                f"minimum word length ({self.min_length})")
        if not dedup(self.separators):
            raise InvalidConfiguration("Separator set is empty")
        separators = set(self.separators)
        if self.prefix_symbols + self.suffix_symbols > 0:
            if not dedup(self.symbols):
                raise InvalidConfiguration("Padding symbols requested but symbol set is empty")
            if separators & set(self.symbols):
                raise InvalidConfiguration("Separators must not be used as padding symbols")
        if self.prefix_digits + self.suffix_digits > 0 and separators & set(NUMBER):
            raise InvalidConfiguration("Separators must not be digits when digits are added")
        return self


class Defaults(NamedTuple):

    """Built-in defaults, overridden by config file."""

    length: int = 30
    categories: str = 'ULN'
    chars_count: int = 10
    words_count: int = 10
    word_count: int = 4
    min_word_length: int = 4
    max_word_length: int = 8
    prefix_digits: int = 0
    suffix_digits: int = 2
    prefix_symbols: int = 0
    suffix_symbols: int = 1
    symbols: str = '!@#$%^&*?'
    separators: str = '-_.+='
    wordbank: Path = DEFAULT_WORDBANK_PATH

    def alphabet(self, categories=None) -> str:
        categories = (categories or self.categories).upper()
        return compose(upper='U' in categories, lower='L' in categories,
                       number='N' in categories, symbol='S' in categories)


#: (section, key) -> (Defaults field, converter)
CONFIG_KEYS = {
    ('chars', 'length'): ('length', int),
    ('chars', 'categories'): ('categories', str),
    ('chars', 'count'): ('chars_count', int),
    ('words', 'count'): ('words_count', int),
    ('words', 'words'): ('word_count', int),
    ('words', 'min_length'): ('min_word_length', int),
    ('words', 'max_length'): ('max_word_length', int),
    ('words', 'prefix_digits'): ('prefix_digits', int),
    ('words', 'suffix_digits'): ('suffix_digits', int),
    ('words', 'prefix_symbols'): ('prefix_symbols', int),
    ('words', 'suffix_symbols'): ('suffix_symbols', int),
    ('words', 'symbols'): ('symbols', str),
    ('words', 'separators'): ('separators', str),
    ('wordbank', 'path'): ('wordbank', Path),
}


class Config:

    def __init__(self, config_file=DEFAULT_CONFIG_FILE):
        self._defaults = Defaults()
        self.load(config_file)

    @property
    def defaults(self) -> Defaults:
        return self._defaults

    def load(self, config_file):
        config_file = Path(config_file).expanduser()
        config = configparser.ConfigParser(interpolation=None)
        if not config.read(config_file, encoding='utf-8'):
            return
        overrides = {}
        for section in config.sections():
            if section not in ('chars', 'words', 'wordbank'):
                print(f"Warning: unknown section {section!r} in config {str(config_file)!r}")
                continue
            section = config[section]
            for key in section:
                if (section.name, key) not in CONFIG_KEYS:
                    print(f"Warning: unknown key [{section.name}] {key!r} "
                          f"in config {str(config_file)!r}")
                    continue
                field, convert = CONFIG_KEYS[(section.name, key)]
                try:
                    overrides[field] = convert(section[key])
                except ValueError:
                    raise InvalidConfiguration(
                        f"Bad value for [{section.name}] {key!r} "
                        f"in config {str(config_file)!r}: {section[key]!r}")
        self._defaults = self._defaults._replace(**overrides)

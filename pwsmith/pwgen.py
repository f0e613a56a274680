# pwgen
# (random password generator)
#

from random import SystemRandom

from .alphabet import dedup, NUMBER
from .config import CharacterSpec, PassphraseSpec, GenerationError, InvalidConfiguration
from .entropy import estimate
from .result import CharacterResult, PassphraseResult
from .secure import SecureString

#: Word pool must be larger than this
MIN_POOL_SIZE = 100

random = SystemRandom()


class InsufficientWordPool(GenerationError):
    pass


class CharacterGenerator:

    """Random characters drawn from an alphabet (with replacement)."""

    def __init__(self, spec: CharacterSpec, rng=None):
        spec.validate()
        self._length = spec.length
        self._alphabet = dedup(spec.alphabet)
        self._rng = rng or random

    @property
    def alphabet(self) -> str:
        return self._alphabet

    def generate(self) -> CharacterResult:
        n = len(self._alphabet)
        password = ''.join(self._alphabet[self._rng.randrange(n)]
                           for _ in range(self._length))
        return CharacterResult(password, self._length, n)


class PassphraseGenerator:

    """Random dictionary words, optionally padded by digits and symbols.

    Layout of the passphrase (components joined by single separator)::

        [symbol ...] [digits] word ... [digits] [symbol ...]

    Each padding symbol is a separate component, digits form
    a single block. Each word is upper-cased with probability 1/2.

    The word pool and symbol sets are prepared once in constructor,
    :meth:`generate` may be then called repeatedly.

    """

    def __init__(self, spec: PassphraseSpec, wordbank, rng=None):
        spec.validate()
        self._spec = spec
        self._pool = wordbank.pool(spec.min_length, spec.max_length)
        if len(self._pool) <= MIN_POOL_SIZE:
            raise InsufficientWordPool(
                f"Only {len(self._pool)} words with length "
                f"{spec.min_length}..{spec.max_length} "
                f"(need more than {MIN_POOL_SIZE})")
        self._symbols = dedup(spec.symbols)
        self._separators = dedup(spec.separators)
        self._rng = rng or random

    @property
    def pool_size(self) -> int:
        return len(self._pool)

    def _choice(self, seq):
        return seq[self._rng.randrange(len(seq))]

    def _symbols_block(self, count) -> tuple:
        return tuple(self._choice(self._symbols) for _ in range(count))

    def _digits_block(self, count) -> tuple:
        if count == 0:
            return ()
        return (''.join(self._choice(NUMBER) for _ in range(count)),)

    def _word(self) -> str:
        word = self._choice(self._pool)
        if self._rng.randrange(2):
            word = word.upper()
        return word

    def generate(self) -> PassphraseResult:
        spec = self._spec
        components = (self._symbols_block(spec.prefix_symbols)
                      + self._digits_block(spec.prefix_digits)
                      + tuple(self._word() for _ in range(spec.word_count))
                      + self._digits_block(spec.suffix_digits)
                      + self._symbols_block(spec.suffix_symbols))
        if len(self._separators) == 1:
            separator = self._separators
        else:
            separator = self._choice(self._separators)
        return PassphraseResult(
            password=separator.join(components),
            word_pool_size=len(self._pool),
            word_count=spec.word_count,
            prefix_symbol_count=spec.prefix_symbols,
            suffix_symbol_count=spec.suffix_symbols,
            symbol_set_size=len(self._symbols),
            prefix_digit_count=spec.prefix_digits,
            suffix_digit_count=spec.suffix_digits,
            separator_set_size=len(self._separators),
            separator=separator)


def make_generator(spec, wordbank=None, rng=None):
    """Select generator by type of `spec`."""
    if isinstance(spec, CharacterSpec):
        return CharacterGenerator(spec, rng)
    if isinstance(spec, PassphraseSpec):
        if wordbank is None:
            raise InvalidConfiguration("Passphrase generation requires a word bank")
        return PassphraseGenerator(spec, wordbank, rng)
    raise InvalidConfiguration(f"Unknown generation spec: {type(spec).__name__}")


def generate(spec, count: int = 1, wordbank=None, rng=None, secure=False) -> list:
    """Generate `count` passwords according to `spec`.

    :param spec: CharacterSpec or PassphraseSpec
    :param count: Number of passwords to generate
    :param wordbank: WordBank, required for PassphraseSpec
    :param rng: Random source providing `randrange(n)`. Default is SystemRandom.
    :param secure: Wrap passwords in SecureString
    :returns: List of (result, EntropyReport) pairs.

    All validation happens before the first password is generated,
    so an invalid configuration produces no output at all.

    """
    if count < 1:
        raise InvalidConfiguration(f"Count must be at least 1, got {count}")
    generator = make_generator(spec, wordbank, rng)
    output = []
    for _ in range(count):
        result = generator.generate()
        report = estimate(result)
        if secure:
            result = result._replace(password=SecureString(result.password))
        output.append((result, report))
    return output

import sys
import argparse

from . import pwgen, ui
from .config import (Config, CharacterSpec, PassphraseSpec, GenerationError,
                     InvalidConfiguration, DEFAULT_CONFIG_FILE)
from .wordbank import WordBank, WordBankError, load_wordbank, load_wordlist, read_wordlist


def _default(value, default):
    return default if value is None else value


def _check_pick(pick, output_file, file_format):
    if pick and (output_file != '-' or file_format != 'plain'):
        raise InvalidConfiguration("--pick cannot be combined with -o, --tsv or --json")


def _emit(pairs, output_file, file_format, copy, pick, secure):
    if pick:
        ui.PasswordUI().pick(pairs)
        return
    password_ui = ui.PasswordUI(output_file, file_format)
    password_ui.show(pairs)
    if copy or secure:
        password_ui.copy(pairs[0][0])


def run_chars(config_file, length, upper, lower, number, symbol, alphabet,
              count, output_file, file_format, copy, pick, secure):
    _check_pick(pick, output_file, file_format)
    defaults = Config(config_file).defaults
    if not alphabet:
        categories = ''.join(flag for flag, selected in
                             (('U', upper), ('L', lower), ('N', number), ('S', symbol))
                             if selected)
        alphabet = defaults.alphabet(categories or None)
    spec = CharacterSpec(length=_default(length, defaults.length), alphabet=alphabet)
    pairs = pwgen.generate(spec, count or defaults.chars_count, secure=secure)
    _emit(pairs, output_file, file_format, copy, pick, secure)


def run_words(config_file, wordbank_file, words, min_length, max_length,
              prefix_digits, suffix_digits, prefix_symbols, suffix_symbols,
              symbols, separators, count, output_file, file_format, copy, pick, secure):
    _check_pick(pick, output_file, file_format)
    defaults = Config(config_file).defaults
    spec = PassphraseSpec(
        word_count=_default(words, defaults.word_count),
        min_length=_default(min_length, defaults.min_word_length),
        max_length=_default(max_length, defaults.max_word_length),
        prefix_digits=_default(prefix_digits, defaults.prefix_digits),
        suffix_digits=_default(suffix_digits, defaults.suffix_digits),
        prefix_symbols=_default(prefix_symbols, defaults.prefix_symbols),
        suffix_symbols=_default(suffix_symbols, defaults.suffix_symbols),
        symbols=_default(symbols, defaults.symbols),
        separators=_default(separators, defaults.separators),
    )
    # Fail on bad arguments before touching the word bank
    spec.validate()
    wordbank = load_wordbank(wordbank_file or defaults.wordbank)
    pairs = pwgen.generate(spec, count or defaults.words_count,
                           wordbank=wordbank, secure=secure)
    _emit(pairs, output_file, file_format, copy, pick, secure)


def run_wordbank(config_file, wordbank_file, source_file):
    defaults = Config(config_file).defaults
    wordbank_file = wordbank_file or defaults.wordbank
    words = read_wordlist(source_file) if source_file else load_wordlist()
    bank = WordBank.build(words)
    bank.save(wordbank_file)
    print(f"Saved {len(bank)} words to {str(wordbank_file)!r}.")
    print(bank)


def non_negative(value):
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return n


def positive(value):
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return n


def parse_args(argv=None):
    """Process command line args."""
    ap = argparse.ArgumentParser(prog="pwsmith",
                                 description="Random password and passphrase generator",
                                 formatter_class=argparse.RawTextHelpFormatter)

    # Sub-commands
    sp = ap.add_subparsers()
    ap_chars = sp.add_parser("chars", aliases=['c'],
                             help="generate passwords from random characters (default)")
    ap_chars.set_defaults(func=run_chars)
    ap_words = sp.add_parser("words", aliases=['w'],
                             help="generate passphrases from random dictionary words")
    ap_words.set_defaults(func=run_words)
    ap_wordbank = sp.add_parser("wordbank",
                                help="build word bank from a word list")
    ap_wordbank.set_defaults(func=run_wordbank)

    for subparser in (ap_chars, ap_words, ap_wordbank):
        subparser.add_argument('-c', '--config', dest='config_file',
                               default=DEFAULT_CONFIG_FILE,
                               help="config file (default: %(default)s)")

    for subparser in (ap_words, ap_wordbank):
        subparser.add_argument('-b', dest='wordbank_file',
                               help="word bank file (default: ~/.pwsmith/wordbank.json)")

    for subparser in (ap_chars, ap_words):
        subparser.add_argument('-n', dest='count', type=positive,
                               help="number of passwords to generate (default: 10)")
        subparser.add_argument('-o', dest='output_file', type=str, default='-',
                               help="write to this file instead of stdout")
        format_grp = subparser.add_mutually_exclusive_group()
        format_grp.add_argument('--plain', dest='file_format', action='store_const', const='plain',
                                help="select plain-text format (default)")
        format_grp.add_argument('--tsv', dest='file_format', action='store_const', const='tsv',
                                help="select tab-separated format")
        format_grp.add_argument('--json', dest='file_format', action='store_const', const='json',
                                help="select JSON format")
        subparser.set_defaults(file_format='plain')
        subparser.add_argument('--copy', action='store_true',
                               help="copy first password to clipboard")
        subparser.add_argument('--pick', action='store_true',
                               help="select password interactively and copy it to clipboard")
        subparser.add_argument('--secure', action='store_true',
                               help="do not print passwords, keep them in locked memory "
                                    "and copy the first (or picked) one to clipboard")

    ap_chars.add_argument('-l', dest='length', type=int,
                          help="length of password (default: 30)")
    ap_chars.add_argument('-U', '--upper', action='store_true',
                          help="use uppercase letters")
    ap_chars.add_argument('-L', '--lower', action='store_true',
                          help="use lowercase letters")
    ap_chars.add_argument('-N', '--number', action='store_true',
                          help="use digits")
    ap_chars.add_argument('-S', '--symbol', action='store_true',
                          help="use punctuation symbols")
    ap_chars.add_argument('-a', dest='alphabet', type=str,
                          help="use custom alphabet instead of categories")

    ap_words.add_argument('-w', dest='words', type=non_negative,
                          help="number of words (default: 4)")
    ap_words.add_argument('--min', dest='min_length', type=positive,
                          help="minimal word length (default: 4)")
    ap_words.add_argument('--max', dest='max_length', type=positive,
                          help="maximal word length (default: 8)")
    ap_words.add_argument('--prefix-digits', type=non_negative,
                          help="number of digits before words (default: 0)")
    ap_words.add_argument('--suffix-digits', type=non_negative,
                          help="number of digits after words (default: 2)")
    ap_words.add_argument('--prefix-symbols', type=non_negative,
                          help="number of symbols before words (default: 0)")
    ap_words.add_argument('--suffix-symbols', type=non_negative,
                          help="number of symbols after words (default: 1)")
    ap_words.add_argument('--symbols', type=str,
                          help="padding symbols to choose from (default: '!@#$%%^&*?')")
    ap_words.add_argument('--separators', type=str,
                          help="separators to choose from (default: '-_.+=')")

    ap_wordbank.add_argument('source_file', nargs='?',
                             help="raw word list, one word per line "
                                  "(default: system dictionary or web download)")

    args = ap.parse_args(args=argv)

    if 'func' not in args:
        ap_chars.parse_args(args=[], namespace=args)

    return args


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: exit status
    """
    args = parse_args(argv)
    run_func = args.func
    delattr(args, 'func')
    try:
        run_func(**vars(args))
    except (GenerationError, WordBankError) as e:
        print("Error:", e, file=sys.stderr)
        return 1
    return 0

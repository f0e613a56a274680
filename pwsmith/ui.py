# PasswordUI
# (print, copy and pick generated passwords)
#

import sys

from prompt_toolkit import prompt as prompt_input
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.formatted_text import FormattedText
from blessed import Terminal
import pyperclip

from .fileformat import make_record, write_file
from .secure import SecureString


def reveal(password) -> str:
    if isinstance(password, SecureString):
        return password.reveal()
    return password


class PickCompleter(Completer):

    """Complete index of generated password, show the password as display text."""

    def __init__(self, records):
        self._records = records

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor.strip()
        for n, record in enumerate(self._records, 1):
            if str(n).startswith(text):
                yield Completion(str(n), start_position=-len(document.text_before_cursor),
                                 display=record['password'],
                                 display_meta=f"seen {record['seen']:.1f} bits")


class PasswordUI:

    """Presents generated (result, report) pairs to the user."""

    def __init__(self, output_file='-', file_format='plain'):
        self._output_file = output_file
        self._file_format = file_format
        self._term = Terminal()
        self._completer = None

    #################
    # Other Utility #
    #################

    def _copy(self, text):
        """Wraps copy-to-clipboard function to allow overriding."""
        pyperclip.copy(text)

    def _input(self, prompt):
        """Wraps input function to allow overriding."""
        return prompt_input(FormattedText([('bold', prompt)]), completer=self._completer)

    ############
    # Commands #
    ############

    def show(self, pairs, numbered=False):
        """Print or write generated passwords with entropy figures."""
        records = [make_record(result, report) for result, report in pairs]
        if self._output_file != '-':
            with open(self._output_file, 'w', encoding='utf-8') as f:
                write_file(f, records, self._file_format)
            print(f"Written {len(records)} passwords to {str(self._output_file)!r}.")
            return
        if self._file_format != 'plain':
            write_file(sys.stdout, records, self._file_format)
            return
        term = self._term
        width = max(len(r['password']) for r in records)
        for n, record in enumerate(records, 1):
            prefix = "[%d] " % n if numbered else ''
            print(prefix + term.bold(record['password'].ljust(width)),
                  term.yellow(f"blind={record['blind']:<7.2f}"),
                  term.bright_blue(f"seen={record['seen']:.2f}"),
                  sep='  ')

    def copy(self, result):
        """Copy password to clipboard."""
        self._copy(reveal(result.password))
        print("Password copied to clipboard.")

    def pick(self, pairs):
        """Let user select one of generated passwords, copy it to clipboard.

        Returns selected result or None.

        """
        self.show(pairs, numbered=True)
        self._completer = PickCompleter([make_record(*pair) for pair in pairs])
        try:
            num = int(self._input('Select: ')) - 1
            if num < 0:
                raise IndexError(num)
            result = pairs[num][0]
        except (ValueError, IndexError):
            print("Not found.")
            return None
        except (KeyboardInterrupt, EOFError):
            print()
            return None
        finally:
            self._completer = None
        self.copy(result)
        return result

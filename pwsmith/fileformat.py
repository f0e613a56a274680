# format
# (output records: plain, tsv, json)
#

import io
import json

COLUMNS = ('password', 'blind', 'seen')


def make_record(result, report) -> dict:
    """Structured output record for one generated password.

    Password in SecureString is rendered masked.

    """
    return {
        'password': str(result.password),
        'blind': round(report.blind, 2),
        'seen': round(report.seen, 2),
    }


def format_plain(record: dict, width=0) -> str:
    """Format record as aligned columns."""
    return '{}  blind={:<7.2f} seen={:.2f}\n'.format(
        record['password'].ljust(width), record['blind'], record['seen'])


def format_tsv_header(columns=COLUMNS) -> str:
    return '\t'.join(columns) + '\n'


def format_tsv(record: dict, columns=COLUMNS) -> str:
    """Format record as tab-delimited column values."""
    return '\t'.join(str(record[key]) for key in columns) + '\n'


def write_file(stream, records, file_format='plain'):
    """Write records into text stream."""
    records = list(records)
    if file_format == 'plain':
        width = max((len(r['password']) for r in records), default=0)
        for record in records:
            stream.write(format_plain(record, width))
    elif file_format == 'tsv':
        stream.write(format_tsv_header())
        for record in records:
            stream.write(format_tsv(record))
    elif file_format == 'json':
        json.dump(records, stream)
        stream.write('\n')
    else:
        raise ValueError(f"Unknown file format: {file_format!r}")


def format_file(records, file_format='plain') -> str:
    """Format all records into string."""
    stream = io.StringIO()
    write_file(stream, records, file_format)
    return stream.getvalue()

"""Word count report: count the words of a text file into an HTML page.

The page holds two side-by-side tables, one ordered alphabetically and
one ordered by occurrence. Input and output names come from the command
line or, when omitted, from interactive prompts.

Usage:
    python -m text_nlp.word_report
    python -m text_nlp.word_report --input book.txt --output book.html
"""

from __future__ import annotations

import argparse
import html
import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional, TextIO, Union

from common.cli_helpers import add_log_level_argument, prompt, setup_logging
from common.exceptions import ValidationError, WordCountError
from common.file_helpers import file_manager
from text_nlp.ranking import RankedEntry, rank
from text_nlp.word_frequency import count_words_in_file, total_words

logger = logging.getLogger(__name__)

INPUT_PROMPT = "Enter name of input file here (full extension): "
OUTPUT_PROMPT = "Enter name of output file here (full extension): "
CONFIRMATION = "Confirm: Output file finished"

ALPHABETICAL_CAPTION = "Ordered Alphabetically"
OCCURRENCE_CAPTION = "Ordered by Occurrence"
BACKGROUND_COLOR = "#FFFF99"


def _check_open(out: TextIO) -> None:
    assert out is not None, "output stream is None"
    assert not out.closed, "output stream is closed"


def write_header(out: TextIO, title: str) -> None:
    """Write the opening tags, page title and heading."""
    _check_open(out)
    out.write(f"<html> <head><title>Words Counted in {title}</title> </head>")
    out.write(
        f'<body style = "background-color: {BACKGROUND_COLOR}" >'
        f"<h2>Words Counted in {title}</h2><hr />\n"
    )


def write_table(
    out: TextIO,
    entries: Iterable[RankedEntry],
    caption: str,
    side: str,
    escape: bool = False,
) -> None:
    """Write one captioned Words/Counts table floated to `side`.

    Rows follow the order of `entries`, which is consumed once.
    """
    _check_open(out)
    out.write(
        f'<div><table style = "float: {side} " border="4">'
        f"<caption><b>{caption}</b></caption>"
        "<tr><th>Words</th><th>Counts</th></tr>\n"
    )
    rows = 0
    for entry in entries:
        word = html.escape(entry.word) if escape else entry.word
        out.write(f"<tr><td>{word}</td><td>{entry.count}</td></tr>\n")
        rows += 1
    out.write("</table></div>\n")
    logger.debug("Wrote table %r with %d rows", caption, rows)


def write_footer(out: TextIO) -> None:
    """Write the closing tags."""
    _check_open(out)
    out.write("</body></html>\n")


def write_report(
    out: TextIO,
    title: str,
    alphabetical: Iterable[RankedEntry],
    by_occurrence: Iterable[RankedEntry],
    escape: bool = False,
) -> None:
    """Write the full page: header, both tables side by side, footer."""
    if escape:
        title = html.escape(title)
    write_header(out, title)
    write_table(out, alphabetical, ALPHABETICAL_CAPTION, "left", escape=escape)
    write_table(out, by_occurrence, OCCURRENCE_CAPTION, "right", escape=escape)
    write_footer(out)


def generate_report(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    title: Optional[str] = None,
    encoding: str = "utf-8",
    escape: bool = False,
) -> Dict[str, int]:
    """Count the words of `input_path` and write the HTML report to `output_path`.

    Args:
        input_path: Text file to read
        output_path: HTML file to create or overwrite
        title: Name shown in the page; defaults to `input_path` as given
        encoding: Encoding of both files
        escape: HTML-escape words and title

    Returns:
        The word frequency table the report was built from

    Raises:
        FileOperationError: If either file cannot be opened
    """
    frequencies = count_words_in_file(input_path, encoding=encoding)
    word_total, unique_total = total_words(frequencies), len(frequencies)
    alphabetical, by_occurrence = rank(frequencies)

    with file_manager(output_path, mode="w", encoding=encoding) as out:
        write_report(
            out,
            title if title is not None else str(input_path),
            iter(alphabetical),
            iter(by_occurrence),
            escape=escape,
        )

    logger.info(
        "Wrote report for %d words (%d unique) to %s",
        word_total,
        unique_total,
        output_path,
    )
    return frequencies


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Count the words of a text file and write an HTML report.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--input",
        type=str,
        help="Text file to read. Prompted for when omitted.",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="HTML file to write. Prompted for when omitted.",
    )
    parser.add_argument(
        "--title",
        type=str,
        help="Name shown in the report. Defaults to the input file name.",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of the input and output files.",
    )
    parser.add_argument(
        "--escape-html",
        action="store_true",
        help="HTML-escape words and title in the report.",
    )
    add_log_level_argument(parser)
    return parser.parse_args(argv)


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = parse_arguments(argv)
    setup_logging(args.log_level)

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    try:
        input_name = args.input or prompt(INPUT_PROMPT, stdin, stdout)
        output_name = args.output or prompt(OUTPUT_PROMPT, stdin, stdout)
    except ValidationError as ex:
        logger.error(str(ex))
        return 2

    try:
        generate_report(
            input_name,
            output_name,
            title=args.title,
            encoding=args.encoding,
            escape=args.escape_html,
        )
    except WordCountError as ex:
        logger.error(str(ex))
        return 1

    print(CONFIRMATION, file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python
"""warc2text - convert warc response records to one line per record text

Because lines delimit records, any new line characters in the content
are replaced by the \\u000A sequence.
"""

import logging
import sys

import click

from .warctools import open_archive
from .warctools.output import FORMATS, make_writer


def convert_archive(fh, writer, name: str = "-") -> int:
    """Write every record of ``fh`` through ``writer``, logging parse errors.

    Returns the number of parse errors encountered.
    """
    nerrors = 0
    for offset, result in fh.read_records():
        if fh.record_parser.is_error(result):
            nerrors += 1
            logging.warning(f"warc error at {name}:{offset}: {result}")
        elif not writer.write(result):
            logging.debug(f"skipped {result.type} record at {name}:{offset}")
    return nerrors


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-f",
    "--format",
    "fmt",
    help="Output file format",
    type=click.Choice(sorted(FORMATS)),
    default="tsv",
    show_default=True,
)
@click.option(
    "-L",
    "--log-level",
    "log_level",
    help="Log level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="info",
    show_default=True,
)
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.argument("output_file", required=False, type=click.Path(dir_okay=False, allow_dash=True))
def main(fmt: str, log_level: str, input_file: str, output_file: str | None) -> None:
    """Parse a WARC file and output its response records as text.

    INPUT_FILE may be - to read from stdin; without OUTPUT_FILE the
    records are written to stdout.
    """
    logging.basicConfig(
        level=log_level.upper(),
        stream=sys.stderr,
        format="%(levelname)s: %(message)s",
    )

    with click.open_file(output_file or "-", "w", encoding="utf-8") as out:
        writer = make_writer(fmt, out)
        fh = open_archive(input_file)
        try:
            nerrors = convert_archive(fh, writer, name=input_file)
        finally:
            if input_file != "-":
                fh.close()

    logging.info(f"wrote {writer.written} records, {nerrors} errors")


def run() -> None:
    """Entry point for the command-line interface."""
    main()


if __name__ == "__main__":
    run()

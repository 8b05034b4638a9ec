#!/usr/bin/env python
"""warcvalid - check a warc is ok"""

import logging
import sys

import click

from .warctools import open_archive


def validate_archive(fh, name: str) -> bool:
    """Return True if every record of ``fh`` parses, reporting the first error."""
    for offset, result in fh.read_records():
        if fh.record_parser.is_error(result):
            print(f"warc errors at {name}:{offset}", file=sys.stderr)
            print(f"\t{result}", file=sys.stderr)
            return False
        logging.debug(f"ok {result.type} record at {name}:{offset}")
    return True


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-L",
    "--log-level",
    "log_level",
    help="Log level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="info",
)
@click.argument("warc_files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def main(log_level: str, warc_files: tuple[str, ...]) -> None:
    """Validate WARC files."""
    logging.basicConfig(
        level=log_level.upper(),
        stream=sys.stderr,
        format="%(levelname)s: %(message)s",
    )

    correct = True
    for name in warc_files:
        fh = open_archive(name)
        try:
            if not validate_archive(fh, name):
                correct = False
        finally:
            fh.close()

    sys.exit(0 if correct else 1)


def run() -> None:
    """Entry point for the command-line interface."""
    main()


if __name__ == "__main__":
    run()

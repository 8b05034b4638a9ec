#!/usr/bin/env python
"""warcdump - dump warcs in a slightly more humane format"""

import logging
import sys

import click

from .warctools import open_archive


def dump_archive(fh, name: str) -> None:
    """Dump archive records and errors to stdout."""
    for offset, result in fh.read_records():
        if fh.record_parser.is_error(result):
            print(f"warc errors at {name}:{offset}")
            print("\t", result)
        else:
            print(f"archive record at {name}:{offset}")
            result.dump(content=True)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-L",
    "--log-level",
    "log_level",
    help="Log level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="info",
)
@click.argument("warc_files", nargs=-1, type=click.Path(exists=True, dir_okay=False))
def main(log_level: str, warc_files: tuple[str, ...]) -> None:
    """Dump WARC files in a human-readable format."""
    logging.basicConfig(
        level=log_level.upper(),
        stream=sys.stderr,
        format="%(levelname)s: %(message)s",
    )

    if len(warc_files) < 1:
        dump_archive(open_archive("-"), name="-")
    else:
        for name in warc_files:
            fh = open_archive(name)
            dump_archive(fh, name)
            fh.close()


def run() -> None:
    """Entry point for the command-line interface."""
    main()


if __name__ == "__main__":
    run()

"""ClueWeb WARC tools: record reader and command line converters."""

__version__ = "0.1.0"

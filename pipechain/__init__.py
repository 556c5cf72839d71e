"""Run chains of piped commands between an input file and an output file, with small string and list helpers."""

__version__ = "0.1.0"
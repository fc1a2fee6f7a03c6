"""Run two commands as a pipeline between an input file and an output file, with small string, byte-buffer and linked-list helpers."""

__version__ = "1.0.0"
"""
PL/0 Command-Line Interface
===========================

This package provides the command-line tools for the PL/0 toolkit:

- **pl0parse**: PL/0 syntax recognizer with derivation trace

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["pl0parse"]

"""
pl0parse - PL/0 Syntax Recognizer Command-Line Interface
========================================================

This module implements the command-line interface for the PL/0
recognizer. It reads a PL/0 program, checks its syntax and writes the
derivation trace, the symbol table and the final status line.

Usage Examples
--------------
Check a program, trace to stdout:
    $ pl0parse factorial.pl0

Write the trace to a file:
    $ pl0parse factorial.pl0 -o factorial.trace

Read a numeric lexeme list produced by another scanner:
    $ pl0parse --lexeme-list lexemes.txt

Show the tokens only:
    $ pl0parse --tokens factorial.pl0
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from pl0 import __version__
from pl0.cli.errors import ExitCode, handle_cli_exception
from pl0.lexer import tokenize, read_token_list, format_token_list
from pl0.parser import Parser, ParserOptions


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output trace file (default: stdout)",
)
@click.option(
    "-l", "--lexeme-list",
    is_flag=True,
    help="Input is a numeric lexeme list instead of PL/0 source",
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Print the token list and exit",
)
@click.option(
    "--no-symbols",
    is_flag=True,
    help="Do not print the symbol table after a successful parse",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging)",
)
@click.version_option(version=__version__, prog_name="pl0parse")
def main(
    input_file: Path,
    output: Optional[Path],
    lexeme_list: bool,
    tokens: bool,
    no_symbols: bool,
    verbose: bool,
) -> None:
    """
    Check the syntax of a PL/0 program.

    INPUT_FILE is the PL/0 source file, or a lexeme list with -l.

    The derivation trace lists every grammar rule entered and every token
    consumed. On success the declared constants, variables and procedures
    follow with their nesting level.

    \b
    Examples:
        pl0parse prog.pl0                # Trace to stdout
        pl0parse prog.pl0 -o prog.out    # Trace to a file
        pl0parse -l lexemes.txt          # Numeric lexeme list input
        pl0parse --tokens prog.pl0       # Token list only

    Exit status is 0 when the program is accepted and 1 when it is
    rejected.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        text = input_file.read_text(encoding="utf-8")
        if lexeme_list:
            token_list = read_token_list(text)
        else:
            token_list = tokenize(text, str(input_file))

        if verbose:
            click.echo(f"Read {len(token_list)} tokens from {input_file}", err=True)

        if tokens:
            click.echo(format_token_list(token_list))
            for token in token_list:
                click.echo(f"{token.kind.display_name:<14} {token.lexeme}")
            return

        options = ParserOptions(write_symbol_table=not no_symbols)
        if output is not None:
            with output.open("w", encoding="utf-8") as out:
                result = Parser(token_list, out, options).parse()
            click.echo(f"Wrote trace to {output}")
        else:
            result = Parser(token_list, sys.stdout, options).parse()

    except Exception as e:
        handle_cli_exception(e, verbose)

    if not result.success:
        if output is not None:
            click.echo(str(result.error), err=True)
        sys.exit(ExitCode.SYNTAX_ERROR)


if __name__ == "__main__":
    main()

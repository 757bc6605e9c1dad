"""
vtbc - Very Tiny BASIC Compiler Command-Line Interface
======================================================

Translates a BASIC source file into C.

Usage Examples
--------------
Basic translation (writes out.c in the current directory):
    $ vtbc hello.bas

With output file:
    $ vtbc hello.bas -o hello.c

Full pipeline to an executable:
    $ vtbc hello.bas && cc out.c -o hello

Verbose mode:
    $ vtbc -v hello.bas
"""

import logging
from pathlib import Path
from typing import Optional

import click

from vtbasic import __version__
from vtbasic.cli.errors import handle_cli_exception
from vtbasic.translator import BasicCompiler, CompilerOptions
from vtbasic.translator.compiler import DEFAULT_OUTPUT


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Output C file (default: {DEFAULT_OUTPUT})",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="vtbc")
def main(input_file: Path, output: Optional[Path], verbose: bool) -> None:
    """
    Translate a BASIC program to C.

    INPUT_FILE is the BASIC source file to translate.

    \b
    Examples:
        vtbc hello.bas               # Outputs out.c
        vtbc hello.bas -o hello.c    # Specify output file
        vtbc -v hello.bas            # Verbose output

    \b
    Supported statements:
        PRINT, INPUT, LET, IF/THEN/ENDIF,
        WHILE/REPEAT/ENDWHILE, LABEL, GOTO
    """
    setup_logging(verbose)
    click.echo("Very Tiny Compiler")

    if output is None:
        output = Path(DEFAULT_OUTPUT)

    options = CompilerOptions(output_path=str(output))

    try:
        if verbose:
            click.echo(f"Translating {input_file}...")

        result = BasicCompiler(options).compile_file(input_file)

        if verbose:
            click.echo(f"Tokenized: {result.token_count} tokens")
            click.echo(f"Declared: {len(result.variables)} variables, {len(result.labels)} labels")
            click.echo(f"Wrote {len(result.output)} bytes to {result.output_path}")

        click.echo("Compiling completed.")

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()

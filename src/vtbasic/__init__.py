"""
VTBasic - Very Tiny BASIC to C Compiler
=======================================

This package translates programs written in a minimal BASIC dialect
into C source code in a single pass, with no intermediate tree.

Main Components
---------------
- **translator**: lexer, syntax-directed translator and C emitter
- **cli**: the ``vtbc`` command-line tool

Quick Start
-----------
Translate a string:
    >>> from vtbasic import translate
    >>> c_code = translate('PRINT "hello, world"')

Translate a file:
    >>> from vtbasic import BasicCompiler
    >>> result = BasicCompiler().compile_file("hello.bas")
    >>> result.output_path
    PosixPath('out.c')

Or use the command-line tool:
    $ vtbc hello.bas
    $ cc out.c -o hello
"""

__version__ = "1.0.0"

from vtbasic.errors import VTBasicError, SourceLocation
from vtbasic.translator import (
    BasicCompiler,
    CompilerOptions,
    CompilerResult,
    translate,
    translate_file,
    BasicError,
    LexicalError,
    BasicSyntaxError,
    SemanticError,
)

__all__ = [
    "__version__",
    "VTBasicError",
    "SourceLocation",
    "BasicCompiler",
    "CompilerOptions",
    "CompilerResult",
    "translate",
    "translate_file",
    "BasicError",
    "LexicalError",
    "BasicSyntaxError",
    "SemanticError",
]

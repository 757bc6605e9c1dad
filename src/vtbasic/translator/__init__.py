"""
BASIC to C Translator
=====================

One-pass translator from a minimal BASIC dialect to C. The lexer feeds
tokens on demand to a recursive descent translator, which writes C
fragments into an emitter as it recognizes each grammar rule.

Language Summary
----------------
    PRINT "text" | PRINT expression
    INPUT var
    LET var = expression
    IF comparison THEN ... ENDIF
    WHILE comparison REPEAT ... ENDWHILE
    LABEL name
    GOTO name

All variables are floats. Comments start with '#'.

Example
-------
>>> from vtbasic.translator import translate
>>> print(translate('LET a = 5\\nPRINT a'))
"""

from vtbasic.translator.compiler import (
    BasicCompiler,
    CompilerOptions,
    CompilerResult,
    translate,
    translate_file,
)
from vtbasic.translator.errors import (
    BasicError,
    LexicalError,
    BasicSyntaxError,
    SemanticError,
    InvalidCharacterError,
    MalformedNumberError,
    IllegalStringCharacterError,
    UnterminatedStringError,
    UnexpectedTokenError,
    InvalidStatementError,
    UndeclaredVariableError,
    DuplicateLabelError,
    UndefinedLabelError,
)
from vtbasic.translator.tokens import Token, TokenType, KEYWORDS
from vtbasic.translator.lexer import Lexer
from vtbasic.translator.emitter import Emitter
from vtbasic.translator.translator import Translator

__all__ = [
    # Main API
    "BasicCompiler",
    "CompilerOptions",
    "CompilerResult",
    "translate",
    "translate_file",
    # Pipeline
    "Lexer",
    "Translator",
    "Emitter",
    "Token",
    "TokenType",
    "KEYWORDS",
    # Errors
    "BasicError",
    "LexicalError",
    "BasicSyntaxError",
    "SemanticError",
    "InvalidCharacterError",
    "MalformedNumberError",
    "IllegalStringCharacterError",
    "UnterminatedStringError",
    "UnexpectedTokenError",
    "InvalidStatementError",
    "UndeclaredVariableError",
    "DuplicateLabelError",
    "UndefinedLabelError",
]

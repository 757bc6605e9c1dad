"""
Translator Error Hierarchy
==========================

Exceptions raised while translating a BASIC program to C. All of them
inherit from BasicError, which itself inherits from VTBasicError.

Exception Hierarchy
-------------------
BasicError (base for all translation errors)
├── LexicalError - malformed input at the character level
│   ├── InvalidCharacterError - unexpected character (including bare '!')
│   ├── MalformedNumberError - '.' not followed by a digit
│   ├── IllegalStringCharacterError - forbidden character inside a string
│   └── UnterminatedStringError - string runs into a newline
├── BasicSyntaxError - token stream does not match the grammar
│   ├── UnexpectedTokenError - expected one kind, got another
│   └── InvalidStatementError - no statement starts with this token
└── SemanticError - well-formed but meaningless program
    ├── UndeclaredVariableError - variable read before LET/INPUT
    ├── DuplicateLabelError - LABEL declared twice
    └── UndefinedLabelError - GOTO target never declared

The first error aborts the translation; there is no recovery.

Example:
    prog.bas:2:7: error: referencing variable before assignment: a
        PRINT a
              ^
"""

from typing import Optional

from vtbasic.errors import VTBasicError, SourceLocation


# =============================================================================
# Base Translation Exception
# =============================================================================

class BasicError(VTBasicError):
    """
    Base exception for all translation errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The actual source text at the error location
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with location, source context, and hint."""
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(BasicError):
    """
    Error converting characters into tokens.

    Examples:
        - Unknown character such as '$' or '@'
        - '!' not followed by '='
        - Number ending in '.'
        - Tab, backslash or '%' inside a string
    """
    pass


class InvalidCharacterError(LexicalError):
    """Character that cannot start any token."""

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"invalid character '{char}' (0x{ord(char):02X})",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class MalformedNumberError(LexicalError):
    """Decimal point that is not followed by at least one digit."""

    def __init__(
        self,
        lexeme: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.lexeme = lexeme
        super().__init__(
            f"malformed number '{lexeme}'",
            location=location,
            hint="a decimal point must be followed by at least one digit",
            source_line=source_line,
        )


class IllegalStringCharacterError(LexicalError):
    """
    Forbidden character inside a string literal.

    Strings are copied verbatim into a printf format, so escapes and
    format directives are not allowed.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"illegal character in string: {char!r}",
            location=location,
            hint="strings may not contain tabs, carriage returns, '\\' or '%'",
            source_line=source_line,
        )


class UnterminatedStringError(LexicalError):
    """String literal not closed before the end of the line."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )


# =============================================================================
# Syntax Errors
# =============================================================================

class BasicSyntaxError(BasicError):
    """Token stream does not match what a grammar rule requires."""
    pass


class UnexpectedTokenError(BasicSyntaxError):
    """
    Current token is not the one the grammar requires.

    Attributes:
        expected: Name of the expected token kind (or a description)
        found: Name of the kind actually found
        lexeme: Text of the offending token
    """

    def __init__(
        self,
        expected: str,
        found: str,
        lexeme: str = "",
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.expected = expected
        self.found = found
        self.lexeme = lexeme
        super().__init__(
            f"expected {expected}, got {found}",
            location=location,
            hint=f"unexpected token {lexeme!r}" if lexeme.strip() else None,
            source_line=source_line,
        )


class InvalidStatementError(BasicSyntaxError):
    """No statement form begins with the current token."""

    def __init__(
        self,
        lexeme: str,
        kind: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.lexeme = lexeme
        self.kind = kind
        super().__init__(
            f"invalid statement at {lexeme!r} ({kind})",
            location=location,
            hint="statements start with PRINT, IF, WHILE, LABEL, GOTO, LET or INPUT",
            source_line=source_line,
        )


# =============================================================================
# Semantic Errors
# =============================================================================

class SemanticError(BasicError):
    """Program is well-formed but violates a declaration rule."""
    pass


class UndeclaredVariableError(SemanticError):
    """Variable used in an expression before any LET or INPUT of it."""

    def __init__(
        self,
        name: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.name = name
        super().__init__(
            f"referencing variable before assignment: {name}",
            location=location,
            hint=f"assign '{name}' with LET or INPUT before using it",
            source_line=source_line,
        )


class DuplicateLabelError(SemanticError):
    """Label declared more than once."""

    def __init__(
        self,
        name: str,
        location: Optional[SourceLocation] = None,
        original_location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.name = name
        self.original_location = original_location

        hint = None
        if original_location:
            hint = f"'{name}' was first declared at {original_location}"

        super().__init__(
            f"label already exists: {name}",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class UndefinedLabelError(SemanticError):
    """GOTO target that is not declared anywhere in the program."""

    def __init__(
        self,
        name: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.name = name
        super().__init__(
            f"GOTO to undeclared label: {name}",
            location=location,
            hint=f"add 'LABEL {name}' somewhere in the program",
            source_line=source_line,
        )

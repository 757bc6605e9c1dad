"""
VTBasic Error Hierarchy
=======================

This module defines the root of the exception hierarchy for the whole
package. All exceptions inherit from VTBasicError, allowing callers to
catch every package-related error with a single except clause.

Exception Hierarchy
-------------------
VTBasicError (base)
└── BasicError (translation errors, see vtbasic.translator.errors)
    ├── LexicalError
    ├── BasicSyntaxError
    └── SemanticError

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class VTBasicError(Exception):
    """
    Base exception for all VTBasic errors.

    Example:
        try:
            translate(source)
        except VTBasicError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"

"""
BASIC to C Translator
=====================

Recursive descent parser that emits C code as each grammar rule is
recognized. No syntax tree is built: the order in which rules are
matched is the order in which C fragments are emitted.

Grammar (EBNF)
--------------
program    ::= {statement}
statement  ::= "PRINT" (expression | string) nl
             | "IF" comparison "THEN" nl {statement} "ENDIF" nl
             | "WHILE" comparison "REPEAT" nl {statement} "ENDWHILE" nl
             | "LABEL" ident nl
             | "GOTO" ident nl
             | "LET" ident "=" expression nl
             | "INPUT" ident nl
comparison ::= expression (("==" | "!=" | ">" | ">=" | "<" | "<=" | "=") expression)+
expression ::= term {("-" | "+") term}
term       ::= unary {("/" | "*") unary}
unary      ::= ["+" | "-"] primary
primary    ::= number | ident
nl         ::= NEWLINE+

Symbol Tables
-------------
- variables: names assigned by LET or INPUT; must exist before use
- declared labels: names introduced by LABEL; at most once each
- referenced labels: names used by GOTO; checked against the declared
  labels only after the whole program has been parsed, so forward
  jumps are legal

Example Usage
-------------
>>> from vtbasic.translator.lexer import Lexer
>>> from vtbasic.translator.emitter import Emitter
>>> from vtbasic.translator.translator import Translator
>>> emitter = Emitter()
>>> Translator(Lexer('LET a = 5\\nPRINT a'), emitter).program()
>>> print(emitter.finalize())
#include <stdio.h>
int main(void){
float a;
a = 5;
printf("%.2f\\n", (float)(a));
return 0;
}
"""

from typing import Optional

from vtbasic.errors import SourceLocation
from vtbasic.translator.lexer import Lexer
from vtbasic.translator.emitter import Emitter
from vtbasic.translator.tokens import Token, TokenType, COMPARISON_OPERATORS
from vtbasic.translator.errors import (
    UnexpectedTokenError,
    InvalidStatementError,
    UndeclaredVariableError,
    DuplicateLabelError,
    UndefinedLabelError,
)


class Translator:
    """
    Syntax-directed BASIC to C translator.

    Holds two in-flight tokens: ``current`` and the one-token
    ``lookahead``. Both are filled when the translator is created.

    Attributes:
        lexer: Token source
        emitter: Output buffers receiving the generated C
        current: Token being examined
        lookahead: Token after current
        variables: Declared variable names, in first-use order
        labels_declared: Declared label names mapped to their location
        labels_gotoed: Referenced label names mapped to their first GOTO
        token_count: Number of tokens pulled from the lexer
    """

    def __init__(self, lexer: Lexer, emitter: Emitter):
        self.lexer = lexer
        self.emitter = emitter
        # Only '\n' ends a line, matching the lexer's line numbers
        self._source_lines = lexer.source.split("\n")

        # dicts keep insertion order, so reports and declarations are stable
        self.variables: dict[str, SourceLocation] = {}
        self.labels_declared: dict[str, SourceLocation] = {}
        self.labels_gotoed: dict[str, SourceLocation] = {}

        self._statement_handlers = {
            TokenType.PRINT: self._print_statement,
            TokenType.IF: self._if_statement,
            TokenType.WHILE: self._while_statement,
            TokenType.LABEL: self._label_statement,
            TokenType.GOTO: self._goto_statement,
            TokenType.LET: self._let_statement,
            TokenType.INPUT: self._input_statement,
        }

        self.token_count = 0
        self.current: Optional[Token] = None
        self.lookahead: Optional[Token] = None

        # Twice, to fill both current and lookahead
        self.advance()
        self.advance()

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def token_is(self, kind: TokenType) -> bool:
        """Return True if the current token is of the given kind."""
        return self.current.kind == kind

    def lookahead_is(self, kind: TokenType) -> bool:
        """Return True if the lookahead token is of the given kind."""
        return self.lookahead.kind == kind

    def advance(self) -> None:
        """Shift lookahead into current and read a fresh lookahead."""
        self.current = self.lookahead
        self.lookahead = self.lexer.next_token()
        self.token_count += 1

    def expect(self, kind: TokenType) -> Token:
        """
        Consume the current token, which must be of the given kind.

        Returns:
            The consumed token

        Raises:
            UnexpectedTokenError: If the current token is of another kind
        """
        token = self.current
        if token.kind != kind:
            raise UnexpectedTokenError(
                kind.name,
                token.kind.name,
                token.text,
                token.location,
                self._get_source_line(token.line),
            )
        self.advance()
        return token

    def _get_source_line(self, line: int) -> Optional[str]:
        """Get source line for error reporting."""
        if 0 < line <= len(self._source_lines):
            return self._source_lines[line - 1]
        return None

    # =========================================================================
    # Program
    # =========================================================================

    def program(self) -> None:
        """
        Translate the whole program.

        Raises:
            BasicError: On the first lexical, syntax or semantic error
        """
        self.emitter.header_line("#include <stdio.h>")
        self.emitter.header_line("int main(void){")

        # Leading blank lines
        while self.token_is(TokenType.NEWLINE):
            self.advance()

        while not self.token_is(TokenType.EOF):
            self._statement()

        self.emitter.emit_line("return 0;")
        self.emitter.emit_line("}")

        self._check_labels()

    def _check_labels(self) -> None:
        """Every GOTO target must have been declared somewhere."""
        for name, location in self.labels_gotoed.items():
            if name not in self.labels_declared:
                raise UndefinedLabelError(
                    name,
                    location,
                    self._get_source_line(location.line),
                )

    # =========================================================================
    # Statements
    # =========================================================================

    def _statement(self) -> None:
        """Translate one statement and its terminating newline(s)."""
        handler = self._statement_handlers.get(self.current.kind)
        if handler is None:
            raise InvalidStatementError(
                self.current.text,
                self.current.kind.name,
                self.current.location,
                self._get_source_line(self.current.line),
            )

        handler()
        self._newline()

    def _print_statement(self) -> None:
        """PRINT (expression | string)"""
        self.advance()

        if self.token_is(TokenType.STRING):
            self.emitter.emit_line(f'printf("{self.current.text}\\n");')
            self.advance()
        else:
            self.emitter.emit('printf("%.2f\\n", (float)(')
            self._expression()
            self.emitter.emit_line("));")

    def _if_statement(self) -> None:
        """IF comparison THEN nl {statement} ENDIF"""
        self.advance()
        self.emitter.emit("if(")
        self._comparison()

        self.expect(TokenType.THEN)
        self._newline()
        self.emitter.emit_line("){")

        while not self.token_is(TokenType.ENDIF) and not self.token_is(TokenType.EOF):
            self._statement()

        self.expect(TokenType.ENDIF)
        self.emitter.emit_line("}")

    def _while_statement(self) -> None:
        """WHILE comparison REPEAT nl {statement} ENDWHILE"""
        self.advance()
        self.emitter.emit("while(")
        self._comparison()

        self.expect(TokenType.REPEAT)
        self._newline()
        self.emitter.emit_line("){")

        while not self.token_is(TokenType.ENDWHILE) and not self.token_is(TokenType.EOF):
            self._statement()

        self.expect(TokenType.ENDWHILE)
        self.emitter.emit_line("}")

    def _label_statement(self) -> None:
        """LABEL ident"""
        self.advance()
        token = self.expect(TokenType.IDENTIFIER)

        if token.text in self.labels_declared:
            raise DuplicateLabelError(
                token.text,
                token.location,
                self.labels_declared[token.text],
                self._get_source_line(token.line),
            )
        self.labels_declared[token.text] = token.location
        self.emitter.emit_line(f"{token.text}:")

    def _goto_statement(self) -> None:
        """GOTO ident"""
        self.advance()
        token = self.expect(TokenType.IDENTIFIER)

        self.labels_gotoed.setdefault(token.text, token.location)
        self.emitter.emit_line(f"goto {token.text};")

    def _let_statement(self) -> None:
        """LET ident = expression"""
        self.advance()
        token = self.expect(TokenType.IDENTIFIER)
        self._declare_variable(token)

        self.emitter.emit(f"{token.text} = ")
        self.expect(TokenType.EQ)
        self._expression()
        self.emitter.emit_line(";")

    def _input_statement(self) -> None:
        """INPUT ident"""
        self.advance()
        token = self.expect(TokenType.IDENTIFIER)
        self._declare_variable(token)

        # On a failed read, zero the variable and drop the bad input
        name = token.text
        self.emitter.emit_line(f'if(0 == scanf("%f", &{name})) {{')
        self.emitter.emit_line(f"{name} = 0;")
        self.emitter.emit_line('scanf("%*s");')
        self.emitter.emit_line("}")

    def _declare_variable(self, token: Token) -> None:
        """Add a float declaration to the header the first time a name is assigned."""
        if token.text not in self.variables:
            self.variables[token.text] = token.location
            self.emitter.header_line(f"float {token.text};")

    # =========================================================================
    # Expressions
    # =========================================================================

    def _is_comparison_operator(self) -> bool:
        return self.current.kind in COMPARISON_OPERATORS

    def _comparison(self) -> None:
        """expression (comparison_operator expression)+"""
        self._expression()

        if not self._is_comparison_operator():
            raise UnexpectedTokenError(
                "comparison operator",
                self.current.kind.name,
                self.current.text,
                self.current.location,
                self._get_source_line(self.current.line),
            )

        while self._is_comparison_operator():
            self.emitter.emit(self.current.text)
            self.advance()
            self._expression()

    def _expression(self) -> None:
        """term {(- | +) term}"""
        self._term()
        while self.token_is(TokenType.MINUS) or self.token_is(TokenType.PLUS):
            self.emitter.emit(self.current.text)
            self.advance()
            self._term()

    def _term(self) -> None:
        """unary {(/ | *) unary}"""
        self._unary()
        while self.token_is(TokenType.SLASH) or self.token_is(TokenType.ASTERISK):
            self.emitter.emit(self.current.text)
            self.advance()
            self._unary()

    def _unary(self) -> None:
        """[+ | -] primary"""
        if self.token_is(TokenType.PLUS) or self.token_is(TokenType.MINUS):
            self.emitter.emit(self.current.text)
            self.advance()
        self._primary()

    def _primary(self) -> None:
        """number | ident"""
        token = self.current

        if self.token_is(TokenType.NUMBER):
            self.emitter.emit(token.text)
            self.advance()
        elif self.token_is(TokenType.IDENTIFIER):
            if token.text not in self.variables:
                raise UndeclaredVariableError(
                    token.text,
                    token.location,
                    self._get_source_line(token.line),
                )
            self.emitter.emit(token.text)
            self.advance()
        else:
            raise UnexpectedTokenError(
                "NUMBER or IDENTIFIER",
                token.kind.name,
                token.text,
                token.location,
                self._get_source_line(token.line),
            )

    def _newline(self) -> None:
        """One required NEWLINE, then any number of blank lines."""
        self.expect(TokenType.NEWLINE)
        while self.token_is(TokenType.NEWLINE):
            self.advance()

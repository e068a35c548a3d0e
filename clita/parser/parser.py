"""
Clita Recursive Descent Parser

One method per grammar production. Productions share a token buffer and a
cursor; alternatives are chosen by looking at most two tokens ahead, so the
parser never backtracks and runs in time linear in the number of tokens.

Author: xwest
"""

from typing import Iterable, List, Optional, Union

from ..lexer.tokens import (
    Token, TokenType, SourceLocation, ARITHMETIC_OPERATORS, COMPARISON_OPERATORS,
    BOOLEAN_WORDS
)
from ..lexer.lexer import Lexer
from .ast_nodes import *
from .errors import (
    create_unexpected_token_error, create_unexpected_eof_error,
    create_no_matching_production_error
)


class Parser:
    """
    Clita recursive descent parser.

    Holds the token buffer produced by the lexer (always terminated by an EOF
    token) and a cursor that only moves forward.
    """

    # Production name -> method, for callers that pick an entry point by name
    ENTRY_POINTS = {
        "program": "parse_program",
        "block": "parse_block",
        "statement": "parse_statement",
        "symbol_declaration": "parse_symbol_declaration",
        "symbol_assignment": "parse_symbol_assignment",
        "pragma": "parse_pragma",
        "expression": "parse_expression",
        "binary_expr": "parse_binary_expr",
        "comparison_expr": "parse_comparison_expr",
        "unary_expr": "parse_unary_expr",
        "literal_expr": "parse_literal_expr",
        "symbol_literal": "parse_symbol_literal",
        "numeric_literal": "parse_numeric_literal",
        "boolean_literal": "parse_boolean_literal",
    }

    def __init__(self, tokens: List[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer; an EOF token is appended
                if the list does not end with one
        """
        self.tokens = list(tokens)
        self.current = 0

        if not self.tokens or self.tokens[-1].kind != TokenType.EOF:
            self.tokens.append(self._synthesize_eof())

    @classmethod
    def from_source(cls, source: str, filename: str = "<string>",
                    reserved_words: Optional[Iterable[str]] = None) -> 'Parser':
        """Tokenize `source` completely and return a parser over the tokens."""
        return cls(Lexer(source, filename, reserved_words).tokenize())

    def _synthesize_eof(self) -> Token:
        """EOF token placed just past the last token, on the same line."""
        if not self.tokens:
            return Token(TokenType.EOF, "", 0, 0, SourceLocation("<unknown>", 1, 1, 0))

        last = self.tokens[-1]
        column = last.location.column + (last.end - last.pos)
        location = SourceLocation(last.location.filename, last.location.line, column, last.end)
        return Token(TokenType.EOF, "", last.end, last.end, location)

    def parse(self, entry: str = "program", allow_trailing: bool = False) -> ASTNode:
        """
        Parse the token stream starting from the named production.

        Args:
            entry: Key of ENTRY_POINTS
            allow_trailing: Accept tokens left over after the production

        Returns:
            The AST node built by the production

        Raises:
            ParseError: On the first syntax error
            ValueError: If `entry` is not a known production
        """
        if entry not in self.ENTRY_POINTS:
            choices = ", ".join(sorted(self.ENTRY_POINTS))
            raise ValueError(f"Unknown entry production {entry!r} (expected one of: {choices})")

        node = getattr(self, self.ENTRY_POINTS[entry])()

        if not allow_trailing and not self.peek().is_eof:
            raise create_unexpected_token_error(TokenType.EOF, self.peek())

        return node

    # ------------------------------------------------------------------
    # Token buffer operations
    # ------------------------------------------------------------------

    def consume(self) -> Token:
        """Return the current token and advance past it. EOF is never consumed."""
        if self.current >= len(self.tokens) - 1:
            raise create_unexpected_eof_error(None, self.tokens[-1])
        token = self.tokens[self.current]
        self.current += 1
        return token

    def peek(self) -> Token:
        """Return current token without consuming."""
        return self.look_ahead(0)

    def look_ahead(self, n: int) -> Token:
        """Return the token `n` positions past the cursor; EOF past the end."""
        if n < 0:
            raise ValueError("look_ahead only looks forward")
        index = self.current + n
        if index >= len(self.tokens):
            return self.tokens[-1]
        return self.tokens[index]

    def expect(self, kind: TokenType) -> Token:
        """Consume token of expected kind or raise error."""
        token = self.peek()
        if token.kind != kind:
            raise create_unexpected_token_error(kind, token)
        return self.consume()

    def consume_dot(self) -> Token:
        """Consume the '.' that terminates a statement."""
        return self.expect(TokenType.DOT)

    def _span(self, start: int) -> SourceSpan:
        """Span from the token at index `start` to the last consumed token."""
        first = self.tokens[start]
        if self.current <= start:
            return SourceSpan(first.pos, first.pos)
        return SourceSpan(first.pos, self.tokens[self.current - 1].end)

    # ------------------------------------------------------------------
    # Top level and statements
    # ------------------------------------------------------------------

    def parse_program(self) -> Program:
        """Parse a whole source text into a Program."""
        start = self.current
        body = self.parse_block()
        return Program(body, self._span(start))

    def parse_block(self) -> Block:
        """Parse statements until the end of input."""
        start = self.current
        statements = []
        while not self.peek().is_eof:
            statements.append(self.parse_statement())
        return Block(tuple(statements), self._span(start))

    def parse_statement(self) -> AnyStatement:
        """Dispatch on the token after the identifier: ':' declares, '=' assigns."""
        token = self.peek()
        if token.kind == TokenType.SYMBOL:
            following = self.look_ahead(1)
            if following.kind == TokenType.COLON:
                return self.parse_symbol_declaration()
            if following.kind == TokenType.EQUALS:
                return self.parse_symbol_assignment()
            token = following

        raise create_no_matching_production_error(
            "statement", token, ["'name := value.'", "'name = value.'"]
        )

    def parse_symbol_declaration(self) -> SymbolDeclaration:
        """SYMBOL ':' '=' expression '.'"""
        start = self.current
        identifier = self.parse_symbol_literal()
        self.expect(TokenType.COLON)
        self.expect(TokenType.EQUALS)
        init = self.parse_expression()
        self.consume_dot()
        return SymbolDeclaration(identifier, init, self._span(start))

    def parse_symbol_assignment(self) -> SymbolAssignment:
        """SYMBOL '=' expression '.'"""
        start = self.current
        identifier = self.parse_symbol_literal()
        self.expect(TokenType.EQUALS)
        value = self.parse_expression()
        self.consume_dot()
        return SymbolAssignment(identifier, value, self._span(start))

    def parse_pragma(self) -> Pragma:
        """'`' SYMBOL '[' numeric_literal ']' '`'"""
        start = self.current
        self.expect(TokenType.BACKTICK)
        name = self.expect(TokenType.SYMBOL).text
        self.expect(TokenType.BRACKET_LEFT)
        argument = self.parse_numeric_literal()
        self.expect(TokenType.BRACKET_RIGHT)
        self.expect(TokenType.BACKTICK)
        return Pragma(name, argument, self._span(start))

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def parse_expression(self) -> AnyExpression:
        """
        Pick the expression production from the next two tokens.

        A leading '-' or '+' is a unary expression, a number followed by a
        comparison operator is a comparison, and any other literal is a
        binary expression or, with no operator after it, the literal itself.
        """
        token = self.peek()
        if token.kind in (TokenType.MINUS, TokenType.PLUS):
            return self.parse_unary_expr()
        if token.kind == TokenType.NUMERIC and self.look_ahead(1).kind in COMPARISON_OPERATORS:
            return self.parse_comparison_expr()
        if token.is_literal:
            return self.parse_binary_expr()

        raise create_no_matching_production_error(
            "expression", token, ["a number", "a symbol", "true", "false", "'-'", "'--'", "'++'"]
        )

    def parse_binary_expr(self) -> AnyExpression:
        """literal_expr ('+'|'-'|'*'|'/') expression, or the literal alone."""
        start = self.current
        left = self.parse_literal_expr()
        if self.peek().kind not in ARITHMETIC_OPERATORS:
            return left

        operator = ARITHMETIC_OPERATORS[self.consume().kind]
        right = self.parse_expression()
        return BinaryExpr(left, operator, right, self._span(start))

    def parse_comparison_expr(self) -> Union[ComparisonExpr, NumericLiteral]:
        """numeric_literal ('<'|'<='|'>'|'>='|'=') numeric_literal, or the number alone."""
        start = self.current
        left = self.parse_numeric_literal()
        if self.peek().kind not in COMPARISON_OPERATORS:
            return left

        operator = COMPARISON_OPERATORS[self.consume().kind]
        right = self.parse_numeric_literal()
        return ComparisonExpr(left, operator, right, self._span(start))

    def parse_unary_expr(self) -> UnaryExpr:
        """('-' | '--' | '++') literal_expr; doubled operators must be adjacent."""
        start = self.current
        first = self.peek()

        if first.kind == TokenType.MINUS:
            self.consume()
            second = self.peek()
            if second.kind == TokenType.MINUS and second.pos == first.end:
                self.consume()
                operator = "--"
            else:
                operator = "-"
        elif first.kind == TokenType.PLUS:
            self.consume()
            second = self.peek()
            if second.kind != TokenType.PLUS:
                raise create_unexpected_token_error(TokenType.PLUS, second)
            if second.pos != first.end:
                raise create_no_matching_production_error("unary operator", second, ["'++'"])
            self.consume()
            operator = "++"
        else:
            raise create_no_matching_production_error(
                "unary expression", first, ["'-'", "'--'", "'++'"]
            )

        operand = self.parse_literal_expr()
        return UnaryExpr(operator, operand, self._span(start))

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def parse_literal_expr(self) -> LiteralExpr:
        """Dispatch to the numeric, boolean or symbol literal."""
        token = self.peek()
        if token.kind == TokenType.NUMERIC:
            return self.parse_numeric_literal()
        if token.is_boolean_word:
            return self.parse_boolean_literal()
        if token.kind == TokenType.SYMBOL:
            return self.parse_symbol_literal()

        raise create_no_matching_production_error(
            "literal", token, ["a number", "a symbol", "true", "false"]
        )

    def parse_symbol_literal(self) -> SymbolLiteral:
        start = self.current
        token = self.expect(TokenType.SYMBOL)
        return SymbolLiteral(token.text, self._span(start))

    def parse_numeric_literal(self) -> NumericLiteral:
        start = self.current
        token = self.expect(TokenType.NUMERIC)
        value = token.value if token.value is not None else int(token.text)
        return NumericLiteral(value, self._span(start))

    def parse_boolean_literal(self) -> BooleanLiteral:
        start = self.current
        token = self.peek()
        if token.kind not in (TokenType.SYMBOL, TokenType.KEYWORD):
            raise create_unexpected_token_error(TokenType.SYMBOL, token)
        if token.text not in BOOLEAN_WORDS:
            raise create_no_matching_production_error("boolean literal", token, ["true", "false"])

        self.consume()
        return BooleanLiteral(BOOLEAN_WORDS[token.text], self._span(start))


def parse_string(source: str, entry: str = "program", filename: str = "<string>",
                 reserved_words: Optional[Iterable[str]] = None,
                 allow_trailing: bool = False) -> ASTNode:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        entry: Production to start from (see Parser.ENTRY_POINTS)
        filename: Filename for error reporting
        reserved_words: Words lexed as KEYWORD instead of SYMBOL
        allow_trailing: Accept input left over after the production

    Returns:
        AST node built by the entry production

    Raises:
        LexerError: If tokenizing fails
        ParseError: If parsing fails
    """
    parser = Parser.from_source(source, filename, reserved_words)
    return parser.parse(entry, allow_trailing)


def parse_file(filepath: str, entry: str = "program",
               reserved_words: Optional[Iterable[str]] = None) -> ASTNode:
    """
    Convenience function to parse a source file.

    Raises:
        LexerError: If tokenizing fails
        ParseError: If parsing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return parse_string(source, entry, filepath, reserved_words)

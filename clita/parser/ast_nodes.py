"""
Abstract Syntax Tree node definitions for Clita.

Defines the closed set of AST node types produced by the parser. Nodes are
frozen dataclasses: a tree is immutable once built and every composite node
owns its children. Each node records the source span it was parsed from;
spans are ignored by equality so trees compare by structure alone.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple, Union
from dataclasses import dataclass, field
from enum import Enum


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Top-level
    PROGRAM = "Program"
    BLOCK = "Block"

    # Statements
    SYMBOL_DECLARATION = "SymbolDeclaration"
    SYMBOL_ASSIGNMENT = "SymbolAssignment"

    # Directives
    PRAGMA = "Pragma"

    # Literals
    SYMBOL_LITERAL = "SymbolLiteral"
    NUMERIC_LITERAL = "NumericLiteral"
    BOOLEAN_LITERAL = "BooleanLiteral"

    # Expressions
    BINARY_EXPR = "BinaryExpr"
    COMPARISON_EXPR = "ComparisonExpr"
    UNARY_EXPR = "UnaryExpr"


@dataclass(frozen=True)
class SourceSpan:
    """Half-open range of source offsets a node was parsed from."""
    pos: int
    end: int

    def __str__(self) -> str:
        return f"{self.pos}..{self.end}"


class ASTVisitor(ABC):
    """
    Base visitor for traversing AST nodes.

    `visit` dispatches to `visit_<NodeType>` (for example
    `visit_BinaryExpr`); nodes without a specific method go to
    `generic_visit`.
    """

    def visit(self, node: 'ASTNode') -> Any:
        method = getattr(self, f"visit_{node.node_type.value}", self.generic_visit)
        return method(node)

    @abstractmethod
    def generic_visit(self, node: 'ASTNode') -> Any:
        """Visit a node that has no specific handler."""
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ASTNodeType

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> Tuple['ASTNode', ...]:
        """Get all child nodes in source order."""
        pass

    def walk(self):
        """Yield this node and all descendants, depth first."""
        yield self
        for child in self.children():
            yield from child.walk()


class Expression(ASTNode):
    """Base class for expressions."""
    pass


class Literal(Expression):
    """Base class for single-token literal expressions."""

    def children(self) -> Tuple[ASTNode, ...]:
        return ()


class Statement(ASTNode):
    """Base class for statements."""
    pass


# ============================================================================
# Literals
# ============================================================================

@dataclass(frozen=True)
class SymbolLiteral(Literal):
    """Reference to a symbol by name."""
    name: str
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.SYMBOL_LITERAL


@dataclass(frozen=True)
class NumericLiteral(Literal):
    """Integer literal."""
    value: int
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.NUMERIC_LITERAL


@dataclass(frozen=True)
class BooleanLiteral(Literal):
    """The words true and false."""
    value: bool
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.BOOLEAN_LITERAL


# ============================================================================
# Expressions
# ============================================================================

@dataclass(frozen=True)
class BinaryExpr(Expression):
    """Arithmetic expression: literal followed by + - * / and an expression."""
    left: Expression
    op: str
    right: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.BINARY_EXPR

    def children(self) -> Tuple[ASTNode, ...]:
        return (self.left, self.right)


@dataclass(frozen=True)
class ComparisonExpr(Expression):
    """Comparison between two numeric literals."""
    left: NumericLiteral
    op: str
    right: NumericLiteral
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.COMPARISON_EXPR

    def children(self) -> Tuple[ASTNode, ...]:
        return (self.left, self.right)


@dataclass(frozen=True)
class UnaryExpr(Expression):
    """Prefix operator (-, -- or ++) applied to a literal."""
    op: str
    operand: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.UNARY_EXPR

    def children(self) -> Tuple[ASTNode, ...]:
        return (self.operand,)


# ============================================================================
# Statements
# ============================================================================

@dataclass(frozen=True)
class SymbolDeclaration(Statement):
    """`name := expression.`"""
    identifier: SymbolLiteral
    init: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.SYMBOL_DECLARATION

    def children(self) -> Tuple[ASTNode, ...]:
        return (self.identifier, self.init)


@dataclass(frozen=True)
class SymbolAssignment(Statement):
    """`name = expression.`"""
    identifier: SymbolLiteral
    value: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.SYMBOL_ASSIGNMENT

    def children(self) -> Tuple[ASTNode, ...]:
        return (self.identifier, self.value)


@dataclass(frozen=True)
class Pragma(ASTNode):
    """Compiler directive with one integer argument: `` `name[3]` ``."""
    name: str
    argument: NumericLiteral
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.PRAGMA

    def children(self) -> Tuple[ASTNode, ...]:
        return (self.argument,)


# ============================================================================
# Top-level nodes
# ============================================================================

@dataclass(frozen=True)
class Block(ASTNode):
    """Ordered sequence of statements."""
    statements: Tuple[Statement, ...] = ()
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.BLOCK

    def __post_init__(self):
        # Accept any iterable but always store a tuple
        object.__setattr__(self, "statements", tuple(self.statements))

    def children(self) -> Tuple[ASTNode, ...]:
        return self.statements


@dataclass(frozen=True)
class Program(ASTNode):
    """Root AST node representing a complete source text."""
    body: Block = field(default_factory=Block)
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.PROGRAM

    def children(self) -> Tuple[ASTNode, ...]:
        return (self.body,)


LiteralExpr = Union[NumericLiteral, SymbolLiteral, BooleanLiteral]
AnyExpression = Union[BinaryExpr, ComparisonExpr, UnaryExpr, LiteralExpr]
AnyStatement = Union[SymbolDeclaration, SymbolAssignment]

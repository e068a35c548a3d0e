"""
AST printers for Clita.

TreePrinter renders an indented outline of a tree, one node per line.
SourceFormatter turns a tree back into Clita source; parsing its output
with the same entry production gives an equal tree.

Author: xwest
"""

from typing import List

from .parser.ast_nodes import (
    ASTNode, ASTVisitor, Program, Block, SymbolDeclaration, SymbolAssignment,
    Pragma, SymbolLiteral, NumericLiteral, BooleanLiteral, BinaryExpr,
    ComparisonExpr, UnaryExpr
)


class TreePrinter(ASTVisitor):
    """Indented outline of an AST."""

    def __init__(self, indent: str = "  ", show_spans: bool = False):
        self.indent = indent
        self.show_spans = show_spans
        self._lines: List[str] = []
        self._depth = 0

    def render(self, node: ASTNode) -> str:
        self._lines = []
        self._depth = 0
        self.visit(node)
        return "\n".join(self._lines)

    def _emit(self, node: ASTNode, detail: str = ""):
        line = f"{self.indent * self._depth}{node.node_type.value}"
        if detail:
            line += f" {detail}"
        if self.show_spans and node.span is not None:
            line += f" @{node.span}"
        self._lines.append(line)

    def _children(self, node: ASTNode):
        self._depth += 1
        for child in node.children():
            self.visit(child)
        self._depth -= 1

    def generic_visit(self, node: ASTNode):
        self._emit(node)
        self._children(node)

    def visit_SymbolLiteral(self, node: SymbolLiteral):
        self._emit(node, node.name)

    def visit_NumericLiteral(self, node: NumericLiteral):
        self._emit(node, str(node.value))

    def visit_BooleanLiteral(self, node: BooleanLiteral):
        self._emit(node, "true" if node.value else "false")

    def visit_BinaryExpr(self, node: BinaryExpr):
        self._emit(node, repr(node.op))
        self._children(node)

    def visit_ComparisonExpr(self, node: ComparisonExpr):
        self._emit(node, repr(node.op))
        self._children(node)

    def visit_UnaryExpr(self, node: UnaryExpr):
        self._emit(node, repr(node.op))
        self._children(node)

    def visit_Pragma(self, node: Pragma):
        self._emit(node, node.name)
        self._children(node)


class SourceFormatter(ASTVisitor):
    """Render an AST as Clita source text."""

    def format(self, node: ASTNode) -> str:
        return self.visit(node)

    def generic_visit(self, node: ASTNode) -> str:
        raise TypeError(f"Cannot format node of type {node.node_type.value}")

    def visit_Program(self, node: Program) -> str:
        return self.visit(node.body)

    def visit_Block(self, node: Block) -> str:
        return "\n".join(self.visit(statement) for statement in node.statements)

    def visit_SymbolDeclaration(self, node: SymbolDeclaration) -> str:
        return f"{self.visit(node.identifier)} := {self.visit(node.init)}."

    def visit_SymbolAssignment(self, node: SymbolAssignment) -> str:
        return f"{self.visit(node.identifier)} = {self.visit(node.value)}."

    def visit_Pragma(self, node: Pragma) -> str:
        return f"`{node.name}[{self.visit(node.argument)}]`"

    def visit_SymbolLiteral(self, node: SymbolLiteral) -> str:
        return node.name

    def visit_NumericLiteral(self, node: NumericLiteral) -> str:
        return str(node.value)

    def visit_BooleanLiteral(self, node: BooleanLiteral) -> str:
        return "true" if node.value else "false"

    def visit_BinaryExpr(self, node: BinaryExpr) -> str:
        return f"{self.visit(node.left)} {node.op} {self.visit(node.right)}"

    def visit_ComparisonExpr(self, node: ComparisonExpr) -> str:
        return f"{self.visit(node.left)} {node.op} {self.visit(node.right)}"

    def visit_UnaryExpr(self, node: UnaryExpr) -> str:
        return f"{node.op}{self.visit(node.operand)}"


def format_tree(node: ASTNode, show_spans: bool = False) -> str:
    """Indented outline of `node`."""
    return TreePrinter(show_spans=show_spans).render(node)


def format_source(node: ASTNode) -> str:
    """Clita source text for `node`."""
    return SourceFormatter().format(node)


def summarize(node: ASTNode) -> str:
    """One-line summary such as `<BinaryExpr>:: 20 + 5`."""
    return f"<{node.node_type.value}>:: {format_source(node)}"

"""Visitor over Letters parse trees.

Every rule handler visits the node's children by default, so a subclass only
overrides the rules it cares about.
"""

from __future__ import annotations

from typing import Any

from letters.tree import (
    AddSubExpr,
    AssignExpr,
    AssignStmt,
    AtomExpr,
    CompExpr,
    Decl,
    DeclList,
    EqualsExpr,
    Expr,
    IfStmt,
    JumpStmt,
    Local,
    MulDivExpr,
    ParseNode,
    Program,
    ReadStmt,
    Stmt,
    StmtList,
    Term,
    Terminal,
    VecIndexExpr,
    VecLit,
    WriteStmt,
)


class LettersVisitor:
    """Walks a parse tree, combining the results of visited children."""

    def visit(self, node: ParseNode | Terminal) -> Any:
        """Visit a node by letting it dispatch to the matching handler."""
        return node.accept(self)

    def visit_children(self, node: ParseNode) -> Any:
        """Visit every child in order and fold their results together."""
        result = self.default_result()
        for child in node.children:
            result = self.aggregate_result(result, child.accept(self))
        return result

    def visit_terminal(self, node: Terminal) -> Any:
        """Handle a token leaf; the default yields the default result."""
        return self.default_result()

    def default_result(self) -> Any:
        """The result of a visit that produced nothing."""
        return None

    def aggregate_result(self, aggregate: Any, next_result: Any) -> Any:
        """Combine the running result with a child's; the default keeps the latest."""
        return next_result

    def visit_program(self, node: Program) -> Any:
        return self.visit_children(node)

    def visit_decl_list(self, node: DeclList) -> Any:
        return self.visit_children(node)

    def visit_decl(self, node: Decl) -> Any:
        return self.visit_children(node)

    def visit_stmt_list(self, node: StmtList) -> Any:
        return self.visit_children(node)

    def visit_stmt(self, node: Stmt) -> Any:
        return self.visit_children(node)

    def visit_if_stmt(self, node: IfStmt) -> Any:
        return self.visit_children(node)

    def visit_assign_stmt(self, node: AssignStmt) -> Any:
        return self.visit_children(node)

    def visit_read_stmt(self, node: ReadStmt) -> Any:
        return self.visit_children(node)

    def visit_write_stmt(self, node: WriteStmt) -> Any:
        return self.visit_children(node)

    def visit_jump_stmt(self, node: JumpStmt) -> Any:
        return self.visit_children(node)

    def visit_expr(self, node: Expr) -> Any:
        return self.visit_children(node)

    def visit_add_sub_expr(self, node: AddSubExpr) -> Any:
        return self.visit_children(node)

    def visit_mul_div_expr(self, node: MulDivExpr) -> Any:
        return self.visit_children(node)

    def visit_equals_expr(self, node: EqualsExpr) -> Any:
        return self.visit_children(node)

    def visit_comp_expr(self, node: CompExpr) -> Any:
        return self.visit_children(node)

    def visit_atom_expr(self, node: AtomExpr) -> Any:
        return self.visit_children(node)

    def visit_assign_expr(self, node: AssignExpr) -> Any:
        return self.visit_children(node)

    def visit_vec_index_expr(self, node: VecIndexExpr) -> Any:
        return self.visit_children(node)

    def visit_term(self, node: Term) -> Any:
        return self.visit_children(node)

    def visit_local(self, node: Local) -> Any:
        return self.visit_children(node)

    def visit_vec_lit(self, node: VecLit) -> Any:
        return self.visit_children(node)
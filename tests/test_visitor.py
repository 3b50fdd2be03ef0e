import pytest

from letters.tree import (
    AssignExpr,
    AssignStmt,
    AtomExpr,
    Expr,
    Local,
    Program,
    Stmt,
    StmtList,
    Term,
    Terminal,
    TokenType,
    VecLit,
)
from letters.visitor import LettersVisitor


def _build_program():
    program = Program()
    stmts = program.add_child(StmtList())
    stmt = stmts.add_child(Stmt())
    assign_stmt = stmt.add_child(AssignStmt())
    assign = assign_stmt.add_child(AssignExpr())
    term = assign.add_child(Term())
    local = term.add_child(Local())
    local.add_child(Terminal(TokenType.IDENT, "x"))
    expr = assign.add_child(Expr())
    atom = expr.add_child(AtomExpr())
    value = atom.add_child(Term())
    value.add_child(Terminal(TokenType.INTLIT, "5"))
    assign_stmt.add_child(Terminal(TokenType.PERIOD, "."))
    program.add_child(Terminal(TokenType.EOF, "<EOF>"))
    return program


class _TextCollector(LettersVisitor):
    def default_result(self):
        return []

    def aggregate_result(self, aggregate, next_result):
        return aggregate + next_result

    def visit_terminal(self, node):
        return [node.text]


class _LocalNames(LettersVisitor):
    def default_result(self):
        return []

    def aggregate_result(self, aggregate, next_result):
        return aggregate + next_result

    def visit_local(self, node):
        return [t.text for t in node.tokens(TokenType.IDENT)]


def test_default_visit_returns_none():
    assert LettersVisitor().visit(_build_program()) is None


def test_terminals_are_collected_in_order():
    assert _TextCollector().visit(_build_program()) == ["x", "5", ".", "<EOF>"]


def test_override_of_one_rule_is_dispatched():
    assert _LocalNames().visit(_build_program()) == ["x"]


def test_visit_terminal_directly():
    leaf = Terminal(TokenType.CHARLIT, "'a'")
    assert _TextCollector().visit(leaf) == ["'a'"]


def test_default_aggregate_keeps_last_child_result():
    class Last(LettersVisitor):
        def visit_terminal(self, node):
            return node.text

    lit = VecLit()
    lit.add_child(Terminal(TokenType.INTLIT, "1"))
    lit.add_child(Terminal(TokenType.INTLIT, "2"))
    assert Last().visit(lit) == "2"


def test_empty_node_gives_default_result():
    assert _TextCollector().visit(StmtList()) == []


@pytest.mark.parametrize(
    "node_cls",
    [Program, StmtList, Stmt, AssignStmt, AssignExpr, Expr, AtomExpr, Term, Local, VecLit],
)
def test_every_rule_visits_children(node_cls):
    node = node_cls()
    node.add_child(Terminal(TokenType.IDENT, "q"))
    assert _TextCollector().visit(node) == ["q"]


def test_visit_children_counts_nodes():
    class Counter(LettersVisitor):
        def default_result(self):
            return 0

        def aggregate_result(self, aggregate, next_result):
            return aggregate + next_result

        def visit_terminal(self, node):
            return 1

    program = _build_program()
    collected = _TextCollector().visit(program)
    assert Counter().visit(program) == len(collected)
"""Token kinds, rule indices and parse-tree nodes of the Letters language."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeVar, Union


class TokenType(enum.IntEnum):
    """Kinds of lexical tokens."""

    EOF = -1
    T__0 = 1
    T__1 = 2
    T__2 = 3
    T__3 = 4
    T__4 = 5
    T__5 = 6
    T__6 = 7
    T__7 = 8
    T__8 = 9
    T__9 = 10
    T__10 = 11
    T__11 = 12
    T__12 = 13
    T__13 = 14
    T__14 = 15
    T__15 = 16
    T__16 = 17
    T__17 = 18
    T__18 = 19
    PERIOD = 20
    WS = 21
    COMMENT = 22
    IDENT = 23
    INTLIT = 24
    ESCAPE = 25
    CHARLIT = 26
    STRLIT = 27


class RuleIndex(enum.IntEnum):
    """Indices of the grammar rules."""

    PROGRAM = 0
    DECL_LIST = 1
    DECL = 2
    STMT_LIST = 3
    STMT = 4
    IF_STMT = 5
    ASSIGN_STMT = 6
    READ_STMT = 7
    WRITE_STMT = 8
    JUMP_STMT = 9
    EXPR = 10
    ADD_SUB_EXPR = 11
    MUL_DIV_EXPR = 12
    EQUALS_EXPR = 13
    COMP_EXPR = 14
    ATOM_EXPR = 15
    ASSIGN_EXPR = 16
    VEC_INDEX_EXPR = 17
    TERM = 18
    LOCAL = 19
    VEC_LIT = 20


@dataclass
class Terminal:
    """A leaf of the parse tree holding one token."""

    type: TokenType
    text: str
    line: int = 0
    column: int = 0
    parent: ParseNode | None = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to the visitor's terminal handler."""
        return visitor.visit_terminal(self)


Child = Union["ParseNode", Terminal]
N = TypeVar("N", bound="ParseNode")


@dataclass
class ParseNode:
    """An inner node of the parse tree, one per grammar rule."""

    rule_index: ClassVar[RuleIndex]
    visit_name: ClassVar[str]

    children: list[Child] = field(default_factory=list)
    parent: ParseNode | None = field(default=None, repr=False, compare=False)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to the visitor method for this rule."""
        return getattr(visitor, self.visit_name)(self)

    def add_child(self, child: Child) -> Child:
        """Append a child, make this node its parent and return it."""
        if not isinstance(child, (ParseNode, Terminal)):
            raise TypeError(f"cannot add {type(child).__name__} to a parse tree")
        child.parent = self
        self.children.append(child)
        return child

    def children_of(self, kind: type[N]) -> list[N]:
        """Return the direct children that are nodes of the given kind."""
        return [c for c in self.children if isinstance(c, kind)]

    def first(self, kind: type[N]) -> N | None:
        """Return the first direct child of the given kind, or None."""
        return next((c for c in self.children if isinstance(c, kind)), None)

    def tokens(self, token_type: TokenType) -> list[Terminal]:
        """Return the direct terminal children of the given token type."""
        return [
            c for c in self.children if isinstance(c, Terminal) and c.type == token_type
        ]

    def token(self, token_type: TokenType) -> Terminal | None:
        """Return the first direct terminal child of the given token type, or None."""
        return next(
            (c for c in self.children if isinstance(c, Terminal) and c.type == token_type),
            None,
        )


class Program(ParseNode):
    rule_index = RuleIndex.PROGRAM
    visit_name = "visit_program"


class DeclList(ParseNode):
    rule_index = RuleIndex.DECL_LIST
    visit_name = "visit_decl_list"


class Decl(ParseNode):
    rule_index = RuleIndex.DECL
    visit_name = "visit_decl"


class StmtList(ParseNode):
    rule_index = RuleIndex.STMT_LIST
    visit_name = "visit_stmt_list"


class Stmt(ParseNode):
    rule_index = RuleIndex.STMT
    visit_name = "visit_stmt"


class IfStmt(ParseNode):
    rule_index = RuleIndex.IF_STMT
    visit_name = "visit_if_stmt"


class AssignStmt(ParseNode):
    rule_index = RuleIndex.ASSIGN_STMT
    visit_name = "visit_assign_stmt"


class ReadStmt(ParseNode):
    rule_index = RuleIndex.READ_STMT
    visit_name = "visit_read_stmt"


class WriteStmt(ParseNode):
    rule_index = RuleIndex.WRITE_STMT
    visit_name = "visit_write_stmt"


class JumpStmt(ParseNode):
    rule_index = RuleIndex.JUMP_STMT
    visit_name = "visit_jump_stmt"


class Expr(ParseNode):
    rule_index = RuleIndex.EXPR
    visit_name = "visit_expr"


class AddSubExpr(ParseNode):
    rule_index = RuleIndex.ADD_SUB_EXPR
    visit_name = "visit_add_sub_expr"


class MulDivExpr(ParseNode):
    rule_index = RuleIndex.MUL_DIV_EXPR
    visit_name = "visit_mul_div_expr"


class EqualsExpr(ParseNode):
    rule_index = RuleIndex.EQUALS_EXPR
    visit_name = "visit_equals_expr"


class CompExpr(ParseNode):
    rule_index = RuleIndex.COMP_EXPR
    visit_name = "visit_comp_expr"


class AtomExpr(ParseNode):
    rule_index = RuleIndex.ATOM_EXPR
    visit_name = "visit_atom_expr"


class AssignExpr(ParseNode):
    rule_index = RuleIndex.ASSIGN_EXPR
    visit_name = "visit_assign_expr"


class VecIndexExpr(ParseNode):
    rule_index = RuleIndex.VEC_INDEX_EXPR
    visit_name = "visit_vec_index_expr"


class Term(ParseNode):
    rule_index = RuleIndex.TERM
    visit_name = "visit_term"


class Local(ParseNode):
    rule_index = RuleIndex.LOCAL
    visit_name = "visit_local"


class VecLit(ParseNode):
    rule_index = RuleIndex.VEC_LIT
    visit_name = "visit_vec_lit"
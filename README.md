# letters

Building blocks for a compiler of the Letters language, a small language
whose programs are made of declarations and statements ending in a period.
The statements are `if` blocks, assignments, reads, writes and jumps.

## Modules

- `letters.symbols`
  - `TypeName` is an enumeration of symbol types: `INT`, `CHAR`, `BOOL`,
    `STR_LIT` and `ERR`.
  - `Sym` is a dataclass with a `name` and an optional `type`.
  - `SymTab` is a scoped symbol table kept as a stack of dictionaries. It
    starts with one empty global scope. `add_scope()` opens a new innermost
    scope, and `rm_scope()` closes it. `rm_scope()` raises `IndexError` when
    no scope is left.
  - `SymTab.add_sym(sym)` adds a copy of the symbol to the innermost scope.
    If the name is already present in that scope, the existing entry is kept.
  - `SymTab.lookup_local(name)` looks only in the innermost scope.
  - `SymTab.lookup_global(name)` searches every scope, from the outermost
    one inwards, and returns the first match.
  - Both lookups return a copy of the symbol, or `None` when the name is
    missing.
  - `SymTab.dump(file=None)` writes every scope and its entries to `file`,
    or to standard output when no file is given.
- `letters.tree`
  - `TokenType` and `RuleIndex` are integer enumerations of the token kinds
    and the grammar rules.
  - `Terminal` is a token leaf. It holds `type`, `text`, `line` and `column`.
  - `ParseNode` is the base class of rule nodes. It has `add_child(child)`,
    `children_of(kind)`, `first(kind)`, `tokens(token_type)`,
    `token(token_type)` and `accept(visitor)`.
  - There is one `ParseNode` subclass per rule: `Program`, `DeclList`,
    `Decl`, `StmtList`, `Stmt`, `IfStmt`, `AssignStmt`, `ReadStmt`,
    `WriteStmt`, `JumpStmt`, `Expr`, `AddSubExpr`, `MulDivExpr`,
    `EqualsExpr`, `CompExpr`, `AtomExpr`, `AssignExpr`, `VecIndexExpr`,
    `Term`, `Local` and `VecLit`.
- `letters.visitor`
  - `LettersVisitor` is a base visitor with one `visit_<rule>` method per
    rule, such as `visit_program` or `visit_if_stmt`.
  - Each of those methods calls `visit_children(node)`. That visits the
    children in order and folds their results with
    `aggregate_result(aggregate, next_result)`, starting from
    `default_result()`. By default the fold keeps the last result, and the
    starting value is `None`.
  - `visit_terminal(node)` returns `default_result()`.
  - Override only the methods you need.
- `letters.utils`
  - `file2str(filename)` returns the whole text of a file, read as UTF-8.
    It returns an empty string when the file cannot be opened.

## Install

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Command line

    letters program.let

The command takes exactly one argument, the path of a Letters source file,
and reads that file. If it gets any other number of arguments, it prints
`invalid command-line options` to standard error and exits with status 1.

## What it does not do

The package has no lexer or parser. It cannot turn Letters source text into
tokens or a parse tree. Trees must be built by hand with
`ParseNode.add_child`. The `letters` command only reads the file it is
given. It does not check, compile or run the program.

## Example

```python
from letters.symbols import Sym, SymTab, TypeName

table = SymTab()
table.add_sym(Sym("a", TypeName.INT))
table.add_scope()
table.add_sym(Sym("b", TypeName.CHAR))

assert table.lookup_local("a") is None
assert table.lookup_global("a").type is TypeName.INT

table.rm_scope()
assert table.lookup_global("b") is None
```

```python
from letters.tree import Local, Terminal, TokenType
from letters.visitor import LettersVisitor


class Names(LettersVisitor):
    def visit_local(self, node):
        return node.token(TokenType.IDENT).text


local = Local()
local.add_child(Terminal(TokenType.IDENT, "x"))
assert Names().visit(local) == "x"
```
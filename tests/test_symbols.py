import io

import pytest

from letters.symbols import Sym, SymTab, TypeName


def test_init_scope():
    table = SymTab()
    assert table.lookup_local("x") is None
    assert table.lookup_global("x") is None
    out = io.StringIO()
    table.dump(out)
    assert out.getvalue().count("start scope XXX") == 1


def test_add_and_lookup_local():
    table = SymTab()
    table.add_sym(Sym("x", TypeName.INT))
    found = table.lookup_local("x")
    assert found == Sym("x", TypeName.INT)


def test_sym_without_type():
    sym = Sym("y")
    assert sym.type is None
    sym.type = TypeName.CHAR
    assert sym.type is TypeName.CHAR


def test_existing_name_not_overwritten():
    table = SymTab()
    table.add_sym(Sym("x", TypeName.INT))
    table.add_sym(Sym("x", TypeName.BOOL))
    assert table.lookup_local("x").type is TypeName.INT


def test_local_lookup_only_sees_innermost_scope():
    table = SymTab()
    table.add_sym(Sym("g", TypeName.INT))
    table.add_scope()
    assert table.lookup_local("g") is None
    assert table.lookup_global("g") == Sym("g", TypeName.INT)


def test_global_lookup_prefers_outermost_scope():
    table = SymTab()
    table.add_sym(Sym("x", TypeName.INT))
    table.add_scope()
    table.add_sym(Sym("x", TypeName.CHAR))
    assert table.lookup_local("x").type is TypeName.CHAR
    assert table.lookup_global("x").type is TypeName.INT


def test_rm_scope_drops_symbols():
    table = SymTab()
    table.add_scope()
    table.add_sym(Sym("inner", TypeName.BOOL))
    table.rm_scope()
    assert table.lookup_global("inner") is None


def test_rm_scope_past_empty_raises():
    table = SymTab()
    table.rm_scope()
    with pytest.raises(IndexError):
        table.rm_scope()
    with pytest.raises(IndexError):
        table.add_sym(Sym("x"))


def test_lookup_returns_copy():
    table = SymTab()
    table.add_sym(Sym("x", TypeName.INT))
    found = table.lookup_local("x")
    found.type = TypeName.ERR
    assert table.lookup_local("x").type is TypeName.INT


def test_dump_format():
    table = SymTab()
    table.add_sym(Sym("a", TypeName.STR_LIT))
    out = io.StringIO()
    table.dump(out)
    stars = "*" * 47
    assert out.getvalue().splitlines() == [
        "SYMBOL TABLE",
        stars,
        "start scope XXX",
        "a : a",
        "end scope XXX",
        stars,
    ]
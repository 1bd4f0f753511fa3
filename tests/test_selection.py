"""Testy polityki wyboru jednostek."""

from __future__ import annotations

from go_source import DeclKind, Declaration
from reordering import SelectionPolicy, SkipReason


def _method(name: str, fields: int = 1) -> Declaration:
    return Declaration(
        kind=DeclKind.METHOD,
        name=name,
        start=0,
        end=10,
        line=1,
        receiver="(t T)" if fields else "()",
        receiver_fields=fields,
        receiver_type="T" if fields else None,
    )


def test_method_with_receiver_is_selected() -> None:
    policy = SelectionPolicy()
    assert policy.accepts(_method("Close"))
    assert policy.reason(_method("Close")) is None


def test_free_function_skipped() -> None:
    decl = Declaration(kind=DeclKind.FUNCTION, name="helper", start=0, end=5, line=1)
    assert SelectionPolicy().reason(decl) is SkipReason.FREE_FUNCTION


def test_non_function_declarations_skipped() -> None:
    policy = SelectionPolicy()
    for kind in (DeclKind.TYPE, DeclKind.VAR, DeclKind.CONST, DeclKind.IMPORT):
        decl = Declaration(kind=kind, name="X", start=0, end=5, line=1)
        assert policy.reason(decl) is SkipReason.NOT_FUNCTION


def test_empty_receiver_skipped() -> None:
    assert SelectionPolicy().reason(_method("Close", fields=0)) is SkipReason.EMPTY_RECEIVER


def test_constructor_prefix_excluded() -> None:
    policy = SelectionPolicy()
    assert policy.reason(_method("NewChild")) is SkipReason.CONSTRUCTOR
    # Prefiks jest czuły na wielkość liter i dotyczy tylko początku nazwy
    assert policy.accepts(_method("Newton")) is False
    assert policy.accepts(_method("newChild"))
    assert policy.accepts(_method("RenewLease"))


def test_custom_and_disabled_constructor_prefix() -> None:
    assert SelectionPolicy(constructor_prefix="Make").reason(_method("MakeX")) is SkipReason.CONSTRUCTOR
    assert SelectionPolicy(constructor_prefix="Make").accepts(_method("NewX"))
    assert SelectionPolicy(constructor_prefix="").accepts(_method("NewX"))

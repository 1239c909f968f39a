"""Test type variable resolution through class hierarchies."""
import typing

import pytest

import beans
from propreflect import typevars
from propreflect.exceptions import NotAClassError

T = typing.TypeVar("T")
C = typing.TypeVar("C", int, str)
B = typing.TypeVar("B", bound=beans.ApiUser)


def test_split_class():
    assert typevars.split_class(beans.User) == (beans.User, ())
    assert typevars.split_class(beans.Pair[int, str]) == (beans.Pair, (int, str))
    with pytest.raises(NotAClassError):
        typevars.split_class(typing.Optional[int])
    with pytest.raises(NotAClassError):
        typevars.split_class(beans.User())


def test_substitute():
    assert typevars.substitute(T, {T: int}) is int
    assert typevars.substitute(T, {}) is T
    assert typevars.substitute(typing.List[T], {T: int}) == typing.List[int]
    assert typevars.substitute(typing.Dict[str, typing.Optional[T]], {T: bytes}) == typing.Dict[
        str, typing.Optional[bytes]
    ]
    # Bare generic classes are left alone.
    assert typevars.substitute(beans.Entity, {T: int}) is beans.Entity
    assert typevars.substitute(str, {T: int}) is str


def test_erase():
    assert typevars.erase(T) is object
    assert typevars.erase(B) is beans.ApiUser
    assert typevars.erase(C) == typing.Union[int, str]
    assert typevars.erase(typing.List[T]) == typing.List[object]
    assert typevars.erase(int) is int


def test_hierarchy_bindings():
    bindings = typevars.hierarchy_bindings(beans.Admin)
    assert bindings[beans.Entity] == {beans.K: int}
    assert bindings[beans.Admin] == {}

    bindings = typevars.hierarchy_bindings(beans.Renamed, (bytes,))
    assert bindings[beans.Renamed] == {beans.U: bytes}
    assert bindings[beans.Pair] == {beans.K: str, beans.U: bytes}

    bindings = typevars.hierarchy_bindings(beans.Renamed)
    assert bindings[beans.Pair] == {beans.K: str, beans.U: beans.U}
    assert typevars.resolve(beans.U, bindings[beans.Pair]) is object

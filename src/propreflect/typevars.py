"""Resolve type variables through a class hierarchy.

A generic base such as ``class Entity(typing.Generic[K])`` annotates its
accessors with the type variable ``K``. A subclass ``class User(Entity[int])``
binds ``K`` to ``int`` through its ``__orig_bases__``. This module walks the
MRO of the inspected class and records, for every class in the hierarchy,
which concrete type each of its type parameters stands for.

Type variables that nothing binds are erased to their bound (or ``object``),
the same way an unparameterized use of a generic class behaves at runtime.
"""

from __future__ import annotations

__all__ = ["Bindings", "erase", "hierarchy_bindings", "resolve", "split_class", "substitute"]

import logging
import typing

import typing_extensions

from propreflect.exceptions import NotAClassError

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))

Scope = typing.Mapping[typing.TypeVar, typing.Any]
Bindings = typing.Dict[type, typing.Dict[typing.TypeVar, typing.Any]]


def split_class(cls) -> typing.Tuple[type, tuple]:
    """Get the class to inspect and the type arguments given at the call site.

    *cls* may be a class (``Box``) or a parameterized generic class (``Box[int]``).
    """
    origin = typing_extensions.get_origin(cls)
    if origin is None:
        if isinstance(cls, type):
            return cls, ()
        raise NotAClassError(f"Expected a class. Got {repr(cls)}.")
    if not isinstance(origin, type):
        raise NotAClassError(f"Expected a class or a parameterized generic class. Got {repr(cls)}.")
    return origin, typing_extensions.get_args(cls)


def _parameters(tp) -> tuple:
    # Only parameterized aliases (List[T], Box[T]) can be re-subscripted.
    # A bare generic class also has __parameters__ but no origin.
    if typing_extensions.get_origin(tp) is None:
        return ()
    return tuple(getattr(tp, "__parameters__", ()))


def substitute(tp, scope: Scope):
    """Replace the type variables in *tp* that *scope* binds."""
    if isinstance(tp, typing.TypeVar):
        return scope.get(tp, tp)
    parameters = _parameters(tp)
    if parameters:
        return tp[tuple(substitute(parameter, scope) for parameter in parameters)]
    return tp


def erase(tp):
    """Replace the type variables remaining in *tp* with their bound."""
    if isinstance(tp, typing.TypeVar):
        if tp.__bound__ is not None:
            return tp.__bound__
        if tp.__constraints__:
            return typing.Union[tp.__constraints__]
        return object
    parameters = _parameters(tp)
    if parameters:
        return tp[tuple(erase(parameter) for parameter in parameters)]
    return tp


def resolve(tp, scope: Scope):
    return erase(substitute(tp, scope))


def hierarchy_bindings(origin: type, args: tuple = ()) -> Bindings:
    """Map each class in the MRO of *origin* to the bindings of its type parameters.

    *args* are the type arguments supplied at the call site for the
    parameters of *origin* itself, if any.

    The MRO lists every class before its bases, so the bindings of a class
    are complete before its own generic bases are visited. If a base is
    reached along several paths, the first (most derived) binding wins.
    """
    bindings: Bindings = {origin: dict(zip(getattr(origin, "__parameters__", ()), args))}
    for klass in origin.__mro__:
        scope = bindings.setdefault(klass, {})
        for base in typing_extensions.get_original_bases(klass):
            base_origin = typing_extensions.get_origin(base)
            if not isinstance(base_origin, type) or base_origin in bindings:
                continue
            base_parameters = getattr(base_origin, "__parameters__", ())
            base_args = typing_extensions.get_args(base)
            bindings[base_origin] = {
                parameter: substitute(arg, scope) for parameter, arg in zip(base_parameters, base_args)
            }
    return bindings

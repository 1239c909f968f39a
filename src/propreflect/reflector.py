"""Discover the bean-like properties of a class.

A *property* is a logical attribute exposed through accessor methods that
follow the bean naming convention:

* read accessors take no arguments besides ``self`` and are named
  ``get_<name>`` / ``getName`` (or ``is_<name>`` / ``isName`` for bool
  properties),
* write accessors take exactly one argument and are named ``set_<name>`` /
  ``setName``,
* a `property` with a getter and/or setter is accessed under its own name.

Example::

    class Person:
        def get_name(self) -> str: ...
        def set_name(self, name: str) -> None: ...
        def is_adult(self) -> bool: ...

    >>> sorted(p.name for p in get_readable_properties(Person))
    ['adult', 'name']
    >>> sorted(p.name for p in get_writeable_and_readable_properties(Person))
    ['name']

Annotations are resolved with :py:func:`typing.get_type_hints`, and type
variables are replaced by what the inspected class binds them to, so a
descriptor of ``class User(Entity[int])`` reports ``int`` where ``Entity``
is annotated with its type variable.

All functions accept either a class or a parameterized generic class
(``Entity[int]``). Each call inspects the class afresh; nothing is cached.
"""

from __future__ import annotations

__all__ = [
    "get_readable_properties",
    "get_writeable_and_readable_properties",
    "get_writeable_properties",
    "has_default_constructor",
]

import dataclasses
import enum
import inspect
import logging
import typing

import typing_extensions

from propreflect import typevars
from propreflect.conventions import Conventions
from propreflect.conventions import current_conventions
from propreflect.descriptor import PropertyDescriptor
from propreflect.exceptions import IntrospectionError
from propreflect.exceptions import NullArgumentError
from propreflect.exceptions import TypeMismatchError

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


class _Kind(enum.IntEnum):
    """Accessor kinds, in order of precedence when several claim one property."""

    PROPERTY = 0
    BOOL_GETTER = 1
    GETTER = 2
    SETTER = 3


@dataclasses.dataclass(frozen=True)
class _Accessor:
    kind: _Kind
    attribute: str
    function: typing.Callable
    property_type: typing.Any
    annotated: bool


def _check_argument(cls):
    if cls is None:
        raise NullArgumentError("cls")


def _public_attributes(origin: type) -> typing.Iterator[typing.Tuple[str, type, typing.Any]]:
    """Yield (name, defining class, raw value) for the public attributes of *origin*.

    Each name is reported once, for the most derived class that defines it.
    """
    seen = set()
    for klass in origin.__mro__:
        if klass is object:
            continue
        for attribute, value in vars(klass).items():
            if attribute in seen:
                continue
            seen.add(attribute)
            if attribute.startswith("_"):
                continue
            yield attribute, klass, value


def _type_hints(function: typing.Callable, owner: type) -> dict:
    try:
        return typing_extensions.get_type_hints(function)
    except (AttributeError, NameError, SyntaxError, TypeError) as e:
        raise IntrospectionError(
            f"Could not resolve the annotations of {owner.__qualname__}.{function.__name__}: {e}"
        ) from e


def _positional_parameters(function: typing.Callable, owner: type) -> typing.Optional[typing.List[inspect.Parameter]]:
    """Get the parameters of *function*, or None if any of them is not plain positional."""
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError) as e:
        raise IntrospectionError(f"Could not get the signature of {owner.__qualname__}.{function!r}: {e}") from e
    parameters = list(signature.parameters.values())
    if any(parameter.kind not in _POSITIONAL for parameter in parameters):
        return None
    return parameters


def _opaque_property_accessor(attribute: str, function, owner: type) -> _Accessor:
    # Any callable can back a property (e.g. operator.attrgetter), but only
    # plain functions carry a signature and annotations to inspect.
    logger.debug(f"{owner.__qualname__}.{attribute} is backed by {function!r}. Its type is unknown.")
    return _Accessor(_Kind.PROPERTY, attribute, function, typing.Any, annotated=False)


def _read_accessor(kind: _Kind, attribute: str, function, owner: type, scope) -> typing.Optional[_Accessor]:
    if kind is _Kind.PROPERTY and not inspect.isfunction(function):
        return _opaque_property_accessor(attribute, function, owner)
    parameters = _positional_parameters(function, owner)
    if parameters is None or len(parameters) != 1:
        logger.debug(f"{owner.__qualname__}.{attribute} takes arguments. Not a read accessor.")
        return None
    hints = _type_hints(function, owner)
    if "return" not in hints:
        if kind is _Kind.BOOL_GETTER:
            # The prefix fixes the type, so a setter cannot override it.
            return _Accessor(kind, attribute, function, bool, annotated=True)
        return _Accessor(kind, attribute, function, typing.Any, annotated=False)
    property_type = typevars.resolve(hints["return"], scope)
    if property_type is type(None):
        logger.debug(f"{owner.__qualname__}.{attribute} returns None. Not a read accessor.")
        return None
    if kind is _Kind.BOOL_GETTER and property_type is not bool:
        logger.debug(f"{owner.__qualname__}.{attribute} does not return bool. Not a read accessor.")
        return None
    return _Accessor(kind, attribute, function, property_type, annotated=True)


def _write_accessor(kind: _Kind, attribute: str, function, owner: type, scope) -> typing.Optional[_Accessor]:
    if kind is _Kind.PROPERTY and not inspect.isfunction(function):
        return _opaque_property_accessor(attribute, function, owner)
    parameters = _positional_parameters(function, owner)
    if parameters is None or len(parameters) != 2:
        logger.debug(f"{owner.__qualname__}.{attribute} does not take exactly one argument. Not a write accessor.")
        return None
    hints = _type_hints(function, owner)
    value_parameter = parameters[1].name
    if value_parameter not in hints:
        return _Accessor(kind, attribute, function, typing.Any, annotated=False)
    return _Accessor(kind, attribute, function, typevars.resolve(hints[value_parameter], scope), annotated=True)


def _claim(accessors: typing.Dict[str, _Accessor], name: str, candidate: typing.Optional[_Accessor]):
    if candidate is None:
        return
    current = accessors.get(name)
    if current is None or candidate.kind < current.kind:
        if current is not None:
            logger.debug(f"Property {name!r}: {candidate.attribute} takes precedence over {current.attribute}.")
        accessors[name] = candidate
    else:
        logger.debug(f"Property {name!r}: {current.attribute} takes precedence over {candidate.attribute}.")


def _discover(cls, config: Conventions) -> typing.Tuple[type, typing.Dict[str, _Accessor], typing.Dict[str, _Accessor]]:
    """Find the read and write accessors of *cls*, keyed by property name."""
    origin, args = typevars.split_class(cls)
    bindings = typevars.hierarchy_bindings(origin, args)
    readers: typing.Dict[str, _Accessor] = {}
    writers: typing.Dict[str, _Accessor] = {}

    for attribute, owner, value in _public_attributes(origin):
        scope = bindings.get(owner, {})
        if isinstance(value, property):
            if not config.include_properties:
                continue
            if value.fget is not None:
                _claim(readers, attribute, _read_accessor(_Kind.PROPERTY, attribute, value.fget, owner, scope))
            if value.fset is not None:
                _claim(writers, attribute, _write_accessor(_Kind.PROPERTY, attribute, value.fset, owner, scope))
            continue
        if not inspect.isfunction(value):
            # Also excludes staticmethod and classmethod objects.
            continue

        name = config.bool_read_property_name(attribute)
        if name is not None:
            _claim(readers, name, _read_accessor(_Kind.BOOL_GETTER, attribute, value, owner, scope))
            continue
        name = config.read_property_name(attribute)
        if name is not None:
            _claim(readers, name, _read_accessor(_Kind.GETTER, attribute, value, owner, scope))
            continue
        name = config.write_property_name(attribute)
        if name is not None:
            _claim(writers, name, _write_accessor(_Kind.SETTER, attribute, value, owner, scope))

    logger.debug(f"{origin.__qualname__}: readable {sorted(readers)}, writeable {sorted(writers)}")
    return origin, readers, writers


def _agreed_type(reader: _Accessor, writer: _Accessor) -> typing.Tuple[bool, typing.Any]:
    """Get (agree, property type) for a read/write accessor pair.

    An unannotated accessor takes the type of its annotated counterpart.
    """
    if not writer.annotated:
        return True, reader.property_type
    if not reader.annotated:
        return True, writer.property_type
    return reader.property_type == writer.property_type, reader.property_type


def _describe(
    cls, config: typing.Optional[Conventions], *, readable: bool, writeable: bool
) -> typing.FrozenSet[PropertyDescriptor]:
    if config is None:
        config = current_conventions()
    origin, readers, writers = _discover(cls, config)

    if readable and writeable:
        names = readers.keys() & writers.keys()
    elif readable:
        names = readers.keys()
    else:
        names = writers.keys()

    descriptors = set()
    for name in names:
        reader = readers.get(name)
        writer = writers.get(name)
        if reader is not None and writer is not None:
            agree, property_type = _agreed_type(reader, writer)
            if not agree:
                if writeable:
                    raise TypeMismatchError(cls, name, reader.property_type, writer.property_type)
                logger.debug(f"Property {name!r} of {origin.__qualname__}: ignoring mismatched {writer.attribute}.")
                writer = None
        else:
            property_type = (reader or writer).property_type
        descriptors.add(
            PropertyDescriptor(
                name=name,
                property_type=property_type,
                read_method=reader.function if reader is not None else None,
                write_method=writer.function if writer is not None else None,
            )
        )
    return frozenset(descriptors)


def get_readable_properties(cls, *, conventions: Conventions = None) -> typing.FrozenSet[PropertyDescriptor]:
    """Get the properties of *cls* that have a read accessor.

    A write accessor is included in a descriptor when its type agrees with
    the read accessor. A disagreeing write accessor is left out, and does
    not cause an error here.

    Raises:
        NullArgumentError: if *cls* is None.
        NotAClassError: if *cls* is not a class.
        IntrospectionError: if accessor annotations cannot be resolved.

    """
    _check_argument(cls)
    return _describe(cls, conventions, readable=True, writeable=False)


def get_writeable_properties(cls, *, conventions: Conventions = None) -> typing.FrozenSet[PropertyDescriptor]:
    """Get the properties of *cls* that have a write accessor.

    Raises:
        NullArgumentError: if *cls* is None.
        NotAClassError: if *cls* is not a class.
        TypeMismatchError: if a property's read and write accessors disagree on its type.
        IntrospectionError: if accessor annotations cannot be resolved.

    """
    _check_argument(cls)
    return _describe(cls, conventions, readable=False, writeable=True)


def get_writeable_and_readable_properties(
    cls, *, conventions: Conventions = None
) -> typing.FrozenSet[PropertyDescriptor]:
    """Get the properties of *cls* that have both a read and a write accessor.

    Raises:
        NullArgumentError: if *cls* is None.
        NotAClassError: if *cls* is not a class.
        TypeMismatchError: if a property's read and write accessors disagree on its type.
        IntrospectionError: if accessor annotations cannot be resolved.

    """
    _check_argument(cls)
    return _describe(cls, conventions, readable=True, writeable=True)


def _builtin_accepts_no_arguments(origin: type) -> bool:
    # Only called for builtin types, whose constructors have no side effects.
    try:
        origin()
    except TypeError:
        return False
    return True


def has_default_constructor(cls) -> bool:
    """Check whether *cls* can be instantiated without arguments.

    Abstract classes and protocols cannot be instantiated at all, so they
    have no default constructor.
    """
    _check_argument(cls)
    origin, _ = typevars.split_class(cls)
    if inspect.isabstract(origin) or getattr(origin, "_is_protocol", False):
        return False
    try:
        signature = inspect.signature(origin)
    except ValueError:
        # Some builtin types do not publish a signature.
        logger.debug(f"No signature available for {origin.__qualname__}.")
        if origin.__init__ is object.__init__ and origin.__new__ is object.__new__:
            return True
        if origin.__module__ == "builtins":
            return _builtin_accepts_no_arguments(origin)
        return False
    return all(
        parameter.default is not inspect.Parameter.empty
        or parameter.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        for parameter in signature.parameters.values()
    )

"""Naming conventions that map accessor names to property names.

The active `Conventions` is held in a context variable. Use
:py:func:`use_conventions` to change it for a block of code, or pass
*conventions* to the individual reflector functions::

    with propreflect.use_conventions(include_properties=False):
        props = propreflect.get_readable_properties(Account)

Both snake_case (``get_first_name`` -> ``first_name``) and camelCase
(``getFirstName`` -> ``firstName``) accessor names are recognized.
"""

from __future__ import annotations

__all__ = ["Conventions", "current_conventions", "decapitalize", "use_conventions"]

import contextlib
import contextvars
import dataclasses
import logging
import typing

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))


def decapitalize(name: str) -> str:
    """Lower the first character of *name*, unless it starts an acronym.

    ``"FooBah"`` becomes ``"fooBah"`` but ``"URL"`` stays ``"URL"``.
    """
    if not name:
        return name
    if len(name) > 1 and name[0].isupper() and name[1].isupper():
        return name
    return name[0].lower() + name[1:]


@dataclasses.dataclass(frozen=True)
class Conventions:
    """Accessor naming rules applied by the reflector.

    Attributes:
        read_prefixes: Prefixes of zero-argument read accessors.
        bool_read_prefixes: Prefixes of read accessors that only qualify for bool properties.
        write_prefixes: Prefixes of single-argument write accessors.
        include_properties: Whether `property` objects count as accessors.

    """

    read_prefixes: typing.Tuple[str, ...] = ("get",)
    bool_read_prefixes: typing.Tuple[str, ...] = ("is",)
    write_prefixes: typing.Tuple[str, ...] = ("set",)
    include_properties: bool = True

    def __post_init__(self):
        for field in ("read_prefixes", "bool_read_prefixes", "write_prefixes"):
            value = getattr(self, field)
            if isinstance(value, str):
                raise TypeError(f"*{field}* must be a sequence of strings, not a single string.")
            value = tuple(value)
            if any(not isinstance(prefix, str) or not prefix for prefix in value):
                raise ValueError(f"*{field}* must contain non-empty strings.")
            # Allow any iterable at construction, but store a hashable tuple.
            object.__setattr__(self, field, value)

    @staticmethod
    def property_name(attribute: str, prefixes: typing.Iterable[str]) -> typing.Optional[str]:
        """Get the property name for accessor *attribute*, or None if no prefix applies.

        After the prefix, the name must continue with ``_`` and a public
        identifier (snake_case) or with an upper case letter (camelCase).
        """
        for prefix in prefixes:
            if not attribute.startswith(prefix):
                continue
            remainder = attribute[len(prefix):]
            if remainder.startswith("_"):
                remainder = remainder[1:]
                if remainder and not remainder.startswith("_"):
                    return remainder
            elif remainder[:1].isupper():
                return decapitalize(remainder)
        return None

    def read_property_name(self, attribute: str) -> typing.Optional[str]:
        return self.property_name(attribute, self.read_prefixes)

    def bool_read_property_name(self, attribute: str) -> typing.Optional[str]:
        return self.property_name(attribute, self.bool_read_prefixes)

    def write_property_name(self, attribute: str) -> typing.Optional[str]:
        return self.property_name(attribute, self.write_prefixes)


_default = Conventions()
_conventions: contextvars.ContextVar[Conventions] = contextvars.ContextVar("_conventions", default=_default)


def current_conventions() -> Conventions:
    """Get the conventions active in the current context."""
    return _conventions.get()


@contextlib.contextmanager
def use_conventions(config: typing.Optional[Conventions] = None, **kwargs):
    """Activate *config* (or a `Conventions` built from *kwargs*) within a ``with`` block.

    Keyword arguments update the currently active conventions, so nested
    blocks only need to name what they change.
    """
    if config is not None and kwargs:
        raise TypeError("Provide a Conventions instance or keyword arguments, not both.")
    if config is None:
        config = dataclasses.replace(current_conventions(), **kwargs)
    elif not isinstance(config, Conventions):
        raise TypeError(f"Expected a Conventions instance. Got {repr(config)}.")
    token = _conventions.set(config)
    logger.debug(f"Using {config}")
    try:
        yield config
    finally:
        _conventions.reset(token)

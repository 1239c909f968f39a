"""The record produced for each discovered property."""

from __future__ import annotations

__all__ = ["PropertyDescriptor", "has_read_method", "has_write_method"]

import dataclasses
import logging
import typing

logger = logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))


@dataclasses.dataclass(frozen=True)
class PropertyDescriptor:
    """Metadata for one property of an inspected class.

    *read_method* and *write_method* are the underlying functions (the plain
    function from the class namespace, or the ``fget``/``fset`` of a
    `property`), so they can be called with an instance as the first argument.

    *property_type* is the type after resolving any type variables bound by
    the inspected class. Accessors without annotations give `typing.Any`.
    """

    name: str
    property_type: typing.Any
    read_method: typing.Optional[typing.Callable] = None
    write_method: typing.Optional[typing.Callable] = None

    @property
    def readable(self) -> bool:
        return self.read_method is not None

    @property
    def writeable(self) -> bool:
        return self.write_method is not None

    def get(self, instance):
        """Read the property from *instance*."""
        if self.read_method is None:
            raise AttributeError(f"Property {self.name!r} is not readable.")
        return self.read_method(instance)

    def set(self, instance, value):
        """Write *value* to the property of *instance*."""
        if self.write_method is None:
            raise AttributeError(f"Property {self.name!r} is not writeable.")
        self.write_method(instance, value)


def has_read_method(descriptor: typing.Optional[PropertyDescriptor]) -> bool:
    """Filter predicate. False for None."""
    return descriptor is not None and descriptor.read_method is not None


def has_write_method(descriptor: typing.Optional[PropertyDescriptor]) -> bool:
    """Filter predicate. False for None."""
    return descriptor is not None and descriptor.write_method is not None

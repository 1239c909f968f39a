"""Exceptions raised by propreflect are catchable as propreflect.ReflectError.

The concrete errors also derive from the built-in exception a caller would
expect for the same misuse (`TypeError` for bad arguments, `ValueError` for an
inconsistent class), so generic handlers keep working.
"""

import logging as _logging
import typing

logger = _logging.getLogger(__name__)
logger.debug("Importing {}".format(__name__))


class ReflectError(Exception):
    """Base exception for propreflect errors."""


class NullArgumentError(ReflectError, TypeError):
    """A required argument was None."""

    def __init__(self, argument: str = "cls"):
        super().__init__(f"*{argument}* must not be None.")
        self.argument = argument


class NotAClassError(ReflectError, TypeError):
    """The object to inspect is neither a class nor a parameterized generic class."""


class TypeMismatchError(ReflectError, ValueError):
    """The read and write accessors of a property disagree on the property type.

    This is a defect of the inspected class, so the property is reported
    rather than dropped.
    """

    def __init__(self, cls, property_name: str, read_type: typing.Any, write_type: typing.Any):
        super().__init__(
            f"Property {property_name!r} of {cls!r} is read as {read_type!r} but written as {write_type!r}."
        )
        self.cls = cls
        self.property_name = property_name
        self.read_type = read_type
        self.write_type = write_type


class IntrospectionError(ReflectError):
    """Type information for an accessor could not be determined.

    Usually an annotation names something that cannot be resolved in the
    defining module. The original error is available as ``__cause__``.
    """

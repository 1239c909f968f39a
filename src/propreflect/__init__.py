"""propreflect - find the bean-like properties of Python classes.

The package inspects a class for getter/setter style accessors
(``get_name``/``set_name``, ``getName``/``setName``, ``is_active``, and
`property` objects), resolves their types through generic base classes, and
reports them as :py:class:`PropertyDescriptor` records. Serialization,
copying and mapping code can use it to treat arbitrary classes generically.

Example::

    import propreflect

    for prop in propreflect.get_writeable_and_readable_properties(Person):
        prop.set(target, prop.get(source))

Logging goes through the ``propreflect`` logger, which has a NullHandler by
default. See :py:mod:`propreflect.logger`.
"""

__all__ = (
    # reflection
    "get_readable_properties",
    "get_writeable_properties",
    "get_writeable_and_readable_properties",
    "has_default_constructor",
    # records and predicates
    "PropertyDescriptor",
    "has_read_method",
    "has_write_method",
    # configuration
    "Conventions",
    "current_conventions",
    "use_conventions",
    # errors
    "ReflectError",
    "NullArgumentError",
    "NotAClassError",
    "TypeMismatchError",
    "IntrospectionError",
    "__version__",
)

from ._version import __version__
from .logger import logger
from .conventions import Conventions
from .conventions import current_conventions
from .conventions import use_conventions
from .descriptor import has_read_method
from .descriptor import has_write_method
from .descriptor import PropertyDescriptor
from .exceptions import IntrospectionError
from .exceptions import NotAClassError
from .exceptions import NullArgumentError
from .exceptions import ReflectError
from .exceptions import TypeMismatchError
from .reflector import get_readable_properties
from .reflector import get_writeable_and_readable_properties
from .reflector import get_writeable_properties
from .reflector import has_default_constructor

logger.debug("Imported {}".format(__name__))

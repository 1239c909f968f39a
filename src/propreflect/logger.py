"""Package logging uses the built-in logging module.

Importing propreflect attaches a "NullHandler" to the 'propreflect' logger so
that, unless the application configures logging, messages do not reach the
`handler of last resort
<https://docs.python.org/3/howto/logging.html#what-happens-if-no-configuration-is-provided>`__.

To see what the reflector decides while walking a class, attach a handler::

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))
    logging.getLogger('propreflect').addHandler(handler)
    logging.getLogger('propreflect').setLevel(logging.DEBUG)

Submodules log through child loggers (e.g. ``logging.getLogger('propreflect.reflector')``),
so handling can be tuned per module. ``python -m propreflect --log-level DEBUG``
does the above for command line use.
"""

__all__ = ["logger"]

from logging import DEBUG
from logging import getLogger
from logging import NullHandler

# Parent of the per-module loggers.
logger = getLogger("propreflect")
logger.addHandler(NullHandler(level=DEBUG))

"""Inspect a class from the command line.

Usage::

    python -m propreflect [--log-level DEBUG] [--mode readable|writeable|both] package.module:ClassName

Prints one line per property, sorted by name, followed by whether the class
has a default constructor.
"""

import argparse
import functools
import importlib
import logging
import sys
import typing

from propreflect import reflector
from propreflect.exceptions import ReflectError

logger = logging.getLogger("propreflect.__main__")

_listings = {
    "readable": reflector.get_readable_properties,
    "writeable": reflector.get_writeable_properties,
    "both": reflector.get_writeable_and_readable_properties,
}


@functools.lru_cache(maxsize=None)
def parser(add_help=False):
    """Get the base propreflect argument parser.

    By default, the returned ArgumentParser is created with ``add_help=False``
    so it can be used as a *parent* for a parser more local to the caller.
    """
    from propreflect import __version__ as _version

    _parser = argparse.ArgumentParser(add_help=add_help)

    _parser.add_argument("--version", action="version", version=f"propreflect version {_version}")

    _parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Optionally configure console logging to the indicated level.",
    )
    return _parser


def make_parser() -> argparse.ArgumentParser:
    _parser = argparse.ArgumentParser(
        prog="propreflect",
        description="List the bean-like properties of a class.",
        parents=[parser()],
    )
    _parser.add_argument(
        "--mode",
        choices=sorted(_listings),
        default="readable",
        help="Which properties to list (default: %(default)s).",
    )
    _parser.add_argument("target", metavar="module:Class", help="Importable location of the class to inspect.")
    return _parser


def load_target(target: str):
    """Import *target*, given as ``package.module:QualifiedName``."""
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise ValueError(f"Expected <module>:<class>. Got {target!r}.")
    obj = importlib.import_module(module_name)
    for part in qualname.split("."):
        obj = getattr(obj, part)
    return obj


def _type_name(tp) -> str:
    if isinstance(tp, type):
        return tp.__qualname__
    return repr(tp)


def _accessor_name(function: typing.Optional[typing.Callable]) -> str:
    if function is None:
        return "-"
    return getattr(function, "__qualname__", repr(function))


def configure_logging(level: typing.Optional[str]):
    if level is None:
        return
    package_logger = logging.getLogger("propreflect")
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(level)
            return
    character_stream = logging.StreamHandler()
    character_stream.setLevel(level)
    character_stream.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    package_logger.addHandler(character_stream)


def main(argv: typing.Sequence[str] = None) -> int:
    args = make_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        cls = load_target(args.target)
    except (ImportError, AttributeError, ValueError) as e:
        print(f"propreflect: cannot load {args.target}: {e}", file=sys.stderr)
        return 2

    try:
        properties = _listings[args.mode](cls)
        default_constructor = reflector.has_default_constructor(cls)
    except ReflectError as e:
        logger.debug("Reflection failed.", exc_info=True)
        print(f"propreflect: {e}", file=sys.stderr)
        return 1

    for descriptor in sorted(properties, key=lambda d: d.name):
        print(
            f"{descriptor.name}\t{_type_name(descriptor.property_type)}"
            f"\t{_accessor_name(descriptor.read_method)}\t{_accessor_name(descriptor.write_method)}"
        )
    print(f"default constructor: {'yes' if default_constructor else 'no'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

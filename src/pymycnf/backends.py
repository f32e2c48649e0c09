# -*- encoding: utf-8 -*-
# @File   : backends.py
# @Time   : 2024/10/15 00:12:26
# @Author : Kariko Lin

"""Downstream INI parsers the flattened buffer can be handed to.

Each one is a `Backend`, looked up by name. They don't parse INIs
the same way, e.g.:

- `ini` keeps keys outside any section in `header`, the others refuse
  such keys (`!include` of a file without section headers, or a bare
  option at the top of `my.cnf`, will fail there).
- Assigning the same option twice: `ini` and `configparser` keep the
  later value, `iniconfig` raises `ParseError`.

And probably many more.
"""

from configparser import ConfigParser

from iniconfig import IniConfig

from .abstract import Backend
from .cnf.consts import DEFAULT_BACKEND
from .errors import InvalidArgument
from .ini import IniParser

__all__ = [
    'ConfigParserBackend', 'IniConfigBackend',
    'register_backend', 'get_backend', 'available_backends'
]


class ConfigParserBackend(Backend[ConfigParser]):
    name = 'configparser'

    def loads(self, text: str, source: str = '<string>') -> ConfigParser:
        ret = ConfigParser(
            allow_no_value=True,
            delimiters=('=',),
            comment_prefixes=('#', ';'),
            inline_comment_prefixes=('#',),
            strict=False,
            interpolation=None)
        ret.optionxform = str  # type: ignore[assignment, method-assign]
        ret.read_string(text, source)
        return ret


class IniConfigBackend(Backend[IniConfig]):
    name = 'iniconfig'

    def loads(self, text: str, source: str = '<string>') -> IniConfig:
        return IniConfig(source, data=text)


_registry: dict[str, Backend] = {}


def register_backend(backend: Backend) -> None:
    """Add (or replace) a backend under `backend.name`."""
    _registry[backend.name] = backend


def get_backend(name: str | None = None) -> Backend:
    if name is None:
        name = DEFAULT_BACKEND
    try:
        return _registry[name]
    except KeyError:
        raise InvalidArgument(
            f"Unknown backend '{name}', "
            f"try one of: {', '.join(available_backends())}") from None


def available_backends() -> list[str]:
    return list(_registry)


for _i in (IniParser(), ConfigParserBackend(), IniConfigBackend()):
    register_backend(_i)

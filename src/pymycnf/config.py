# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2024/10/15 00:40:58
# @Author : Kariko Lin

"""Read a MySQL config file with the INI backend of your choice.

    ```python
    # read MySQL config with the default (`ini`) backend
    config = read_config({'from': '/etc/mysql/my.cnf'})
    config['mysqld']['port']

    # ...or with configparser
    config = read_config({'from': '/etc/mysql/my.cnf',
                          'using': 'configparser'})
    config.getint('mysqld', 'port')
    ```
"""

import codecs
import logging
from collections.abc import Mapping
from os import PathLike, fspath
from os.path import dirname, isabs
from typing import Any, Generic, Iterator, TypeVar

import yaml

from .backends import get_backend
from .cnf import CnfAssembler, MAX_INCLUDE_DEPTH
from .errors import InvalidArgument, ReadError

__all__ = ['MySQLConfig', 'read_config', 'load_options']

T = TypeVar('T')

_log = logging.getLogger(__name__)

_KNOWN_OPTIONS = frozenset({'from', 'using', 'encoding', 'max_depth',
                            'base_dir'})


def _check_options(options: Any) -> None:
    if not isinstance(options, Mapping):
        raise InvalidArgument("Arguments must be given as a mapping")
    if 'from' not in options:
        raise InvalidArgument("Missing required argument 'from'")
    src = options['from']
    if not isinstance(src, (str, PathLike)) and src is not None:
        raise InvalidArgument(
            f"Argument 'from' must be a path, got {type(src).__name__}")
    if src is None or not fspath(src):
        raise InvalidArgument("Empty argument 'from'")
    if unknown := sorted(set(options) - _KNOWN_OPTIONS):
        raise InvalidArgument(
            f"Unknown argument(s): {', '.join(map(str, unknown))}")
    max_depth = options.get('max_depth', MAX_INCLUDE_DEPTH)
    if not isinstance(max_depth, int) or max_depth < 0:
        raise InvalidArgument(
            f"Argument 'max_depth' must be a non-negative int: {max_depth!r}")
    base_dir = options.get('base_dir')
    if base_dir is not None and not isinstance(base_dir, (str, PathLike)):
        raise InvalidArgument(
            f"Argument 'base_dir' must be a path, got {type(base_dir).__name__}")
    encoding = options.get('encoding')
    if encoding is None:
        return
    if not isinstance(encoding, str):
        raise InvalidArgument(
            f"Argument 'encoding' must be a str, got {type(encoding).__name__}")
    try:
        codecs.lookup(encoding)
    except LookupError:
        raise InvalidArgument(f"Unknown encoding '{encoding}'") from None


class MySQLConfig(Generic[T]):
    """The backend's result, plus where it came from.

    Lookups are delegated to the backend's own object, so use it as you
    usually do; `native` is there when you need the object itself.
    """
    def __init__(self, native: T, *,
                 backend: str, source: str, text: str) -> None:
        self.__native = native
        self.backend = backend
        self.source = source
        self.text = text

    @property
    def native(self) -> T:
        return self.__native

    @classmethod
    def from_options(
        cls, options: Mapping[str, Any] | None = None
    ) -> 'MySQLConfig':
        _check_options(options)
        # unknown backend should fail before reading anything, too.
        backend = get_backend(options.get('using'))
        assembler = CnfAssembler(
            options['from'],
            base_dir=options.get('base_dir'),
            encoding=options.get('encoding'),
            max_depth=options.get('max_depth', MAX_INCLUDE_DEPTH))

        text = assembler.read()
        native = backend.loads(text, assembler.filename)
        _log.info('Loaded %s with backend %s', assembler, backend.name)
        return cls(native, backend=backend.name, source=assembler.filename,
                   text=text)

    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(name)
        return getattr(self.__native, name)

    def __getitem__(self, key: Any) -> Any:
        return self.__native[key]  # type: ignore[index]

    def __contains__(self, key: object) -> bool:
        return key in self.__native  # type: ignore[operator]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.__native)  # type: ignore[call-overload]

    def __repr__(self) -> str:
        return f'<MySQLConfig {self.source!r} using {self.backend!r}>'


def read_config(options: Mapping[str, Any] | None = None) -> MySQLConfig:
    """Flatten `options['from']` and parse it with `options['using']`.

    Raises:
        InvalidArgument: bad `options`, before any I/O happens.
        ReadError: the root file (or an `!include`d one) is unreadable.
        IncludeDepthError: includes nest too deep (or loop).

    Parse errors of the backend propagate as they are.
    """
    return MySQLConfig.from_options(options)


def load_options(path: str | PathLike[str]) -> dict[str, Any]:
    """Load invocation options from a YAML file, like:

        ```yaml
        from: my.cnf        # relative to this YAML file
        using: configparser
        encoding: utf-8
        ```
    """
    path = fspath(path)
    try:
        with open(path, 'r', encoding='utf-8') as fp:
            data = yaml.safe_load(fp)
    except OSError as e:
        raise ReadError(path, e.strerror or str(e)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidArgument(
            f"Options in '{path}' must be a mapping, "
            f"got {type(data).__name__}")
    if isinstance(data.get('from'), str) and data['from'] \
            and not isabs(data['from']) and 'base_dir' not in data:
        data['base_dir'] = dirname(path) or '.'
    return data

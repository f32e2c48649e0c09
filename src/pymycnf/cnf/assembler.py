# -*- encoding: utf-8 -*-
# @File   : assembler.py
# @Time   : 2024/10/14 21:40:11
# @Author : Kariko Lin

"""Flatten a MySQL option file tree into one INI buffer.

MySQL option files are *almost* INI, except:

    ```ini
    [mysqld]
    skip-networking          ; bare boolean option
    !include /etc/mysql/extra.cnf
    !includedir /etc/mysql/conf.d/
    ```

So we slurp the root file, turn bare options into `name = yes`, and
splice every included file (or directory) in place of its directive,
depth first. What comes out can be fed to any INI parser.
"""

import logging
from io import StringIO
from os import PathLike, fspath, getcwd, scandir
from os.path import abspath, dirname, isabs, join
from typing import Iterator

from chardet import detect as guess_codec

from ..abstract import FileHandler
from ..errors import IncludeDepthError, ReadError
from .consts import (
    BARE_OPTION,
    INCLUDE_DIRECTIVE,
    MAX_INCLUDE_DEPTH,
    SKIP_NAMES,
    IncludeKind
)

__all__ = ['CnfAssembler', 'resolve', 'expand_bare_options']

_log = logging.getLogger(__name__)


def _split_lines(text: str) -> Iterator[tuple[str, str]]:
    """Yield `(content, terminator)` per line; only `\\n` splits lines."""
    *lines, last = text.split('\n')
    for i in lines:
        yield i, '\n'
    if last:
        yield last, ''


def _decode_file(filename: str) -> str:
    with open(filename, 'rb') as fp:
        raw = fp.read()

    codec = guess_codec(raw)
    if not codec['encoding'] or codec['confidence'] < 0.8:
        codec = {'encoding': 'utf-8-sig'}

    # fallbacks
    try:
        return raw.decode(codec['encoding'])
    except (UnicodeDecodeError, LookupError):
        return raw.decode('latin-1')


def _slurp(path: str, encoding: str | None) -> str:
    encoding = encoding or 'utf-8-sig'
    try:
        try:
            # newline='' keeps '\r' around, stripped with the other spaces.
            with open(path, 'r', encoding=encoding, newline='') as fp:
                text = fp.read()
        except UnicodeDecodeError:
            _log.debug("'%s' is not %s, guessing its encoding.",
                       path, encoding)
            text = _decode_file(path)
    except OSError as e:
        raise ReadError(path, e.strerror or str(e)) from e
    # Notepad likes BOMs, \s doesn't match them.
    return text.removeprefix('\ufeff')


def _with_terminator(content: str, terminator: str) -> str:
    # keep whatever follows from being glued onto the last included line.
    if content and not content.endswith('\n'):
        return content + terminator
    return content


def _locate(
    path: str | PathLike[str],
    base_dir: str | PathLike[str] | None
) -> str:
    path = fspath(path)
    if not isabs(path):
        path = join(getcwd() if base_dir is None else fspath(base_dir), path)
    return abspath(path)


def expand_bare_options(text: str) -> str:
    """`skip-name-resolve` => `skip-name-resolve = yes`, line by line."""
    buf = StringIO()
    for line, eol in _split_lines(text):
        if (m := BARE_OPTION.match(line)) is not None:
            line = f'{m.group(1)} = yes'
        buf.write(line)
        buf.write(eol)
    return buf.getvalue()


class _Resolver:
    def __init__(self, encoding: str | None, max_depth: int) -> None:
        self._codec = encoding
        self._max_depth = max_depth

    def resolve(self, kind: IncludeKind, path: str, depth: int = 0) -> str:
        if depth > self._max_depth:
            raise IncludeDepthError(path, self._max_depth)
        if kind is IncludeKind.DIRECTORY:
            return self._read_dir(path, depth)
        return self._read_file(path, depth)

    def _read_file(self, path: str, depth: int) -> str:
        _log.debug('Reading file %s', path)
        base_dir = dirname(path)
        content = expand_bare_options(_slurp(path, self._codec))

        buf = StringIO()
        for line, eol in _split_lines(content):
            if (m := INCLUDE_DIRECTIVE.match(line)) is None:
                buf.write(line)
                buf.write(eol)
                continue
            kind = IncludeKind.DIRECTORY if m.group(1) else IncludeKind.FILE
            target = _locate(m.group(2), base_dir)
            buf.write(_with_terminator(
                self.resolve(kind, target, depth + 1), eol))
        return buf.getvalue()

    def _read_dir(self, path: str, depth: int) -> str:
        _log.debug('Reading directory %s', path)
        buf = StringIO()
        try:
            entries = scandir(path)
        except OSError as e:
            # optional drop-in dirs (conf.d) may well be absent.
            _log.debug('Skipping include dir %s: %s', path, e)
            return ''

        with entries:
            for i in entries:
                if i.name in SKIP_NAMES or i.name.startswith('.'):
                    continue
                if i.is_file():
                    kind = IncludeKind.FILE
                elif i.is_dir():
                    kind = IncludeKind.DIRECTORY
                else:
                    # sockets, fifos, dangling links...
                    continue
                buf.write(_with_terminator(
                    self.resolve(kind, i.path, depth + 1), '\n'))
        return buf.getvalue()


def resolve(
    kind: IncludeKind | str,
    path: str | PathLike[str], *,
    base_dir: str | PathLike[str] | None = None,
    encoding: str | None = None,
    max_depth: int = MAX_INCLUDE_DEPTH
) -> str:
    """Resolve a file (or a directory tree) into flattened INI text.

    Relative `path` is taken against `base_dir`, or the current working
    directory if not given.

    Raises:
        ReadError: a file, the root or an `!include`d one, is unreadable.
        IncludeDepthError: includes nest deeper than `max_depth`.
    """
    return _Resolver(encoding, max_depth).resolve(
        IncludeKind(kind), _locate(path, base_dir))


class CnfAssembler(FileHandler[str]):
    """Reads a root `my.cnf`, returning the flattened buffer."""
    def __init__(
        self, rootfile: str | PathLike[str], *,
        base_dir: str | PathLike[str] | None = None,
        encoding: str | None = None,
        max_depth: int = MAX_INCLUDE_DEPTH
    ) -> None:
        super().__init__(_locate(rootfile, base_dir))
        self._codec = encoding
        self._max_depth = max_depth

    def read(self) -> str:
        return resolve(IncludeKind.FILE, self._fn,
                       encoding=self._codec, max_depth=self._max_depth)

    def __str__(self) -> str:
        return "MySQL config root: " + super().__str__()

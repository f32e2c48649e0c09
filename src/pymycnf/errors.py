# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/14 21:08:36
# @Author : Kariko Lin


class CnfError(Exception):
    """Base of everything raised by pymycnf itself.

    Errors raised by a backend while parsing the flattened buffer
    are *not* wrapped into this.
    """
    pass


class InvalidArgument(CnfError, ValueError):
    """Bad invocation, detected before any file is touched."""
    pass


class ReadError(CnfError, OSError):
    """A config file (root or `!include`d) could not be read."""
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Can't read config file '{path}': {reason}")
        self.path = path
        self.reason = reason

    def __reduce__(self):
        return type(self), (self.path, self.reason)


class IncludeDepthError(CnfError):
    """Raised when `!include` / `!includedir` nests too deep.

    Usually means an include loop, or a symlink pointing back up.
    """
    def __init__(self, path: str, depth: int) -> None:
        super().__init__(
            f"Include depth limit ({depth}) exceeded at '{path}'")
        self.path = path
        self.depth = depth

    def __reduce__(self):
        return type(self), (self.path, self.depth)

# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/10/14 21:22:47
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Something reading one root file into a `T`.

    Read only: pymycnf never writes config files back.
    """
    def __init__(self, filename: str) -> None:
        self._fn = filename

    @property
    def filename(self) -> str:
        return self._fn

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn


class Backend(Generic[T], metaclass=ABCMeta):
    """A downstream INI parser, constructed from an in-memory buffer."""
    name: str

    @abstractmethod
    def loads(self, text: str, source: str = '<string>') -> T:
        """Parse the flattened `text`.

        `source` is only informative (error messages and such).
        Parse errors should propagate as the parser raises them.
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f'<{type(self).__name__} {self.name!r}>'

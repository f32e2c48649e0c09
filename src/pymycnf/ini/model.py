# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/14 22:05:51
# @Author : Kariko Lin

"""
Basically INI Structure, the way `mysqld --print-defaults` sees it.

No inheritance, no `+=`: for option files the later value simply wins.
"""

from collections.abc import MutableMapping
from typing import Iterator, Mapping


class IniSection(MutableMapping[str, str]):
    """INI 小节字典。

    所有键值对均*应该*是`str: str`类型（哪怕值为空串），
    但由于 Python 的动态类型性质，运行时并不会对此作出限制。
    """
    def __init__(
        self, section_name: str, /,
        pairs: Mapping[str, str] | None = None
    ) -> None:
        self._name = section_name
        self._data: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()

    def getbool(self, key: str) -> bool | None:
        """`yes` / `1` / `true` / `on` => True, `None` if absent."""
        if key not in self:
            return None
        return self[key].strip().lower() in ('1', 'y', 'yes', 't', 'true',
                                             'on')


class IniClass(MutableMapping[str, IniSection]):
    """INI 文件表示。支持以下形式的小节和键值对：

        ```ini
        key = val  ; 使用 self.header 访问游离的键值对。

        [mysqld]
        port = 3306
        skip-networking = yes
        ```

    同名小节会被合并，同名键以后者为准。
    """
    def __init__(self) -> None:
        # section declaration is impossible to contain ';'.
        self.__header = IniSection('; PyMyCnf_Global')
        self.__raw: dict[str, IniSection] = {}

    @property
    def header(self) -> IniSection:
        """位于文件头部的，不属于任何小节的游离键值对。"""
        return self.__header

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key]

    def __setitem__(
        self,
        key: str,
        value: IniSection | Mapping[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict in key setting operation.
        self.__raw[key] = IniSection(key, value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def setdefault(
        self, key: str, default: Mapping[str, str] | None = None
    ) -> IniSection:
        if key not in self:
            self[key] = default
        return self[key]

    def get_value(
        self, section: str | None, key: str, default: str | None = None
    ) -> str | None:
        """Look up `key` in `section`, or in `header` if `section` is None."""
        sect = self.__header if section is None else self.__raw.get(section)
        if sect is None:
            return default
        return sect.get(key, default)

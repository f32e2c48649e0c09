# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/14 22:31:07
# @Author : Kariko Lin

"""The default backend: a tiny reader for already flattened option files.

We do parsing based on the following consumption:
1. `!include`s are already resolved, bare options already `= yes`.
(see `pymycnf.cnf`)

2. Comments start with `#` or `;`. `#` may also start in the middle of
an unquoted value, like mysqld itself accepts.
"""

from io import StringIO, TextIOBase
from warnings import warn

from ..abstract import Backend
from .model import IniClass


def _unquote(val: str) -> str:
    if val[:1] in ('"', "'"):
        end = val.find(val[0], 1)
        if end > 0:
            return val[1:end]
    return val.split('#', 1)[0].rstrip()


class IniParser(Backend[IniClass]):
    name = 'ini'

    @staticmethod
    def readstream(
        buf: TextIOBase,
        ins: IniClass | None = None,
        source: str = '<string>'
    ) -> IniClass:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.loads()`便是。
        """
        if ins is None:
            ins = IniClass()
        this_sect = ins.header
        for lineno, i in enumerate(buf, 1):
            i = i.strip()
            if not i or i[0] in '#;':
                continue
            if i[0] == '[':
                end = i.find(']')
                if end < 0:
                    warn(f'{source}:{lineno}: 小节声明没有闭合："{i}"，已忽略。')
                    continue
                this_sect = ins.setdefault(i[1:end].strip())
            elif '=' in i:
                key, val = i.split('=', 1)
                this_sect[key.strip()] = _unquote(val.strip())
            else:
                warn(f'{source}:{lineno}: 无法识别的行："{i}"，已忽略。')
        return ins

    def loads(self, text: str, source: str = '<string>') -> IniClass:
        return self.readstream(StringIO(text), source=source)

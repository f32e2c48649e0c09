# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/14 22:03:19
# @Author : Kariko Lin

from .model import IniSection, IniClass
from .parser import IniParser


# 只是给拼好的 my.cnf 用的最小实现，不打算支持 INI 的所有方言。

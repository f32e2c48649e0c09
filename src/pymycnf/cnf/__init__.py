# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/14 21:12:40
# @Author : Kariko Lin

from .consts import IncludeKind, SKIP_NAMES, MAX_INCLUDE_DEPTH
from .assembler import CnfAssembler, resolve, expand_bare_options

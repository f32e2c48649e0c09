# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/14 21:15:02
# @Author : Kariko Lin

from enum import Enum
from re import compile as regex


class IncludeKind(str, Enum):
    FILE = 'file'
    DIRECTORY = 'dir'


# never descend into these when expanding `!includedir`.
# dotfiles are skipped as well, see `assembler`.
SKIP_NAMES = frozenset({'.', '..', 'CVS'})

# `skip-networking`, `  log_bin  `, ...
BARE_OPTION = regex(r'^\s*(\w+(?:-\w+)*)\s*$')
# group 1: 'dir' or None, group 2: the target path.
INCLUDE_DIRECTIVE = regex(r'^\s*!include(dir)?\s+(.+?)\s*$')

MAX_INCLUDE_DEPTH = 64

DEFAULT_BACKEND = 'ini'

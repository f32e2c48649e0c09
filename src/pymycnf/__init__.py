# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/14 20:58:13
# @Author : Kariko Lin

import logging

from .backends import available_backends, get_backend, register_backend
from .cnf import CnfAssembler, IncludeKind, resolve
from .config import MySQLConfig, load_options, read_config
from .errors import CnfError, IncludeDepthError, InvalidArgument, ReadError

__all__ = [
    'MySQLConfig', 'read_config', 'load_options',
    'CnfAssembler', 'IncludeKind', 'resolve',
    'available_backends', 'get_backend', 'register_backend',
    'CnfError', 'InvalidArgument', 'ReadError', 'IncludeDepthError'
]

__version__ = '0.1.0'

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')

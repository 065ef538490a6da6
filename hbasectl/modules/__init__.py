"""
Cluster administration modules.
"""
from .hbase import HBaseAdmin, HBaseError
from .pre_upgrade import VALIDATIONS, ValidationResult, run_validations

__all__ = [
    'HBaseAdmin',
    'HBaseError',
    'VALIDATIONS',
    'ValidationResult',
    'run_validations',
]

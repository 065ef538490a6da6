from . import pre_upgrade

__all__ = ['pre_upgrade']

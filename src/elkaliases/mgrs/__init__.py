"""Module to make class imports nicer for the mgrs package."""

from .alias import AliasSetMgr
from .resource import ResourceMgr
from .template import IndexTemplateMgr

__all__ = [
    'AliasSetMgr',
    'IndexTemplateMgr',
    'ResourceMgr',
]

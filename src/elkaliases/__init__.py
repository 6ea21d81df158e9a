"""elkaliases: Reconcile Elasticsearch index templates and alias sets."""

from datetime import datetime
from elkaliases.debug import debug
from elkaliases.mgrs import AliasSetMgr, IndexTemplateMgr
from elkaliases.provider import Provider
from elkaliases.state import ResourceData

__version__ = "0.3.0"

FIRST_YEAR = 2025
now = datetime.now()
if now.year == FIRST_YEAR:
    COPYRIGHT_YEARS = "2025"
else:
    COPYRIGHT_YEARS = f"2025-{now.year}"

__author__ = "elkaliases contributors"
__copyright__ = f"{COPYRIGHT_YEARS}, {__author__}"
__license__ = "Apache 2.0"
__status__ = "Development"
__description__ = (
    "Library that reconciles Elasticsearch composable index templates and index "
    "alias sets against a declared desired state."
)
__keywords__ = [
    "elasticsearch",
    "index",
    "template",
    "alias",
    "datastream",
    "reconcile",
]

__all__ = [
    "AliasSetMgr",
    "IndexTemplateMgr",
    "Provider",
    "ResourceData",
    "debug",
    "__author__",
    "__copyright__",
    "__version__",
]

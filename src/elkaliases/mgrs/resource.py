"""Resource Manager Class Definition"""

import typing as t
import logging
from pydantic import BaseModel, ValidationError
from ..debug import debug, begin_end
from ..defaults import PLURALMAP
from ..exceptions import NotFound, ResourceMisconfig
from ..state import ResourceData

if t.TYPE_CHECKING:
    from elasticsearch8 import Elasticsearch

logger = logging.getLogger(__name__)


class ResourceMgr:
    """
    Resource Manager Parent Class

    Subclasses implement the host lifecycle for one resource type: ``create``,
    ``read``, ``update`` and ``delete`` each take a
    :py:class:`~.elkaliases.state.ResourceData` and return it, updated in place.
    """

    kind = 'resource_type'
    model: t.Type[BaseModel] = BaseModel

    def __init__(self, client: t.Union['Elasticsearch', None] = None):
        self.client = client

    @property
    def plural(self) -> str:
        """Readable plural name of the managed resource type"""
        return PLURALMAP.get(self.kind, self.kind)

    def desired(self, data: ResourceData) -> BaseModel:
        """
        Validate the working state of ``data`` against :py:attr:`model`

        :raises ResourceMisconfig: If validation fails
        """
        try:
            debug.lv4(f'TRY: {self.model.__name__}.model_validate')
            return self.model.model_validate(data.state.toDict())
        except ValidationError as err:
            msg = f'Invalid {self.kind} configuration: {err}'
            logger.error(msg)
            raise ResourceMisconfig(msg, (err,)) from err

    def create(self, data: ResourceData) -> ResourceData:
        """Create the resource, then read it back"""
        raise NotImplementedError

    def read(self, data: ResourceData) -> ResourceData:
        """Refresh the state from the remote. Clears ``data.id`` if absent"""
        raise NotImplementedError

    def update(self, data: ResourceData) -> ResourceData:
        """Bring the remote in line with the desired state, then read it back"""
        raise NotImplementedError

    def delete(self, data: ResourceData) -> ResourceData:
        """Delete the resource and clear ``data.id``"""
        raise NotImplementedError

    @begin_end()
    def import_state(self, ident: str) -> ResourceData:
        """
        Adopt the existing remote resource ``ident`` into tracked state

        :raises NotFound: If the resource does not exist
        """
        data = self.read(ResourceData(id=ident))
        if not data.exists:
            msg = f'Cannot import {self.kind} "{ident}": not found'
            logger.error(msg)
            raise NotFound(msg)
        debug.lv3(f'Imported {self.plural}: "{ident}"')
        return data

"""Alias Set Resource Manager Class"""

import typing as t
import logging
from ..debug import debug, begin_end
from ..es_api import get_alias, update_aliases
from ..exceptions import NotFound
from ..models import Alias, AliasAction, AliasSet
from ..state import ResourceData
from ..utils import json_equal, merge_aliases, missing_keys
from .resource import ResourceMgr

if t.TYPE_CHECKING:
    from elasticsearch8 import Elasticsearch

logger = logging.getLogger(__name__)


class AliasSetMgr(ResourceMgr):
    """
    Manager for the list of aliases attached to one index or data_stream

    The alias actions API takes discrete add/remove directives, so updates only
    send what changed.
    """

    kind = 'alias_set'
    model = AliasSet

    def __init__(self, client: t.Union['Elasticsearch', None] = None):
        debug.lv2('Initializing AliasSetMgr object...')
        super().__init__(client=client)
        debug.lv3('AliasSetMgr object initialized')

    def add(self, index: str, aliases: t.Sequence[Alias]) -> None:
        """Attach ``aliases`` to ``index`` in a single batch"""
        debug.lv5(f'Adding {[alias.name for alias in aliases]} to "{index}"')
        update_aliases(
            self.client, [AliasAction.add_alias(index, alias) for alias in aliases]
        )

    def remove(
        self, index: str, names: t.Sequence[str], missing_ok: bool = False
    ) -> None:
        """Detach the aliases ``names`` from ``index`` in a single batch"""
        debug.lv5(f'Removing {list(names)} from "{index}"')
        update_aliases(
            self.client,
            [AliasAction.remove_alias(index, name) for name in names],
            missing_ok=missing_ok,
        )

    @begin_end()
    def create(self, data: ResourceData) -> ResourceData:
        desired = self.desired(data)
        self.add(desired.index, desired.alias)
        data.set_id(desired.index)
        debug.lv3(f'Successfully added {self.plural} to: {desired.index}')
        return self.read(data)

    @begin_end()
    def read(self, data: ResourceData) -> ResourceData:
        try:
            response = get_alias(self.client, data.id)
        except NotFound:
            debug.lv3(f'Target "{data.id}" is gone. Removing from state')
            data.set_id(None)
            return data
        target = response.find(data.id)
        if target is None:
            debug.lv3(f'No entry for "{data.id}" in response. Removing from state')
            data.set_id(None)
            return data
        tracked = data.get('alias') or []
        data.update_state(
            {'index': data.id, 'alias': merge_aliases(tracked, target.aliases)}
        )
        return data

    @staticmethod
    def pending(
        prior: t.Sequence[t.Mapping], desired: t.Sequence[Alias]
    ) -> t.List[Alias]:
        """Return the desired aliases which are new, or whose filter changed"""
        known = {alias['name']: alias.get('filter') for alias in prior}
        return [
            alias
            for alias in desired
            if alias.name not in known
            or not json_equal(known[alias.name], alias.filter)
        ]

    @begin_end()
    def update(self, data: ResourceData) -> ResourceData:
        """
        Apply the difference between the prior and the desired alias list.

        If the target moved, every previously tracked alias is removed from the
        old target and the whole desired list is added to the new one. Otherwise
        dropped aliases are removed in one batch, then new or changed aliases
        are added in another. Empty batches are not sent.
        """
        desired = self.desired(data)
        prior = data.get_prior('alias') or []
        if data.id is not None and desired.index != data.id:
            debug.lv3(f'Target changed from "{data.id}" to "{desired.index}"')
            names = [alias['name'] for alias in prior]
            if names:
                self.remove(data.id, names, missing_ok=True)
            self.add(desired.index, desired.alias)
            data.set_id(desired.index)
            return self.read(data)
        data.set_id(desired.index)
        dropped = missing_keys(prior, [alias.model_dump() for alias in desired.alias])
        if dropped:
            self.remove(desired.index, dropped)
        else:
            debug.lv5('No aliases dropped')
        pending = self.pending(prior, desired.alias)
        if pending:
            self.add(desired.index, pending)
        else:
            debug.lv5('No aliases to add or change')
        return self.read(data)

    @begin_end()
    def delete(self, data: ResourceData) -> ResourceData:
        """Remove every tracked alias. An already deleted target is not an error"""
        names = [alias['name'] for alias in data.get('alias') or []]
        if names:
            self.remove(data.id, names, missing_ok=True)
        else:
            debug.lv3(f'No tracked aliases on "{data.id}": nothing to delete.')
        debug.lv3(f'Deleted {self.plural}: {names} from "{data.id}"')
        data.set_id(None)
        return data

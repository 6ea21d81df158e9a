"""Index Template Resource Manager Class"""

import typing as t
import logging
from ..debug import debug, begin_end
from ..es_api import delete_idx_tmpl, get_idx_tmpl, put_idx_tmpl
from ..exceptions import NotFound
from ..models import IndexTemplate, IndexTemplateDetail
from ..state import ResourceData
from ..utils import dump_json, merge_aliases
from .resource import ResourceMgr

if t.TYPE_CHECKING:
    from elasticsearch8 import Elasticsearch

logger = logging.getLogger(__name__)


def project_data_stream(
    data_stream: t.Optional[t.Dict[str, t.Any]],
) -> t.Optional[t.Dict[str, bool]]:
    """Project a remote data_stream object into the tracked shape, or None"""
    if data_stream is None:
        return None
    return {
        'allow_custom_routing': bool(data_stream.get('allow_custom_routing', False)),
        'hidden': bool(data_stream.get('hidden', False)),
    }


class IndexTemplateMgr(ResourceMgr):
    """
    Composable index template manager

    The put index template API replaces the whole template, so an update is
    a create followed by a read.
    """

    kind = 'index_template'
    model = IndexTemplate

    def __init__(self, client: t.Union['Elasticsearch', None] = None):
        debug.lv2('Initializing IndexTemplateMgr object...')
        super().__init__(client=client)
        debug.lv3('IndexTemplateMgr object initialized')

    @begin_end()
    def create(self, data: ResourceData) -> ResourceData:
        desired = self.desired(data)
        put_idx_tmpl(self.client, desired.name, desired.to_request())
        data.set_id(desired.name)
        debug.lv3(f'Successfully put index template: {desired.name}')
        return self.read(data)

    @begin_end()
    def read(self, data: ResourceData) -> ResourceData:
        try:
            response = get_idx_tmpl(self.client, data.id)
        except NotFound:
            debug.lv3(f'Index template "{data.id}" is gone. Removing from state')
            data.set_id(None)
            return data
        detail = response.find(data.id)
        if detail is None:
            debug.lv3(f'No index template named "{data.id}" in response')
            data.set_id(None)
            return data
        data.update_state(self.project(data, detail))
        return data

    def project(self, data: ResourceData, detail: IndexTemplateDetail) -> t.Dict:
        """
        Re-project the remote template into the desired-state shape.

        Mappings, settings and filters come back as raw JSON and are turned
        into strings. Tracked aliases keep their order. Aliases added outside
        of tracked state are appended. A ``template`` or ``data_stream`` block
        held in single-element list form is written back in that form.
        """
        debug.lv2('Starting method...')
        retval = {
            'name': data.id,
            'index_patterns': list(detail.index_patterns),
            'data_stream': project_data_stream(detail.data_stream),
            'template': None,
            'composed_of': list(detail.composed_of),
        }
        if detail.template is not None:
            tracked = data.get('template.alias') or []
            body = detail.template
            retval['template'] = {
                'mappings': None if body.mappings is None else dump_json(body.mappings),
                'settings': None if body.settings is None else dump_json(body.settings),
                'alias': merge_aliases(tracked, body.aliases),
            }
        for block in ('template', 'data_stream'):
            if data.is_list(block):
                value = retval[block]
                retval[block] = [] if value is None else [value]
        debug.lv3('Exiting method, returning value')
        return retval

    @begin_end()
    def update(self, data: ResourceData) -> ResourceData:
        return self.create(data)

    @begin_end()
    def delete(self, data: ResourceData) -> ResourceData:
        delete_idx_tmpl(self.client, data.id)
        debug.lv3(f'Deleted {self.plural}: "{data.id}"')
        data.set_id(None)
        return data

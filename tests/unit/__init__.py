"""Unit test initialization file."""

import copy
import typing as t
from elastic_transport import ApiResponseMeta
from elasticsearch8.exceptions import NotFoundError

INDEX: str = 'index'
"""Default alias set target for testing."""

OTHER: str = 'other-index'
"""Second alias set target for testing."""

TEMPLATE: str = 'test_index'
"""Default index template name for testing."""

MAPPINGS: str = '{"_source":{"mode":"synthetic"}}'
"""Default template mappings, as a JSON string."""

SETTINGS: str = '{"index":{"codec":"default"}}'
"""Default template settings, as a JSON string."""

FILTER: str = '{"term":{"user.id":"kimchy"}}'
"""Default alias filter, as a JSON string."""

BADREQUEST_BODY: dict = {
    'error': {
        'type': 'illegal_argument_exception',
        'reason': 'index template [test_index] has index patterns [x] matching...',
    },
    'status': 400,
}
"""Response body used for rejected requests."""


def meta(status: int = 200) -> ApiResponseMeta:
    """Return response metadata carrying ``status``."""
    return ApiResponseMeta(status, '1.1', {}, 0.01, None)


def api_error(cls: t.Type[Exception], status: int, body: t.Any) -> Exception:
    """Return an elasticsearch8 ApiError subclass instance."""
    return cls('error', meta(status), body)


def not_found(reason: str) -> NotFoundError:
    """Return a NotFoundError shaped like an Elasticsearch 404."""
    body = {'error': {'type': reason, 'reason': reason}, 'status': 404}
    return api_error(NotFoundError, 404, body)


def template_state(
    aliases: t.Optional[t.Sequence[t.Dict]] = None,
    composed_of: t.Optional[t.Sequence[str]] = None,
    data_stream: t.Optional[t.Dict] = None,
) -> t.Dict[str, t.Any]:
    """Return a desired index template state."""
    retval = {
        'name': TEMPLATE,
        'index_patterns': [TEMPLATE],
        'template': {
            'mappings': MAPPINGS,
            'settings': SETTINGS,
            'alias': list(aliases or []),
        },
        'composed_of': list(composed_of or []),
    }
    if data_stream is not None:
        retval['data_stream'] = data_stream
    return retval


def alias_state(names: t.Sequence[str], index: str = INDEX, **filters) -> t.Dict:
    """Return a desired alias set state. ``filters`` maps alias name to filter."""
    return {
        'index': index,
        'alias': [{'name': name, 'filter': filters.get(name)} for name in names],
    }


class FakeIndices:
    """In-memory stand-in for ``client.indices`` that answers like Elasticsearch."""

    def __init__(self):
        self.templates: t.Dict[str, t.Dict] = {}
        self.aliases: t.Dict[str, t.Dict[str, t.Dict]] = {}
        self.batches: t.List[t.List[t.Dict]] = []

    def put_index_template(
        self, name, index_patterns, template, composed_of, data_stream=None
    ):
        detail = {
            'index_patterns': list(index_patterns),
            'composed_of': list(composed_of),
            'template': copy.deepcopy(template),
        }
        if data_stream is not None:
            detail['data_stream'] = dict(data_stream)
        self.templates[name] = detail
        return {'acknowledged': True}

    def get_index_template(self, name):
        if name not in self.templates:
            raise not_found('resource_not_found_exception')
        return {
            'index_templates': [
                {'name': name, 'index_template': copy.deepcopy(self.templates[name])}
            ]
        }

    def delete_index_template(self, name):
        if name not in self.templates:
            raise not_found('index_template_missing_exception')
        del self.templates[name]
        return {'acknowledged': True}

    def update_aliases(self, actions):
        self.batches.append(copy.deepcopy(actions))
        staged = copy.deepcopy(self.aliases)
        for action in actions:
            ((verb, body),) = action.items()
            index = body['index']
            if index not in staged:
                raise not_found('index_not_found_exception')
            if verb == 'add':
                entry = {'filter': body['filter']} if 'filter' in body else {}
                staged[index][body['alias']] = entry
            elif body['alias'] in staged[index]:
                del staged[index][body['alias']]
            else:
                raise not_found('aliases_not_found_exception')
        self.aliases = staged
        return {'acknowledged': True, 'errors': False}

    def get_alias(self, index):
        if index not in self.aliases:
            raise not_found('index_not_found_exception')
        return {index: {'aliases': copy.deepcopy(self.aliases[index])}}

    def directives(self, verb: str, start: int = 0) -> t.List[t.Dict]:
        """Return every ``verb`` directive body sent since batch ``start``."""
        return [
            action[verb]
            for batch in self.batches[start:]
            for action in batch
            if verb in action
        ]


class FakeClient:
    """Minimal Elasticsearch client exposing only ``indices``."""

    def __init__(self):
        self.indices = FakeIndices()

"""Integration Test Setup"""

MAPPINGS: str = '{"properties":{"message":{"type":"text"}}}'
"""Template mappings, as a JSON string."""

SETTINGS: str = '{"index":{"number_of_shards":"1"}}'
"""Template settings, as a JSON string."""

FILTER: str = '{"term":{"user.id":"kimchy"}}'
"""Alias filter, as a JSON string."""


def template_state(name, aliases=None, composed_of=None, data_stream=None):
    """Return a desired index template state named ``name``"""
    retval = {
        'name': name,
        'index_patterns': [f'{name}-*'],
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


def alias_state(index, names, **filters):
    """Return a desired alias set state. ``filters`` maps alias name to filter."""
    return {
        'index': index,
        'alias': [{'name': name, 'filter': filters.get(name)} for name in names],
    }

"""Default values and constants"""

import typing as t

ENDPOINT_ENVVAR: str = 'ELASTICSEARCH_ENDPOINT'
"""Environment variable for the Elasticsearch URL"""

APIKEY_ENVVAR: str = 'ELASTICSEARCH_API_KEY'
"""Environment variable for the Elasticsearch API key"""

JSON_SEPARATORS: t.Tuple[str, str] = (',', ':')
"""Compact separators used when a raw JSON value is turned back into a string"""

INDEX_TEMPLATE: str = 'elkaliases_index'
"""Resource type name of the index template reconciler"""

INDEX_ALIASES: str = 'elkaliases_index_aliases'
"""Resource type name of the alias set reconciler"""

PLURALMAP: t.Dict[str, str] = {
    'index_template': 'index template(s)',
    'alias_set': 'alias(es)',
}
"""Mapping of resource kinds to readable plural names for log messages"""

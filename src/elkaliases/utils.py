"""Utility helper functions"""

import sys
import json
import typing as t
import logging
from pprint import pformat
from .debug import debug
from .defaults import JSON_SEPARATORS

logger = logging.getLogger(__name__)


def dump_json(value: t.Any) -> str:
    """
    Serialize a raw JSON value received from Elasticsearch back into a string.

    Key order is kept as the remote returned it. Separators are compact so the
    result matches what ``jsonencode`` style tooling emits.

    Numbers go through a parse and dump, so their text may change even though
    the value does not: ``1e10`` comes back as ``10000000000.0`` and ``1.50``
    as ``1.5``. Compare such strings with :py:func:`json_equal`.
    """
    return json.dumps(value, separators=JSON_SEPARATORS, ensure_ascii=False)


def load_json(value: t.Union[str, None]) -> t.Any:
    """Parse a JSON string into its raw value. Empty or None values return None"""
    if not value:
        return None
    return json.loads(value)


def json_equal(first: t.Union[str, None], second: t.Union[str, None]) -> bool:
    """Compare two JSON strings by their parsed values rather than their text"""
    return load_json(first) == load_json(second)


def missing_keys(
    first: t.Sequence[t.Mapping],
    second: t.Sequence[t.Mapping],
    key: str = 'name',
) -> t.List[t.Any]:
    """
    Return the values of ``key`` found in ``first`` but absent from ``second``.

    Order follows ``first``.

    :param first: The records to check, e.g. previously tracked aliases
    :param second: The records to check against, e.g. desired aliases
    :param key: The field which identifies a record
    """
    present = {item[key] for item in second}
    return [item[key] for item in first if item[key] not in present]


def alias_entry(name: str, body: t.Union[t.Mapping, None]) -> t.Dict[str, t.Any]:
    """Build a tracked alias entry from the remote body of alias ``name``"""
    retval = {'name': name, 'filter': None}
    if body and body.get('filter') is not None:
        retval['filter'] = dump_json(body['filter'])
    return retval


def merge_aliases(
    tracked: t.Sequence[t.Mapping],
    remote: t.Mapping[str, t.Mapping],
) -> t.List[t.Dict[str, t.Any]]:
    """
    Project the remote aliases into a list of tracked alias entries.

    Aliases already tracked come first, in tracked order. Remote aliases that
    are not tracked are appended in the order the remote returned them.

    :param tracked: Previously known alias entries (dicts with a ``name`` key)
    :param remote: Alias name to alias body, as returned by Elasticsearch
    """
    debug.lv2('Starting function...')
    retval = []
    for alias in tracked:
        name = alias['name']
        if name in remote:
            retval.append(alias_entry(name, remote[name]))
        else:
            debug.lv5(f'Tracked alias "{name}" no longer exists remotely')
    seen = {alias['name'] for alias in retval}
    for name, body in remote.items():
        if name not in seen:
            debug.lv5(f'Appending untracked alias "{name}"')
            retval.append(alias_entry(name, body))
            seen.add(name)
    debug.lv3('Exiting function, returning value')
    debug.lv5(f'Value = {retval}')
    return retval


def prettystr(*args, **kwargs) -> str:
    """
    A (nearly) straight up wrapper for pprint.pformat, except that we provide our own
    default values for 'indent' (2) and 'sort_dicts' (False). Primarily for debug
    logging and showing more readable dictionaries.

    The keyword arg, ``underscore_numbers`` is only available in Python versions
    3.10 and up, so there is a test here to add it when that is the case.
    """
    defaults = [
        ('indent', 2),
        ('width', 80),
        ('depth', None),
        ('compact', False),
        ('sort_dicts', False),
    ]
    if sys.version_info >= (3, 10):
        defaults.append(('underscore_numbers', False))
    kw = {}
    for tup in defaults:
        key, default = tup
        kw[key] = kwargs[key] if key in kwargs else default

    return f"\n{pformat(*args, **kw)}"  # newline in front so it always starts clean

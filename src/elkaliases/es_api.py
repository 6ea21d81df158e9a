"""Functions that make Elasticsearch API Calls"""

import typing as t
import logging
from elasticsearch8.exceptions import ApiError, NotFoundError
from pydantic import ValidationError
from .debug import debug, begin_end
from .exceptions import NotFound, RemoteRejected, ResultNotExpected
from .models import (
    AliasAction,
    GetAliasResponse,
    GetIndexTemplateResponse,
    PutIndexTemplateRequest,
    UpdateAliasesRequest,
)
from .utils import prettystr

if t.TYPE_CHECKING:
    from elasticsearch8 import Elasticsearch

logger = logging.getLogger(__name__)


def body_of(response: t.Any) -> t.Any:
    """Return the deserialized body of an API response"""
    return getattr(response, 'body', response)


def rejected(err: ApiError, action: str) -> RemoteRejected:
    """Build a RemoteRejected exception from an ApiError, keeping the body as-is"""
    status = err.meta.status if err.meta is not None else None
    msg = f'Error response from Elasticsearch while {action}: [{status}] {err.body}'
    logger.error(msg)
    return RemoteRejected(msg, (err,), status=status, body=err.body)


def unexpected(err: ValidationError, action: str) -> ResultNotExpected:
    """Build a ResultNotExpected exception for a response of the wrong shape"""
    msg = f'Unexpected response from Elasticsearch while {action}: {err}'
    logger.error(msg)
    return ResultNotExpected(msg, (err,))


@begin_end()
def put_idx_tmpl(
    client: 'Elasticsearch', name: str, request: PutIndexTemplateRequest
) -> None:
    """Publish (create or fully replace) index template ``name``"""
    kwargs = request.kwargs()
    debug.lv5(f'put_index_template name: {name}, body: {prettystr(kwargs)}')
    try:
        debug.lv4('TRY: indices.put_index_template')
        res = client.indices.put_index_template(name=name, **kwargs)
        debug.lv5(f'put_index_template response: {body_of(res)}')
    except ApiError as err:
        raise rejected(err, f'putting index template "{name}"') from err


@begin_end()
def get_idx_tmpl(client: 'Elasticsearch', name: str) -> GetIndexTemplateResponse:
    """
    Get index template ``name``

    :raises NotFound: If Elasticsearch answers 404
    """
    try:
        debug.lv4('TRY: indices.get_index_template')
        res = client.indices.get_index_template(name=name)
    except NotFoundError as err:
        debug.lv3(f'Index template "{name}" not found')
        raise NotFound(f'Index template "{name}" not found', (err,)) from err
    except ApiError as err:
        raise rejected(err, f'getting index template "{name}"') from err
    debug.lv5(f'get_index_template response: {prettystr(body_of(res))}')
    try:
        retval = GetIndexTemplateResponse.model_validate(body_of(res))
    except ValidationError as err:
        raise unexpected(err, f'getting index template "{name}"') from err
    return retval


@begin_end()
def delete_idx_tmpl(client: 'Elasticsearch', name: str) -> None:
    """Delete index template ``name``. A 404 is a rejection like any other"""
    try:
        debug.lv4('TRY: indices.delete_index_template')
        res = client.indices.delete_index_template(name=name)
        debug.lv5(f'delete_index_template response: {body_of(res)}')
    except ApiError as err:
        raise rejected(err, f'deleting index template "{name}"') from err


@begin_end()
def update_aliases(
    client: 'Elasticsearch',
    actions: t.Sequence[AliasAction],
    missing_ok: bool = False,
) -> bool:
    """
    Submit alias ``actions`` as one batch.

    :param client: A client connection object
    :param actions: The add/remove directives
    :param missing_ok: Treat a 404 (index or alias already gone) as success

    :returns: True if the batch was applied, False if a 404 was absorbed
    """
    kwargs = UpdateAliasesRequest(actions=list(actions)).kwargs()
    debug.lv5(f'update_aliases body: {prettystr(kwargs)}')
    try:
        debug.lv4('TRY: indices.update_aliases')
        res = client.indices.update_aliases(**kwargs)
        debug.lv5(f'update_aliases response: {body_of(res)}')
    except NotFoundError as err:
        if not missing_ok:
            raise rejected(err, 'updating aliases') from err
        debug.lv3(f'Alias target already gone, nothing to remove: {err.body}')
        return False
    except ApiError as err:
        raise rejected(err, 'updating aliases') from err
    return True


@begin_end()
def get_alias(client: 'Elasticsearch', index: str) -> GetAliasResponse:
    """
    Get the aliases attached to ``index``

    :raises NotFound: If Elasticsearch answers 404
    """
    try:
        debug.lv4('TRY: indices.get_alias')
        res = client.indices.get_alias(index=index)
    except NotFoundError as err:
        debug.lv3(f'Index or data_stream "{index}" not found')
        raise NotFound(f'Index or data_stream "{index}" not found', (err,)) from err
    except ApiError as err:
        raise rejected(err, f'getting aliases of "{index}"') from err
    debug.lv5(f'get_alias response: {prettystr(body_of(res))}')
    try:
        retval = GetAliasResponse.model_validate(body_of(res))
    except ValidationError as err:
        raise unexpected(err, f'getting aliases of "{index}"') from err
    return retval

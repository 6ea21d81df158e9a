"""Pytest configuration for unit tests."""

# pylint: disable=redefined-outer-name,C0116,W0212
import logging
from unittest.mock import MagicMock
import pytest
from elasticsearch8.exceptions import BadRequestError
from elkaliases.debug import debug
from elkaliases.mgrs import AliasSetMgr, IndexTemplateMgr
from . import BADREQUEST_BODY, INDEX, FakeClient, api_error, not_found

logger = logging.getLogger(__name__)

debug.level = 5  # Set the debug level to 5 for all tests


@pytest.fixture(scope="function")
def client():
    """Return a mock Elasticsearch client."""
    return MagicMock()


@pytest.fixture(scope="function")
def fake():
    """Return an in-memory client with index ``INDEX`` already present."""
    _ = FakeClient()
    _.indices.aliases[INDEX] = {}
    return _


@pytest.fixture
def badrequest():
    return api_error(BadRequestError, 400, BADREQUEST_BODY)


@pytest.fixture
def notfound():
    return not_found('index_not_found_exception')


@pytest.fixture
def template_mgr(fake):
    return IndexTemplateMgr(client=fake)


@pytest.fixture
def alias_mgr(fake):
    return AliasSetMgr(client=fake)


@pytest.fixture
def mock_template_mgr(client):
    return IndexTemplateMgr(client=client)


@pytest.fixture
def mock_alias_mgr(client):
    return AliasSetMgr(client=client)

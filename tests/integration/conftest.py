"""Integration test conftest.py"""

# pylint: disable=C0115,missing-function-docstring,redefined-outer-name,R0913
from os import environ, path
import pytest
from dotenv import load_dotenv
from elasticsearch8.exceptions import NotFoundError
from elastic_transport import TransportError
from elkaliases.client import ClientConfig, build_client
from elkaliases.debug import debug
from elkaliases.mgrs import AliasSetMgr, IndexTemplateMgr

PROJ = path.abspath(path.join(path.dirname(__file__), '..', '..'))
ENVPATH = path.join(PROJ, '.env')

debug.level = 5  # Set the debug level to 5 for all tests


class Index4Test:

    def __init__(self, client, idx_name):
        self.client = client
        self.name = idx_name

    def setup(self):
        self.client.indices.create(index=self.name)

    def teardown(self):
        try:
            self.client.indices.delete(index=self.name)
        except NotFoundError:
            pass


@pytest.fixture(scope='session')
def client():
    """Return an Elasticsearch client, or skip when no cluster answers"""
    load_dotenv(dotenv_path=ENVPATH)
    config = ClientConfig(
        url=environ.get('TEST_ES_SERVER', 'http://127.0.0.1:9200'),
        token=environ.get('TEST_ES_API_KEY', 'unused'),
        insecure=environ.get('TEST_ES_INSECURE', '') in ('1', 'true'),
    )
    _ = build_client(config)
    try:
        alive = _.ping()
    except TransportError:
        alive = False
    if not alive:
        pytest.skip(f'No Elasticsearch cluster at {config.url}')
    return _


@pytest.fixture
def template_mgr(client):
    return IndexTemplateMgr(client=client)


@pytest.fixture
def alias_mgr(client):
    return AliasSetMgr(client=client)


@pytest.fixture
def template_name(namecore):
    """Return the name of an index template, deleted again after the test"""
    return namecore('template')


@pytest.fixture
def cleanup_template(client, template_name):
    yield template_name
    try:
        client.indices.delete_index_template(name=template_name)
    except NotFoundError:
        pass


@pytest.fixture
def create_idx(client, namecore):
    """Create an index for alias sets to point at and delete it after the test"""
    index = Index4Test(client, namecore('index'))
    index.setup()
    yield index
    index.teardown()


@pytest.fixture
def create_other(client, namecore):
    """A second index, for moving an alias set"""
    index = Index4Test(client, namecore('other'))
    index.setup()
    yield index
    index.teardown()

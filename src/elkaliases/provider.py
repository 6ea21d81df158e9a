"""Provider Class Definition"""

import typing as t
import logging
from .client import ClientConfig, build_client
from .debug import debug, begin_end
from .defaults import INDEX_ALIASES, INDEX_TEMPLATE
from .exceptions import ResourceMisconfig
from .mgrs import AliasSetMgr, IndexTemplateMgr, ResourceMgr

if t.TYPE_CHECKING:
    from elasticsearch8 import Elasticsearch

logger = logging.getLogger(__name__)

RESOURCES: t.Dict[str, t.Type[ResourceMgr]] = {
    INDEX_TEMPLATE: IndexTemplateMgr,
    INDEX_ALIASES: AliasSetMgr,
}
"""Resource type name to resource manager class"""


class Provider:
    """
    Entry point for a host.

    Holds the client configuration and hands out resource managers which all
    share one client.

    .. code-block:: python

       provider = Provider(url='https://es.example.com:9200', token='...')
       mgr = provider.resource('elkaliases_index')
       data = mgr.create(ResourceData(state=desired))

    :param url: Elasticsearch URL. Defaults to ``$ELASTICSEARCH_ENDPOINT``
    :param token: API key. Defaults to ``$ELASTICSEARCH_API_KEY``
    :param insecure: Skip TLS certificate verification
    """

    def __init__(
        self,
        url: t.Optional[str] = None,
        token: t.Optional[str] = None,
        insecure: bool = False,
    ):
        debug.lv2('Initializing Provider object...')
        #: The client configuration
        self.config = ClientConfig.from_env(url=url, token=token, insecure=insecure)
        self._client = None
        debug.lv3('Provider object initialized')

    @property
    def client(self) -> 'Elasticsearch':
        """The shared Elasticsearch client, built on first use"""
        if self._client is None:
            self._client = build_client(self.config)
        return self._client

    @property
    def resource_types(self) -> t.Sequence[str]:
        """Names of the resource types this provider manages"""
        return list(RESOURCES.keys())

    @begin_end()
    def resource(self, name: str) -> ResourceMgr:
        """
        Return the resource manager for resource type ``name``

        :raises ResourceMisconfig: If ``name`` is not a known resource type
        """
        try:
            mgr_cls = RESOURCES[name]
        except KeyError as err:
            msg = (
                f'Unknown resource type "{name}". '
                f'Expected one of {self.resource_types}'
            )
            logger.error(msg)
            raise ResourceMisconfig(msg) from err
        return mgr_cls(client=self.client)

"""Elasticsearch client factory"""

import typing as t
import logging
from os import getenv
from elastic_transport import RequestsHttpNode
from elasticsearch8 import Elasticsearch
from pydantic import BaseModel, Field, SecretStr, ValidationError
from .debug import debug, begin_end
from .defaults import APIKEY_ENVVAR, ENDPOINT_ENVVAR
from .exceptions import ClientConstructionError

logger = logging.getLogger(__name__)


class ClientConfig(BaseModel):
    """
    Connection settings for the Elasticsearch client.

    The API key is held as a :py:class:`~pydantic.SecretStr`, so it never shows
    up in ``repr()``, ``str()`` or log output.
    """

    url: str = Field(min_length=1)
    token: SecretStr
    insecure: bool = False

    @classmethod
    def from_env(
        cls,
        url: t.Optional[str] = None,
        token: t.Optional[str] = None,
        insecure: t.Optional[bool] = False,
    ) -> 'ClientConfig':
        """
        Build a config, filling ``url`` and ``token`` from the environment when
        they are not passed.

        :param url: Elasticsearch URL. Defaults to ``$ELASTICSEARCH_ENDPOINT``
        :param token: API key. Defaults to ``$ELASTICSEARCH_API_KEY``
        :param insecure: Skip TLS certificate verification

        :raises ClientConstructionError: If a value is missing or invalid
        """
        debug.lv2('Starting method...')
        if not url:
            url = getenv(ENDPOINT_ENVVAR)
        if not token:
            token = getenv(APIKEY_ENVVAR)
        if not url:
            msg = f'No Elasticsearch URL provided. Set "url" or ${ENDPOINT_ENVVAR}'
            logger.critical(msg)
            raise ClientConstructionError(msg)
        if not token:
            msg = f'No API key provided. Set "token" or ${APIKEY_ENVVAR}'
            logger.critical(msg)
            raise ClientConstructionError(msg)
        try:
            debug.lv4('TRY: ClientConfig()')
            retval = cls(url=url, token=token, insecure=bool(insecure))
        except ValidationError as err:
            fields = ', '.join(
                '.'.join(str(loc) for loc in error['loc']) for error in err.errors()
            )
            msg = f'Invalid client configuration for field(s): {fields}'
            logger.critical(msg)
            raise ClientConstructionError(msg) from err
        debug.lv3('Exiting method, returning value')
        return retval


class RequestsNode(RequestsHttpNode):
    """
    The ``requests`` HTTP node, which applies ``HTTP_PROXY``, ``HTTPS_PROXY``
    and ``NO_PROXY`` to every request.

    Before each send, requests merges environment settings into the call, and
    ``REQUESTS_CA_BUNDLE`` or ``CURL_CA_BUNDLE`` would replace a disabled
    certificate check with the bundle path. With ``verify_certs=False`` the
    check stays off.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._merge_environment = self.session.merge_environment_settings
        self.session.merge_environment_settings = self.merge_environment_settings

    def merge_environment_settings(
        self, url, proxies, stream, verify, cert
    ) -> t.Dict[str, t.Any]:
        """Session environment settings, with ``verify`` pinned when disabled"""
        settings = self._merge_environment(url, proxies, stream, verify, cert)
        if self.session.verify is False:
            settings['verify'] = False
        return settings


@begin_end()
def build_client(config: ClientConfig) -> Elasticsearch:
    """
    Return an Elasticsearch client for ``config``.

    Every request carries ``Authorization: ApiKey <token>`` and goes through
    the ``requests`` HTTP node, which honors ``HTTP_PROXY``, ``HTTPS_PROXY``
    and ``NO_PROXY``. The client itself never retries.

    :raises ClientConstructionError: If the transport cannot be built
    """
    kwargs = {
        'hosts': [config.url],
        'api_key': config.token.get_secret_value(),
        'node_class': RequestsNode,
        'verify_certs': not config.insecure,
        'max_retries': 0,
        'retry_on_timeout': False,
    }
    if config.insecure:
        kwargs['ssl_show_warn'] = False
    debug.lv5(f'Client url: {config.url}, verify_certs: {not config.insecure}')
    try:
        debug.lv4('TRY: Elasticsearch()')
        client = Elasticsearch(**kwargs)
    except Exception as err:
        msg = f'Error creating Elasticsearch client for {config.url}: {err}'
        logger.critical(msg)
        raise ClientConstructionError(msg) from err
    return client

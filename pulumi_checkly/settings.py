# Copyright 2016-2026, Pulumi Corporation.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Resolution of the provider's connection settings from stack configuration and the environment.

An explicitly configured, non-empty value always wins; the environment is only consulted when the configuration
leaves a setting unset.
"""
import os
from typing import Any, Mapping, Optional

from pulumi import log

from .client import DEFAULT_API_URL, Client
from .errors import ConfigurationError

CONFIG_NAMESPACE = "checkly"

API_KEY_ENV = "CHECKLY_API_KEY"
API_URL_ENV = "CHECKLY_API_URL"
ACCOUNT_ID_ENV = "CHECKLY_ACCOUNT_ID"
API_SOURCE_ENV = "CHECKLY_API_SOURCE"

DEFAULT_API_SOURCE = "PULUMI"


class ConnectionSettings:
    """
    ConnectionSettings holds everything needed to build a Checkly client.
    """

    api_key: Optional[str]
    api_url: str
    account_id: str
    source: str

    def __init__(self, api_key: Optional[str], api_url: str, account_id: str, source: str = DEFAULT_API_SOURCE) -> None:
        self.api_key = api_key
        self.api_url = api_url
        self.account_id = account_id
        self.source = source

    def __repr__(self) -> str:
        # Never include the API key.
        return f"ConnectionSettings(api_url={self.api_url!r}, account_id={self.account_id!r}, source={self.source!r})"


def config_key(name: str) -> str:
    return f"{CONFIG_NAMESPACE}:{name}"


def _lookup(config: Any, name: str, environ: Mapping[str, str], env_var: str) -> Optional[str]:
    value = config.get(config_key(name)) if config is not None else None
    if value:
        return str(value)
    value = environ.get(env_var)
    if value:
        return value
    return None


def resolve_settings(config: Any, environ: Optional[Mapping[str, str]] = None) -> ConnectionSettings:
    """
    Resolves the connection settings.

    :param config: The provider configuration. Anything with a `get(key)` method works, e.g. a
           `pulumi.dynamic.Config` or a plain dict keyed by `checkly:<name>`.
    :param Optional[Mapping[str, str]] environ: The environment to fall back on. Defaults to `os.environ`.
    :raises ConfigurationError: if no account id is set.
    """
    if environ is None:
        environ = os.environ

    account_id = _lookup(config, "account_id", environ, ACCOUNT_ID_ENV)
    if account_id is None:
        raise ConfigurationError("account_id", config_key("account_id"), ACCOUNT_ID_ENV)

    api_key = _lookup(config, "api_key", environ, API_KEY_ENV)
    if api_key is None:
        log.debug("no Checkly API key configured; requests will be sent unauthenticated")

    api_url = _lookup(config, "api_url", environ, API_URL_ENV) or DEFAULT_API_URL
    source = environ.get(API_SOURCE_ENV) or DEFAULT_API_SOURCE

    return ConnectionSettings(api_key=api_key, api_url=api_url, account_id=account_id, source=source)


def new_client(settings: ConnectionSettings) -> Client:
    client = Client(settings.api_url, settings.api_key)
    client.set_account_id(settings.account_id)
    client.set_checkly_source(settings.source)
    log.info(f"configured Checkly client: api_url={settings.api_url} account_id={settings.account_id}")
    return client

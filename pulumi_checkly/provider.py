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

from typing import Any, ClassVar, Dict, Optional

from pulumi import log
from pulumi.dynamic import CheckResult, ConfigureRequest, ResourceProvider
from semver import VersionInfo

from ._version import __version__
from .client import Client
from .errors import ProviderNotConfiguredError
from .schema import Attribute, Schema
from .settings import new_client, resolve_settings

TYPE_NAME = "checkly"


class ProviderMetadata:
    """
    ProviderMetadata identifies the provider to the engine.
    """

    type_name: str
    """The prefix of every resource type this provider implements."""

    version: str
    """The version of the provider. Always valid semver."""

    def __init__(self, type_name: str, version: str) -> None:
        self.type_name = type_name
        self.version = version


def metadata() -> ProviderMetadata:
    # Raises ValueError if the package version is not valid semver.
    VersionInfo.parse(__version__)
    return ProviderMetadata(TYPE_NAME, __version__)


_PROVIDER_SCHEMA = Schema(
    "Configuration of the Checkly provider.",
    [
        Attribute("account_id", str, "The Checkly account id to be used.", optional=True),
        Attribute("api_url", str, "The Checkly API endpoint to be used.", optional=True),
        Attribute("api_key", str, "The Checkly API key to be used.", optional=True, secret=True),
    ],
)


def provider_schema() -> Schema:
    return _PROVIDER_SCHEMA


class ChecklyResourceProvider(ResourceProvider):
    """
    ChecklyResourceProvider is the base class of the dynamic providers for Checkly resources. It owns the Checkly
    client that every lifecycle operation uses.

    The client is built once by `configure`, or passed in explicitly, and is never serialized along with the
    provider.
    """

    schema: ClassVar[Schema]

    _client: Optional[Client]

    def __init__(self, client: Optional[Client] = None) -> None:
        super().__init__()
        self._client = client

    def configure(self, req: ConfigureRequest) -> None:
        log.debug(f"configuring {type(self).__name__}")
        settings = resolve_settings(req.config)
        self._client = new_client(settings)

    @property
    def client(self) -> Client:
        if self._client is None:
            raise ProviderNotConfiguredError(type(self).__name__)
        return self._client

    def check(self, _olds: Any, news: Any) -> CheckResult:
        return self.schema.check(news)

    def __getstate__(self) -> Dict[str, Any]:
        state = dict(self.__dict__)
        state["_client"] = None
        return state

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self.__dict__.update(state)

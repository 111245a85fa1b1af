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
A Pulumi dynamic provider for Checkly.
"""

from ._version import __version__

from .client import (
    DEFAULT_API_URL,
    Client,
)

from .errors import (
    ApiError,
    ChecklyError,
    ConfigurationError,
    NotFoundError,
    ProviderNotConfiguredError,
    ResourceOperationError,
)

from .settings import (
    ConnectionSettings,
    new_client,
    resolve_settings,
)

from .schema import (
    Attribute,
    Schema,
)

from .provider import (
    TYPE_NAME,
    ChecklyResourceProvider,
    ProviderMetadata,
    metadata,
    provider_schema,
)

from .environment_variable import (
    EnvironmentVariable,
    EnvironmentVariableModel,
    EnvironmentVariableProvider,
)

__all__ = [
    "__version__",
    # client
    "DEFAULT_API_URL",
    "Client",
    # errors
    "ApiError",
    "ChecklyError",
    "ConfigurationError",
    "NotFoundError",
    "ProviderNotConfiguredError",
    "ResourceOperationError",
    # settings
    "ConnectionSettings",
    "new_client",
    "resolve_settings",
    # schema
    "Attribute",
    "Schema",
    # provider
    "TYPE_NAME",
    "ChecklyResourceProvider",
    "ProviderMetadata",
    "metadata",
    "provider_schema",
    # environment_variable
    "EnvironmentVariable",
    "EnvironmentVariableModel",
    "EnvironmentVariableProvider",
]

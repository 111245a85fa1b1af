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

from typing import Optional

from pulumi import RunError


class ChecklyError(Exception):
    """
    Base class for every error raised by the Checkly provider.
    """


class ConfigurationError(ChecklyError, RunError):
    """
    Indicates the provider could not be configured, e.g. because a required setting is missing from both the
    stack configuration and the environment.
    """

    setting: str
    """
    The name of the missing setting.
    """

    config_key: str
    """
    The configuration key that could have supplied the setting.
    """

    env_var: str
    """
    The environment variable that could have supplied the setting.
    """

    def __init__(self, setting: str, config_key: str, env_var: str) -> None:
        self.setting = setting
        self.config_key = config_key
        self.env_var = env_var
        super().__init__(
            f"Missing required Checkly setting '{setting}'\n"
            + f"\tplease set it using `pulumi config set {config_key} <value>` "
            + f"or the {env_var} environment variable"
        )


class ApiError(ChecklyError):
    """
    ApiError is raised when a call to the Checkly API fails, either because the server answered with a non-2xx
    status or because the request never completed.
    """

    method: str
    path: str
    status_code: Optional[int]
    body: str

    def __init__(self, method: str, path: str, status_code: Optional[int], body: str = "") -> None:
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body
        if status_code is None:
            msg = f"{method} {path} failed: {body}"
        else:
            msg = f"{method} {path}: unexpected response status {status_code}"
            if body:
                msg += f", body: {body}"
        super().__init__(msg)


class NotFoundError(ApiError):
    """
    NotFoundError is raised when the Checkly API reports that the requested entity does not exist.
    """


class ResourceOperationError(ChecklyError):
    """
    ResourceOperationError wraps a failed remote call made on behalf of a lifecycle operation. Its message is what
    the operator sees.
    """

    def __init__(self, label: str, cause: Exception) -> None:
        self.label = label
        self.cause = cause
        super().__init__(f"{label}: Checkly API error: {cause}")


class ProviderNotConfiguredError(ChecklyError):
    def __init__(self, provider_name: str) -> None:
        super().__init__(
            f"{provider_name} has no Checkly client; the provider must be configured before "
            + "resource operations run. Please report this issue to the provider developers."
        )

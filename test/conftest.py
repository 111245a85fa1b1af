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

import logging
from typing import Dict, List, Optional, Tuple

import pytest

from pulumi_checkly import ApiError, Client, EnvironmentVariableProvider, NotFoundError
from pulumi_checkly.client import EnvironmentVariable


# Suppresses logs about faulted unobserved tasks left behind by the Pulumi runtime.
logging.getLogger("asyncio").setLevel(logging.CRITICAL)


class FakeClient(Client):
    """
    An in-memory stand-in for the Checkly API. Records every call it receives.
    """

    def __init__(self) -> None:
        super().__init__("https://checkly.invalid", "test-key")
        self.variables: Dict[str, EnvironmentVariable] = {}
        self.calls: List[Tuple[str, str]] = []
        self.fail_with: Optional[Exception] = None

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def _lookup(self, method: str, key: str) -> EnvironmentVariable:
        if key not in self.variables:
            raise NotFoundError(method, f"/v1/variables/{key}", 404, '{"message":"Not Found"}')
        return self.variables[key]

    def create_environment_variable(self, env: EnvironmentVariable) -> EnvironmentVariable:
        self.calls.append(("create", env.key))
        self._maybe_fail()
        if env.key in self.variables:
            raise ApiError("POST", "/v1/variables", 409, "key already exists")
        self.variables[env.key] = EnvironmentVariable(env.key, env.value, env.locked)
        return EnvironmentVariable(env.key, env.value, env.locked)

    def get_environment_variable(self, key: str) -> EnvironmentVariable:
        self.calls.append(("get", key))
        self._maybe_fail()
        env = self._lookup("GET", key)
        return EnvironmentVariable(env.key, env.value, env.locked)

    def update_environment_variable(self, key: str, env: EnvironmentVariable) -> EnvironmentVariable:
        self.calls.append(("update", key))
        self._maybe_fail()
        self._lookup("PUT", key)
        self.variables[key] = EnvironmentVariable(key, env.value, env.locked)
        return EnvironmentVariable(key, env.value, env.locked)

    def delete_environment_variable(self, key: str) -> None:
        self.calls.append(("delete", key))
        self._maybe_fail()
        self._lookup("DELETE", key)
        del self.variables[key]


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def provider(fake_client):
    return EnvironmentVariableProvider(fake_client)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("CHECKLY_API_KEY", "CHECKLY_API_URL", "CHECKLY_ACCOUNT_ID", "CHECKLY_API_SOURCE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch

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
A minimal client for the parts of the Checkly public API used by the provider.
"""
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from .errors import ApiError, NotFoundError

DEFAULT_API_URL = "https://api.checklyhq.com"

# Seconds to wait for the API before giving up on a request.
DEFAULT_TIMEOUT = 30


class EnvironmentVariable:
    """
    EnvironmentVariable is an account-level environment variable as represented by the Checkly API.
    """

    key: str
    """
    The name of the variable. Checkly uses it as the variable's identifier.
    """

    value: str
    """
    The value of the variable.
    """

    locked: bool
    """
    Whether the value is hidden in the Checkly UI.
    """

    def __init__(self, key: str, value: str, locked: bool = False) -> None:
        self.key = key
        self.value = value
        self.locked = locked

    def to_json(self) -> Dict[str, Any]:
        return {"key": self.key, "value": self.value, "locked": self.locked}

    @staticmethod
    def from_json(data: Dict[str, Any]) -> "EnvironmentVariable":
        return EnvironmentVariable(
            key=data["key"],
            value=data.get("value", ""),
            locked=bool(data.get("locked", False)),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnvironmentVariable):
            return NotImplemented
        return self.to_json() == other.to_json()

    def __repr__(self) -> str:
        return f"EnvironmentVariable(key={self.key!r}, locked={self.locked!r})"


class Client:
    """
    Client talks to the Checkly API. It performs exactly one HTTP request per call and never retries.
    """

    api_url: str
    api_key: Optional[str]
    account_id: Optional[str]
    source: Optional[str]

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        :param str api_url: The base URL of the Checkly API.
        :param Optional[str] api_key: The API key sent as a bearer token. Requests are sent unauthenticated if unset.
        :param Optional[requests.Session] session: The session used to send requests.
        :param float timeout: Seconds to wait for a response.
        """
        self.api_url = api_url.rstrip("/")
        self.api_key = api_key
        self.account_id = None
        self.source = None
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout

    def set_account_id(self, account_id: str) -> None:
        self.account_id = account_id

    def set_checkly_source(self, source: str) -> None:
        self.source = source

    def create_environment_variable(self, env: EnvironmentVariable) -> EnvironmentVariable:
        data = self._request("POST", "/v1/variables", env.to_json())
        return _decode_variable("POST", "/v1/variables", data)

    def get_environment_variable(self, key: str) -> EnvironmentVariable:
        path = _variable_path(key)
        return _decode_variable("GET", path, self._request("GET", path))

    def update_environment_variable(self, key: str, env: EnvironmentVariable) -> EnvironmentVariable:
        path = _variable_path(key)
        return _decode_variable("PUT", path, self._request("PUT", path, env.to_json()))

    def delete_environment_variable(self, key: str) -> None:
        self._request("DELETE", _variable_path(key))

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if self.account_id:
            headers["X-Checkly-Account"] = self.account_id
        if self.source:
            headers["x-checkly-source"] = self.source
        return headers

    def _request(self, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        try:
            response = self._session.request(
                method,
                self.api_url + path,
                headers=self._headers(),
                json=body,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise ApiError(method, path, None, str(e)) from e

        if response.status_code == 404:
            raise NotFoundError(method, path, response.status_code, response.text)
        if not 200 <= response.status_code < 300:
            raise ApiError(method, path, response.status_code, response.text)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(method, path, response.status_code, response.text) from e


def _variable_path(key: str) -> str:
    return "/v1/variables/" + quote(key, safe="")


def _decode_variable(method: str, path: str, data: Any) -> EnvironmentVariable:
    if not isinstance(data, dict) or not data.get("key"):
        raise ApiError(method, path, None, "response does not describe an environment variable")
    return EnvironmentVariable.from_json(data)

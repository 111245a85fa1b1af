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

import unittest.mock

import pytest

from pulumi_checkly import (
    ApiError,
    Client,
    EnvironmentVariableModel,
    EnvironmentVariableProvider,
    ProviderNotConfiguredError,
    ResourceOperationError,
)
from pulumi_checkly.client import EnvironmentVariable


def plan(provider, news):
    """Runs the inputs through check, the way the engine does before create and update."""
    result = provider.check({}, news)
    assert result.failures == []
    return result.inputs


def test_create(provider, fake_client):
    result = provider.create(plan(provider, {"key": "one", "value": "secret", "locked": True}))

    assert result.id == "one"
    assert result.outs == {"key": "one", "value": "secret", "locked": True}
    assert fake_client.variables["one"] == EnvironmentVariable("one", "secret", True)
    assert fake_client.calls == [("create", "one")]


def test_create_without_locked_defaults_to_false(provider, fake_client):
    result = provider.create(plan(provider, {"key": "one", "value": "secret"}))

    assert result.outs["locked"] is False
    assert fake_client.variables["one"].locked is False


def test_create_failure_is_reported(provider, fake_client):
    fake_client.fail_with = ApiError("POST", "/v1/variables", 500, "boom")

    with pytest.raises(ResourceOperationError) as exc_info:
        provider.create(plan(provider, {"key": "one", "value": "secret"}))

    assert str(exc_info.value) == (
        "Creating environment variable failed: Checkly API error: "
        "POST /v1/variables: unexpected response status 500, body: boom"
    )
    assert exc_info.value.cause is fake_client.fail_with


def test_lifecycle(provider, fake_client):
    # Create and read.
    created = provider.create(plan(provider, {"key": "one", "value": "secret", "locked": True}))
    read = provider.read(created.id, created.outs)
    assert read.id == "one"
    assert read.outs == {"key": "one", "value": "secret", "locked": True}

    # Update and read.
    news = plan(provider, {"key": "one", "value": "three", "locked": False})
    diff = provider.diff(created.id, read.outs, news)
    assert diff.changes is True
    assert diff.replaces == []
    updated = provider.update(created.id, read.outs, news)
    assert updated.outs == {"key": "one", "value": "three", "locked": False}
    assert provider.read(created.id, updated.outs).id == "one"

    # Lock it again, then update without `locked`: the default applies, not the previous value.
    locked = provider.update(created.id, updated.outs, plan(provider, {"key": "one", "value": "three", "locked": True}))
    assert locked.outs["locked"] is True
    news = plan(provider, {"key": "one", "value": "four"})
    assert provider.diff(created.id, locked.outs, news).changes is True
    unlocked = provider.update(created.id, locked.outs, news)
    assert unlocked.outs == {"key": "one", "value": "four", "locked": False}
    assert fake_client.variables["one"] == EnvironmentVariable("one", "four", False)

    # Delete.
    provider.delete(created.id, unlocked.outs)
    assert fake_client.variables == {}
    assert fake_client.calls[-1] == ("delete", "one")


def test_read_by_id_alone_restores_all_attributes(provider, fake_client):
    # An import reads the variable with nothing but its id.
    fake_client.variables["one"] = EnvironmentVariable("one", "secret", True)

    read = provider.read("one", {})
    assert read.id == "one"
    assert read.outs == {"key": "one", "value": "secret", "locked": True}


def test_read_missing_clears_id(provider, fake_client):
    read = provider.read("one", {"key": "one", "value": "secret", "locked": True})

    assert read.id == ""
    assert fake_client.calls == [("get", "one")]


def test_read_failure_is_reported(provider, fake_client):
    fake_client.fail_with = ApiError("GET", "/v1/variables/one", 401, "unauthorized")

    with pytest.raises(ResourceOperationError, match="^Getting environment variable failed: Checkly API error: "):
        provider.read("one", {"key": "one"})


def test_read_overwrites_drifted_values(provider, fake_client):
    fake_client.variables["one"] = EnvironmentVariable("one", "changed remotely", False)

    read = provider.read("one", {"key": "one", "value": "secret", "locked": True})

    assert read.outs == {"key": "one", "value": "changed remotely", "locked": False}


def test_update_keeps_id(provider, fake_client):
    fake_client.variables["one"] = EnvironmentVariable("one", "secret", True)

    provider.update("one", {"key": "one", "value": "secret", "locked": True}, {"key": "one", "value": "two"})

    assert fake_client.calls == [("update", "one")]
    assert fake_client.variables["one"] == EnvironmentVariable("one", "two", False)


def test_update_failure_is_reported(provider):
    with pytest.raises(ResourceOperationError, match="^Updating environment variable failed"):
        provider.update("one", {}, {"key": "one", "value": "two"})


def test_delete_falls_back_to_id(provider, fake_client):
    fake_client.variables["one"] = EnvironmentVariable("one", "secret", False)

    provider.delete("one", {})

    assert fake_client.calls == [("delete", "one")]


def test_delete_failure_is_reported(provider):
    with pytest.raises(ResourceOperationError, match="^Deleting environment variable failed"):
        provider.delete("one", {"key": "one", "value": "secret", "locked": False})


def test_diff_no_changes(provider):
    olds = {"key": "one", "value": "secret", "locked": False}

    diff = provider.diff("one", olds, {"key": "one", "value": "secret"})

    assert diff.changes is False
    assert diff.replaces == []
    assert diff.stables == ["id"]


def test_diff_key_change_replaces(provider):
    olds = {"key": "one", "value": "secret", "locked": False}

    diff = provider.diff("one", olds, {"key": "two", "value": "secret", "locked": False})

    assert diff.changes is True
    assert diff.replaces == ["key"]


def test_operations_require_a_client():
    provider = EnvironmentVariableProvider()

    with pytest.raises(ProviderNotConfiguredError):
        provider.create({"key": "one", "value": "secret", "locked": False})


def test_model_mapping():
    model = EnvironmentVariableModel.from_props({"key": "one", "value": "secret"}, "one")

    assert model.locked is False
    assert model.id == "one"
    assert model.to_checkly_entity() == EnvironmentVariable("one", "secret", False)

    model.update_with_checkly_entity(EnvironmentVariable("one", "other", True))
    assert model.to_props() == {"key": "one", "value": "other", "locked": True}
    assert model.id == "one"


def http_provider(status_code, text):
    resp = unittest.mock.Mock()
    resp.status_code = status_code
    resp.text = text
    resp.content = text.encode()
    resp.json.side_effect = ValueError("Expecting value")
    session = unittest.mock.Mock()
    session.request.return_value = resp
    return EnvironmentVariableProvider(Client("https://api.example.com", "key", session=session))


def test_read_invalid_json_is_reported():
    provider = http_provider(200, "<html>")

    with pytest.raises(ResourceOperationError, match="^Getting environment variable failed: Checkly API error: "):
        provider.read("one", {"key": "one", "value": "secret", "locked": False})


def test_create_empty_response_is_reported():
    provider = http_provider(201, "")

    with pytest.raises(ResourceOperationError, match="^Creating environment variable failed: Checkly API error: "):
        provider.create({"key": "one", "value": "secret", "locked": False})

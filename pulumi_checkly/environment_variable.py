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
The `checkly:EnvironmentVariable` resource: an account-level Checkly environment variable.
"""
from typing import Any, Dict, Mapping, Optional

from pulumi import Input, Output, ResourceOptions, log
from pulumi.dynamic import CreateResult, DiffResult, ReadResult, Resource, UpdateResult
from pulumi.runtime import rpc

from .client import EnvironmentVariable as ChecklyEnvironmentVariable
from .errors import ApiError, NotFoundError, ResourceOperationError
from .provider import ChecklyResourceProvider
from .schema import Attribute, Schema

SCHEMA = Schema(
    "An environment variable shared by every check of a Checkly account.",
    [
        Attribute("key", str, "Key of the environment variable.", required=True),
        Attribute("value", str, "Value of the environment variable.", required=True, secret=True),
        Attribute(
            "locked",
            bool,
            "Whether the environment variable is locked or not. Set to true for storing sensitive data.",
            optional=True,
            computed=True,
            default=False,
        ),
        Attribute("id", str, "The id of the environment variable. Equal to its key.", computed=True),
    ],
)


class EnvironmentVariableModel:
    """
    EnvironmentVariableModel is the provider-side view of an environment variable's state.
    """

    key: str
    value: str
    locked: bool
    id: str

    def __init__(self, key: str = "", value: str = "", locked: bool = False, id_: str = "") -> None:
        self.key = key
        self.value = value
        self.locked = locked
        self.id = id_

    @staticmethod
    def from_props(props: Mapping[str, Any], id_: Optional[str] = None) -> "EnvironmentVariableModel":
        props = SCHEMA.apply_defaults(props)
        return EnvironmentVariableModel(
            key=rpc.unwrap_rpc_secret(props.get("key")) or "",
            value=rpc.unwrap_rpc_secret(props.get("value")) or "",
            locked=bool(rpc.unwrap_rpc_secret(props.get("locked"))),
            id_=id_ or "",
        )

    def to_props(self) -> Dict[str, Any]:
        return {"key": self.key, "value": self.value, "locked": self.locked}

    def to_checkly_entity(self) -> ChecklyEnvironmentVariable:
        return ChecklyEnvironmentVariable(key=self.key, value=self.value, locked=self.locked)

    def update_with_checkly_entity(self, env: ChecklyEnvironmentVariable) -> None:
        self.key = env.key
        self.value = env.value
        self.locked = env.locked

    def log_fields(self) -> str:
        return f"variable={self.key} locked={self.locked} id={self.id}"


class EnvironmentVariableProvider(ChecklyResourceProvider):
    """
    EnvironmentVariableProvider implements the lifecycle of `EnvironmentVariable` resources. Every operation makes
    a single call to the Checkly API.
    """

    schema = SCHEMA

    def diff(self, _id: str, _olds: Any, _news: Any) -> DiffResult:
        olds = EnvironmentVariableModel.from_props(_olds, _id)
        # Omitted attributes take their defaults, never their previous values.
        news = SCHEMA.apply_defaults(_news)

        replaces = []
        changed = False
        for name in ("key", "value", "locked"):
            value = rpc.unwrap_rpc_secret(news.get(name))
            if value == getattr(olds, name):
                continue
            changed = True
            # The id of a variable is its key, so renaming one means replacing it.
            if name == "key":
                replaces.append(name)

        return DiffResult(changes=changed, replaces=replaces, stables=["id"], delete_before_replace=False)

    def create(self, props: Any) -> CreateResult:
        data = EnvironmentVariableModel.from_props(props)
        try:
            env = self.client.create_environment_variable(data.to_checkly_entity())
        except ApiError as e:
            raise ResourceOperationError("Creating environment variable failed", e) from e
        data.id = env.key

        log.debug(f"created a new environment variable: {data.log_fields()}")
        return CreateResult(data.id, outs=data.to_props())

    def read(self, id_: str, props: Any) -> ReadResult:
        data = EnvironmentVariableModel.from_props(props, id_)
        try:
            env = self.client.get_environment_variable(data.id)
        except NotFoundError:
            # Deleted outside of Pulumi; an empty id tells the engine the resource is gone.
            log.debug(f"environment variable not found, assuming it was deleted: {data.log_fields()}")
            data.id = ""
            return ReadResult(data.id, data.to_props())
        except ApiError as e:
            raise ResourceOperationError("Getting environment variable failed", e) from e

        log.debug(f"read environment variable: {data.log_fields()}")
        data.update_with_checkly_entity(env)
        return ReadResult(data.id, data.to_props())

    def update(self, _id: str, _olds: Any, _news: Any) -> UpdateResult:
        data = EnvironmentVariableModel.from_props(_news, _id)
        log.debug(f"updating environment variable: {data.log_fields()}")
        try:
            env = self.client.update_environment_variable(data.id, data.to_checkly_entity())
        except ApiError as e:
            raise ResourceOperationError("Updating environment variable failed", e) from e
        data.update_with_checkly_entity(env)

        log.debug(f"updated environment variable: {data.log_fields()}")
        return UpdateResult(outs=data.to_props())

    def delete(self, _id: str, _props: Any) -> None:
        data = EnvironmentVariableModel.from_props(_props, _id)
        key = data.key or data.id
        try:
            self.client.delete_environment_variable(key)
        except ApiError as e:
            raise ResourceOperationError("Deleting environment variable failed", e) from e
        log.debug(f"deleted environment variable: {data.log_fields()}")


class EnvironmentVariable(Resource, module="checkly", name="EnvironmentVariable"):
    """
    EnvironmentVariable manages an environment variable of a Checkly account.
    """

    key: Output[str]
    """
    Key of the environment variable.
    """

    value: Output[str]
    """
    Value of the environment variable. Always stored as a secret.
    """

    locked: Output[bool]
    """
    Whether the environment variable is locked. Defaults to false.
    """

    def __init__(
        self,
        resource_name: str,
        key: Optional[Input[str]] = None,
        value: Optional[Input[str]] = None,
        locked: Optional[Input[bool]] = None,
        opts: Optional[ResourceOptions] = None,
    ) -> None:
        """
        :param str resource_name: The name of the resource.
        :param Input[str] key: Key of the environment variable.
        :param Input[str] value: Value of the environment variable.
        :param Optional[Input[bool]] locked: Whether the variable is locked. Defaults to false.
        :param Optional[ResourceOptions] opts: Options for the resource.
        """
        opts = ResourceOptions.merge(ResourceOptions(additional_secret_outputs=SCHEMA.secret_outputs()), opts)
        if opts.id is None:
            if key is None:
                raise TypeError("Missing required property 'key'")
            if value is None:
                raise TypeError("Missing required property 'value'")

        props = {"key": key, "value": value, "locked": locked}
        super().__init__(EnvironmentVariableProvider(), resource_name, props, opts)

    @staticmethod
    def get(resource_name: str, id: Input[str], opts: Optional[ResourceOptions] = None) -> "EnvironmentVariable":
        """
        Gets an existing environment variable's state by its key.

        :param str resource_name: The unique name of the resulting resource.
        :param Input[str] id: The key of the environment variable to look up.
        :param Optional[ResourceOptions] opts: Options for the resource.
        """
        opts = ResourceOptions.merge(opts, ResourceOptions(id=id))
        return EnvironmentVariable(resource_name, opts=opts)

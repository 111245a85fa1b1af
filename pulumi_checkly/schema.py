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
Typed attribute schemas for Checkly resources and the provider configuration.
"""
from typing import Any, Dict, List, Mapping, Sequence

from pulumi.dynamic import CheckFailure, CheckResult
from pulumi.output import Unknown
from pulumi.runtime import rpc

_TYPE_NAMES = {str: "string", bool: "boolean", int: "integer"}


def is_unknown(value: Any) -> bool:
    """
    Returns true if the value is not known yet, which happens during previews.
    """
    return isinstance(value, Unknown) or value == rpc.UNKNOWN


class Attribute:
    """
    Attribute describes a single property of a resource or of the provider configuration.
    """

    name: str
    type_: type
    description: str
    required: bool
    optional: bool
    computed: bool
    default: Any
    secret: bool

    def __init__(
        self,
        name: str,
        type_: type,
        description: str = "",
        required: bool = False,
        optional: bool = False,
        computed: bool = False,
        default: Any = None,
        secret: bool = False,
    ) -> None:
        if required and (optional or computed):
            raise ValueError(f"attribute '{name}' cannot be both required and optional or computed")
        if default is not None and not computed:
            # A defaulted value is decided by the provider, so it has to be computed.
            raise ValueError(f"attribute '{name}' has a default and must be computed")
        self.name = name
        self.type_ = type_
        self.description = description
        self.required = required
        self.optional = optional
        self.computed = computed
        self.default = default
        self.secret = secret

    @property
    def computed_only(self) -> bool:
        return self.computed and not self.optional and not self.required

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "type": _TYPE_NAMES.get(self.type_, self.type_.__name__),
            "description": self.description,
        }
        for flag in ("required", "optional", "computed", "secret"):
            if getattr(self, flag):
                result[flag] = True
        if self.default is not None:
            result["default"] = self.default
        return result


class Schema:
    """
    Schema is the set of attributes a resource (or the provider configuration) accepts.
    """

    description: str
    attributes: Dict[str, Attribute]

    def __init__(self, description: str, attributes: Sequence[Attribute]) -> None:
        self.description = description
        self.attributes = {a.name: a for a in attributes}

    def apply_defaults(self, props: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Returns a copy of `props` where every defaulted attribute that is missing or None holds its default.
        """
        result = dict(props)
        for attr in self.attributes.values():
            if attr.default is not None and result.get(attr.name) is None:
                result[attr.name] = attr.default
        return result

    def check(self, news: Mapping[str, Any]) -> CheckResult:
        """
        Validates the inputs of a resource and fills in defaults.
        """
        inputs = self.apply_defaults(news)
        failures: List[CheckFailure] = []
        for attr in self.attributes.values():
            value = inputs.get(attr.name)
            if is_unknown(value):
                continue
            if attr.computed_only:
                if value is not None:
                    failures.append(CheckFailure(attr.name, f"'{attr.name}' is computed and cannot be set"))
                continue
            if value is None:
                if attr.required:
                    failures.append(CheckFailure(attr.name, f"missing required property '{attr.name}'"))
                continue
            # bool is a subclass of int, so compare the exact type.
            if type(value) is not attr.type_:  # pylint: disable=unidiomatic-typecheck
                failures.append(
                    CheckFailure(
                        attr.name,
                        f"'{attr.name}' must be a {_TYPE_NAMES.get(attr.type_, attr.type_.__name__)}",
                    )
                )
        return CheckResult(inputs, failures)

    def secret_outputs(self) -> List[str]:
        return [a.name for a in self.attributes.values() if a.secret]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "attributes": {name: attr.to_dict() for name, attr in self.attributes.items()},
        }

# Copyright 2016-2026, Pulumi Corporation.  All rights reserved.

import pulumi
from pulumi_checkly import EnvironmentVariable

config = pulumi.Config()

variable = EnvironmentVariable(
    "variable-1",
    key="one",
    value=config.require_secret("value"),
    locked=config.get_bool("locked"),
)

pulumi.export("id", variable.id)
pulumi.export("key", variable.key)
pulumi.export("locked", variable.locked)

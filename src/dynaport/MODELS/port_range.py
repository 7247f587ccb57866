# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
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
Immutable port range models.

The Well Known Ports (0-1023) are reserved for the operating system and core
services and are never handed out. Two ranges are provided:

- Registered ports (1024-49151), usable by applications and users.
- Dynamic and/or private ports (49152-65535), conventionally ephemeral.
"""
from enum import Enum
from typing import List, Iterator

from pydantic import BaseModel, ConfigDict, Field, model_validator

MIN_PORT = 1
MAX_PORT = 65535


class PortRangeName(str, Enum):
    """
    Names of the built-in port ranges.
    """
    REGISTERED = "registered"
    DYNAMIC = "dynamic"


class PortRange(BaseModel):
    """
    A closed interval of TCP port numbers.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    lower: int = Field(ge=MIN_PORT, le=MAX_PORT)
    upper: int = Field(ge=MIN_PORT, le=MAX_PORT)

    @model_validator(mode="after")
    def check_bounds(self) -> "PortRange":
        if self.lower > self.upper:
            raise ValueError(
                f"lower bound {self.lower} is above upper bound {self.upper}"
            )
        return self

    @property
    def size(self) -> int:
        """Number of ports in the range, both bounds included."""
        return self.upper - self.lower + 1

    def ascending(self) -> Iterator[int]:
        return iter(range(self.lower, self.upper + 1))

    def descending(self) -> Iterator[int]:
        return iter(range(self.upper, self.lower - 1, -1))

    def to_list(self) -> List[int]:
        """
        Materializes every port of the range in ascending order.
        """
        return list(range(self.lower, self.upper + 1))

    def __contains__(self, port: object) -> bool:
        return isinstance(port, int) and self.lower <= port <= self.upper

    def __str__(self) -> str:
        return f"{self.name} ({self.lower}-{self.upper})"


REGISTERED = PortRange(name=PortRangeName.REGISTERED.value, lower=1024, upper=49151)
DYNAMIC = PortRange(name=PortRangeName.DYNAMIC.value, lower=49152, upper=65535)

_BUILTIN_RANGES = {
    PortRangeName.REGISTERED: REGISTERED,
    PortRangeName.DYNAMIC: DYNAMIC,
}


def get_port_range(name: str) -> PortRange:
    """
    Looks up a built-in port range by name.

    :param name: "registered" or "dynamic", case-insensitive.
    :return: The matching range constant.
    :raises ValueError: If the name is not a built-in range.
    """
    try:
        key = PortRangeName(name.lower())
    except ValueError:
        choices = ", ".join(n.value for n in PortRangeName)
        raise ValueError(f"Unknown port range '{name}', expected one of: {choices}") from None
    return _BUILTIN_RANGES[key]

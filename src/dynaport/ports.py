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
Module level port queries.

Each function probes with a loopback PortProber. The generic forms take the
range to scan; the named forms are bound to the registered or dynamic range.
"""
from typing import List, Optional

from .MODELS.port_range import DYNAMIC, REGISTERED, PortRange
from .PROBER.port_prober import PortProber

_prober = PortProber()


def random_port(port_range: PortRange) -> Optional[int]:
    """Returns a free port of the range chosen at random, or None."""
    return _prober.random_port(port_range)


def lowest_port(port_range: PortRange) -> Optional[int]:
    """Returns the lowest free port of the range, or None."""
    return _prober.lowest_port(port_range)


def highest_port(port_range: PortRange) -> Optional[int]:
    """Returns the highest free port of the range, or None."""
    return _prober.highest_port(port_range)


def random_n_ports(port_range: PortRange, count: int) -> List[int]:
    """Returns count free ports of the range chosen at random."""
    return _prober.random_n_ports(port_range, count)


def lowest_n_ports(port_range: PortRange, count: int) -> List[int]:
    """Returns the count lowest free ports of the range, ascending."""
    return _prober.lowest_n_ports(port_range, count)


def highest_n_ports(port_range: PortRange, count: int) -> List[int]:
    """Returns the count highest free ports of the range, descending."""
    return _prober.highest_n_ports(port_range, count)


def random_registered_port() -> Optional[int]:
    return random_port(REGISTERED)


def lowest_registered_port() -> Optional[int]:
    return lowest_port(REGISTERED)


def highest_registered_port() -> Optional[int]:
    return highest_port(REGISTERED)


def random_n_registered_ports(count: int) -> List[int]:
    return random_n_ports(REGISTERED, count)


def lowest_n_registered_ports(count: int) -> List[int]:
    return lowest_n_ports(REGISTERED, count)


def highest_n_registered_ports(count: int) -> List[int]:
    return highest_n_ports(REGISTERED, count)


def random_dynamic_port() -> Optional[int]:
    return random_port(DYNAMIC)


def lowest_dynamic_port() -> Optional[int]:
    return lowest_port(DYNAMIC)


def highest_dynamic_port() -> Optional[int]:
    return highest_port(DYNAMIC)


def random_n_dynamic_ports(count: int) -> List[int]:
    return random_n_ports(DYNAMIC, count)


def lowest_n_dynamic_ports(count: int) -> List[int]:
    return lowest_n_ports(DYNAMIC, count)


def highest_n_dynamic_ports(count: int) -> List[int]:
    return highest_n_ports(DYNAMIC, count)

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
dynaport - free TCP port discovery

Finds unused TCP ports on the local host in the registered (1024-49151) and
dynamic (49152-65535) ranges, picking the lowest, highest or a random one.
"""

from .errors import DynaportError, NotEnoughPorts
from .MODELS.port_range import DYNAMIC, REGISTERED, PortRange, PortRangeName, get_port_range
from .MODELS.prober_config import ProberConfig
from .PROBER.port_prober import PortProber
from .UTILS.port_probe import is_available
from .ports import (
    highest_dynamic_port,
    highest_n_dynamic_ports,
    highest_n_ports,
    highest_n_registered_ports,
    highest_port,
    highest_registered_port,
    lowest_dynamic_port,
    lowest_n_dynamic_ports,
    lowest_n_ports,
    lowest_n_registered_ports,
    lowest_port,
    lowest_registered_port,
    random_dynamic_port,
    random_n_dynamic_ports,
    random_n_ports,
    random_n_registered_ports,
    random_port,
    random_registered_port,
)

__version__ = "0.1.0"
__author__ = "Michael Maillet, Damien Davison, Sacha Davison"
__license__ = "Apache-2.0"

__all__ = [
    "DYNAMIC",
    "REGISTERED",
    "DynaportError",
    "NotEnoughPorts",
    "PortProber",
    "PortRange",
    "PortRangeName",
    "ProberConfig",
    "get_port_range",
    "is_available",
    "random_port",
    "lowest_port",
    "highest_port",
    "random_n_ports",
    "lowest_n_ports",
    "highest_n_ports",
    "random_registered_port",
    "lowest_registered_port",
    "highest_registered_port",
    "random_n_registered_ports",
    "lowest_n_registered_ports",
    "highest_n_registered_ports",
    "random_dynamic_port",
    "lowest_dynamic_port",
    "highest_dynamic_port",
    "random_n_dynamic_ports",
    "lowest_n_dynamic_ports",
    "highest_n_dynamic_ports",
]

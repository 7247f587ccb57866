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
Port discovery over the registered and dynamic ranges.

Every query walks a range in the order its policy dictates and probes each
candidate until enough free ports turn up. Nothing is cached between calls.
"""
import logging
import random
from typing import Callable, Iterable, List, Optional

from ..MODELS.port_range import PortRange
from ..MODELS.prober_config import ProberConfig
from ..UTILS.port_probe import is_available
from ..errors import NotEnoughPorts

logger = logging.getLogger(__name__)

Probe = Callable[[int, str], bool]


class PortProber:
    """
    Finds ports nobody is listening on.

    The returned ports are only known to be free at the moment of the probe.
    """
    def __init__(self,
                 config: Optional[ProberConfig] = None,
                 probe: Probe = is_available,
                 rng: Optional[random.Random] = None):
        """
        Initializes the prober.

        :param config: Probe settings, defaults to loopback.
        :param probe: Availability check taking (port, host).
        :param rng: Random source for the random policy, defaults to the module generator.
        """
        self.config = config or ProberConfig()
        self.probe = probe
        self.rng = rng

    def is_available(self, port: int) -> bool:
        return self.probe(port, self.config.host)

    def random_port(self, port_range: PortRange) -> Optional[int]:
        """
        Returns a free port from the range chosen at random, or None.
        """
        return self._first(port_range, self._shuffled(port_range), "random")

    def lowest_port(self, port_range: PortRange) -> Optional[int]:
        """
        Returns the lowest free port of the range, or None.
        """
        return self._first(port_range, port_range.ascending(), "lowest")

    def highest_port(self, port_range: PortRange) -> Optional[int]:
        """
        Returns the highest free port of the range, or None.
        """
        return self._first(port_range, port_range.descending(), "highest")

    def random_n_ports(self, port_range: PortRange, count: int) -> List[int]:
        """
        Returns count free ports picked at random, in the order they were found.

        :raises NotEnoughPorts: If the range holds fewer than count free ports.
        """
        if self._check_count(count) == 0:
            return []
        return self._collect(port_range, self._shuffled(port_range), count, "random")

    def lowest_n_ports(self, port_range: PortRange, count: int) -> List[int]:
        """
        Returns the count lowest free ports in ascending order.

        :raises NotEnoughPorts: If the range holds fewer than count free ports.
        """
        if self._check_count(count) == 0:
            return []
        return self._collect(port_range, port_range.ascending(), count, "lowest")

    def highest_n_ports(self, port_range: PortRange, count: int) -> List[int]:
        """
        Returns the count highest free ports in descending order.

        :raises NotEnoughPorts: If the range holds fewer than count free ports.
        """
        if self._check_count(count) == 0:
            return []
        return self._collect(port_range, port_range.descending(), count, "highest")

    def _shuffled(self, port_range: PortRange) -> List[int]:
        ports = port_range.to_list()
        if self.rng is None:
            random.shuffle(ports)
        else:
            self.rng.shuffle(ports)
        return ports

    def _first(self, port_range: PortRange, candidates: Iterable[int], policy: str) -> Optional[int]:
        logger.debug("Looking for %s free port in %s", policy, port_range)
        for port in candidates:
            if self.is_available(port):
                logger.debug("Found free port %d", port)
                return port
        logger.debug("No free port left in %s", port_range)
        return None

    def _collect(self, port_range: PortRange, candidates: Iterable[int], count: int, policy: str) -> List[int]:
        logger.debug("Looking for %d %s free ports in %s", count, policy, port_range)
        ports: List[int] = []
        for port in candidates:
            if self.is_available(port):
                ports.append(port)
                if len(ports) == count:
                    logger.debug("Found free ports %s", ports)
                    return ports
        raise NotEnoughPorts(wanted=count, got=len(ports))

    @staticmethod
    def _check_count(count: int) -> int:
        if count < 0:
            raise ValueError(f"Port count must not be negative, got {count}")
        return count

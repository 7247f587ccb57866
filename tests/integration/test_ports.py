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
Integration tests for the module level queries against real sockets.
"""
from contextlib import ExitStack

import pytest

import dynaport
from dynaport import DYNAMIC, REGISTERED, NotEnoughPorts, PortRange
from dynaport.UTILS.port_probe import hold_port, is_available


def test_lowest_registered_port_skips_held_ports():
    """Holding the lowest free ports pushes the answer upward."""
    with ExitStack() as stack:
        previous = None
        for _ in range(3):
            port = dynaport.lowest_registered_port()
            assert port in REGISTERED
            if previous is not None:
                assert port > previous
            stack.enter_context(hold_port(port))
            previous = port
        assert dynaport.lowest_registered_port() > previous


def test_highest_registered_port_skips_held_ports():
    """Holding the highest free ports pushes the answer downward."""
    with ExitStack() as stack:
        previous = None
        for _ in range(3):
            port = dynaport.highest_registered_port()
            assert port in REGISTERED
            if previous is not None:
                assert port < previous
            stack.enter_context(hold_port(port))
            previous = port
        assert dynaport.highest_registered_port() < previous


def test_lowest_n_registered_ports_ascending():
    ports = dynaport.lowest_n_registered_ports(3)
    assert ports == sorted(ports)
    assert len(set(ports)) == 3
    assert ports[0] == dynaport.lowest_registered_port()


def test_highest_n_dynamic_ports_descending():
    ports = dynaport.highest_n_dynamic_ports(3)
    assert ports == sorted(ports, reverse=True)
    assert all(port in DYNAMIC for port in ports)
    assert all(is_available(port) for port in ports)


def test_random_ports_within_ranges():
    assert dynaport.random_registered_port() in REGISTERED
    assert dynaport.random_dynamic_port() in DYNAMIC
    ports = dynaport.random_n_dynamic_ports(5)
    assert len(set(ports)) == 5
    assert all(port in DYNAMIC for port in ports)


def test_named_variants_match_generic_forms():
    assert dynaport.lowest_dynamic_port() == dynaport.lowest_port(DYNAMIC)
    assert dynaport.highest_dynamic_port() == dynaport.highest_port(DYNAMIC)
    assert dynaport.lowest_n_dynamic_ports(2) == dynaport.lowest_n_ports(DYNAMIC, 2)
    assert dynaport.highest_n_registered_ports(2) == dynaport.highest_n_ports(REGISTERED, 2)
    assert len(dynaport.random_n_registered_ports(2)) == 2


def test_zero_ports():
    assert dynaport.lowest_n_registered_ports(0) == []
    assert dynaport.highest_n_dynamic_ports(0) == []


def test_occupied_range_exhausts():
    """A range whose only port is held yields nothing."""
    port = dynaport.highest_port(DYNAMIC)
    single = PortRange(name="single", lower=port, upper=port)
    with hold_port(port):
        assert dynaport.lowest_port(single) is None
        assert dynaport.random_port(single) is None
        with pytest.raises(NotEnoughPorts) as exc_info:
            dynaport.lowest_n_ports(single, 1)
    assert exc_info.value == NotEnoughPorts(wanted=1, got=0)

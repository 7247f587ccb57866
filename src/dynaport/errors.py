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
Errors raised by dynaport.
"""


class DynaportError(Exception):
    """Base class for all dynaport errors."""


class NotEnoughPorts(DynaportError):
    """
    Raised when a range runs out before the requested number of ports is found.
    """

    def __init__(self, wanted: int, got: int):
        self.wanted = wanted
        self.got = got
        super().__init__(f"wanted {wanted} ports but there are only {got} available")

    def __eq__(self, other):
        if not isinstance(other, NotEnoughPorts):
            return NotImplemented
        return (self.wanted, self.got) == (other.wanted, other.got)

    def __hash__(self):
        return hash((self.wanted, self.got))

    def __reduce__(self):
        return (self.__class__, (self.wanted, self.got))

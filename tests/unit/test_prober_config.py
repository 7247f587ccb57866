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
Unit tests for the prober configuration.
"""
import pytest

from dynaport.MODELS.prober_config import ProberConfig


class TestProberConfig:
    """Tests for ProberConfig."""

    def test_defaults(self):
        """Test default values."""
        config = ProberConfig()
        assert config.host == "127.0.0.1"
        assert config.log_level == "WARNING"

    def test_from_env(self):
        """Test reading DYNAPORT_* variables."""
        config = ProberConfig.from_env({"DYNAPORT_HOST": "0.0.0.0", "DYNAPORT_LOG_LEVEL": "debug"})
        assert config.host == "0.0.0.0"
        assert config.log_level == "DEBUG"

    def test_from_env_ignores_empty_values(self):
        """Test that empty variables keep the defaults."""
        config = ProberConfig.from_env({"DYNAPORT_HOST": "", "OTHER": "x"})
        assert config.host == "127.0.0.1"

    def test_invalid_log_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValueError):
            ProberConfig(log_level="chatty")

"""Tests for configuration parsing."""

from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import pytest

from opsman.cli.platform import config
from opsman.cli.platform.config import get_timeout
from opsman.cli.platform.exceptions import InvalidInputError


class TestGetTimeout:
    """Tests for get_timeout."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_unset_means_no_timeout(self, value):
        assert get_timeout(value) is None

    def test_seconds(self):
        assert get_timeout("30") == 30.0
        assert get_timeout("2.5") == 2.5

    def test_not_a_number(self):
        with pytest.raises(InvalidInputError, match="OPSMAN_TIMEOUT 'soon'"):
            get_timeout("soon")

    @pytest.mark.parametrize("value", ["0", "-5"])
    def test_must_be_positive(self, value):
        with pytest.raises(InvalidInputError, match="must be positive"):
            get_timeout(value)


class TestPackageVersion:
    """Tests for the version lookup behind USER_AGENT."""

    def test_installed(self):
        with patch.object(config, "version", return_value="1.2.3"):
            assert config._package_version() == "1.2.3"

    def test_not_installed(self):
        with patch.object(
            config, "version", side_effect=PackageNotFoundError("opsman-cli")
        ):
            assert config._package_version() == "unknown"

    def test_user_agent_carries_version(self):
        assert config.USER_AGENT == f"opsman-cli/{config.PACKAGE_VERSION}"

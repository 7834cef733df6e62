"""
Unit tests for ServiceDiscoveryType.
"""

import pytest

from meshtest.manifest.service_discovery import ServiceDiscoveryType


@pytest.mark.unit
class TestServiceDiscoveryType:
    """Test ServiceDiscoveryType enum."""

    @pytest.mark.parametrize("value,expected", [
        ("dns", ServiceDiscoveryType.DNS),
        ("DNS", ServiceDiscoveryType.DNS),
        (" cloudmap ", ServiceDiscoveryType.CLOUD_MAP),
        ("CloudMap", ServiceDiscoveryType.CLOUD_MAP),
    ])
    def test_from_string(self, value, expected):
        assert ServiceDiscoveryType.from_string(value) is expected

    def test_from_string_invalid(self):
        """Test unknown values list the valid types."""
        with pytest.raises(ValueError) as exc_info:
            ServiceDiscoveryType.from_string("consul")

        assert "consul" in str(exc_info.value)
        assert "dns, cloudmap" in str(exc_info.value)

    def test_properties(self):
        assert ServiceDiscoveryType.DNS.is_dns
        assert not ServiceDiscoveryType.DNS.is_cloud_map
        assert ServiceDiscoveryType.CLOUD_MAP.is_cloud_map

    def test_str(self):
        assert str(ServiceDiscoveryType.CLOUD_MAP) == "cloudmap"

"""
Service Discovery Type Enumeration

Defines how the mesh under test resolves the services created by a suite.
"""

from enum import Enum


class ServiceDiscoveryType(str, Enum):
    """
    Supported service discovery modes.

    Attributes:
        DNS: Services are discovered through cluster DNS
        CLOUD_MAP: Services are registered in an AWS Cloud Map namespace
    """

    DNS = "dns"
    CLOUD_MAP = "cloudmap"

    @classmethod
    def from_string(cls, value: str) -> "ServiceDiscoveryType":
        """
        Convert a string to ServiceDiscoveryType enum.

        Args:
            value: String value ("dns" or "cloudmap", case-insensitive)

        Returns:
            ServiceDiscoveryType enum value

        Raises:
            ValueError: If value is not a valid service discovery type
        """
        value_lower = value.lower().strip()
        for mode in cls:
            if mode.value == value_lower:
                return mode
        valid_modes = ", ".join([m.value for m in cls])
        raise ValueError(
            f"Invalid service discovery type: '{value}'. Valid types: {valid_modes}"
        )

    @property
    def is_dns(self) -> bool:
        """Check if this is DNS service discovery."""
        return self == ServiceDiscoveryType.DNS

    @property
    def is_cloud_map(self) -> bool:
        """Check if this is Cloud Map service discovery."""
        return self == ServiceDiscoveryType.CLOUD_MAP

    def __str__(self) -> str:
        return self.value

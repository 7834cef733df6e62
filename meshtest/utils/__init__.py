"""Utility modules for the meshtest framework."""

from .resource_naming import (
    APP_NAME_LABEL,
    APP_INSTANCE_LABEL,
    build_instance_labels,
    build_resource_name,
    build_service_name,
)

__all__ = [
    'APP_NAME_LABEL',
    'APP_INSTANCE_LABEL',
    'build_instance_labels',
    'build_resource_name',
    'build_service_name',
]

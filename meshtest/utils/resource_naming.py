"""
Resource naming utilities for test application instances.

Centralized functions for deriving consistent identifiers from an instance name:
- Deployment and Service names
- Pod labels and Service selectors

Every function is pure: the same instance name always yields the same
names and labels.
"""

from typing import Dict

APP_NAME_LABEL = "app.kubernetes.io/name"
APP_INSTANCE_LABEL = "app.kubernetes.io/instance"


def build_instance_labels(app_name: str, instance_name: str) -> Dict[str, str]:
    """
    Get the labels identifying one logical application instance.

    Used both to tag Pods (Deployment template) and to select them (Deployment
    selector, Service selector). A new dict is returned on every call.

    Args:
        app_name: Application tag shared by every instance in the suite
        instance_name: Caller-chosen instance identifier

    Returns:
        Dict of labels

    Examples:
        >>> build_instance_labels("timeout-app", "mesh-test-1")
        {"app.kubernetes.io/name": "timeout-app", "app.kubernetes.io/instance": "mesh-test-1"}
    """
    return {
        APP_NAME_LABEL: app_name,
        APP_INSTANCE_LABEL: instance_name,
    }


def build_resource_name(instance_name: str) -> str:
    """
    Get the Deployment (and selector-based Service) name for an instance.

    The instance name is used verbatim.
    """
    return instance_name


def build_service_name(instance_name: str, suffix: str = "") -> str:
    """
    Get the selector-less Service name for an instance.

    With an empty suffix this equals build_resource_name(), so a selector-based
    and a selector-less Service for the same instance collide in one namespace.

    Args:
        instance_name: Caller-chosen instance identifier
        suffix: Appended verbatim (e.g. "-manual")

    Examples:
        >>> build_service_name("mesh-test-1")
        "mesh-test-1"

        >>> build_service_name("mesh-test-1", "-manual")
        "mesh-test-1-manual"
    """
    return f"{instance_name}{suffix}"

"""
Serialization of built manifests for the apply step.

The client model objects carry no apiVersion/kind unless set explicitly, so
they are filled in here before converting to plain dicts or YAML suitable
for `kubectl apply -f -`.
"""

from typing import Any, Dict, Iterable

import yaml
from kubernetes import client

# Model class -> (apiVersion, kind)
_TYPE_META = {
    client.V1Deployment: ("apps/v1", "Deployment"),
    client.V1Service: ("v1", "Service"),
    client.V1Secret: ("v1", "Secret"),
}


def to_manifest_dict(obj: Any) -> Dict[str, Any]:
    """
    Convert a client model object into a plain manifest dict.

    apiVersion and kind are filled in for Deployments, Services and Secrets
    when unset. The input object is not modified.

    Args:
        obj: V1Deployment, V1Service, V1Secret (or any other client model)

    Returns:
        Dict using the API field names (camelCase), None fields omitted
    """
    manifest = client.ApiClient().sanitize_for_serialization(obj)
    type_meta = _TYPE_META.get(type(obj))
    if type_meta:
        api_version, kind = type_meta
        manifest.setdefault("apiVersion", api_version)
        manifest.setdefault("kind", kind)
        # Keep apiVersion/kind first like hand-written manifests
        manifest = {
            "apiVersion": manifest.pop("apiVersion"),
            "kind": manifest.pop("kind"),
            **manifest
        }
    return manifest


def dump_manifests(objs: Iterable[Any]) -> str:
    """
    Render objects as a multi-document YAML stream.

    Args:
        objs: Client model objects, in apply order

    Returns:
        YAML text with one document per object
    """
    return yaml.dump_all(
        [to_manifest_dict(obj) for obj in objs],
        default_flow_style=False,
        sort_keys=False
    )

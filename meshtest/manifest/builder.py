"""
Manifest Builder for End-to-End Test Applications

Builds the Kubernetes objects a test scenario needs to stand up a throwaway
application instance:
- Deployment: one "app" container exposing a single port
- Service: selector-based (endpoints populated by the cluster) or
  selector-less (endpoints managed by the test or a controller under test)
- Secret: opaque TLS fixture secret built from PEM files

All names and labels are derived from a caller-chosen instance name. The
builder never talks to the cluster; applying, waiting and deleting is up to
the caller.
"""

import base64
import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence, Union

from kubernetes import client

from ..config import Settings, get_settings
from ..utils import resource_naming
from .pem import PemFileOpenError, load_pem_files
from .service_discovery import ServiceDiscoveryType

logger = logging.getLogger(__name__)

APP_CONTAINER_NAME = "app"

EnvInput = Union[Sequence[client.V1EnvVar], Mapping[str, str]]


def _to_env_vars(env: Optional[EnvInput]) -> Optional[list]:
    """Convert a name -> value mapping (or V1EnvVar list) to a V1EnvVar list, keeping order."""
    if env is None:
        return None
    if isinstance(env, Mapping):
        return [client.V1EnvVar(name=name, value=value) for name, value in env.items()]
    return list(env)


@dataclass(frozen=True)
class ManifestBuilder:
    """
    Test-scoped factory for Deployments, Services and Secrets.

    Configuration is fixed at construction. Every build call returns freshly
    allocated objects, so one builder can be shared across a test module.

    Attributes:
        namespace: Namespace for Deployments and Services
        service_discovery_type: How the mesh discovers the created services
        cloud_map_namespace: Cloud Map namespace (required for CLOUD_MAP)
        app_name: Value of the app.kubernetes.io/name label
        tls_secret_namespace: Namespace for TLS fixture secrets
        selectorless_service_suffix: Appended to selector-less Service names
    """

    namespace: str
    service_discovery_type: ServiceDiscoveryType = ServiceDiscoveryType.DNS
    cloud_map_namespace: str = ""
    app_name: str = "timeout-app"
    tls_secret_namespace: str = "tls-e2e"
    selectorless_service_suffix: str = ""

    def __post_init__(self):
        if self.service_discovery_type == ServiceDiscoveryType.CLOUD_MAP and not self.cloud_map_namespace:
            raise ValueError(
                "cloud_map_namespace is required when service_discovery_type is 'cloudmap'"
            )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ManifestBuilder":
        """
        Create a builder from MESHTEST_* settings.

        Args:
            settings: Settings instance (default: cached settings from environment)

        Raises:
            ValueError: If the discovery type is unknown or Cloud Map has no namespace
        """
        settings = settings or get_settings()
        return cls(
            namespace=settings.namespace,
            service_discovery_type=ServiceDiscoveryType.from_string(settings.service_discovery_type),
            cloud_map_namespace=settings.cloud_map_namespace,
            app_name=settings.app_name,
            tls_secret_namespace=settings.tls_secret_namespace,
            selectorless_service_suffix=settings.selectorless_service_suffix,
        )

    # =========================================================================
    # Names and Labels
    # =========================================================================

    def build_selector_labels(self, instance_name: str) -> Dict[str, str]:
        """Labels that tag an instance's Pods and select them."""
        return resource_naming.build_instance_labels(self.app_name, instance_name)

    def build_resource_name(self, instance_name: str) -> str:
        """Name of the instance's Deployment and selector-based Service."""
        return resource_naming.build_resource_name(instance_name)

    def build_service_name(self, instance_name: str) -> str:
        """Name of the instance's selector-less Service."""
        return resource_naming.build_service_name(instance_name, self.selectorless_service_suffix)

    # =========================================================================
    # Deployment
    # =========================================================================

    def build_deployment(
        self,
        instance_name: str,
        replicas: int,
        app_image: str,
        container_port: int,
        env: Optional[EnvInput] = None,
        annotations: Optional[Dict[str, str]] = None
    ) -> client.V1Deployment:
        """
        Create Deployment manifest for a test application instance.

        The Pod runs a single container named "app". Resources, probes and
        restart policy are left to cluster defaults. No input is validated:
        zero replicas or an out-of-range port are passed through as given.

        Args:
            instance_name: Instance identifier (Deployment name and instance label)
            replicas: Replica count (may be zero)
            app_image: Container image reference
            container_port: The single port exposed by the container
            env: Environment variables, as V1EnvVar list or ordered name -> value mapping
            annotations: Pod template annotations, copied verbatim

        Returns:
            V1Deployment manifest
        """
        logger.debug(
            "Building deployment %s/%s (image=%s, replicas=%s, port=%s)",
            self.namespace, instance_name, app_image, replicas, container_port
        )

        container = client.V1Container(
            name=APP_CONTAINER_NAME,
            image=app_image,
            ports=[
                client.V1ContainerPort(container_port=container_port)
            ],
            env=_to_env_vars(env)
        )

        return client.V1Deployment(
            metadata=client.V1ObjectMeta(
                name=self.build_resource_name(instance_name),
                namespace=self.namespace
            ),
            spec=client.V1DeploymentSpec(
                replicas=replicas,
                selector=client.V1LabelSelector(
                    match_labels=self.build_selector_labels(instance_name)
                ),
                template=client.V1PodTemplateSpec(
                    metadata=client.V1ObjectMeta(
                        labels=self.build_selector_labels(instance_name),
                        annotations=dict(annotations) if annotations is not None else None
                    ),
                    spec=client.V1PodSpec(containers=[container])
                )
            )
        )

    # =========================================================================
    # Services
    # =========================================================================

    def build_service_with_selector(
        self,
        instance_name: str,
        container_port: int,
        target_port: int
    ) -> client.V1Service:
        """
        Create ClusterIP Service selecting the instance's Pods.

        Endpoints are populated by the cluster from the instance labels, which
        match the Deployment built for the same instance name.

        Args:
            instance_name: Instance identifier
            container_port: Service-facing port
            target_port: Pod-facing port

        Returns:
            V1Service manifest
        """
        logger.debug(
            "Building service %s/%s with selector (%s -> %s)",
            self.namespace, instance_name, container_port, target_port
        )
        return self._build_service(
            name=self.build_resource_name(instance_name),
            container_port=container_port,
            target_port=target_port,
            selector=self.build_selector_labels(instance_name)
        )

    def build_service_without_selector(
        self,
        instance_name: str,
        container_port: int,
        target_port: int
    ) -> client.V1Service:
        """
        Create ClusterIP Service with no selector.

        The control plane will not manage its endpoints; the test (or the
        controller under test) is expected to.

        With the default empty suffix the name equals the selector-based
        Service name for the same instance, so only one of the two can exist
        per instance in a namespace.

        Args:
            instance_name: Instance identifier
            container_port: Service-facing port
            target_port: Pod-facing port

        Returns:
            V1Service manifest
        """
        logger.debug(
            "Building service %s/%s without selector (%s -> %s)",
            self.namespace, instance_name, container_port, target_port
        )
        return self._build_service(
            name=self.build_service_name(instance_name),
            container_port=container_port,
            target_port=target_port
        )

    def _build_service(
        self,
        name: str,
        container_port: int,
        target_port: int,
        selector: Optional[Dict[str, str]] = None
    ) -> client.V1Service:
        return client.V1Service(
            metadata=client.V1ObjectMeta(
                name=name,
                namespace=self.namespace
            ),
            spec=client.V1ServiceSpec(
                type="ClusterIP",
                selector=selector,
                ports=[
                    client.V1ServicePort(
                        port=container_port,
                        target_port=target_port,
                        protocol="TCP"
                    )
                ]
            )
        )

    # =========================================================================
    # TLS Secrets
    # =========================================================================

    def build_secret_from_pem_files(
        self,
        secret_name: str,
        pem_files: Mapping[str, bytes]
    ) -> client.V1Secret:
        """
        Create Opaque Secret from already-loaded PEM content.

        Bytes are stored as-is (base64 is only the API transport encoding).
        The Secret always lands in tls_secret_namespace, not in the builder's
        namespace.

        Args:
            secret_name: Secret name
            pem_files: File name -> raw content

        Returns:
            V1Secret manifest
        """
        data = {
            name: base64.b64encode(content).decode("ascii")
            for name, content in pem_files.items()
        }
        return client.V1Secret(
            metadata=client.V1ObjectMeta(
                name=secret_name,
                namespace=self.tls_secret_namespace
            ),
            data=data,
            type="Opaque"
        )

    def build_k8s_secrets_from_pem_file(
        self,
        pem_file_base_path: str,
        tls_files: Sequence[str],
        secret_name: str,
        log: Optional[logging.Logger] = None
    ) -> Optional[client.V1Secret]:
        """
        Create Opaque Secret from PEM files on disk.

        Each file is read from pem_file_base_path + file name and stored under
        its file name. If a file cannot be opened the error is logged and None
        is returned; files after it are not read and no partial Secret is built.

        Use load_pem_files() + build_secret_from_pem_files() to get the error
        as a value instead of a log line.

        Args:
            pem_file_base_path: Prefix joined to each file name
            tls_files: PEM file names
            secret_name: Secret name
            log: Logger for open failures (default: this module's logger)

        Returns:
            V1Secret manifest, or None if a file could not be opened

        Raises:
            PemFileReadError: If a file was opened but could not be read
        """
        result = load_pem_files(pem_file_base_path, tls_files)
        if not result.success:
            if isinstance(result.error, PemFileOpenError):
                (log or logger).error("PEM File Open error: %s", result.error)
                return None
            raise result.error

        return self.build_secret_from_pem_files(secret_name, result.files)

from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # Namespace that test workloads and services are created in
    namespace: str = "default"

    # Service discovery mode for the mesh under test: "dns" or "cloudmap"
    # Use the manifest module for type-safe access: from meshtest.manifest import ServiceDiscoveryType
    service_discovery_type: str = "dns"

    # Cloud Map namespace name, required when service_discovery_type is "cloudmap"
    cloud_map_namespace: str = ""

    # Value of the app.kubernetes.io/name label stamped on every test workload
    app_name: str = "timeout-app"

    # Namespace reserved for TLS fixture secrets
    tls_secret_namespace: str = "tls-e2e"

    # Appended to selector-less service names
    # Empty keeps them equal to the instance name (same as selector-based services)
    selectorless_service_suffix: str = ""

    # Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = "INFO"

    class Config:
        # Every field is read from MESHTEST_<FIELD> (e.g. MESHTEST_NAMESPACE)
        env_prefix = "MESHTEST_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra fields from .env file
        case_sensitive = False  # Allow lowercase env vars to match uppercase field names

@lru_cache()
def get_settings():
    return Settings()

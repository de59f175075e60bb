"""Agent configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Resolution settings loaded from environment variables."""

    # Network driver service selection
    driver_service_kind: str = "networkDriverService"
    driver_service_name: str = "cni-driver"  # Tie-breaker when several driver services exist

    # CNI config inspection
    cni_config_key: str = "cniConfig"  # Network metadata key holding the CNI files
    bridge_cni_type: str = "rancher-bridge"

    class Config:
        env_prefix = "CNIAGENT_"


settings = Settings()

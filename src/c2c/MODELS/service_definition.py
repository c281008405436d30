"""
Models for the emitted compose service, its health check and its volumes.

Every field defaults to ``None``; a ``None`` field is absent and never rendered.
"""
from typing import List, Dict, Optional
from pydantic import BaseModel

from .snapshots import HealthCheck
from ..UTILS.duration import format_duration

class ComposeHealthCheck(BaseModel):
    """
    A health check in compose form, with durations rendered as strings like ``1m30s``.
    """
    test: Optional[List[str]] = None
    interval: Optional[str] = None
    timeout: Optional[str] = None
    retries: Optional[int] = None
    start_period: Optional[str] = None

    @classmethod
    def from_snapshot(cls, health_check: HealthCheck) -> "ComposeHealthCheck":
        """
        Converts a runtime health check, dropping zero values.

        :param health_check: The container's health check.
        :return: The compose representation.
        """
        return cls(
            test=list(health_check.test) or None,
            interval=format_duration(health_check.interval) if health_check.interval else None,
            timeout=format_duration(health_check.timeout) if health_check.timeout else None,
            retries=health_check.retries or None,
            start_period=format_duration(health_check.start_period) if health_check.start_period else None,
        )

class VolumeDescriptor(BaseModel):
    """
    A top-level volume declaration. External volumes must already exist.
    """
    name: str
    external: bool = False

class ServiceDescriptor(BaseModel):
    """
    The minimal definition of a single service, reconstructed from a running container.
    """
    image: Optional[str] = None
    container_name: Optional[str] = None

    # Networking
    ports: Optional[List[str]] = None
    networks: Optional[List[str]] = None
    hostname: Optional[str] = None
    domainname: Optional[str] = None
    network_disabled: Optional[bool] = None

    # Storage
    volumes: Optional[List[str]] = None

    # Environment
    environment: Optional[Dict[str, str]] = None

    # Lifecycle
    restart: Optional[str] = None
    healthcheck: Optional[ComposeHealthCheck] = None
    stop_signal: Optional[str] = None
    stop_timeout: Optional[int] = None

    # Resources
    resources: Optional[Dict[str, str]] = None

    # Security
    cap_add: Optional[List[str]] = None
    cap_drop: Optional[List[str]] = None
    privileged: Optional[bool] = None
    user: Optional[str] = None

    # Execution
    command: Optional[List[str]] = None
    entrypoint: Optional[List[str]] = None
    working_dir: Optional[str] = None
    shell: Optional[List[str]] = None
    tty: Optional[bool] = None
    open_stdin: Optional[bool] = None
    stdin_once: Optional[bool] = None

    # Metadata
    labels: Optional[Dict[str, str]] = None

"""
Models for the read-only inspection records supplied by the container runtime.
"""
from typing import List, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum

class MountType(str, Enum):
    """
    Kinds of mounts a container can carry.
    """
    BIND = "bind"
    VOLUME = "volume"
    OTHER = "other"

class HealthCheck(BaseModel):
    """
    A runtime health check. Durations are in nanoseconds, the runtime's native unit.
    """
    model_config = ConfigDict(frozen=True)

    test: List[str] = []
    interval: int = 0
    timeout: int = 0
    retries: int = 0
    start_period: int = 0

class Mount(BaseModel):
    """
    A filesystem mount attached to a container.
    """
    model_config = ConfigDict(frozen=True)

    type: MountType
    source: str = ""
    destination: str
    name: Optional[str] = None
    read_only: bool = False

class PortBinding(BaseModel):
    """
    A single host-side binding of a container port.
    """
    model_config = ConfigDict(frozen=True)

    host_ip: str = ""
    host_port: str = ""

class ResourceLimits(BaseModel):
    """
    CPU and memory limits from the container's host config.
    """
    model_config = ConfigDict(frozen=True)

    cpu_period: int = 0
    cpu_quota: int = 0
    memory: int = 0

class RestartPolicy(BaseModel):
    """
    Restart policy as reported by the runtime.
    """
    model_config = ConfigDict(frozen=True)

    name: str = ""
    maximum_retry_count: int = 0

class ImageSnapshot(BaseModel):
    """
    Configuration baked into an image, i.e. what a container inherits by default.
    """
    model_config = ConfigDict(frozen=True)

    id: str = ""
    env: List[str] = []
    cmd: Optional[List[str]] = None
    entrypoint: Optional[List[str]] = None
    working_dir: str = ""
    labels: Dict[str, str] = {}
    healthcheck: Optional[HealthCheck] = None

class ContainerSnapshot(BaseModel):
    """
    The effective runtime configuration of a single container.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    image: str

    # Execution
    env: List[str] = []
    cmd: Optional[List[str]] = None
    entrypoint: Optional[List[str]] = None
    working_dir: str = ""
    shell: List[str] = []
    user: str = ""

    # Identity
    hostname: str = ""
    domainname: str = ""
    labels: Dict[str, str] = {}

    # Terminal
    tty: bool = False
    open_stdin: bool = False
    stdin_once: bool = False

    # Lifecycle
    stop_signal: str = ""
    stop_timeout: Optional[int] = None
    healthcheck: Optional[HealthCheck] = None
    restart_policy: RestartPolicy = Field(default_factory=RestartPolicy)

    # Host config
    resources: ResourceLimits = Field(default_factory=ResourceLimits)
    cap_add: List[str] = []
    cap_drop: List[str] = []
    privileged: bool = False
    network_disabled: bool = False

    # Storage and networking
    mounts: List[Mount] = []
    port_bindings: Dict[str, List[PortBinding]] = {}  # {"80/tcp": [...]}
    networks: List[str] = []

class VolumeSnapshot(BaseModel):
    """
    Inspection record of a named volume. Only its labels matter for provenance.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    labels: Dict[str, str] = {}

class ContainerSummary(BaseModel):
    """
    One row of the container listing.
    """
    id: str
    names: List[str] = []

    @property
    def short_id(self) -> str:
        return self.id[:12]

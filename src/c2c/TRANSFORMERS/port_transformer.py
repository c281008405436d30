"""
Translation of runtime port bindings into compose port strings.
"""
from typing import Dict, List
from ..MODELS.snapshots import PortBinding

# Host addresses meaning "listen on every interface"
ALL_INTERFACES = {"0.0.0.0", "::"}

class PortTransformer:
    """
    Converts the runtime's port binding table into ``[hostIP:]hostPort:containerPort[/proto]`` strings.
    """
    def transform(self, port_bindings: Dict[str, List[PortBinding]]) -> List[str]:
        """
        Emits one entry per host binding. Ports without host bindings are skipped.

        :param port_bindings: Mapping such as ``{"80/tcp": [PortBinding(host_port="8080")]}``.
        :return: Compose port strings, e.g. ``["8080:80", "127.0.0.1:53:53/udp"]``.
        """
        ports = []
        for port_spec, bindings in port_bindings.items():
            container_port, _, protocol = port_spec.partition('/')
            for binding in bindings:
                ports.append(self.format_binding(container_port, protocol or "tcp", binding))
        return ports

    def format_binding(self, container_port: str, protocol: str, binding: PortBinding) -> str:
        if not binding.host_ip or binding.host_ip in ALL_INTERFACES:
            mapping = f"{binding.host_port}:{container_port}"
        else:
            mapping = f"{binding.host_ip}:{binding.host_port}:{container_port}"

        # TCP is the compose default and carries no suffix
        if protocol != "tcp":
            mapping += f"/{protocol}"
        return mapping

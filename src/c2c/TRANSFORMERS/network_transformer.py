"""
Filtering of the networks a container is attached to.
"""
from typing import Iterable, List

# Networks every engine provides out of the box
BUILT_IN_NETWORKS = {"bridge", "host", "none"}

def is_built_in_network(name: str) -> bool:
    return name in BUILT_IN_NETWORKS

def is_compose_network(name: str) -> bool:
    """
    Compose names its networks ``<project>_<network>``, e.g. ``myapp_default``.
    Any name with an underscore is treated as compose-generated.
    """
    return "_" in name

class NetworkTransformer:
    """
    Keeps the user-defined networks a service must join, in attachment order.
    """
    def transform(self, networks: Iterable[str]) -> List[str]:
        return [
            name for name in networks
            if not is_built_in_network(name) and not is_compose_network(name)
        ]

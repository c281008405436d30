"""
Translation of CPU and memory limits into compose resource settings.
"""
from typing import Dict
from ..MODELS.snapshots import ResourceLimits

class ResourceTransformer:
    """
    Converts CFS quota/period and memory bytes into ``cpus`` and ``mem_limit``.
    """
    def transform(self, limits: ResourceLimits) -> Dict[str, str]:
        """
        :param limits: The container's resource limits.
        :return: A mapping with ``cpus`` and/or ``mem_limit``; empty when no limit is set.
        """
        resources = {}
        if limits.cpu_period > 0:
            resources['cpus'] = f"{limits.cpu_quota / limits.cpu_period:.2f}"
        if limits.memory > 0:
            # Bytes, the runtime's native unit
            resources['mem_limit'] = str(limits.memory)
        return resources

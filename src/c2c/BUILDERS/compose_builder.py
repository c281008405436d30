"""
Builder assembling a compose file from a container and the image it runs.
"""
from typing import Optional

from ..DIFF.field_diff import FieldDiffEngine
from ..MODELS.compose_file import ComposeFile
from ..MODELS.service_definition import ServiceDescriptor
from ..MODELS.snapshots import ContainerSnapshot, ImageSnapshot, VolumeSnapshot
from ..TRANSFORMERS.network_transformer import NetworkTransformer
from ..TRANSFORMERS.port_transformer import PortTransformer
from ..TRANSFORMERS.resource_transformer import ResourceTransformer
from ..TRANSFORMERS.volume_transformer import VolumeLookup, VolumeTransformer


def _no_volume_lookup(name: str) -> Optional[VolumeSnapshot]:
    return None


def service_name(container: ContainerSnapshot) -> str:
    """
    The container name without the leading ``/`` the runtime prefixes it with.
    """
    return container.name.lstrip('/') or container.id[:12]


class ComposeBuilder:
    """
    Composes the field diff and the structural transformers into a single-service compose file.
    """

    def __init__(self, volume_lookup: Optional[VolumeLookup] = None):
        """
        Initializes the builder.

        :param volume_lookup: Fetches volume snapshots by name. Without one every
                              named volume is declared external.
        """
        self.ports = PortTransformer()
        self.volumes = VolumeTransformer(volume_lookup or _no_volume_lookup)
        self.resources = ResourceTransformer()
        self.networks = NetworkTransformer()

    def build(self, container: ContainerSnapshot, image: ImageSnapshot) -> ComposeFile:
        """
        Builds the minimal compose file reproducing the container.

        :param container: The running container's snapshot.
        :param image: The snapshot of the image the container was started from.
        :return: A compose file with one service and its volume declarations.
        """
        diff = FieldDiffEngine(container, image)
        name = service_name(container)
        volumes, declarations = self.volumes.transform(container.mounts)

        service = ServiceDescriptor(
            image=container.image or None,
            container_name=name,
            ports=self.ports.transform(container.port_bindings) or None,
            volumes=volumes or None,
            resources=self.resources.transform(container.resources) or None,
            networks=self.networks.transform(container.networks) or None,
            environment=diff.diff_environment() or None,
            labels=diff.diff_labels() or None,
            command=diff.diff_command(),
            entrypoint=diff.diff_entrypoint(),
            working_dir=diff.diff_working_dir(),
            hostname=diff.diff_hostname(),
            healthcheck=diff.diff_healthcheck(),
            restart=diff.restart_policy(),
            **diff.passthrough(),
        )

        return ComposeFile(services={name: service}, volumes=declarations)

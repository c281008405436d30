# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Translation of container mounts into compose volume strings and volume declarations.
"""
import sys
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ..MODELS.snapshots import Mount, MountType, VolumeSnapshot
from ..MODELS.service_definition import VolumeDescriptor

# Label prefix compose puts on the volumes it creates
COMPOSE_VOLUME_LABEL_PREFIX = "com.docker.compose."

VolumeLookup = Callable[[str], Optional[VolumeSnapshot]]


def is_compose_volume(volume: VolumeSnapshot) -> bool:
    """
    Checks whether a volume was created by compose tooling.
    """
    return any(key.startswith(COMPOSE_VOLUME_LABEL_PREFIX) for key in volume.labels)


class VolumeTransformer:
    """
    Converts bind mounts and named volumes. Other mount kinds cannot be
    expressed in a static compose file and are skipped.
    """

    def __init__(self, volume_lookup: VolumeLookup):
        """
        Initializes the transformer.

        :param volume_lookup: Fetches a volume snapshot by name. It may raise or return None
                              when the volume cannot be inspected.
        """
        self.volume_lookup = volume_lookup

    def transform(self, mounts: Iterable[Mount]) -> Tuple[List[str], Dict[str, VolumeDescriptor]]:
        """
        Converts a container's mounts.

        :param mounts: The container's mounts.
        :return: The service's volume strings and the volume declarations keyed by name.
        """
        volumes = []
        declarations: Dict[str, VolumeDescriptor] = {}

        for mount in mounts:
            if mount.type == MountType.BIND:
                volumes.append(self._format(mount.source, mount))
            elif mount.type == MountType.VOLUME:
                volumes.append(self._format(mount.name, mount))
                if mount.name not in declarations:
                    declarations[mount.name] = VolumeDescriptor(
                        name=mount.name,
                        external=self._is_external(mount.name),
                    )

        return volumes, declarations

    def _format(self, source: str, mount: Mount) -> str:
        mapping = f"{source}:{mount.destination}"
        if mount.read_only:
            mapping += ":ro"
        return mapping

    def _is_external(self, name: str) -> bool:
        """
        A volume is external unless it is known to be compose-managed.
        A failed lookup falls back to external.
        """
        try:
            volume = self.volume_lookup(name)
        except Exception as e:
            print(f"Warning: Could not inspect volume {name}, declaring it external: {e}", file=sys.stderr)
            return True
        return volume is None or not is_compose_volume(volume)

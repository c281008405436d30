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
Docker Engine client for inspecting containers, images and volumes.
"""

from typing import List, Optional

import docker
from docker.errors import DockerException
from requests.exceptions import RequestException

from ..errors import (
    ContainerInspectError,
    ImageInspectError,
    RuntimeConnectionError,
    VolumeInspectError,
)
from ..MODELS.snapshots import ContainerSnapshot, ContainerSummary, ImageSnapshot, VolumeSnapshot
from ..PARSERS.inspect_parser import InspectParser


class DockerInspector:
    """
    Read-only view of a Docker Engine, returning snapshots instead of raw API objects.
    """

    def __init__(self, client: Optional[docker.DockerClient] = None, base_url: Optional[str] = None):
        """
        Initialize the inspector.

        Args:
            client: An existing Docker client. Takes precedence over ``base_url``.
            base_url: Engine URL such as ``unix:///var/run/docker.sock``.
                Defaults to the standard DOCKER_HOST environment.
        """
        self.parser = InspectParser()
        if client is not None:
            self.client = client
            return

        try:
            if base_url:
                self.client = docker.DockerClient(base_url=base_url)
            else:
                self.client = docker.from_env()
        except (DockerException, RequestException) as e:
            raise RuntimeConnectionError(f"Error creating Docker client: {e}") from e

    def inspect_container(self, reference: str) -> ContainerSnapshot:
        """
        Inspect a container by id or name.

        Args:
            reference: Container id, id prefix or name.

        Returns:
            The container snapshot.
        """
        try:
            container = self.client.containers.get(reference)
        except (DockerException, RequestException) as e:
            raise ContainerInspectError(reference, str(e)) from e
        return self.parser.parse_container(container.attrs)

    def inspect_image(self, reference: str) -> ImageSnapshot:
        """
        Inspect an image by reference or id.

        Args:
            reference: Image reference as stored in the container config (e.g. 'nginx:latest').

        Returns:
            The image snapshot.
        """
        try:
            image = self.client.images.get(reference)
        except (DockerException, RequestException) as e:
            raise ImageInspectError(reference, str(e)) from e
        return self.parser.parse_image(image.attrs)

    def inspect_volume(self, name: str) -> VolumeSnapshot:
        """Inspect a named volume."""
        try:
            volume = self.client.volumes.get(name)
        except (DockerException, RequestException) as e:
            raise VolumeInspectError(name, str(e)) from e
        return self.parser.parse_volume(volume.attrs)

    def list_containers(self) -> List[ContainerSummary]:
        """
        List all containers, including stopped ones.

        Returns:
            One summary per container, in the engine's order.
        """
        try:
            # sparse keeps the listing attrs instead of inspecting every container
            containers = self.client.containers.list(all=True, sparse=True)
        except (DockerException, RequestException) as e:
            raise RuntimeConnectionError(f"Error listing containers: {e}") from e
        return [self.parser.parse_summary(c.attrs) for c in containers]

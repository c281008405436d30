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
Per-field inherit/override decisions between a container and its image.

Each ``diff_*`` method returns the value to emit, or ``None`` when the container
simply inherits the image default.
"""
from typing import Dict, List, Optional

from ..MODELS.snapshots import ContainerSnapshot, HealthCheck, ImageSnapshot
from ..MODELS.service_definition import ComposeHealthCheck
from ..PARSERS.env_parser import EnvParser

# Labels the compose tooling stamps on the containers it manages
COMPOSE_LABEL_PREFIX = "com.docker.compose"

# Length of the id prefix the runtime uses as a default hostname
SHORT_ID_LENGTH = 12


def lists_equal(a: Optional[List[str]], b: Optional[List[str]]) -> bool:
    """
    Compares two argument lists element-wise. ``None`` compares equal to an empty list.
    """
    return list(a or []) == list(b or [])


def healthchecks_equal(a: HealthCheck, b: HealthCheck) -> bool:
    """
    Two health checks are equal when the test command and every timing field match.
    """
    return (
        lists_equal(a.test, b.test)
        and a.interval == b.interval
        and a.timeout == b.timeout
        and a.retries == b.retries
        and a.start_period == b.start_period
    )


def is_random_hostname(hostname: str, container_id: str) -> bool:
    """
    Checks whether a hostname was generated by the runtime.

    The runtime defaults the hostname to the first 12 characters of the container id.
    A length and prefix match is taken as sufficient evidence.

    :param hostname: The container's hostname.
    :param container_id: The container's full id.
    :return: True if the hostname looks auto-generated.
    """
    return (
        len(hostname) == SHORT_ID_LENGTH
        and container_id != ""
        and container_id != hostname
        and container_id[:SHORT_ID_LENGTH] == hostname
    )


class FieldDiffEngine:
    """
    Decides, field by field, whether a container setting overrides its image default.
    """

    def __init__(self, container: ContainerSnapshot, image: ImageSnapshot):
        """
        Initializes the engine for one container/image pair.

        :param container: The running container's snapshot.
        :param image: The snapshot of the image the container was started from.
        """
        self.container = container
        self.image = image

    def diff_environment(self) -> Dict[str, str]:
        """
        Returns the variables whose value differs from the image, including ones the image lacks.
        """
        container_env = EnvParser.parse_list(self.container.env)
        image_env = EnvParser.parse_list(self.image.env)
        return {
            key: value
            for key, value in container_env.items()
            if key not in image_env or image_env[key] != value
        }

    def diff_command(self) -> Optional[List[str]]:
        if lists_equal(self.container.cmd, self.image.cmd):
            return None
        return list(self.container.cmd or [])

    def diff_entrypoint(self) -> Optional[List[str]]:
        if lists_equal(self.container.entrypoint, self.image.entrypoint):
            return None
        return list(self.container.entrypoint or [])

    def diff_working_dir(self) -> Optional[str]:
        working_dir = self.container.working_dir
        if not working_dir or working_dir == self.image.working_dir:
            return None
        return working_dir

    def diff_hostname(self) -> Optional[str]:
        hostname = self.container.hostname
        if not hostname or is_random_hostname(hostname, self.container.id):
            return None
        return hostname

    def diff_labels(self) -> Dict[str, str]:
        """
        Returns the labels that differ from the image, never those owned by compose tooling.
        """
        image_labels = self.image.labels
        return {
            key: value
            for key, value in self.container.labels.items()
            if (key not in image_labels or image_labels[key] != value)
            and not key.startswith(COMPOSE_LABEL_PREFIX)
        }

    def diff_healthcheck(self) -> Optional[ComposeHealthCheck]:
        health_check = self.container.healthcheck
        if health_check is None:
            return None
        if self.image.healthcheck is not None and healthchecks_equal(health_check, self.image.healthcheck):
            return None
        compose_health_check = ComposeHealthCheck.from_snapshot(health_check)
        # Nothing left to render once zero values are dropped
        if not compose_health_check.model_dump(exclude_none=True):
            return None
        return compose_health_check

    def restart_policy(self) -> Optional[str]:
        """
        Returns the restart policy in compose syntax. ``no`` is the compose default and is left out.
        """
        policy = self.container.restart_policy
        if not policy.name or policy.name == "no":
            return None
        if policy.name == "on-failure" and policy.maximum_retry_count > 0:
            return f"on-failure:{policy.maximum_retry_count}"
        return policy.name

    def passthrough(self) -> Dict[str, object]:
        """
        Returns the settings with no image-level default, copied from the container.
        False and empty values are left out so they never render as placeholders.
        """
        c = self.container
        fields = {
            'tty': c.tty or None,
            'user': c.user or None,
            'domainname': c.domainname or None,
            'open_stdin': c.open_stdin or None,
            'stdin_once': c.stdin_once or None,
            'privileged': c.privileged or None,
            'cap_add': list(c.cap_add) or None,
            'cap_drop': list(c.cap_drop) or None,
            'stop_signal': c.stop_signal or None,
            'stop_timeout': c.stop_timeout,
            'shell': list(c.shell) or None,
            'network_disabled': c.network_disabled or None,
        }
        return {key: value for key, value in fields.items() if value is not None}

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
Parsers for Docker Engine inspection records.
"""
import re
from typing import Dict, Any, List, Optional
from ..MODELS.snapshots import (
    ContainerSnapshot,
    ContainerSummary,
    HealthCheck,
    ImageSnapshot,
    Mount,
    MountType,
    PortBinding,
    ResourceLimits,
    RestartPolicy,
    VolumeSnapshot,
)

# Anonymous volumes are named after a random 64 character hex id
ANONYMOUS_VOLUME_NAME = re.compile(r'^[0-9a-f]{64}$')

def _get(data: Optional[Dict[str, Any]], key: str, default: Any) -> Any:
    """
    Returns ``data[key]``, or ``default`` when the key is missing or null.
    The engine reports unset lists and mappings as null.
    """
    if not data:
        return default
    value = data.get(key, default)
    return value if value is not None else default

class InspectParser:
    """
    Parser turning raw inspect dictionaries (as returned by ``docker inspect``) into snapshots.
    """
    def parse_container(self, attrs: Dict[str, Any]) -> ContainerSnapshot:
        """
        Parses a container inspect record.

        :param attrs: The container's inspect dictionary.
        :return: An immutable container snapshot.
        """
        config = _get(attrs, 'Config', {})
        host_config = _get(attrs, 'HostConfig', {})
        network_settings = _get(attrs, 'NetworkSettings', {})
        restart = _get(host_config, 'RestartPolicy', {})

        return ContainerSnapshot(
            id=_get(attrs, 'Id', ''),
            name=_get(attrs, 'Name', ''),
            image=_get(config, 'Image', ''),
            env=list(_get(config, 'Env', [])),
            cmd=_get(config, 'Cmd', None),
            entrypoint=_get(config, 'Entrypoint', None),
            working_dir=_get(config, 'WorkingDir', ''),
            shell=list(_get(config, 'Shell', [])),
            user=_get(config, 'User', ''),
            hostname=_get(config, 'Hostname', ''),
            domainname=_get(config, 'Domainname', ''),
            labels=dict(_get(config, 'Labels', {})),
            tty=_get(config, 'Tty', False),
            open_stdin=_get(config, 'OpenStdin', False),
            stdin_once=_get(config, 'StdinOnce', False),
            stop_signal=_get(config, 'StopSignal', ''),
            stop_timeout=_get(config, 'StopTimeout', None),
            healthcheck=self._parse_healthcheck(_get(config, 'Healthcheck', None)),
            restart_policy=RestartPolicy(
                name=_get(restart, 'Name', ''),
                maximum_retry_count=_get(restart, 'MaximumRetryCount', 0),
            ),
            resources=ResourceLimits(
                cpu_period=_get(host_config, 'CpuPeriod', 0),
                cpu_quota=_get(host_config, 'CpuQuota', 0),
                memory=_get(host_config, 'Memory', 0),
            ),
            cap_add=list(_get(host_config, 'CapAdd', [])),
            cap_drop=list(_get(host_config, 'CapDrop', [])),
            privileged=_get(host_config, 'Privileged', False),
            network_disabled=_get(config, 'NetworkDisabled', False),
            mounts=[self._parse_mount(m) for m in _get(attrs, 'Mounts', [])],
            port_bindings=self._parse_port_bindings(_get(host_config, 'PortBindings', {})),
            networks=list(_get(network_settings, 'Networks', {}).keys()),
        )

    def parse_image(self, attrs: Dict[str, Any]) -> ImageSnapshot:
        """
        Parses an image inspect record.

        :param attrs: The image's inspect dictionary.
        :return: An immutable image snapshot.
        """
        config = _get(attrs, 'Config', {})
        return ImageSnapshot(
            id=_get(attrs, 'Id', ''),
            env=list(_get(config, 'Env', [])),
            cmd=_get(config, 'Cmd', None),
            entrypoint=_get(config, 'Entrypoint', None),
            working_dir=_get(config, 'WorkingDir', ''),
            labels=dict(_get(config, 'Labels', {})),
            healthcheck=self._parse_healthcheck(_get(config, 'Healthcheck', None)),
        )

    def parse_volume(self, attrs: Dict[str, Any]) -> VolumeSnapshot:
        """
        Parses a volume inspect record.

        :param attrs: The volume's inspect dictionary.
        :return: An immutable volume snapshot.
        """
        return VolumeSnapshot(
            name=_get(attrs, 'Name', ''),
            labels=dict(_get(attrs, 'Labels', {})),
        )

    def parse_summary(self, attrs: Dict[str, Any]) -> ContainerSummary:
        """
        Parses one entry of the container listing, stripping the leading ``/`` of each name.
        """
        names = [name.lstrip('/') for name in _get(attrs, 'Names', [])]
        return ContainerSummary(id=_get(attrs, 'Id', ''), names=names)

    def _parse_healthcheck(self, spec: Optional[Dict[str, Any]]) -> Optional[HealthCheck]:
        if spec is None:
            return None
        return HealthCheck(
            test=list(_get(spec, 'Test', [])),
            interval=_get(spec, 'Interval', 0),
            timeout=_get(spec, 'Timeout', 0),
            retries=_get(spec, 'Retries', 0),
            start_period=_get(spec, 'StartPeriod', 0),
        )

    def _parse_mount(self, spec: Dict[str, Any]) -> Mount:
        """
        Parses a mount. Anonymous volumes cannot be referenced by name and are classified as ``OTHER``.
        """
        kind = _get(spec, 'Type', '')
        name = _get(spec, 'Name', None)
        if kind == 'bind':
            mount_type = MountType.BIND
        elif kind == 'volume' and name and not ANONYMOUS_VOLUME_NAME.match(name):
            mount_type = MountType.VOLUME
        else:
            mount_type = MountType.OTHER

        return Mount(
            type=mount_type,
            source=_get(spec, 'Source', ''),
            destination=_get(spec, 'Destination', ''),
            name=name,
            read_only=not _get(spec, 'RW', True),
        )

    def _parse_port_bindings(self, spec: Dict[str, Any]) -> Dict[str, List[PortBinding]]:
        bindings = {}
        for port, host_bindings in spec.items():
            bindings[port] = [
                PortBinding(
                    host_ip=_get(b, 'HostIp', ''),
                    host_port=_get(b, 'HostPort', ''),
                )
                for b in host_bindings or []
            ]
        return bindings

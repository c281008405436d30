"""
Shared inspect records modelled on real ``docker inspect`` output.
"""
import copy
import pytest

CONTAINER_ID = "abc123def456789aaaabbbbccccddddeeeeffff000011112222333344445555"

CONTAINER_ATTRS = {
    "Id": CONTAINER_ID,
    "Name": "/web",
    "Config": {
        "Hostname": "abc123def456",
        "Domainname": "",
        "User": "",
        "Tty": False,
        "OpenStdin": False,
        "StdinOnce": False,
        "Env": [
            "PATH=/usr/local/sbin:/usr/local/bin:/usr/sbin:/usr/bin:/sbin:/bin",
            "NGINX_VERSION=1.25.3",
            "DEBUG=true",
        ],
        "Cmd": ["nginx", "-g", "daemon off;"],
        "Image": "nginx:latest",
        "WorkingDir": "",
        "Entrypoint": ["/docker-entrypoint.sh"],
        "Labels": {
            "maintainer": "NGINX Docker Maintainers",
            "com.docker.compose.project": "myapp",
            "traefik.enable": "true",
        },
        "StopSignal": "SIGQUIT",
    },
    "HostConfig": {
        "CpuPeriod": 100000,
        "CpuQuota": 150000,
        "Memory": 536870912,
        "CapAdd": None,
        "CapDrop": None,
        "Privileged": False,
        "RestartPolicy": {"Name": "unless-stopped", "MaximumRetryCount": 0},
        "PortBindings": {
            "80/tcp": [{"HostIp": "", "HostPort": "8080"}],
            "443/tcp": [{"HostIp": "127.0.0.1", "HostPort": "8443"}],
        },
    },
    "Mounts": [
        {
            "Type": "bind",
            "Source": "/srv/site",
            "Destination": "/usr/share/nginx/html",
            "Mode": "",
            "RW": True,
        },
        {
            "Type": "volume",
            "Name": "nginx_cache",
            "Source": "/var/lib/docker/volumes/nginx_cache/_data",
            "Destination": "/var/cache/nginx",
            "Driver": "local",
            "RW": True,
        },
    ],
    "NetworkSettings": {
        "Networks": {
            "bridge": {},
            "myapp_default": {},
            "customnet": {},
        },
    },
}

IMAGE_ATTRS = {
    "Id": "sha256:1f2e3d",
    "Config": {
        "Env": [
            "PATH=/usr/local/sbin:/usr/local/bin:/usr/sbin:/usr/bin:/sbin:/bin",
            "NGINX_VERSION=1.25.3",
        ],
        "Cmd": ["nginx", "-g", "daemon off;"],
        "WorkingDir": "",
        "Entrypoint": ["/docker-entrypoint.sh"],
        "Labels": {"maintainer": "NGINX Docker Maintainers"},
        "StopSignal": "SIGQUIT",
    },
}

@pytest.fixture
def container_attrs():
    return copy.deepcopy(CONTAINER_ATTRS)

@pytest.fixture
def image_attrs():
    return copy.deepcopy(IMAGE_ATTRS)

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
Unit tests for the field diff engine.
"""
import pytest
from c2c.DIFF.field_diff import FieldDiffEngine, is_random_hostname, healthchecks_equal
from c2c.MODELS.snapshots import ContainerSnapshot, HealthCheck, ImageSnapshot, RestartPolicy

SECOND = 1_000_000_000
CONTAINER_ID = "abc123def456789aaaabbbbccccdddd"


def make_container(**kwargs):
    kwargs.setdefault("id", CONTAINER_ID)
    kwargs.setdefault("name", "/web")
    kwargs.setdefault("image", "nginx:latest")
    return ContainerSnapshot(**kwargs)


def make_health(**kwargs):
    kwargs.setdefault("test", ["CMD", "curl", "-f", "http://localhost/"])
    kwargs.setdefault("interval", 30 * SECOND)
    kwargs.setdefault("timeout", 5 * SECOND)
    kwargs.setdefault("retries", 3)
    kwargs.setdefault("start_period", 10 * SECOND)
    return HealthCheck(**kwargs)


class TestEnvironment:
    """Tests for environment diffing."""

    def test_identical_environment_is_empty(self):
        """Test that identical lists emit nothing."""
        env = ["A=1", "B=2"]
        engine = FieldDiffEngine(make_container(env=env), ImageSnapshot(env=list(reversed(env))))
        assert engine.diff_environment() == {}

    def test_added_variable(self):
        """Test that only the variable missing from the image is kept."""
        engine = FieldDiffEngine(make_container(env=["A=1", "B=2"]), ImageSnapshot(env=["A=1"]))
        assert engine.diff_environment() == {"B": "2"}

    def test_changed_variable(self):
        """Test that a variable with a different value is kept."""
        engine = FieldDiffEngine(make_container(env=["A=2"]), ImageSnapshot(env=["A=1"]))
        assert engine.diff_environment() == {"A": "2"}

    def test_empty_value_missing_from_image(self):
        """Test that an empty value the image does not define is kept."""
        engine = FieldDiffEngine(make_container(env=["A="]), ImageSnapshot())
        assert engine.diff_environment() == {"A": ""}

    def test_image_only_variable_is_ignored(self):
        """Test that variables only the image defines are omitted."""
        engine = FieldDiffEngine(make_container(env=[]), ImageSnapshot(env=["A=1"]))
        assert engine.diff_environment() == {}

    def test_malformed_entries_dropped(self):
        """Test that entries without '=' are dropped silently."""
        engine = FieldDiffEngine(make_container(env=["JUNK", "A=1"]), ImageSnapshot())
        assert engine.diff_environment() == {"A": "1"}


class TestCommandAndEntrypoint:
    """Tests for command and entrypoint diffing."""

    def test_same_command_omitted(self):
        cmd = ["nginx", "-g", "daemon off;"]
        engine = FieldDiffEngine(make_container(cmd=cmd), ImageSnapshot(cmd=list(cmd)))
        assert engine.diff_command() is None

    def test_different_command_emitted(self):
        engine = FieldDiffEngine(make_container(cmd=["nginx", "-T"]), ImageSnapshot(cmd=["nginx"]))
        assert engine.diff_command() == ["nginx", "-T"]

    def test_reordered_command_emitted(self):
        engine = FieldDiffEngine(make_container(cmd=["b", "a"]), ImageSnapshot(cmd=["a", "b"]))
        assert engine.diff_command() == ["b", "a"]

    def test_null_and_empty_are_equal(self):
        engine = FieldDiffEngine(make_container(cmd=None), ImageSnapshot(cmd=[]))
        assert engine.diff_command() is None

    def test_cleared_entrypoint_is_explicit_empty_list(self):
        """Test that removing the image entrypoint is emitted as an empty list."""
        engine = FieldDiffEngine(make_container(entrypoint=None), ImageSnapshot(entrypoint=["/init"]))
        assert engine.diff_entrypoint() == []

    def test_same_entrypoint_omitted(self):
        engine = FieldDiffEngine(
            make_container(entrypoint=["/docker-entrypoint.sh"]),
            ImageSnapshot(entrypoint=["/docker-entrypoint.sh"]),
        )
        assert engine.diff_entrypoint() is None


class TestWorkingDir:
    """Tests for working directory diffing."""

    def test_same_working_dir(self):
        engine = FieldDiffEngine(make_container(working_dir="/app"), ImageSnapshot(working_dir="/app"))
        assert engine.diff_working_dir() is None

    def test_working_dir_set_over_empty_image(self):
        engine = FieldDiffEngine(make_container(working_dir="/srv"), ImageSnapshot())
        assert engine.diff_working_dir() == "/srv"

    def test_changed_working_dir(self):
        engine = FieldDiffEngine(make_container(working_dir="/srv"), ImageSnapshot(working_dir="/app"))
        assert engine.diff_working_dir() == "/srv"


class TestHostname:
    """Tests for the auto-generated hostname heuristic."""

    def test_random_hostname_suppressed(self):
        engine = FieldDiffEngine(make_container(hostname=CONTAINER_ID[:12]), ImageSnapshot())
        assert engine.diff_hostname() is None

    def test_custom_hostname_emitted(self):
        engine = FieldDiffEngine(make_container(hostname="myhost"), ImageSnapshot())
        assert engine.diff_hostname() == "myhost"

    def test_empty_hostname_omitted(self):
        engine = FieldDiffEngine(make_container(hostname=""), ImageSnapshot())
        assert engine.diff_hostname() is None

    def test_twelve_chars_not_matching_id(self):
        assert not is_random_hostname("db-primary01", CONTAINER_ID)

    def test_hostname_equal_to_full_id(self):
        assert not is_random_hostname("abc123def456", "abc123def456")

    def test_empty_id(self):
        assert not is_random_hostname("abc123def456", "")


class TestLabels:
    """Tests for label diffing."""

    def test_inherited_labels_omitted(self):
        labels = {"maintainer": "me"}
        engine = FieldDiffEngine(make_container(labels=labels), ImageSnapshot(labels=labels))
        assert engine.diff_labels() == {}

    def test_new_and_changed_labels(self):
        engine = FieldDiffEngine(
            make_container(labels={"maintainer": "you", "tier": "web"}),
            ImageSnapshot(labels={"maintainer": "me"}),
        )
        assert engine.diff_labels() == {"maintainer": "you", "tier": "web"}

    def test_compose_labels_redacted(self):
        """Test that compose-managed labels are never emitted."""
        engine = FieldDiffEngine(
            make_container(labels={
                "com.docker.compose.project": "myapp",
                "com.docker.compose.service": "web",
                "com.docker.composefoo": "x",
            }),
            ImageSnapshot(labels={"com.docker.compose.project": "other"}),
        )
        assert engine.diff_labels() == {}


class TestHealthcheck:
    """Tests for health check diffing."""

    def test_equal_healthcheck_omitted(self):
        engine = FieldDiffEngine(make_container(healthcheck=make_health()), ImageSnapshot(healthcheck=make_health()))
        assert engine.diff_healthcheck() is None

    @pytest.mark.parametrize("change", [
        {"test": ["CMD", "true"]},
        {"interval": 10 * SECOND},
        {"timeout": 1 * SECOND},
        {"retries": 5},
        {"start_period": 0},
    ])
    def test_any_difference_emits_full_healthcheck(self, change):
        engine = FieldDiffEngine(make_container(healthcheck=make_health(**change)), ImageSnapshot(healthcheck=make_health()))
        health = engine.diff_healthcheck()
        assert health is not None
        expected = make_health(**change)
        assert health.test == expected.test
        assert health.retries == expected.retries

    def test_image_without_healthcheck(self):
        engine = FieldDiffEngine(make_container(healthcheck=make_health()), ImageSnapshot())
        health = engine.diff_healthcheck()
        assert health.test == ["CMD", "curl", "-f", "http://localhost/"]
        assert health.interval == "30s"
        assert health.timeout == "5s"
        assert health.retries == 3
        assert health.start_period == "10s"

    def test_empty_healthcheck_omitted(self):
        """Test that a health check with nothing to render is left out."""
        engine = FieldDiffEngine(make_container(healthcheck=HealthCheck()), ImageSnapshot(healthcheck=make_health()))
        assert engine.diff_healthcheck() is None

    def test_container_without_healthcheck(self):
        engine = FieldDiffEngine(make_container(), ImageSnapshot(healthcheck=make_health()))
        assert engine.diff_healthcheck() is None

    def test_healthchecks_equal_compares_test_lists(self):
        assert not healthchecks_equal(make_health(test=["CMD"]), make_health(test=["CMD", "x"]))


class TestPassthroughAndRestart:
    """Tests for settings copied from the container."""

    def test_passthrough_omits_defaults(self):
        engine = FieldDiffEngine(make_container(), ImageSnapshot())
        assert engine.passthrough() == {}

    def test_passthrough_copies_values(self):
        container = make_container(
            tty=True,
            user="1000:1000",
            privileged=True,
            cap_add=["NET_ADMIN"],
            cap_drop=["ALL"],
            stop_signal="SIGTERM",
            stop_timeout=0,
            shell=["/bin/bash", "-c"],
        )
        fields = FieldDiffEngine(container, ImageSnapshot()).passthrough()
        assert fields["tty"] is True
        assert fields["user"] == "1000:1000"
        assert fields["privileged"] is True
        assert fields["cap_add"] == ["NET_ADMIN"]
        assert fields["cap_drop"] == ["ALL"]
        assert fields["stop_signal"] == "SIGTERM"
        assert fields["stop_timeout"] == 0
        assert fields["shell"] == ["/bin/bash", "-c"]
        assert "open_stdin" not in fields

    @pytest.mark.parametrize("policy,expected", [
        (RestartPolicy(), None),
        (RestartPolicy(name="no"), None),
        (RestartPolicy(name="always"), "always"),
        (RestartPolicy(name="on-failure"), "on-failure"),
        (RestartPolicy(name="on-failure", maximum_retry_count=5), "on-failure:5"),
    ])
    def test_restart_policy(self, policy, expected):
        engine = FieldDiffEngine(make_container(restart_policy=policy), ImageSnapshot())
        assert engine.restart_policy() == expected

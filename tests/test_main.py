"""
Tests for the __main__.py entrypoint to the library as an executable
"""

# Standard
from unittest import mock

# Third Party
import pytest
import yaml

# First Party
import alog

# Local
from appsody_operator import config
from appsody_operator.__main__ import main
from appsody_operator.exceptions import ContractViolationError
from appsody_operator.test_helpers.helpers import (
    configure_logging,
    library_config,
    setup_cr,
)

log = alog.use_channel("TEST")


## Helpers #####################################################################


@pytest.fixture(autouse=True)
def restore_library_config():
    """main writes the parsed args back into the library config and logging
    setup, so put both back after each test
    """
    with library_config(**dict(config.library_config)):
        yield
    configure_logging()


def write_yaml(path, *docs):
    with open(path, "w", encoding="utf-8") as handle:
        yaml.safe_dump_all(docs, handle)
    return str(path)


def plain_cr(**kwargs):
    return _to_dict(setup_cr(**kwargs))


def _to_dict(obj):
    if isinstance(obj, dict):
        return {key: _to_dict(val) for key, val in obj.items()}
    if isinstance(obj, list):
        return [_to_dict(val) for val in obj]
    return obj


def render(tmp_path, *extra_args):
    out_path = tmp_path / "out.yaml"
    exit_code = main(["render", "--output", str(out_path), *extra_args])
    objects = []
    if out_path.exists():
        with open(out_path, encoding="utf-8") as handle:
            objects = list(yaml.safe_load_all(handle))
    return exit_code, objects


## Tests #######################################################################


def test_render_minimal(tmp_path):
    """Make sure a minimal CR renders the default object set"""
    cr_path = write_yaml(tmp_path / "cr.yaml", plain_cr(spec={"replicas": 3}))
    exit_code, objects = render(tmp_path, "--cr", cr_path)
    assert exit_code == 0
    assert [obj["kind"] for obj in objects] == [
        "ServiceAccount",
        "Deployment",
        "Service",
    ]
    assert objects[1]["spec"]["replicas"] == 3


def test_render_existing(tmp_path):
    """Make sure live objects passed with --existing are customized in place"""
    cr_path = write_yaml(tmp_path / "cr.yaml", plain_cr())
    existing_path = write_yaml(
        tmp_path / "existing.yaml",
        {
            "apiVersion": "v1",
            "kind": "Service",
            "metadata": {"name": "example-app", "uid": "1234"},
            "spec": {"clusterIP": "10.0.0.1"},
        },
    )
    exit_code, objects = render(
        tmp_path, "--cr", cr_path, "--existing", existing_path
    )
    assert exit_code == 0
    svc = [obj for obj in objects if obj["kind"] == "Service"][0]
    assert svc["metadata"]["uid"] == "1234"
    assert svc["spec"]["clusterIP"] == "10.0.0.1"


def test_render_operator_id_override(tmp_path):
    """Make sure library config overrides are applied from the command line"""
    cr_path = write_yaml(tmp_path / "cr.yaml", plain_cr())
    exit_code, objects = render(tmp_path, "--cr", cr_path, "--operator_id", "other")
    assert exit_code == 0
    for obj in objects:
        assert obj["metadata"]["labels"]["app.kubernetes.io/managed-by"] == "other"


def test_render_malformed_storage(tmp_path):
    """Make sure a malformed storage size fails with a non-zero exit code"""
    cr_path = write_yaml(
        tmp_path / "cr.yaml", plain_cr(spec={"storage": {"size": "not-a-quantity"}})
    )
    exit_code, objects = render(tmp_path, "--cr", cr_path)
    assert exit_code == 1
    assert not objects


def test_render_empty_cr(tmp_path):
    """Make sure an empty CR file fails cleanly"""
    cr_path = tmp_path / "cr.yaml"
    cr_path.write_text("")
    exit_code, _ = render(tmp_path, "--cr", str(cr_path))
    assert exit_code == 1


def test_command_required():
    """Make sure running without a command exits with a usage error"""
    with pytest.raises(SystemExit):
        main([])


def test_render_autoscaling_without_max_replicas(tmp_path):
    """Make sure autoscaling without maxReplicas fails with a non-zero exit
    code rather than a traceback
    """
    cr_path = write_yaml(
        tmp_path / "cr.yaml", plain_cr(spec={"autoscaling": {"minReplicas": 1}})
    )
    exit_code, objects = render(tmp_path, "--cr", cr_path)
    assert exit_code == 1
    assert not objects


def test_render_contract_violation_logged(tmp_path):
    """Make sure a contract violation raised while building is reported as a
    failed render
    """
    cr_path = write_yaml(tmp_path / "cr.yaml", plain_cr())
    with mock.patch(
        "appsody_operator.cmd.render_cmd.build_desired_state",
        side_effect=ContractViolationError("bad call"),
    ):
        exit_code, objects = render(tmp_path, "--cr", cr_path)
    assert exit_code == 1
    assert not objects

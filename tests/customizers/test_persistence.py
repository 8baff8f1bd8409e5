"""
Tests for the persistence customizer
"""

# Third Party
import pytest

# Local
from appsody_operator.customizers import build_volume_claim, customize_persistence
from appsody_operator.exceptions import ContractViolationError, MalformedQuantityError
from appsody_operator.labels import get_labels
from appsody_operator.test_helpers.helpers import setup_app


def test_claim_synthesized_from_size():
    """Make sure a size-only storage section yields the default claim"""
    app = setup_app(spec={"storage": {"size": "1Gi"}})
    sts = customize_persistence(None, app)
    assert sts["spec"]["volumeClaimTemplates"] == [
        {
            "metadata": {
                "name": "pvc",
                "namespace": "test",
                "labels": get_labels(app),
            },
            "spec": {
                "resources": {"requests": {"storage": "1Gi"}},
                "accessModes": ["ReadWriteOnce"],
            },
        }
    ]


def test_explicit_template_used():
    """Make sure an explicit claim template is used as is"""
    template = {
        "metadata": {"name": "data"},
        "spec": {
            "accessModes": ["ReadWriteMany"],
            "resources": {"requests": {"storage": "5Gi"}},
            "storageClassName": "fast",
        },
    }
    app = setup_app(
        spec={"storage": {"size": "not-used", "volumeClaimTemplate": template}}
    )
    assert build_volume_claim(app) == template
    sts = customize_persistence({"spec": {}}, app)
    assert sts["spec"]["volumeClaimTemplates"] == [template]


def test_malformed_size_rejected():
    """Make sure a malformed size raises and leaves the claims unchanged"""
    app = setup_app(spec={"storage": {"size": "not-a-quantity"}})
    target = {"spec": {"volumeClaimTemplates": []}}
    with pytest.raises(MalformedQuantityError):
        customize_persistence(target, app)
    assert target == {"spec": {"volumeClaimTemplates": []}}


@pytest.mark.parametrize("size", ["NaN", "Infinity", "1_0Gi", " 1Gi"])
def test_non_numeric_size_rejected(size):
    """Make sure sizes that only look numeric to python are rejected"""
    app = setup_app(spec={"storage": {"size": size}})
    with pytest.raises(MalformedQuantityError):
        customize_persistence(None, app)


def test_single_claim_guard():
    """Make sure a second call with a new size does not add or change claims"""
    first = customize_persistence(None, setup_app(spec={"storage": {"size": "1Gi"}}))
    second = customize_persistence(
        first, setup_app(spec={"storage": {"size": "2Gi"}})
    )
    claims = second["spec"]["volumeClaimTemplates"]
    assert len(claims) == 1
    assert claims[0]["spec"]["resources"]["requests"]["storage"] == "1Gi"


def test_existing_claim_skips_size_check():
    """Make sure a malformed size is not checked once a claim exists"""
    existing = {"spec": {"volumeClaimTemplates": [{"metadata": {"name": "pvc"}}]}}
    app = setup_app(spec={"storage": {"size": "not-a-quantity"}})
    assert customize_persistence(existing, app) == existing


def test_requires_storage(app):
    """Make sure calling without storage is a contract violation"""
    with pytest.raises(ContractViolationError):
        customize_persistence(None, app)

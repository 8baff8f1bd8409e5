"""
Tests for composing the full set of owned objects
"""

# Local
from appsody_operator import desired_state
from appsody_operator.customizers import customize_service
from appsody_operator.test_helpers.helpers import setup_app


def _kinds(objects):
    return [obj["kind"] for obj in objects]


def test_minimal_app(app):
    """Make sure a minimal app gets a ServiceAccount, Deployment and Service"""
    objects = desired_state.build_desired_state(app)
    assert _kinds(objects) == ["ServiceAccount", "Deployment", "Service"]
    for obj in objects:
        assert obj["metadata"]["name"] == "example-app"
        assert obj["metadata"]["namespace"] == "test"
    assert [obj["apiVersion"] for obj in objects] == ["v1", "apps/v1", "v1"]


def test_explicit_service_account_not_created():
    """Make sure no ServiceAccount is built when the CR names one"""
    app = setup_app(spec={"serviceAccountName": "shared"})
    assert "ServiceAccount" not in _kinds(desired_state.build_desired_state(app))


def test_full_app_with_storage():
    """Make sure storage, autoscaling and expose add the matching objects and
    the HPA targets the StatefulSet
    """
    app = setup_app(
        spec={
            "storage": {"size": "1Gi"},
            "autoscaling": {"maxReplicas": 3},
            "expose": True,
        }
    )
    objects = desired_state.build_desired_state(app)
    assert _kinds(objects) == [
        "ServiceAccount",
        "StatefulSet",
        "Service",
        "HorizontalPodAutoscaler",
        "Route",
    ]
    hpa = objects[3]
    assert hpa["apiVersion"] == "autoscaling/v1"
    assert hpa["spec"]["scaleTargetRef"]["kind"] == "StatefulSet"
    assert objects[4]["apiVersion"] == "route.openshift.io/v1"


def test_hpa_matches_deployment():
    """Make sure the HPA targets the Deployment when there is no storage"""
    app = setup_app(spec={"autoscaling": {"maxReplicas": 3}})
    objects = desired_state.build_desired_state(app)
    assert "Deployment" in _kinds(objects)
    assert objects[-1]["spec"]["scaleTargetRef"]["kind"] == "Deployment"


def test_existing_objects_customized(app):
    """Make sure live objects are used as the starting point"""
    live_svc = {
        "apiVersion": "v1",
        "kind": "Service",
        "metadata": {"name": "example-app", "resourceVersion": "12"},
        "spec": {"clusterIP": "10.0.0.1", "ports": [{"port": 1}, {"port": 2}]},
    }
    existing = desired_state.index_objects([live_svc, None])
    objects = desired_state.build_desired_state(app, existing)
    svc = objects[2]
    assert svc["metadata"]["resourceVersion"] == "12"
    assert svc["spec"]["clusterIP"] == "10.0.0.1"
    assert svc["spec"]["ports"][1] == {"port": 2}
    assert svc["spec"] == customize_service(live_svc, app)["spec"]
    assert live_svc["spec"]["ports"][0] == {"port": 1}


def test_index_objects():
    """Make sure objects are keyed by kind and name"""
    obj = {"kind": "Service", "metadata": {"name": "foo"}}
    assert desired_state.index_objects([obj, {}]) == {("Service", "foo"): obj}


def test_idempotent():
    """Make sure rendering on top of a previous render changes nothing"""
    app = setup_app(
        spec={
            "storage": {"size": "1Gi"},
            "autoscaling": {"maxReplicas": 3},
            "expose": True,
            "architecture": ["amd64", "s390x"],
        }
    )
    once = desired_state.build_desired_state(app)
    twice = desired_state.build_desired_state(app, desired_state.index_objects(once))
    assert twice == once

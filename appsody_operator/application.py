"""
This module holds the read-only view of an AppsodyApplication custom resource
that every customizer consumes
"""

# Standard
from typing import Any, List, Optional
import copy

# First Party
import aconfig
import alog

# Local
from . import constants
from .exceptions import assert_config, assert_contract
from .utils import nested_get, sanitize_for_serialization

log = alog.use_channel("APP")


class AppsodyApplication:
    """Wrapper around the full manifest of an AppsodyApplication CR. All
    accessors return plain python copies so that nothing a customizer writes
    onto a target aliases the CR.
    """

    __slots__ = ["__cr_manifest"]

    def __init__(self, cr_manifest: Any):
        """Construct from the CR manifest

        Args:
            cr_manifest:  Union[dict, aconfig.Config]
                The full CR manifest including metadata and spec
        """
        if not isinstance(cr_manifest, aconfig.Config):
            cr_manifest = aconfig.Config(
                sanitize_for_serialization(cr_manifest), override_env_vars=False
            )
        self._validate_cr(cr_manifest)
        self.__cr_manifest = cr_manifest

    def __str__(self):
        return f"{constants.CR_KIND}/{self.namespace}/{self.name}"

    def __repr__(self):
        return str(self)

    ## Metadata ################################################################

    @property
    def cr_manifest(self) -> aconfig.Config:
        """The full CR manifest"""
        return self.__cr_manifest

    @property
    def metadata(self) -> aconfig.Config:
        return self.cr_manifest.get("metadata", aconfig.Config({}))

    @property
    def spec(self) -> aconfig.Config:
        return self.cr_manifest.get("spec") or aconfig.Config({})

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.get("namespace") or constants.DEFAULT_NAMESPACE

    ## Container ###############################################################

    @property
    def application_image(self) -> Optional[str]:
        return self.spec.get("applicationImage")

    @property
    def replicas(self) -> Optional[int]:
        return self.spec.get("replicas")

    @property
    def service_port(self) -> int:
        return self.spec.service.port

    @property
    def service_type(self) -> str:
        return self.spec.service.get("type") or constants.DEFAULT_SERVICE_TYPE

    @property
    def resource_constraints(self) -> Optional[dict]:
        return self._copy_field("resourceConstraints")

    @property
    def readiness_probe(self) -> Optional[dict]:
        return self._copy_field("readinessProbe")

    @property
    def liveness_probe(self) -> Optional[dict]:
        return self._copy_field("livenessProbe")

    @property
    def volume_mounts(self) -> Optional[List[dict]]:
        return self._copy_field("volumeMounts")

    @property
    def pull_policy(self) -> Optional[str]:
        return self.spec.get("pullPolicy")

    @property
    def env(self) -> Optional[List[dict]]:
        return self._copy_field("env")

    @property
    def env_from(self) -> Optional[List[dict]]:
        return self._copy_field("envFrom")

    @property
    def volumes(self) -> Optional[List[dict]]:
        return self._copy_field("volumes")

    ## Pod #####################################################################

    @property
    def service_account_name(self) -> str:
        return self.spec.get("serviceAccountName") or ""

    @property
    def architecture(self) -> List[str]:
        """Preferred CPU architectures, most preferred first"""
        return list(self.spec.get("architecture") or [])

    @property
    def pull_secret(self) -> Optional[str]:
        return self.spec.get("pullSecret")

    ## Storage #################################################################

    @property
    def storage(self) -> Optional[dict]:
        """The storage section. Its presence means the workload is a
        StatefulSet.
        """
        return self._copy_field("storage")

    @property
    def storage_size(self) -> Optional[str]:
        return nested_get(self.spec, "storage.size")

    @property
    def volume_claim_template(self) -> Optional[dict]:
        template = nested_get(self.spec, "storage.volumeClaimTemplate")
        return sanitize_for_serialization(template)

    ## Autoscaling #############################################################

    @property
    def autoscaling(self) -> Optional[dict]:
        return self._copy_field("autoscaling")

    @property
    def min_replicas(self) -> Optional[int]:
        return nested_get(self.spec, "autoscaling.minReplicas")

    @property
    def max_replicas(self) -> int:
        """The autoscaler's upper bound. Callers may only ask for this when the
        CR declares autoscaling with maxReplicas set.
        """
        max_replicas = nested_get(self.spec, "autoscaling.maxReplicas")
        assert_contract(
            max_replicas is not None,
            f"{self} has no autoscaling.maxReplicas",
        )
        return max_replicas

    @property
    def target_cpu_utilization_percentage(self) -> Optional[int]:
        return nested_get(self.spec, "autoscaling.targetCPUUtilizationPercentage")

    ## Route ###################################################################

    @property
    def expose(self) -> bool:
        return bool(self.spec.get("expose", False))

    ## Implementation Details ##################################################

    def _copy_field(self, key: str) -> Any:
        """Get a plain deep copy of a top-level spec field"""
        val = self.spec.get(key)
        if val is None:
            return None
        return copy.deepcopy(sanitize_for_serialization(val))

    @staticmethod
    def _validate_cr(cr_manifest: aconfig.Config):
        """Make sure the fields every customizer relies on are present"""
        name = nested_get(cr_manifest, "metadata.name")
        assert_config(
            isinstance(name, str) and bool(name), "CR is missing metadata.name"
        )
        port = nested_get(cr_manifest, "spec.service.port")
        assert_config(
            isinstance(port, int) and not isinstance(port, bool),
            f"CR [{name}] is missing an integer spec.service.port",
        )
        if nested_get(cr_manifest, "spec.autoscaling") is not None:
            max_replicas = nested_get(cr_manifest, "spec.autoscaling.maxReplicas")
            assert_config(
                isinstance(max_replicas, int) and not isinstance(max_replicas, bool),
                f"CR [{name}] sets autoscaling without an integer maxReplicas",
            )
        log.debug3("Validated CR [%s]", name)

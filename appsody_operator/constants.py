"""
Shared module to hold constant values for the library
"""

# The AppsodyApplication custom resource
CR_GROUP = "appsody.example.com"
CR_VERSION = "v1alpha1"
CR_API_VERSION = f"{CR_GROUP}/{CR_VERSION}"
CR_KIND = "AppsodyApplication"

# Identity labels applied to every owned object
NAME_LABEL = "app.kubernetes.io/name"
MANAGED_BY_LABEL = "app.kubernetes.io/managed-by"

# Value used for the managed-by label unless overridden in the library config
DEFAULT_OPERATOR_ID = "appsody-operator"

# Default namespace if none given
DEFAULT_NAMESPACE = "default"

# Delimiter used for nested dict keys
NESTED_DICT_DELIM = "."

## Pod template ################################################################

CONTAINER_NAME = "app"
RESTART_POLICY = "Always"
DNS_POLICY = "ClusterFirst"
DEFAULT_SERVICE_TYPE = "ClusterIP"

# Node label holding the CPU architecture
ARCHITECTURE_LABEL = "beta.kubernetes.io/arch"
NODE_SELECTOR_OP_IN = "In"

## Persistence #################################################################

CLAIM_NAME = "pvc"
CLAIM_ACCESS_MODE = "ReadWriteOnce"
STORAGE_RESOURCE = "storage"

## Object kinds ################################################################

APPS_API_VERSION = "apps/v1"
CORE_API_VERSION = "v1"
HPA_API_VERSION = "autoscaling/v1"
ROUTE_API_VERSION = "route.openshift.io/v1"

DEPLOYMENT_KIND = "Deployment"
STATEFULSET_KIND = "StatefulSet"
SERVICE_KIND = "Service"
SERVICE_ACCOUNT_KIND = "ServiceAccount"
HPA_KIND = "HorizontalPodAutoscaler"
ROUTE_KIND = "Route"

## Route #######################################################################

ROUTE_TARGET_WEIGHT = 100

"""
Customizers map an AppsodyApplication onto the manifest of one owned object.
Each takes the current manifest (or None) and the application and returns a
new manifest. Running a customizer on its own output changes nothing.
"""

# Local
from .base import customizer
from .hpa import customize_hpa, get_workload_kind
from .persistence import build_volume_claim, customize_persistence
from .pod import customize_pod_template, get_service_account_name
from .route import customize_route
from .service import customize_service
from .service_account import customize_service_account
from .workload import customize_deployment, customize_statefulset

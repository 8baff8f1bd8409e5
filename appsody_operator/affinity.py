"""
Compile an ordered list of preferred CPU architectures into node affinity
"""

# Standard
from typing import List

# First Party
import alog

# Local
from . import constants

log = alog.use_channel("AFFIN")


def _arch_requirement(values: List[str]) -> dict:
    return {
        "key": constants.ARCHITECTURE_LABEL,
        "operator": constants.NODE_SELECTOR_OP_IN,
        "values": list(values),
    }


def compile_node_affinity(architectures: List[str]) -> dict:
    """Build a nodeAffinity that requires one of the given architectures and
    prefers them in list order.

    The preferred term for the architecture at position i out of n has weight
    n - i, so the first entry gets the highest weight and the last gets 1.

    Args:
        architectures:  List[str]
            The architectures to allow, most preferred first

    Returns:
        node_affinity:  dict
            The nodeAffinity manifest section
    """
    num_archs = len(architectures)
    preferred = [
        {
            "weight": num_archs - i,
            "preference": {"matchExpressions": [_arch_requirement([arch])]},
        }
        for i, arch in enumerate(architectures)
    ]
    log.debug2("Architecture preference weights: %s", preferred)
    return {
        "requiredDuringSchedulingIgnoredDuringExecution": {
            "nodeSelectorTerms": [
                {"matchExpressions": [_arch_requirement(architectures)]}
            ],
        },
        "preferredDuringSchedulingIgnoredDuringExecution": preferred,
    }

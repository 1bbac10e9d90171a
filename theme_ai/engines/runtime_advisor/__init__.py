"""Runtime advisor engine — Node recommendation and updated manifest."""

from theme_ai.engines.runtime_advisor.manifest_writer import (
    UPDATED_MANIFEST_FILENAME,
    build_updated_manifest,
    write_updated_manifest,
)
from theme_ai.engines.runtime_advisor.recommender import (
    Recommendation,
    constraint_weight,
    pick_highest_constraint,
    recommend_node_version,
)
from theme_ai.engines.runtime_advisor.registry_client import RegistryClient

__all__ = [
    "Recommendation",
    "RegistryClient",
    "UPDATED_MANIFEST_FILENAME",
    "build_updated_manifest",
    "constraint_weight",
    "pick_highest_constraint",
    "recommend_node_version",
    "write_updated_manifest",
]

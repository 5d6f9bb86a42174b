"""Updater registry: maps analysis type tags to ready-to-use updaters.

A host builds the map once at start-up with ``build_updaters`` and then
dispatches finished analyses to ``get_updater(updaters, analysis_type)``.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from staramr_updater.services.base import MetadataResolver, SampleStore, WorkflowResolver
from staramr_updater.updater import ANALYSIS_TYPE, StarAMRUpdater

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PluginInfo:
    analysis_type: str
    default_workflow_uuid: str
    background_color: Optional[str] = None  # hex colour used when listing results


STARAMR_PLUGIN = PluginInfo(
    analysis_type=ANALYSIS_TYPE,
    default_workflow_uuid="4ef5a1ad-435f-4835-b289-deddf0c3f98e",
    background_color="#66c2a4",
)

# Add new updater classes here
UPDATER_CLASSES = [
    StarAMRUpdater,
]

PLUGINS: List[PluginInfo] = [
    STARAMR_PLUGIN,
]


def build_updaters(
    metadata_resolver: MetadataResolver,
    sample_store: SampleStore,
    workflow_resolver: WorkflowResolver,
) -> Dict[str, StarAMRUpdater]:
    """Instantiate every registered updater keyed by its analysis type."""
    updaters: Dict[str, StarAMRUpdater] = {}
    for cls in UPDATER_CLASSES:
        updater = cls(metadata_resolver, sample_store, workflow_resolver)
        key = cls.analysis_type.upper()
        if key in updaters:
            raise ValueError(f"Duplicate updater for analysis type {key}")
        updaters[key] = updater
        logger.debug("Registered %s for analysis type %s", cls.__name__, key)
    return updaters


def get_updater(updaters: Dict[str, StarAMRUpdater], analysis_type: str) -> Optional[StarAMRUpdater]:
    return updaters.get(analysis_type.strip().upper())


def get_plugin_info(analysis_type: str) -> Optional[PluginInfo]:
    wanted = analysis_type.strip().upper()
    for info in PLUGINS:
        if info.analysis_type == wanted:
            return info
    return None

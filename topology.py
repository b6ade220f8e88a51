import logging
from enum import Enum

logger = logging.getLogger(__name__)


class DisplayMode(Enum):
    EXTEND = "extend"
    INTERNAL = "internal"


def is_only_primary_enabled(records) -> bool:
    """True when exactly one device is attached to the desktop and it is the primary one.

    An empty enumeration counts as "not only primary", so a run that finds no
    devices takes the multiple-monitor branch.
    """
    active_count = 0
    primary_count = 0
    for record in records:
        if record.attached_to_desktop:
            active_count += 1
            if record.primary:
                primary_count += 1

    logger.info(f"Active monitors: {active_count}, primary: {primary_count}")
    return active_count == 1 and primary_count == 1

def choose_mode(records) -> DisplayMode:
    if is_only_primary_enabled(records):
        return DisplayMode.EXTEND
    return DisplayMode.INTERNAL

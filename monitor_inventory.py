import logging
import sys
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

VIDEO_CONTROLLER_QUERY = "SELECT * FROM Win32_VideoController"


@dataclass(frozen=True)
class MonitorDetail:
    display_name: Optional[str] = None
    current_horizontal_resolution: Optional[str] = None
    current_vertical_resolution: Optional[str] = None
    current_refresh_rate: Optional[str] = None


def _property(record, name):
    """WMI property as a string, or None when the record doesn't carry it."""
    value = getattr(record, name, None)
    return None if value is None else str(value)

def get_monitor_details(connection=None):
    """Query WMI for every Win32_VideoController, in the order WMI returns them."""
    if connection is None:
        # wmi pulls in pywin32, so only import it when a real query is needed
        import wmi
        connection = wmi.WMI()

    details = []
    for controller in connection.query(VIDEO_CONTROLLER_QUERY):
        details.append(MonitorDetail(
            display_name=_property(controller, "Name"),
            current_horizontal_resolution=_property(controller, "CurrentHorizontalResolution"),
            current_vertical_resolution=_property(controller, "CurrentVerticalResolution"),
            current_refresh_rate=_property(controller, "CurrentRefreshRate"),
        ))

    logger.info(f"WMI returned {len(details)} video controller(s)")
    return details

def print_monitor_details(details, out=None):
    out = out or sys.stdout
    for detail in details:
        print(f"Display Name: {detail.display_name or ''}", file=out)
        print(f"Current Horizontal Resolution: {detail.current_horizontal_resolution or ''}", file=out)
        print(f"Current Vertical Resolution: {detail.current_vertical_resolution or ''}", file=out)
        print(f"Current Refresh Rate: {detail.current_refresh_rate or ''}", file=out)
        print(file=out)

import ctypes
import logging
from ctypes import wintypes
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DISPLAY_DEVICE_ATTACHED_TO_DESKTOP = 0x1
DISPLAY_DEVICE_PRIMARY_DEVICE = 0x4
ENUM_CURRENT_SETTINGS = -1

# --- USER32 STRUCTURES ---
class DISPLAY_DEVICE(ctypes.Structure):
    _fields_ = [
        ("cb", wintypes.DWORD),
        ("DeviceName", wintypes.WCHAR * 32),
        ("DeviceString", wintypes.WCHAR * 128),
        ("StateFlags", wintypes.DWORD),
        ("DeviceID", wintypes.WCHAR * 128),
        ("DeviceKey", wintypes.WCHAR * 128),
    ]

class DEVMODE(ctypes.Structure):
    _fields_ = [
        ("dmDeviceName", wintypes.WCHAR * 32),
        ("dmSpecVersion", wintypes.WORD), ("dmDriverVersion", wintypes.WORD),
        ("dmSize", wintypes.WORD), ("dmDriverExtra", wintypes.WORD),
        ("dmFields", wintypes.DWORD),
        ("dmPositionX", wintypes.LONG), ("dmPositionY", wintypes.LONG),
        ("dmDisplayOrientation", wintypes.DWORD), ("dmDisplayFixedOutput", wintypes.DWORD),
        ("dmColor", ctypes.c_short), ("dmDuplex", ctypes.c_short),
        ("dmYResolution", ctypes.c_short), ("dmTTOption", ctypes.c_short),
        ("dmCollate", ctypes.c_short),
        ("dmFormName", wintypes.WCHAR * 32),
        ("dmLogPixels", wintypes.WORD),
        ("dmBitsPerPel", wintypes.DWORD),
        ("dmPelsWidth", wintypes.DWORD), ("dmPelsHeight", wintypes.DWORD),
        ("dmDisplayFlags", wintypes.DWORD),
        ("dmDisplayFrequency", wintypes.DWORD),
        ("dmICMMethod", wintypes.DWORD), ("dmICMIntent", wintypes.DWORD),
        ("dmMediaType", wintypes.DWORD), ("dmDitherType", wintypes.DWORD),
        ("dmReserved1", wintypes.DWORD), ("dmReserved2", wintypes.DWORD),
        ("dmPanningWidth", wintypes.DWORD), ("dmPanningHeight", wintypes.DWORD),
    ]


@dataclass(frozen=True)
class DisplayDeviceRecord:
    index: int
    device_name: str
    device_string: str
    state_flags: int
    device_id: str
    device_key: str

    @property
    def attached_to_desktop(self) -> bool:
        return bool(self.state_flags & DISPLAY_DEVICE_ATTACHED_TO_DESKTOP)

    @property
    def primary(self) -> bool:
        return bool(self.state_flags & DISPLAY_DEVICE_PRIMARY_DEVICE)


@dataclass(frozen=True)
class DisplaySettings:
    width: int
    height: int
    refresh_rate: int
    bits_per_pixel: int
    position_x: int
    position_y: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}@{self.refresh_rate}Hz"


def _user32():
    # windll only exists on Windows
    return ctypes.windll.user32

def enumerate_display_devices(enum_devices=None):
    """Walk EnumDisplayDevicesW from index 0 until it reports no more devices."""
    if enum_devices is None:
        enum_devices = _user32().EnumDisplayDevicesW

    records = []
    device = DISPLAY_DEVICE()
    index = 0
    while True:
        # cb must be reset before every call
        device.cb = ctypes.sizeof(DISPLAY_DEVICE)
        if not enum_devices(None, index, ctypes.byref(device), 0):
            break
        records.append(DisplayDeviceRecord(
            index=index,
            device_name=device.DeviceName,
            device_string=device.DeviceString,
            state_flags=device.StateFlags,
            device_id=device.DeviceID,
            device_key=device.DeviceKey,
        ))
        index += 1

    logger.info(f"Enumerated {len(records)} display device(s)")
    return records

def get_current_settings(device_name: str, enum_settings=None) -> Optional[DisplaySettings]:
    """Current mode of one device, or None when the driver reports nothing (detached adapters)."""
    if enum_settings is None:
        enum_settings = _user32().EnumDisplaySettingsW

    mode = DEVMODE()
    mode.dmSize = ctypes.sizeof(DEVMODE)
    if not enum_settings(device_name, ENUM_CURRENT_SETTINGS, ctypes.byref(mode)):
        logger.debug(f"No current settings for {device_name}")
        return None

    return DisplaySettings(
        width=mode.dmPelsWidth,
        height=mode.dmPelsHeight,
        refresh_rate=mode.dmDisplayFrequency,
        bits_per_pixel=mode.dmBitsPerPel,
        position_x=mode.dmPositionX,
        position_y=mode.dmPositionY,
    )

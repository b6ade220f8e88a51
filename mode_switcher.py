import logging
import subprocess

from topology import DisplayMode

logger = logging.getLogger(__name__)

DISPLAYSWITCH_EXE = "displayswitch.exe"

SWITCH_ARGS = {
    DisplayMode.EXTEND: "/extend",
    DisplayMode.INTERNAL: "/internal",
}

def switch_argument(mode) -> str:
    try:
        return SWITCH_ARGS[mode]
    except (KeyError, TypeError):
        raise ValueError(f"Unsupported display mode: {mode!r}") from None

def set_display_mode(mode, launcher=None, executable=DISPLAYSWITCH_EXE) -> None:
    """Launch displayswitch with the argument for `mode` and return without waiting for it."""
    argument = switch_argument(mode)
    launcher = launcher or subprocess.Popen
    logger.info(f"Launching {executable} {argument}")
    # Popen raises OSError if the utility is missing or not executable
    launcher([executable, argument], creationflags=getattr(subprocess, "CREATE_NO_WINDOW", 0))

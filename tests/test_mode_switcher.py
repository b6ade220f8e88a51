import pytest

from fakes import FakeLauncher
from mode_switcher import DISPLAYSWITCH_EXE, set_display_mode, switch_argument
from topology import DisplayMode


def test_extend():
    launcher = FakeLauncher()
    set_display_mode(DisplayMode.EXTEND, launcher=launcher)
    assert launcher.calls == [[DISPLAYSWITCH_EXE, "/extend"]]


def test_internal():
    launcher = FakeLauncher()
    set_display_mode(DisplayMode.INTERNAL, launcher=launcher)
    assert launcher.calls == [[DISPLAYSWITCH_EXE, "/internal"]]


def test_custom_executable():
    launcher = FakeLauncher()
    set_display_mode(DisplayMode.EXTEND, launcher=launcher, executable="C:\\Tools\\DisplaySwitch.exe")
    assert launcher.calls == [["C:\\Tools\\DisplaySwitch.exe", "/extend"]]


@pytest.mark.parametrize("mode", ["extend", None, 1, "/extend"])
def test_unknown_mode_raises_without_launching(mode):
    launcher = FakeLauncher()
    with pytest.raises(ValueError):
        set_display_mode(mode, launcher=launcher)
    assert launcher.calls == []


def test_switch_argument():
    assert switch_argument(DisplayMode.EXTEND) == "/extend"
    assert switch_argument(DisplayMode.INTERNAL) == "/internal"


def test_launch_failure_propagates():
    launcher = FakeLauncher(error=FileNotFoundError("displayswitch.exe"))
    with pytest.raises(FileNotFoundError):
        set_display_mode(DisplayMode.INTERNAL, launcher=launcher)

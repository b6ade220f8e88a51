import pytest

from display_devices import DISPLAY_DEVICE_ATTACHED_TO_DESKTOP as ATTACHED
from display_devices import DISPLAY_DEVICE_PRIMARY_DEVICE as PRIMARY
from display_devices import DisplayDeviceRecord
from topology import DisplayMode, choose_mode, is_only_primary_enabled


def make_records(*flags):
    return [DisplayDeviceRecord(i, f"\\\\.\\DISPLAY{i + 1}", "Adapter", f, "", "") for i, f in enumerate(flags)]


def test_single_primary_with_detached_outputs():
    records = make_records(ATTACHED | PRIMARY, 0, PRIMARY, 0)
    assert is_only_primary_enabled(records)
    assert choose_mode(records) is DisplayMode.EXTEND


def test_empty_enumeration_takes_multi_monitor_branch():
    assert not is_only_primary_enabled([])
    assert choose_mode([]) is DisplayMode.INTERNAL


@pytest.mark.parametrize("flags", [
    (ATTACHED | PRIMARY, ATTACHED),
    (ATTACHED, ATTACHED),
    (ATTACHED | PRIMARY, ATTACHED | PRIMARY),
    (ATTACHED | PRIMARY, ATTACHED, ATTACHED),
])
def test_two_or_more_attached(flags):
    records = make_records(*flags)
    assert not is_only_primary_enabled(records)
    assert choose_mode(records) is DisplayMode.INTERNAL


def test_single_attached_but_not_primary():
    assert not is_only_primary_enabled(make_records(ATTACHED, PRIMARY))

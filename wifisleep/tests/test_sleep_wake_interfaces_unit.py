from __future__ import annotations

from wifisleep.core.sleep_wake import interfaces
from wifisleep.core.state import BLUETOOTH_STATE, DISABLED_SERVICES, WIFI_STATE, StateStore


def test_unwritable_store_still_turns_wifi_off(tmp_path, fake_commands) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("")
    store = StateStore(blocker)

    interfaces.save_and_disable_wifi(fake_commands, store)

    assert fake_commands.wifi_on is False
    # Nothing was saved, so nothing is restored.
    assert interfaces.restore_wifi(fake_commands, store) is False
    assert fake_commands.wifi_on is False


def test_garbled_wifi_record_is_saved_again(tmp_path, fake_commands) -> None:
    store = StateStore(tmp_path)
    (tmp_path / WIFI_STATE).write_text("?")

    interfaces.save_and_disable_wifi(fake_commands, store)

    assert store.read_flag(WIFI_STATE) is True


def test_bluetooth_off_before_sleep_is_not_restored(tmp_path, fake_commands) -> None:
    store = StateStore(tmp_path)
    fake_commands.bluetooth_on = False

    interfaces.save_and_disable_bluetooth(fake_commands, store)
    assert store.read_flag(BLUETOOTH_STATE) is False

    assert interfaces.restore_bluetooth(fake_commands, store) is False
    assert ("set_bluetooth", True) not in fake_commands.calls


def test_restore_bluetooth_requires_tool(tmp_path, fake_commands) -> None:
    store = StateStore(tmp_path)
    store.write_flag(BLUETOOTH_STATE, True)
    fake_commands.blueutil_present = False

    assert interfaces.restore_bluetooth(fake_commands, store) is False
    assert fake_commands.calls_named("set_bluetooth") == []


def test_disable_other_services_returns_new_names_only(tmp_path, fake_commands) -> None:
    store = StateStore(tmp_path)

    assert interfaces.disable_other_services(fake_commands, store) == ["Ethernet", "Thunderbolt Bridge"]
    assert interfaces.disable_other_services(fake_commands, store) == []
    assert store.read_lines(DISABLED_SERVICES) == ["Ethernet", "Thunderbolt Bridge"]


def test_no_eligible_services_records_empty_list(tmp_path, fake_commands) -> None:
    store = StateStore(tmp_path)
    fake_commands.services = ["Wi-Fi"]

    interfaces.disable_other_services(fake_commands, store)

    assert store.read_lines(DISABLED_SERVICES) == []
    assert interfaces.restore_other_services(fake_commands, store) == []


def test_read_saved_state(tmp_path) -> None:
    store = StateStore(tmp_path)
    store.write_flag(WIFI_STATE, False)
    store.write_lines(DISABLED_SERVICES, ["Ethernet"])

    state = interfaces.read_saved_state(store)

    assert state == interfaces.SavedInterfaceState(wifi_on=False, bluetooth_on=None, disabled_services=("Ethernet",))

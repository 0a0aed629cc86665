import pytest

from slstatus.components import wifi
from slstatus.components.wifi import link_quality, wifi_essid, wifi_perc

HEADER = (
    "Inter-| sta-|   Quality        |   Discarded packets               | Missed | WE\n"
    " face | tus | link level noise |  nwid  crypt   frag  retry   misc | beacon | 22\n"
)


def _line(interface, quality):
    return (
        f"{interface}: 0000   {quality}.  -40.  -256        0      0      0"
        "      0      0        0\n"
    )


@pytest.fixture
def sysfs(tmp_path, monkeypatch):
    net = tmp_path / "net"
    (net / "wlan0").mkdir(parents=True)
    wireless = tmp_path / "wireless"
    monkeypatch.setattr(wifi, "NET_DIR", str(net))
    monkeypatch.setattr(wifi, "PROC_NET_WIRELESS", str(wireless))
    return net / "wlan0" / "operstate", wireless


def test_link_quality_full():
    assert link_quality(HEADER + _line("wlan0", 70), "wlan0") == 100


def test_link_quality_zero():
    assert link_quality(HEADER + _line("wlan0", 0), "wlan0") == 0


def test_link_quality_grows_with_signal():
    values = [link_quality(HEADER + _line("wlan0", q), "wlan0") for q in range(0, 71, 10)]
    assert values == sorted(values)


def test_link_quality_missing_interface():
    assert link_quality(HEADER + _line("wlan0", 50), "wlan1") is None


def test_link_quality_too_few_lines():
    assert link_quality(HEADER, "wlan0") is None


def test_link_quality_only_first_interface():
    text = HEADER + _line("wlan0", 50) + _line("wlan1", 50)
    assert link_quality(text, "wlan1") is None


def test_wifi_perc_up(sysfs):
    operstate, wireless = sysfs
    operstate.write_text("up\n")
    wireless.write_text(HEADER + _line("wlan0", 70))
    assert wifi_perc("wlan0") == "100"


def test_wifi_perc_down(sysfs):
    operstate, wireless = sysfs
    operstate.write_text("down\n")
    wireless.write_text(HEADER + _line("wlan0", 70))
    assert wifi_perc("wlan0") is None


def test_wifi_perc_up_without_newline(sysfs):
    operstate, wireless = sysfs
    operstate.write_text("up")
    wireless.write_text(HEADER + _line("wlan0", 70))
    assert wifi_perc("wlan0") is None


def test_wifi_perc_missing_interface(sysfs):
    assert wifi_perc("wlan9") is None


def test_wifi_perc_missing_wireless_file(sysfs):
    operstate, _ = sysfs
    operstate.write_text("up\n")
    assert wifi_perc("wlan0") is None


def test_wifi_essid_name_too_long():
    assert wifi_essid("x" * 20) is None


def test_wifi_essid_unknown_interface():
    assert wifi_essid("nosuchif0") is None
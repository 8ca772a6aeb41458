import pytest

from barstatus.ram import parse_meminfo, ram_free, ram_perc, ram_total, ram_used
from barstatus.util import ComponentError, fmt_human

MEMINFO = (
    "MemTotal:           1000 kB\n"
    "MemFree:             200 kB\n"
    "MemAvailable:        650 kB\n"
    "Buffers:             100 kB\n"
    "Cached:              100 kB\n"
    "SwapCached:            0 kB\n"
    "HugePages_Total:       0\n"
)


@pytest.fixture
def meminfo(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO)
    return path


def test_parse_meminfo_values():
    info = parse_meminfo(MEMINFO)
    assert info["MemTotal"] == 1000
    assert info["MemAvailable"] == 650
    assert info["Cached"] == 100
    assert info["HugePages_Total"] == 0


def test_parse_meminfo_skips_malformed_lines():
    info = parse_meminfo("garbage line\nMemTotal: abc kB\nMemFree: 5 kB\n")
    assert info == {"MemFree": 5}


def test_ram_total(meminfo):
    assert ram_total(None, meminfo) == fmt_human(1000 * 1024, 1024)


def test_ram_free_uses_available(meminfo):
    assert ram_free(None, meminfo) == fmt_human(650 * 1024, 1024)


def test_ram_used_excludes_buffers_and_cache(meminfo):
    assert ram_used(None, meminfo) == fmt_human(600 * 1024, 1024)


def test_ram_perc(meminfo):
    assert ram_perc(None, meminfo) == "60"


def test_ram_perc_zero_total(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO.replace("1000 kB", "0 kB"))
    with pytest.raises(ComponentError):
        ram_perc(None, path)


def test_missing_field(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal: 1000 kB\n")
    with pytest.raises(ComponentError):
        ram_used(None, path)


def test_missing_file(tmp_path):
    with pytest.raises(ComponentError):
        ram_total(None, tmp_path / "absent")
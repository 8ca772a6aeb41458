import os
from types import SimpleNamespace

import pytest

from barstatus import disk
from barstatus.util import ComponentError, fmt_human


def _fake_statvfs(frsize, blocks, bfree, bavail):
    def fake(path):
        return SimpleNamespace(
            f_frsize=frsize, f_blocks=blocks, f_bfree=bfree, f_bavail=bavail
        )

    return fake


@pytest.fixture
def fake_fs(monkeypatch):
    monkeypatch.setattr(os, "statvfs", _fake_statvfs(4096, 1000, 300, 250))


def test_disk_free_uses_available_blocks(fake_fs):
    assert disk.disk_free("/") == fmt_human(4096 * 250, 1024)


def test_disk_total_uses_all_blocks(fake_fs):
    assert disk.disk_total("/") == fmt_human(4096 * 1000, 1024)


def test_disk_used_excludes_free_blocks(fake_fs):
    assert disk.disk_used("/") == fmt_human(4096 * 700, 1024)


def test_disk_perc_from_available(fake_fs):
    assert disk.disk_perc("/") == "75"


def test_disk_perc_zero_blocks(monkeypatch):
    monkeypatch.setattr(os, "statvfs", _fake_statvfs(4096, 0, 0, 0))
    with pytest.raises(ComponentError):
        disk.disk_perc("/")


def test_disk_perc_real_range(tmp_path):
    value = int(disk.disk_perc(tmp_path))
    assert 0 <= value <= 100


def test_real_values_have_prefix_format(tmp_path):
    for func in (disk.disk_free, disk.disk_total, disk.disk_used):
        result = func(tmp_path)
        number = result.rstrip("KMGTPEZY")
        assert float(number) >= 0
        assert len(number.split(".")[1]) == 1


@pytest.mark.parametrize(
    "func", [disk.disk_free, disk.disk_perc, disk.disk_total, disk.disk_used]
)
def test_missing_path_fails(func, tmp_path):
    with pytest.raises(ComponentError):
        func(tmp_path / "missing")
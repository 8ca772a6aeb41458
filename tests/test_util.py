import pytest

from barstatus.util import ComponentError, fmt_human, read_int, read_text, warn


def test_warn_writes_line_to_stderr(capsys):
    warn("something failed")
    captured = capsys.readouterr()
    assert captured.err == "something failed\n"
    assert captured.out == ""


def test_fmt_human_binary_kilo():
    assert fmt_human(1024, 1024) == "1.0K"


def test_fmt_human_decimal_kilo_is_lowercase():
    assert fmt_human(1500, 1000) == "1.5k"


def test_fmt_human_small_number_has_no_prefix():
    assert fmt_human(0, 1024) == "0.0"


@pytest.mark.parametrize(
    "power,prefix", [(2, "M"), (3, "G"), (4, "T"), (5, "P"), (6, "E")]
)
def test_fmt_human_prefix_progression(power, prefix):
    result = fmt_human(1024**power, 1024)
    assert result.endswith(prefix)
    assert result[: -len(prefix)] == "1.0"


def test_fmt_human_caps_at_largest_prefix():
    result = fmt_human(1000**12, 1000)
    assert result.endswith("Y")
    assert float(result[:-1]) >= 1000


@pytest.mark.parametrize("base", [0, 10, 1023, 2048])
def test_fmt_human_invalid_base(base):
    with pytest.raises(ValueError):
        fmt_human(1, base)


def test_read_text_returns_content(tmp_path):
    target = tmp_path / "file"
    target.write_text("alpha\nbeta\n")
    assert read_text(target) == "alpha\nbeta\n"


def test_read_text_missing_file(tmp_path):
    with pytest.raises(ComponentError):
        read_text(tmp_path / "missing")


def test_read_int_parses_leading_number(tmp_path):
    target = tmp_path / "value"
    target.write_text("  42 kB\n")
    assert read_int(target) == 42


def test_read_int_rejects_non_numeric(tmp_path):
    target = tmp_path / "value"
    target.write_text("abc\n")
    with pytest.raises(ComponentError):
        read_int(target)


def test_read_int_rejects_empty(tmp_path):
    target = tmp_path / "value"
    target.write_text("")
    with pytest.raises(ComponentError):
        read_int(target)


def test_read_int_missing_file(tmp_path):
    with pytest.raises(ComponentError):
        read_int(tmp_path / "nothing")
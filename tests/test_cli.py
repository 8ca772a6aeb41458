import io
import os
import signal

import pytest

from barstatus.cli import UsageError, build_status, main, parse_args, run
from barstatus.config import Arg
from barstatus.util import ComponentError


@pytest.mark.parametrize(
    "argv, expected",
    [
        ([], (False, False)),
        (["-s"], (True, False)),
        (["-1"], (True, True)),
        (["-s1"], (True, True)),
        (["-s", "-1"], (True, True)),
        (["--"], (False, False)),
        (["-s", "--"], (True, False)),
    ],
)
def test_parse_args(argv, expected):
    assert parse_args(argv) == expected


@pytest.mark.parametrize(
    "argv", [["-v"], ["extra"], ["-s", "extra"], ["-s", "--", "x"], ["-"], ["-sx"]]
)
def test_parse_args_usage_error(argv):
    with pytest.raises(UsageError):
        parse_args(argv)


def _const(value):
    return lambda _: value


def test_build_status_joins_components():
    args = [Arg(_const("a"), "[%s]"), Arg(_const("b"), " %s%%")]
    assert build_status(args) == "[a] b%"


def test_build_status_unknown_value():
    def fail(_):
        raise ComponentError("none")

    assert build_status([Arg(fail, "<%s>")], unknown="?") == "<?>"


def test_build_status_fits_exactly_below_limit():
    assert build_status([Arg(_const("abc"), "%s")], maxlen=4) == "abc"


def test_build_status_truncates(capsys):
    args = [Arg(_const("abc"), "%s"), Arg(_const("abc"), "%s")]
    status = build_status(args, maxlen=5)
    assert len(status) == 5 - 1
    assert status.startswith("abc")
    assert "Output truncated" in capsys.readouterr().err


def test_build_status_stops_after_truncation():
    calls = []

    def record(_):
        calls.append(1)
        return "abc"

    args = [Arg(record, "%s") for _ in range(3)]
    status = build_status(args, maxlen=3)
    assert status == "ab"
    assert len(calls) == 1


def test_run_once_prints_single_line():
    buffer = io.StringIO()
    run([Arg(_const("x"), "<%s>")], single=True, once=True, output=buffer)
    assert buffer.getvalue() == "<x>\n"


def test_run_stops_on_sigterm_and_restores_handler():
    before = signal.getsignal(signal.SIGTERM)
    calls = []

    def counting(_):
        calls.append(1)
        if len(calls) == 3:
            os.kill(os.getpid(), signal.SIGTERM)
        return str(len(calls))

    buffer = io.StringIO()
    run([Arg(counting, "%s")], single=True, interval=0, output=buffer)
    assert buffer.getvalue().splitlines() == ["1", "2", "3"]
    assert signal.getsignal(signal.SIGTERM) == before


def test_run_without_display_fails(monkeypatch):
    monkeypatch.delenv("DISPLAY", raising=False)
    with pytest.raises(ComponentError):
        run([Arg(_const("x"), "%s")], single=False, once=True)


def test_run_with_unreachable_display_fails(monkeypatch):
    monkeypatch.setenv("DISPLAY", ":987")
    with pytest.raises(ComponentError):
        run([Arg(_const("x"), "%s")], single=False, once=True)


def test_main_usage(capsys):
    assert main(["-v"]) == 1
    assert "usage:" in capsys.readouterr().err


def test_main_rejects_operands():
    assert main(["operand"]) == 1


def test_main_once_prints_status(capsys):
    assert main(["-1"]) == 0
    out = capsys.readouterr().out
    assert out.count("\n") == 1
    assert " Mem: " in out
    assert out.startswith(" Cpu: ")
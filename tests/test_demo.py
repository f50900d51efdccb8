"""Smoke test for the demo script."""

from primefield.demo import run_demo


def test_demo_passes(capsys):
    assert run_demo.main() == 0
    out = capsys.readouterr().out
    assert "DEMO COMPLETE" in out
    assert "✗" not in out
    assert "DivisionByZero" in out


def test_check_returns_result(capsys):
    assert run_demo.check("same", 1, 1) is True
    assert run_demo.check("different", 1, 2) is False
    assert "✗" in capsys.readouterr().out


def test_expect_error_returns_result():
    assert run_demo.expect_error("raises", ZeroDivisionError, lambda: 1 / 0) is True
    assert run_demo.expect_error("quiet", ZeroDivisionError, lambda: None) is False

import main


def test_scenarios_all_hold(capsys):
    assert main.main() == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == len(list(main.scenarios()))
    assert all(line.endswith(": True") for line in out)
    assert "1/2 in 1/3..2/3: True" in out


def test_failing_scenario_logged(monkeypatch, capsys, caplog):
    from rational import Rational

    def scenarios():
        yield "1/2 == 1/2", lambda: Rational(1, 2) == Rational(2, 4)
        yield "1/0", lambda: Rational(1, 0)
        yield "1/2 == 1/3", lambda: Rational(1, 2) == Rational(1, 3)

    monkeypatch.setattr(main, "scenarios", scenarios)
    assert main.main() == 1
    out = capsys.readouterr().out.splitlines()
    assert out == ["1/2 == 1/2: True", "1/2 == 1/3: False"]
    assert "1/0: zero denominator in 1/0" in caplog.text

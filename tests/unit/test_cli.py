import pytest

from witness.cli import main


def run(argv) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


def test_selfcheck_passes(capsys):
    assert run(["selfcheck"]) == 0

    out, _ = capsys.readouterr()
    assert "Call sites resolve correctly" in out


def test_line_prints_source_line(tmp_path, capsys):
    source = tmp_path / "module.py"
    source.write_text("a = 1\nb = [2]\n", encoding="utf-8")

    assert run(["line", str(source), "2"]) == 0

    out, _ = capsys.readouterr()
    assert out == "b = [2]\n"


def test_line_reports_out_of_range(tmp_path, capsys):
    source = tmp_path / "module.py"
    source.write_text("a = 1\n", encoding="utf-8")

    assert run(["line", str(source), "3"]) == 1

    out, _ = capsys.readouterr()
    assert "invalid line number: 3" in out


def test_config_shows_resolved_values(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WITNESS_VERBOSE", raising=False)
    (tmp_path / "pyproject.toml").write_text("[tool.witness]\nverbose = true\n", encoding="utf-8")

    assert run(["config"]) == 0

    out, _ = capsys.readouterr()
    assert "verbose = True" in out


def test_no_command_prints_help(capsys):
    assert run([]) == 0

    out, _ = capsys.readouterr()
    assert "selfcheck" in out

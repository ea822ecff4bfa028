import logging

import pytest

from quickpass import cli


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("QUICKPASS_CONFIG", str(tmp_path / "config.json"))


def _password_lines(out):
    return [line.split(":", 1)[1].strip() for line in out.splitlines() if line.startswith("Password #")]


def test_generate_default(capsys):
    assert cli.main(["generate"]) == 0
    out = capsys.readouterr().out
    pws = _password_lines(out)
    assert len(pws) == 1
    assert len(pws[0]) == 12
    assert "Strong • 80%" in out


def test_generate_copies_and_flags(capsys):
    assert cli.main(["generate", "--length", "10", "--no-numbers", "--no-symbols", "--copies", "3"]) == 0
    out = capsys.readouterr().out
    pws = _password_lines(out)
    assert len(pws) == 3
    assert all(len(p) == 10 and p.isalpha() for p in pws)
    assert "Very Weak • 20%" in out


def test_generate_length_out_of_range():
    with pytest.raises(SystemExit) as exc:
        cli.main(["generate", "--length", "7"])
    assert exc.value.code == 2


def test_generate_copy_reports_result(capsys, monkeypatch):
    copied = []

    def fake_copy(text, strategies):
        copied.append(text)
        return True

    monkeypatch.setattr(cli, "copy_text", fake_copy)
    cli.main(["generate", "--copy"])
    out = capsys.readouterr().out
    assert copied == _password_lines(out)
    assert "Copied to clipboard" in out


def test_generate_copy_unavailable(capsys, monkeypatch):
    monkeypatch.setattr(cli, "copy_text", lambda text, strategies: False)
    cli.main(["generate", "--copy"])
    assert "Clipboard unavailable" in capsys.readouterr().out


def test_strength_command(capsys):
    assert cli.main(["strength", "--length", "16"]) == 0
    out = capsys.readouterr().out
    assert "Strong • 100%" in out
    assert "#" * 20 in out


def test_default_length_from_settings(tmp_path, monkeypatch, capsys):
    p = tmp_path / "settings.json"
    p.write_text('{"default_length": 30}', encoding="utf-8")
    monkeypatch.setenv("QUICKPASS_CONFIG", str(p))
    cli.main(["generate"])
    assert len(_password_lines(capsys.readouterr().out)[0]) == 30


@pytest.fixture
def bare_root_logger():
    # pytest's logging plugin leaves handlers on the root logger, which turns basicConfig into a no-op
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    root.handlers = saved_handlers
    root.setLevel(saved_level)


@pytest.mark.parametrize(
    "value, expected",
    [
        ('"loud"', logging.WARNING),
        ("[1]", logging.WARNING),
        ('"info"', logging.INFO),
        ("10", logging.DEBUG),
    ],
)
def test_log_level_from_settings(tmp_path, monkeypatch, capsys, bare_root_logger, value, expected):
    p = tmp_path / "settings.json"
    p.write_text('{"log_level": %s}' % value, encoding="utf-8")
    monkeypatch.setenv("QUICKPASS_CONFIG", str(p))
    assert cli.main(["strength"]) == 0
    assert bare_root_logger.level == expected
    assert "Strong • 80%" in capsys.readouterr().out


def test_verbose_overrides_settings(tmp_path, monkeypatch, bare_root_logger):
    p = tmp_path / "settings.json"
    p.write_text('{"log_level": "loud"}', encoding="utf-8")
    monkeypatch.setenv("QUICKPASS_CONFIG", str(p))
    assert cli.main(["-v", "strength"]) == 0
    assert bare_root_logger.level == logging.DEBUG


def test_render_bar():
    from quickpass.strength import StrengthResult

    assert cli.render_bar(StrengthResult(60, "Medium"), width=10) == "######----"
    assert cli.render_bar(StrengthResult(0, "Very Weak"), width=4) == "----"

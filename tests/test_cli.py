"""
Command line tests.
"""

import pytest

import anagram_solver
from anagram_solver import main, parse_args
from anagram_solver.solver import Mode


def test_parse_args_defaults(session_config):
    assert parse_args(["words.txt"]) == ("words.txt", Mode.FAST)
    assert parse_args(["words.txt", "slow"]) == ("words.txt", Mode.SLOW)


def test_parse_args_configured_default(session_config, monkeypatch):
    monkeypatch.setattr(session_config, "mode", "slow")
    assert parse_args(["words.txt"]) == ("words.txt", Mode.SLOW)


def test_parse_args_invalid_mode(session_config, capsys):
    assert parse_args(["words.txt", "medium"]) == ("words.txt", Mode.FAST)
    assert "Invalid mode was passed" in capsys.readouterr().out


def test_parse_args_extra_parameters(session_config, capsys):
    assert parse_args(["words.txt", "slow", "extra"]) == ("words.txt", Mode.SLOW)
    assert "Ignore additional parameters." in capsys.readouterr().out


def test_parse_args_requires_dictionary(session_config):
    with pytest.raises(SystemExit) as exc_info:
        parse_args([])
    assert exc_info.value.code == 2


def test_main_missing_dictionary(session_config, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / "missing.txt")])
    assert exc_info.value.code == 1
    assert "Dictionary file not found" in capsys.readouterr().err


def test_main_runs_session(session_config, tmp_path, monkeypatch, capsys):
    path = tmp_path / "words.txt"
    path.write_text("anagram one two ten\n", encoding="utf-8")
    sessions = []

    def fake_run(solver):
        sessions.append(solver.find_all_anagrams("otwen"))
        return 1

    monkeypatch.setattr(anagram_solver, "run", fake_run)

    main([str(path), "slow"])

    assert sessions == [{"one", "two", "ten"}]
    assert "Loaded 4 words" in capsys.readouterr().out

"""
Poly Secret — CLI tests.
"""

import json
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import cli


DOCUMENT = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


def _write(tmp_path, document, name='input.json'):
    path = tmp_path / name
    path.write_text(json.dumps(document))
    return str(path)


def test_cli_recover_report(tmp_path, capsys):
    path = _write(tmp_path, DOCUMENT)
    assert cli.main(['recover', path]) == 0

    out = capsys.readouterr().out
    assert "SECRET Constant term c: 3" in out
    assert "Polynomial degree (k-1):      2" in out
    assert "L0(0) contribution: 12" in out
    assert "Verification successful! Secret confirmed: 3" in out


def test_cli_recover_json(tmp_path, capsys):
    path = _write(tmp_path, DOCUMENT)
    assert cli.main(['recover', path, '--json']) == 0

    data = json.loads(capsys.readouterr().out)
    assert data['secret'] == '3'
    assert data['verification']['matched'] is True


def test_cli_recover_prompts_for_file(tmp_path, capsys, monkeypatch):
    path = _write(tmp_path, DOCUMENT)
    monkeypatch.setattr('builtins.input', lambda prompt='': path)
    assert cli.main(['recover']) == 0
    assert "SECRET Constant term c: 3" in capsys.readouterr().out


def test_cli_recover_default_filename(tmp_path, capsys, monkeypatch):
    _write(tmp_path, DOCUMENT)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr('builtins.input', lambda prompt='': '')
    assert cli.main(['recover']) == 0
    assert "Processing file: input.json" in capsys.readouterr().out


def test_cli_recover_missing_file(tmp_path, capsys):
    assert cli.main(['recover', str(tmp_path / 'nope.json')]) == 1
    assert "not found" in capsys.readouterr().err


def test_cli_recover_insufficient(tmp_path, capsys):
    document = dict(DOCUMENT, keys={"n": 4, "k": 5})
    path = _write(tmp_path, document)
    assert cli.main(['recover', path]) == 1
    assert "Recovery FAILED: Insufficient points" in capsys.readouterr().err


def test_cli_recover_invalid_json(tmp_path, capsys):
    path = tmp_path / 'broken.json'
    path.write_text('{"keys": ')
    assert cli.main(['recover', str(path)]) == 1
    assert "Recovery FAILED" in capsys.readouterr().err


def test_cli_decode(capsys):
    assert cli.main(['decode', 'ff', '16']) == 0
    assert capsys.readouterr().out.strip() == '255'

    assert cli.main(['decode', 'b', '10']) == 1
    assert "invalid for base 10" in capsys.readouterr().err


def test_cli_recover_directory(tmp_path, capsys):
    """An existing but unreadable path fails cleanly."""
    assert cli.main(['recover', str(tmp_path)]) == 1
    assert "Recovery FAILED" in capsys.readouterr().err


def test_cli_recover_threshold_override_report(tmp_path, capsys):
    path = _write(tmp_path, DOCUMENT)
    assert cli.main(['recover', path, '-k', '2']) == 0

    out = capsys.readouterr().out
    assert "Minimum roots required (k):   2" in out
    assert "Polynomial degree (k-1):      1" in out
    assert "Using 2 points" in out


def test_cli_inspect(tmp_path, capsys):
    document = dict(DOCUMENT)
    document["oops"] = {"base": "10", "value": "1"}
    path = _write(tmp_path, document)
    assert cli.main(['inspect', path]) == 0

    out = capsys.readouterr().out
    assert "(6, 39)" in out
    assert "invalid key 'oops'" in out


def test_cli_inspect_directory(tmp_path, capsys):
    assert cli.main(['inspect', str(tmp_path)]) == 1
    assert "Error" in capsys.readouterr().err


def test_cli_no_command(capsys):
    assert cli.main([]) == 1

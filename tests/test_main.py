from imgsizes.__main__ import main

import io
import sys

def test_select(capsys):
    assert main(['(min-width: 30em) 50vw, 100vw', '(min-width: 30em)']) == 0
    assert capsys.readouterr().out == '50vw\n'

def test_select_default(capsys):
    assert main(['(min-width: 30em) 50vw, 20em']) == 0
    assert capsys.readouterr().out == '20em\n'

def test_value_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr(sys, 'stdin', io.StringIO('calc(200px * 1.4)\n'))
    assert main([]) == 0
    assert capsys.readouterr().out == 'calc(200px * 1.4)\n'

def test_list(capsys):
    assert main(['--list', '(min-width: 30em) 50vw, (max-width:10em) 1px, 100vw']) == 0
    assert capsys.readouterr().out == '(min-width: 30em)\n(max-width:10em)\n'

def test_verbose_reports_parse_errors(capsys):
    assert main(['-v', 'auto, 1px']) == 0
    captured = capsys.readouterr()
    assert captured.out == '1px\n'
    assert captured.err.startswith('Parse error: ')

def test_quiet_by_default(capsys):
    assert main(['auto, 1px']) == 0
    assert capsys.readouterr().err == ''

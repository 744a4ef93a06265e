"""Tests for the cssbuilder command line."""

import logging
import sys

import pytest

from cssbuilder.__main__ import build, main


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["cssbuilder", *argv])
    main()


class TestBuild:
    def test_single_compound(self):
        sel = build([("element", "a"), ("attr", 'href$=".png"'), ("pseudo_class", "focus")])
        assert sel.stringify() == 'a[href$=".png"]:focus'

    def test_right_associative_combinators(self):
        steps = [
            ("element", "table"),
            ("combinator", "~"),
            ("element", "tr"),
            ("combinator", " "),
            ("element", "td"),
        ]
        assert build(steps).stringify() == "table ~ tr   td"


class TestMain:
    def test_prints_selector(self, monkeypatch, capsys):
        _run(monkeypatch, "-i", "main", "-c", "container", "--class", "editable")
        assert capsys.readouterr().out == "#main.container.editable\n"

    def test_combinator(self, monkeypatch, capsys):
        _run(monkeypatch, "-e", "div", "-i", "main", "-x", "+", "-e", "table", "-i", "data")
        assert capsys.readouterr().out == "div#main + table#data\n"

    def test_pseudo_element(self, monkeypatch, capsys):
        _run(monkeypatch, "-e", "p", "--pseudo-class", "first-child", "-P", "first-line")
        assert capsys.readouterr().out == "p:first-child::first-line\n"

    def test_builder_error_exits_2(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as excinfo:
            _run(monkeypatch, "-c", "late", "-e", "div")
        assert excinfo.value.code == 2
        assert "Selector parts should be arranged" in capsys.readouterr().err

    def test_duplicate_exits_2(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as excinfo:
            _run(monkeypatch, "-i", "a", "-i", "b")
        assert excinfo.value.code == 2
        assert "more then one time" in capsys.readouterr().err

    def test_no_fragments_prints_help(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as excinfo:
            _run(monkeypatch)
        assert excinfo.value.code == 1
        assert "usage: cssbuilder" in capsys.readouterr().err

    def test_verbose_logs_combine(self, monkeypatch, capsys, caplog):
        with caplog.at_level(logging.DEBUG, logger="cssbuilder.builder"):
            _run(monkeypatch, "-v", "-e", "ul", "-x", ">", "-e", "li")
        assert capsys.readouterr().out == "ul > li\n"
        assert any("Combined selector" in r.getMessage() for r in caplog.records)

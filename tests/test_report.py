import runpy
import sys
from pathlib import Path

import pandas as pd
import pytest

from cyrillic_comment_words.report.tree import build_report, write_report
from cyrillic_comment_words.utils.io import collect_source_files, parse_ext_list

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "report_tree.py"


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "a.c").write_text("// привет мир\n", encoding="utf-8")
    (tmp_path / "sub" / "b.h").write_text("/* привет */ // кот", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("// привет", encoding="utf-8")
    (tmp_path / "z.cpp").write_text("int main() { return 0; }\n", encoding="utf-8")
    return tmp_path


def test_parse_ext_list():
    assert parse_ext_list(None) is None
    assert parse_ext_list("c, .H,") == {".c", ".h"}
    with pytest.raises(ValueError):
        parse_ext_list(" , ")


def test_collect_source_files(tree):
    names = [p.relative_to(tree).as_posix() for p in collect_source_files(tree)]
    assert names == ["a.c", "sub/b.h", "z.cpp"]
    assert collect_source_files(tree / "a.c") == [tree / "a.c"]
    with pytest.raises(FileNotFoundError):
        collect_source_files(tree / "missing")


def test_build_report_sorted_by_count(tree):
    df = build_report(tree)
    assert list(df.columns) == ["path", "cyrillic_words"]
    assert df.to_dict("records") == [
        {"path": "a.c", "cyrillic_words": 2},
        {"path": "sub/b.h", "cyrillic_words": 1},
        {"path": "z.cpp", "cyrillic_words": 0},
    ]


def test_build_report_filters(tree):
    assert build_report(tree, min_count=2)["path"].tolist() == ["a.c"]
    assert build_report(tree, extensions={".txt"})["cyrillic_words"].tolist() == [1]


def test_empty_tree(tmp_path):
    df = build_report(tmp_path)
    assert df.empty
    assert list(df.columns) == ["path", "cyrillic_words"]


def test_write_report_round_trips_through_csv(tree, tmp_path):
    out = write_report(build_report(tree), tmp_path / "out" / "report.csv")
    back = pd.read_csv(out)
    assert back["path"].tolist() == ["a.c", "sub/b.h", "z.cpp"]
    assert back["cyrillic_words"].tolist() == [2, 1, 0]


def test_script_end_to_end(tree, tmp_path, monkeypatch, capsys):
    out = tmp_path / "report.csv"
    monkeypatch.setattr(sys, "argv", ["report_tree.py", "--root", str(tree), "--out", str(out), "--ext", "c,h"])
    runpy.run_path(str(SCRIPT), run_name="__main__")

    stdout, stderr = capsys.readouterr()
    assert "TOTAL: 3" in stdout
    assert "✅ wrote 2 files" in stderr
    assert pd.read_csv(out)["path"].tolist() == ["a.c", "sub/b.h"]

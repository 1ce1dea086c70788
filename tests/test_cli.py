# tests/test_cli.py

import json

import pytest

from palette_engine import cli


@pytest.fixture
def theme_file(theme, tmp_path):
    path = tmp_path / "paper.json"
    path.write_text(json.dumps(theme))
    return path


def test_ramp_command_prints_and_writes(tmp_path, capsys):
    out = tmp_path / "ramp.json"
    cli.main(["ramp", "#3b82f6", "--stops", "11", "--mode", "dark", "-o", str(out)])
    printed = capsys.readouterr().out
    assert "#3b82f6" in printed
    assert "Neutral tones (dark)" in printed
    data = json.loads(out.read_text())
    assert len(data) == 11
    assert data[5]["hex"] == "#3b82f6"
    assert data[0]["accessibility"]["level"] in ("AAA", "AA", "A", "Fail")


def test_bad_seed_exits_with_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["ramp", "not-a-color"])
    assert excinfo.value.code == 2
    assert "Invalid color" in capsys.readouterr().err


def test_bad_stop_count_exits(capsys):
    with pytest.raises(SystemExit):
        cli.main(["ramp", "#3b82f6", "--stops", "12"])


def test_export_writes_one_file_per_provider(theme_file, tmp_path):
    out_dir = tmp_path / "out"
    cli.main(["export", str(theme_file), "-o", str(out_dir), "-p", "kitty", "-p", "shadcn"])
    names = sorted(p.name for p in out_dir.iterdir())
    assert names == ["kitty-paper.conf", "shadcn-paper.css"]


def test_export_applies_stored_overrides(theme_file, tmp_path):
    record = tmp_path / "record.json"
    record.write_text(json.dumps({"zed_override": {"dark": {"text": "#abcdef"}}}))
    out_dir = tmp_path / "out"
    cli.main(["export", str(theme_file), "-o", str(out_dir), "-p", "zed", "--overrides", str(record)])
    data = json.loads((out_dir / "zed-paper.json").read_text())
    assert data["themes"][0]["style"]["text"] == "#abcdef"


def test_convert_to_stdout(theme_file, capsys):
    cli.main(["convert", str(theme_file), "--from", "canonical", "--to", "rayso"])
    data = json.loads(capsys.readouterr().out)
    assert data["dark"]["background"] == "#100f0f"


def test_unsupported_conversion_exits(theme_file):
    with pytest.raises(SystemExit):
        cli.main(["convert", str(theme_file), "--from", "shadcn", "--to", "tweakcn"])


def test_seeds_then_report(tmp_path, capsys):
    out = tmp_path / "seeded.json"
    cli.main(["seeds", "#64748b", "#3b82f6", "--accent", "#10b981", "-o", str(out)])
    loaded = json.loads(out.read_text())
    assert loaded["name"] == "Palette Engine"
    capsys.readouterr()

    try:
        cli.main(["report", str(out), "--mode", "light"])
    except SystemExit as exc:
        assert exc.code == 1
    assert "READABILITY REPORT" in capsys.readouterr().out

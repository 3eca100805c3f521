# -*- coding: utf-8 -*-
"""配置文件与命令行入口"""

from __future__ import annotations

import json
import logging

import pytest

import codec
import settings
import themer
from presets import dark_style, light_style


# ==================== settings ====================


def test_defaults():
    assert settings.get_rustfmt_path() == "rustfmt"
    assert settings.get_export_format() == "rust"
    assert settings.get_json_pretty() is True
    assert settings.get_eframe() is False


def test_save_and_load(tmp_path):
    path = str(tmp_path / "themer.json")
    settings.set_rustfmt_path("/usr/local/bin/rustfmt")
    settings.set_export_format("json")
    settings.set_export_flags(eframe=True, json_pretty=False)
    settings.save_to_file(path)

    settings.reset()
    settings.load_from_file(path)
    assert settings.get_rustfmt_path() == "/usr/local/bin/rustfmt"
    assert settings.get_export_format() == "json"
    assert settings.get_eframe() is True
    assert settings.get_json_pretty() is False


def test_missing_file_keeps_defaults(tmp_path):
    settings.load_from_file(str(tmp_path / "absent.json"))
    assert settings.get_export_format() == "rust"


def test_corrupt_file_keeps_defaults(tmp_path, caplog):
    path = tmp_path / "themer.json"
    path.write_text("{not json", encoding="utf-8")
    settings.load_from_file(str(path))
    assert settings.get_export_format() == "rust"
    assert "加载配置失败" in caplog.text


def test_unknown_format_in_file_is_ignored(tmp_path):
    path = tmp_path / "themer.json"
    path.write_text(json.dumps({"export_format": "toml"}), encoding="utf-8")
    settings.load_from_file(str(path))
    assert settings.get_export_format() == "rust"


def test_non_bool_flags_in_file_are_ignored(tmp_path, caplog):
    path = tmp_path / "themer.json"
    path.write_text(json.dumps({"eframe": "false", "json_pretty": 0}), encoding="utf-8")
    settings.load_from_file(str(path))
    assert settings.get_eframe() is False
    assert settings.get_json_pretty() is True
    assert "eframe" in caplog.text
    assert "json_pretty" in caplog.text


def test_set_export_format_validates():
    with pytest.raises(ValueError):
        settings.set_export_format("yaml")


# ==================== CLI ====================


def _run(tmp_path, *argv) -> int:
    return themer.main(["--config", str(tmp_path / "none.json"), *argv])


def test_cli_export_json(tmp_path):
    out = tmp_path / "style.json"
    assert _run(tmp_path, "export", "--preset", "light", "--format", "json", "--pretty", "-o", str(out)) == 0
    assert codec.decode(out.read_bytes()) == light_style()
    assert out.read_bytes().startswith(b"{\n")


def test_cli_convert_json(tmp_path):
    src = tmp_path / "in.json"
    src.write_bytes(codec.encode(dark_style()))
    out = tmp_path / "out.json"
    assert _run(tmp_path, "convert", str(src), "--format", "json", "-o", str(out)) == 0
    assert codec.decode(out.read_bytes()) == dark_style()


def test_cli_reports_import_errors(tmp_path, capsys):
    src = tmp_path / "in.json"
    src.write_bytes(b"[1, 2, 3]")
    assert _run(tmp_path, "convert", str(src), "--format", "json") == 1
    assert "导入错误" in capsys.readouterr().err


def test_cli_reports_missing_rustfmt(tmp_path, capsys):
    out = tmp_path / "style.rs"
    code = _run(
        tmp_path,
        "--rustfmt", str(tmp_path / "no-such-rustfmt"),
        "export", "--format", "rust", "-o", str(out),
    )
    assert code == 1
    assert not out.exists()
    assert "导出错误" in capsys.readouterr().err


def test_cli_missing_input_file(tmp_path, capsys):
    assert _run(tmp_path, "convert", str(tmp_path / "absent.json"), "--format", "json") == 1
    assert "文件读写失败" in capsys.readouterr().err


def test_cli_logs_resolved_options(tmp_path, caplog):
    caplog.set_level(logging.DEBUG, logger="themer")
    out = tmp_path / "style.json"
    assert _run(tmp_path, "-v", "export", "--format", "json", "--eframe", "-o", str(out)) == 0
    records = [r for r in caplog.records if r.name == "themer"]
    assert len(records) == 1
    assert "command=export format=json" in records[0].getMessage()
    assert "eframe=True" in records[0].getMessage()


def test_cli_uses_config_defaults(tmp_path):
    config = tmp_path / "themer.json"
    config.write_text(json.dumps({"export_format": "json", "json_pretty": False}), encoding="utf-8")
    out = tmp_path / "style.json"
    assert themer.main(["--config", str(config), "export", "--preset", "dark", "-o", str(out)]) == 0
    data = out.read_bytes()
    assert b"\n" not in data
    assert codec.decode(data) == dark_style()

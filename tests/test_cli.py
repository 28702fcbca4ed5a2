"""Tests for the detect CLI command."""

import json
from pathlib import Path

import pytest
import yaml

from clique_stream.cli.__main__ import main, run_detect
from clique_stream.config.settings import get_settings
from clique_stream.detection import DetectorConfig


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_run_detect_formats_clusters(sample_log_file: Path) -> None:
    lines = run_detect(sample_log_file, DetectorConfig())
    assert lines == [
        "a@example.com, b@example.com, c@example.com, d@example.com",
        "x@example.com, y@example.com, z@example.com",
    ]


def test_run_detect_min_size_four(sample_log_file: Path) -> None:
    lines = run_detect(sample_log_file, DetectorConfig(min_cluster_size=4))
    assert lines == ["a@example.com, b@example.com, c@example.com, d@example.com"]


def test_main_prints_clusters(sample_log_file: Path, tmp_path: Path, capsys) -> None:
    main(["detect", str(sample_log_file), "--config", str(tmp_path / "absent.yaml")])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "a@example.com, b@example.com, c@example.com, d@example.com",
        "x@example.com, y@example.com, z@example.com",
    ]


def test_main_min_cluster_size_flag(sample_log_file: Path, tmp_path: Path, capsys) -> None:
    main(
        [
            "detect",
            str(sample_log_file),
            "--config",
            str(tmp_path / "absent.yaml"),
            "--min-cluster-size",
            "4",
        ]
    )
    out = capsys.readouterr().out.splitlines()
    assert out == ["a@example.com, b@example.com, c@example.com, d@example.com"]


def test_main_reads_config_file(sample_log_file: Path, tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "detector.yaml"
    config_path.write_text(yaml.dump({"min_cluster_size": 4}))
    main(["detect", str(sample_log_file), "--config", str(config_path)])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 1


def test_logs_go_to_stderr_as_json(
    sample_log_file: Path, tmp_path: Path, capsys, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CLIQUE_STREAM_LOG_JSON", "true")
    main(["detect", str(sample_log_file), "--config", str(tmp_path / "absent.yaml")])
    captured = capsys.readouterr()
    events = [
        json.loads(line)["event"]
        for line in captured.err.splitlines()
        if line.startswith("{")
    ]
    assert "detect_complete" in events
    assert "detect_complete" not in captured.out


def test_missing_input_exits_nonzero(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["detect", str(tmp_path / "missing.tsv")])
    assert exc_info.value.code == 1


def test_malformed_input_exits_nonzero(tmp_path: Path) -> None:
    path = tmp_path / "bad.tsv"
    path.write_text("a\tb\nnot-an-interaction\n")
    with pytest.raises(SystemExit) as exc_info:
        main(["detect", str(path)])
    assert exc_info.value.code == 1


def test_no_command_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 1
    assert "detect" in capsys.readouterr().out

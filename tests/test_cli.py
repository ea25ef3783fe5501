import io
import json
from pathlib import Path

import pytest

from link_tree.__main__ import main


_GRAPH = {
    "sections": {"hero1": {"kind": "hero", "background_image": {"type": "assets", "id": "img1"}}},
    "composition": [{"section": {"type": "sections", "id": "hero1"}, "disabled": False}],
    "page": {"hero": {"type": "sections", "id": "hero1"}},
    "assets": {"img1": "hero.png"},
}


@pytest.fixture
def graph_file(tmp_path: Path) -> Path:
    path = tmp_path / "graph.json"
    _ = path.write_text(json.dumps(_GRAPH), encoding="utf-8")
    return path


def test_cli_prints_denormalized_tree(graph_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(graph_file), "--path-prefix", "assets=landing_page"])

    output = json.loads(capsys.readouterr().out)
    assert output == [{"section": {"kind": "hero", "background_image": "landing_page/hero.png"}, "disabled": False}]


def test_cli_custom_root_and_indent(graph_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(graph_file), "--root", "page", "--indent", "0"])

    output = capsys.readouterr().out
    assert json.loads(output) == {"hero": {"kind": "hero", "background_image": "hero.png"}}


def test_cli_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(_GRAPH)))

    main(["-r", "page"])

    assert json.loads(capsys.readouterr().out)["hero"]["kind"] == "hero"


def test_cli_reports_missing_root(graph_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(graph_file), "--root", "nothing"])

    assert excinfo.value.code == 1
    assert "root key not found in normalized data: 'nothing'" in capsys.readouterr().err


def test_cli_reports_invalid_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "broken.json"
    _ = path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])

    assert excinfo.value.code == 1
    assert "cannot read normalized data" in capsys.readouterr().err


def test_cli_rejects_non_object_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "list.json"
    _ = path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])

    assert excinfo.value.code == 1
    assert "must be a JSON object" in capsys.readouterr().err


def test_cli_rejects_malformed_path_prefix(graph_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(graph_file), "--path-prefix", "assets"])

    assert excinfo.value.code == 2
    assert "expected TYPE=DIR" in capsys.readouterr().err


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == "0.1.0"


def test_cli_reports_undecodable_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "latin1.json"
    _ = path.write_bytes(b'{"composition": "\xff"}')

    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])

    assert excinfo.value.code == 1
    assert "cannot read normalized data" in capsys.readouterr().err


def test_cli_reports_unhashable_link_type(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "graph.json"
    _ = path.write_text(json.dumps({"composition": {"a": {"type": {"k": 1}, "id": 1}}}), encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])

    assert excinfo.value.code == 1
    assert "type is not hashable" in capsys.readouterr().err


def test_cli_reports_non_string_asset_entity(graph_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(graph_file), "--path-prefix", "sections=dir"])

    assert excinfo.value.code == 1
    assert "must be a file name string, got dict" in capsys.readouterr().err

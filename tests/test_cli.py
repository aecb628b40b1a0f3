from pathlib import Path
import json

import pytest
import yaml
from typer.testing import CliRunner

from csv2openapi.cli import app


runner = CliRunner()


def _write_csv(tmp_path: Path, text: str, name: str = "items.csv") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


# ==========================================================
# HAPPY PATH
# ==========================================================


def test_generates_yaml_in_working_directory(tmp_path: Path, monkeypatch):
    rows = "".join(f"{i},active\n" for i in range(1, 9))
    _write_csv(tmp_path, "id,status\n" + rows)
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["items.csv"])

    assert result.exit_code == 0
    assert "OpenAPI specification generated and saved as items.yaml" in result.output

    doc = yaml.safe_load((tmp_path / "items.yaml").read_text(encoding="utf-8"))
    params = doc["paths"]["/items"]["get"]["parameters"]
    assert params[0] == {"name": "id", "in": "query", "schema": {"type": "integer"}}
    assert params[1]["schema"] == {"type": "string", "enum": ["active"]}


def test_input_in_other_directory_writes_to_cwd(tmp_path: Path, monkeypatch):
    src = tmp_path / "data"
    src.mkdir()
    csv_path = _write_csv(src, "a,b\n1,x\n")
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)

    result = runner.invoke(app, [str(csv_path)])

    assert result.exit_code == 0
    assert (work / "items.yaml").is_file()
    assert not (src / "items.yaml").exists()


def test_running_twice_is_byte_identical(tmp_path: Path, monkeypatch):
    _write_csv(tmp_path, 'id,note\n1,"a, b"\n2,c\n')
    monkeypatch.chdir(tmp_path)

    assert runner.invoke(app, ["items.csv"]).exit_code == 0
    first = (tmp_path / "items.yaml").read_bytes()
    assert runner.invoke(app, ["items.csv"]).exit_code == 0
    assert (tmp_path / "items.yaml").read_bytes() == first


def test_json_format_and_outdir(tmp_path: Path):
    csv_path = _write_csv(tmp_path, "id,price\n1,2.5\n")
    outdir = tmp_path / "out"
    outdir.mkdir()

    result = runner.invoke(app, [str(csv_path), "--format", "json", "--outdir", str(outdir)])

    assert result.exit_code == 0
    doc = json.loads((outdir / "items.json").read_text(encoding="utf-8"))
    assert doc["paths"]["/items"]["get"]["parameters"][1]["schema"] == {"type": "number"}


def test_format_from_environment(tmp_path: Path):
    csv_path = _write_csv(tmp_path, "id\n1\n")

    result = runner.invoke(
        app,
        [str(csv_path), "--outdir", str(tmp_path)],
        env={"CSV2OPENAPI_FORMAT": "json"},
    )

    assert result.exit_code == 0
    assert (tmp_path / "items.json").is_file()


def test_dry_run_prints_document(tmp_path: Path, monkeypatch):
    _write_csv(tmp_path, "id\n1\n")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["items.csv", "--dry-run"])

    assert result.exit_code == 0
    assert "title: Access items" in result.output
    assert not (tmp_path / "items.yaml").exists()


def test_tab_delimiter_alias(tmp_path: Path):
    csv_path = _write_csv(tmp_path, "id\tname\n1\tx\n", name="items.tsv")

    result = runner.invoke(app, [str(csv_path), "-d", "\\t", "-o", str(tmp_path)])

    assert result.exit_code == 0
    doc = yaml.safe_load((tmp_path / "items.yaml").read_text(encoding="utf-8"))
    assert [p["name"] for p in doc["paths"]["/items"]["get"]["parameters"]] == ["id", "name"]


def test_header_only_file(tmp_path: Path):
    csv_path = _write_csv(tmp_path, "id,status\n")

    result = runner.invoke(app, [str(csv_path), "-o", str(tmp_path)])

    assert result.exit_code == 0
    doc = yaml.safe_load((tmp_path / "items.yaml").read_text(encoding="utf-8"))
    op = doc["paths"]["/items"]["get"]
    assert op["responses"]["200"]["content"]["application/json"]["example"] == {}
    assert all(p["schema"] == {"type": "string"} for p in op["parameters"])


# ==========================================================
# USAGE AND FAILURES
# ==========================================================


def test_missing_argument_prints_usage_and_exits_zero():
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "Usage: csv2openapi {your}.csv" in result.output


@pytest.mark.parametrize(
    "setup, args, code, match",
    [
        ("none", ["missing.csv"], 3, "Input file not found"),
        ("dir", ["somedir"], 4, "not a regular file"),
        ("dup", ["items.csv"], 5, "duplicate column name"),
        ("ragged", ["items.csv", "--strict"], 5, "expected 2 fields, found 3"),
        ("ok", ["items.csv", "--outdir", "no/such/dir"], 6, "cannot write output"),
    ],
)
def test_failures_exit_with_distinct_codes(tmp_path: Path, monkeypatch, setup, args, code, match):
    if setup == "dir":
        (tmp_path / "somedir").mkdir()
    elif setup == "dup":
        _write_csv(tmp_path, "id,id\n1,2\n")
    elif setup == "ragged":
        _write_csv(tmp_path, "a,b\n1,2,3\n")
    elif setup == "ok":
        _write_csv(tmp_path, "a,b\n1,2\n")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, args)

    assert result.exit_code == code
    assert match in result.output


def test_malformed_rows_skipped_by_default(tmp_path: Path, monkeypatch):
    _write_csv(tmp_path, "a,b\n1,2,3\n4,5\n")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["items.csv"])

    assert result.exit_code == 0
    doc = yaml.safe_load((tmp_path / "items.yaml").read_text(encoding="utf-8"))
    example = doc["paths"]["/items"]["get"]["responses"]["200"]["content"]["application/json"]["example"]
    assert example == {"a": "4", "b": "5"}


def test_unknown_format_is_a_usage_error(tmp_path: Path):
    csv_path = _write_csv(tmp_path, "id\n1\n")

    result = runner.invoke(app, [str(csv_path), "--format", "xml"])

    assert result.exit_code == 2


@pytest.mark.parametrize("delimiter", ['"', "\n"])
def test_reserved_delimiter_is_a_usage_error(tmp_path: Path, delimiter):
    csv_path = _write_csv(tmp_path, "id\n1\n")

    result = runner.invoke(app, [str(csv_path), "-d", delimiter, "-o", str(tmp_path)])

    assert result.exit_code == 2
    assert not (tmp_path / "items.yaml").exists()


def test_unterminated_quote_exits_with_parse_error(tmp_path: Path, monkeypatch):
    _write_csv(tmp_path, 'a,b\n1,2\n3,"oops\n4,5\n')
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["items.csv"])

    assert result.exit_code == 5
    assert "unexpected end of data" in result.output
    assert not (tmp_path / "items.yaml").exists()

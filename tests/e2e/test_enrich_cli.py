"""
End-to-end tests for the enrichment command-line interface.

Tests the complete flow: CLI arguments → pipeline → output file + exit status
"""

import shutil

import pytest

from src.cli.enrich_cli import build_parser, run


@pytest.fixture
def cli_env(monkeypatch):
    """Let the CLI reconfigure logging without leaking settings into other tests"""
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("LOG_FORMAT", "json")


@pytest.mark.e2e
def test_cli_enriches_fixture_files(test_data_dir, tmp_path, capsys, cli_env):
    output_path = tmp_path / "output.csv"

    exit_code = run([
        "-i", str(test_data_dir / "input.csv"),
        "-o", str(output_path),
        "-r", str(test_data_dir / "room_names.csv"),
        "-H", str(test_data_dir / "hotels.json"),
    ])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == (
        f"The data was successfully parsed and saved at {output_path}"
    )
    assert output_path.read_text(encoding="utf-8") == (
        (test_data_dir / "expected.csv").read_text(encoding="utf-8")
    )


@pytest.mark.e2e
def test_cli_default_paths(test_data_dir, tmp_path, monkeypatch, capsys, cli_env):
    """Test the default file names are resolved in the working directory"""
    for name in ["input.csv", "room_names.csv", "hotels.json"]:
        shutil.copy(test_data_dir / name, tmp_path / name)
    monkeypatch.chdir(tmp_path)

    assert run([]) == 0
    assert (tmp_path / "output.csv").read_text(encoding="utf-8") == (
        (test_data_dir / "expected.csv").read_text(encoding="utf-8")
    )
    assert "output.csv" in capsys.readouterr().out


@pytest.mark.e2e
def test_cli_config_file(test_data_dir, tmp_path, capsys, cli_env):
    config_path = tmp_path / "pipeline.yaml"
    config_path.write_text(
        "pipeline:\n"
        f"  input_path: {test_data_dir / 'input.csv'}\n"
        f"  output_path: {tmp_path / 'from_config.csv'}\n"
        f"  rooms_path: {test_data_dir / 'room_names.csv'}\n"
        f"  hotels_path: {test_data_dir / 'hotels.json'}\n",
        encoding="utf-8",
    )

    assert run(["--config", str(config_path), "--log-format", "text"]) == 0
    assert (tmp_path / "from_config.csv").exists()


@pytest.mark.e2e
def test_cli_reports_errors(test_data_dir, tmp_path, capsys, cli_env):
    """Test failures print the error and exit with status 1"""
    exit_code = run([
        "-i", str(test_data_dir / "input.csv"),
        "-o", str(tmp_path / "output.csv"),
        "-r", str(tmp_path / "missing.csv"),
        "-H", str(test_data_dir / "hotels.json"),
    ])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert out.startswith("Error occurred: ")
    assert "rooms" in out


@pytest.mark.e2e
def test_cli_unreadable_config_file(tmp_path, capsys, cli_env):
    """Test a directory given as --config is reported, not raised"""
    assert run(["--config", str(tmp_path)]) == 1
    assert capsys.readouterr().out.startswith("Error occurred: Cannot read")

@pytest.mark.e2e
def test_parser_has_no_defaults_overriding_config():
    """Test unset flags stay None so config files and env vars apply"""
    args = build_parser().parse_args([])
    assert args.input is None
    assert args.output is None
    assert args.rooms is None
    assert args.hotels is None

"""Unit tests for ConfigFileLoader."""

from pathlib import Path

from pattern_catalog.infrastructure.config_file_loader import ConfigFileLoader


def test_reads_section_from_nearest_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.pattern-catalog]\noutput_format = "json"\n\n[tool.other]\nx = 1\n',
        encoding="utf-8",
    )
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert ConfigFileLoader.load_config_from_fs(nested) == {"output_format": "json"}


def test_pyproject_without_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert ConfigFileLoader.load_config_from_fs(tmp_path) == {}


def test_invalid_toml_yields_empty(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool\n", encoding="utf-8")
    assert ConfigFileLoader.load_config_from_fs(tmp_path) == {}


def test_non_table_section_yields_empty(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool]\npattern-catalog = "oops"\n', encoding="utf-8")
    assert ConfigFileLoader.load_config_from_fs(tmp_path) == {}


def test_non_table_tool_yields_empty(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('tool = 3\n', encoding="utf-8")
    assert ConfigFileLoader.load_config_from_fs(tmp_path) == {}


def test_defaults_to_cwd(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.pattern-catalog]\narchive_traces = true\n', encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert ConfigFileLoader.load_config_from_fs() == {"archive_traces": True}

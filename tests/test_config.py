"""Tests for the configuration module."""

from pathlib import Path

import pytest

from digraph._cli.config import (
    ConfigError,
    DigraphConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestFindPyprojectToml:
    @pytest.mark.parametrize("depth", [0, 1, 3])
    def test_walks_up_to_nearest(self, tmp_path: Path, depth: int) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")
        start = tmp_path.joinpath(*[f"level{i}" for i in range(depth)])
        start.mkdir(parents=True, exist_ok=True)

        assert find_pyproject_toml(start) == pyproject.resolve()

    def test_inner_project_wins(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[project]\nname = 'outer'\n")
        inner = tmp_path / "inner"
        inner.mkdir()
        (inner / "pyproject.toml").write_text("[project]\nname = 'inner'\n")

        assert find_pyproject_toml(inner / ".") == (inner / "pyproject.toml").resolve()

    def test_none_without_pyproject(self, tmp_path: Path) -> None:
        assert find_pyproject_toml(tmp_path) is None

    def test_defaults_to_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text("")
        monkeypatch.chdir(tmp_path)

        assert find_pyproject_toml() == tmp_path.resolve() / "pyproject.toml"


class TestLoadConfig:
    def test_relative_graph_path(self, tmp_path: Path) -> None:
        """Relative paths resolve against the pyproject.toml directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.digraph]\ngraph = "data/graph.json"\n')

        config = load_config(pyproject)

        assert config == DigraphConfig(graph=tmp_path / "data" / "graph.json", project_root=tmp_path)

    def test_absolute_graph_path(self, tmp_path: Path) -> None:
        graph_path = tmp_path / "elsewhere" / "graph.toml"
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f'[tool.digraph]\ngraph = "{graph_path.as_posix()}"\n')

        assert load_config(pyproject).graph == graph_path

    def test_missing_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config.graph is None
        assert config.project_root == tmp_path

    def test_non_string_graph_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.digraph]\ngraph = 42\n")

        with pytest.raises(ConfigError, match="expected string path"):
            load_config(pyproject)

    def test_invalid_toml_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.digraph\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)


class TestGetConfig:
    def test_reads_from_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.digraph]\ngraph = "graph.json"\n')
        monkeypatch.chdir(tmp_path)

        assert get_config().graph == tmp_path.resolve() / "graph.json"

"""Tests for TOML configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from complex_split.engine.allocator import SplitConfig
from complex_split.errors import InvalidConfigError
from complex_split.utils.config import (
    CONFIG_ENV_VAR,
    find_config_path,
    load_config,
    render_config,
    write_default_config,
)


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)


class TestLoadConfig:
    """Tests for config file lookup and loading."""

    def test_defaults_without_file(self) -> None:
        """Test defaults apply when no file is found."""
        assert find_config_path() is None
        assert load_config() == SplitConfig()

    def test_explicit_path(self, tmp_path: Path) -> None:
        """Test an explicit path overrides only the keys it sets."""
        path = tmp_path / "custom.toml"
        path.write_text("[split]\ntrain_fraction = 0.7\nengine = \"compressed\"\n")
        cfg = load_config(path)
        assert cfg.train_fraction == 0.7
        assert cfg.engine == "compressed"
        assert cfg.valid_fraction == 0.1

    def test_explicit_path_missing(self, tmp_path: Path) -> None:
        """Test a missing explicit path is an error."""
        with pytest.raises(InvalidConfigError, match="file not found"):
            load_config(tmp_path / "nope.toml")

    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the environment variable names the file."""
        path = tmp_path / "env.toml"
        path.write_text("[split]\nn_folds = 3\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_config().n_folds == 3

    def test_local_file(self, tmp_path: Path) -> None:
        """Test ./complex_split.toml is picked up."""
        (tmp_path / "complex_split.toml").write_text("[split]\nverify = false\n")
        assert load_config().verify is False

    def test_invalid_values_propagate(self, tmp_path: Path) -> None:
        """Test invalid values in the file are rejected."""
        path = tmp_path / "bad.toml"
        path.write_text("[split]\ntrain_fraction = 0.9\nvalid_fraction = 0.2\n")
        with pytest.raises(InvalidConfigError, match="must not exceed 1"):
            load_config(path)

    def test_quoted_verify_rejected(self, tmp_path: Path) -> None:
        """Test verify written as a string is rejected."""
        path = tmp_path / "quoted.toml"
        path.write_text("[split]\nverify = \"false\"\n")
        with pytest.raises(InvalidConfigError, match="verify"):
            load_config(path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test malformed TOML is reported as a config error."""
        path = tmp_path / "broken.toml"
        path.write_text("[split\n")
        with pytest.raises(InvalidConfigError, match="invalid TOML"):
            load_config(path)

    def test_missing_section_uses_defaults(self, tmp_path: Path) -> None:
        """Test a file without [split] gives defaults."""
        path = tmp_path / "empty.toml"
        path.write_text("# nothing here\n")
        assert load_config(path) == SplitConfig()


class TestWriteDefaultConfig:
    """Tests for writing and rendering config files."""

    def test_written_file_loads_back(self, tmp_path: Path) -> None:
        """Test the default file loads as the default config."""
        path = tmp_path / "conf" / "split.toml"
        assert write_default_config(path) is True
        assert load_config(path) == SplitConfig()

    def test_does_not_overwrite_without_force(self, tmp_path: Path) -> None:
        """Test existing files are kept unless forced."""
        path = tmp_path / "split.toml"
        path.write_text("[split]\nn_folds = 3\n")
        assert write_default_config(path) is False
        assert load_config(path).n_folds == 3
        assert write_default_config(path, force=True) is True
        assert load_config(path).n_folds == 5

    def test_render_roundtrip(self, tmp_path: Path) -> None:
        """Test rendered TOML loads back to the same config."""
        cfg = SplitConfig(train_fraction=0.6, valid_fraction=0.2, verify=False)
        path = tmp_path / "r.toml"
        path.write_text(render_config(cfg))
        assert load_config(path) == cfg

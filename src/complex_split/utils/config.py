"""TOML-backed configuration.

Lookup order: explicit path, ``$COMPLEX_SPLIT_CONFIG``, ``./complex_split.toml``.
With no file found the defaults of ``SplitConfig`` apply. Settings live in
a ``[split]`` table::

    [split]
    train_fraction = 0.8
    valid_fraction = 0.1
    engine = "relabel"
    n_folds = 5
    verify = true
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from complex_split.engine.allocator import SplitConfig
from complex_split.errors import InvalidConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "COMPLEX_SPLIT_CONFIG"
DEFAULT_CONFIG_NAME = "complex_split.toml"

_DEFAULT_TOML = """\
# complex-split configuration
[split]
# Share of complexes targeted for the training split, in (0, 1)
train_fraction = {train_fraction}
# Share targeted for validation; test receives whatever remains
valid_fraction = {valid_fraction}
# Disjoint-set engine: "relabel" (flat array) or "compressed" (path halving)
engine = "{engine}"
# Folds for grouped k-fold labels
n_folds = {n_folds}
# Verify that no component straddles two splits
verify = {verify}
"""


def find_config_path(path: str | Path | None = None) -> Path | None:
    """Return the config file to use, or None when there is none."""
    if path is not None:
        explicit = Path(path)
        if not explicit.is_file():
            raise InvalidConfigError("config", str(explicit), "file not found")
        return explicit

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        from_env = Path(env_path)
        if not from_env.is_file():
            raise InvalidConfigError(CONFIG_ENV_VAR, env_path, "file not found")
        return from_env

    local = Path.cwd() / DEFAULT_CONFIG_NAME
    return local if local.is_file() else None


def load_config(path: str | Path | None = None) -> SplitConfig:
    """Load SplitConfig from TOML; invalid values raise InvalidConfigError."""
    config_path = find_config_path(path)
    if config_path is None:
        logger.debug("No config file found, using defaults")
        return SplitConfig()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise InvalidConfigError("config", str(config_path), f"invalid TOML: {e}") from e

    section = data.get("split", {})
    if not isinstance(section, dict):
        raise InvalidConfigError("split", section, "expected a [split] table")

    logger.debug("Loaded config from %s", config_path)
    return SplitConfig.from_dict(section)


def render_config(config: SplitConfig) -> str:
    """Render ``config`` as commented TOML."""
    values = config.to_dict()
    values["verify"] = "true" if config.verify else "false"
    return _DEFAULT_TOML.format(**values)


def write_default_config(path: str | Path, *, force: bool = False) -> bool:
    """Write a default config file.

    Returns True if written, False if the file exists and ``force`` is off.
    """
    path = Path(path)
    if path.exists() and not force:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_config(SplitConfig()), encoding="utf-8")
    return True

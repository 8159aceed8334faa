from __future__ import annotations
import importlib.util
import logging
import sys
from pathlib import Path
import yaml
from typing import Dict, Any

from shrinkball.api.config import ConfigError

logger = logging.getLogger(__name__)

GAMES_DIR = Path(__file__).resolve().parents[2] / "games"


def game_root_for(game_id: str, games_dir: Path = GAMES_DIR) -> Path:
    root = games_dir / game_id
    if not root.is_dir():
        available = sorted(p.name for p in games_dir.iterdir() if p.is_dir()) if games_dir.is_dir() else []
        raise FileNotFoundError(
            f"No game '{game_id}' under {games_dir} (available: {', '.join(available) or 'none'})")
    return root


def load_game_manifest(game_root: Path) -> Dict[str, Any]:
    manifest = game_root / "manifest.yaml"
    if not manifest.exists():
        raise FileNotFoundError(f"Missing manifest.yaml in {game_root}")
    with open(manifest, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{manifest} must contain a mapping at the top level")
    logger.debug("Loaded manifest %s", manifest)
    return data


def load_game_module(game_root: Path):
    """
    Loads games/<id>/main.py module and returns the module object.
    The file must define a get_game() -> Game factory.
    """
    main_py = game_root / "main.py"
    if not main_py.exists():
        raise FileNotFoundError(f"Missing main.py in {game_root}")
    spec = importlib.util.spec_from_file_location(f"games.{game_root.name}.main", main_py)
    assert spec and spec.loader
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)  # type: ignore[attr-defined]
    if not hasattr(module, "get_game"):
        raise AttributeError("Game module must define get_game()")
    return module

import importlib.util
import logging
from pathlib import Path

import pytest

from shrinkball.api import ConfigError, EngineConfig
from shrinkball.logging_config import setup_logging

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    logger = logging.getLogger("shrinkball")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture(scope="module")
def launcher():
    spec = importlib.util.spec_from_file_location("launchers_run", ROOT / "launchers" / "run.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_defaults(launcher):
    args = launcher.build_parser().parse_args([])
    assert args.game == "shrinking-ball"
    assert args.screen == (1280, 720)
    assert args.seed is None
    assert not args.mirror


def test_screen_and_seed(launcher):
    args = launcher.build_parser().parse_args(["--screen", "640X480", "--seed", "9", "--mirror"])
    assert args.screen == (640, 480)
    assert args.seed == 9
    assert args.mirror


@pytest.mark.parametrize("bad", ["640", "axb", "0x480"])
def test_bad_screen(launcher, bad):
    with pytest.raises(SystemExit):
        launcher.build_parser().parse_args(["--screen", bad])


def test_bad_fps_is_config_error(launcher, capsys):
    assert launcher.main(["--fps", "0", "--log-level", "ERROR"]) == 2
    assert "fps must be positive" in capsys.readouterr().err


def test_engine_config_validation():
    with pytest.raises(ConfigError):
        EngineConfig(screen_size=(0, 10))


def test_setup_logging(tmp_path):
    log_file = tmp_path / "game.log"
    logger = setup_logging(logging.DEBUG, str(log_file))
    setup_logging(logging.DEBUG, str(log_file))
    assert len(logger.handlers) == 2
    assert "Logging initialized." in log_file.read_text(encoding="utf-8")

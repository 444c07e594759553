# tictac/config.py
from dataclasses import dataclass, field
import logging
import os
import tomllib  # python >=3.11

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    board_size: int = 3
    pruning: bool = True        # alpha-beta; False gives plain minimax
    cache_enabled: bool = True
    cache_leaves: bool = False  # also store terminal positions in the table


@dataclass
class UIConfig:
    engine_name: str = "TicTacSolver"
    api_port: int = 8000


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        if "search" in raw:
            for k, v in raw["search"].items():
                if hasattr(cfg.search, k):
                    setattr(cfg.search, k, v)
        if "ui" in raw:
            for k, v in raw["ui"].items():
                if hasattr(cfg.ui, k):
                    setattr(cfg.ui, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg


def configure_logging(level: str = None):
    """Set up root logging at ``level`` (defaults to CONFIG.log_level)."""
    logging.basicConfig(
        level=(level or CONFIG.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("TICTAC_CONFIG_TOML", "config.toml"))
# allow env override of the board size for quick experiments
override_size = os.environ.get("TICTAC_BOARD_SIZE")
if override_size:
    try:
        CONFIG.search.board_size = int(override_size)
    except ValueError:
        logger.warning("Ignoring non-integer TICTAC_BOARD_SIZE=%r", override_size)

"""
Layered configuration of mixedprod.

The built-in defaults are updated, in order, from ``~/mixedprodrc.json``,
the file named by the ``MIXEDPROD_CONFIG`` environment variable and
``./mixedprodrc.json``. Files that do not exist are skipped; later files win.
"""
import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

_LOG = logging.getLogger(__name__)

FILENAME = "mixedprodrc.json"
ENV_KEY = "MIXEDPROD_CONFIG"

DEFAULTS: Dict[str, Any] = {
    "logger": {
        "console_level": "WARNING",
        "format": "%(asctime)s ¦ %(name)s ¦ %(levelname)s ¦ %(message)s",
        "start_logging_on_import": False,
    },
}


def update_nested(target: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            update_nested(target[key], value)
        else:
            target[key] = value
    return target


class Config:
    home_file_name = str(Path.home() / FILENAME)
    cwd_file_name = FILENAME

    def __init__(self, path: Optional[str] = None):
        # An explicit path takes the place of the working directory file
        if path is not None:
            self.cwd_file_name = path
        self.current_config: Dict[str, Any] = {}
        self.current_config_files: List[str] = []
        self.update_config()

    @property
    def env_file_name(self) -> Optional[str]:
        return os.environ.get(ENV_KEY)

    def update_config(self) -> Dict[str, Any]:
        config = copy.deepcopy(DEFAULTS)
        self.current_config_files = []
        for file_name in (self.home_file_name, self.env_file_name, self.cwd_file_name):
            if file_name is None or not os.path.isfile(file_name):
                continue
            update_nested(config, self.load_config(file_name))
            self.current_config_files.append(file_name)
            _LOG.debug(f"Applied config file {file_name}")
        self.current_config = config
        return config

    @staticmethod
    def load_config(path: str) -> Dict[str, Any]:
        with open(path) as file:
            try:
                loaded = json.load(file)
            except json.JSONDecodeError as error:
                raise ValueError(f"Config file {path} is not valid JSON: {error}") from error
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {path} must contain a JSON object.")
        return loaded

    def __getitem__(self, name: str) -> Any:
        return self.current_config[name]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} files={self.current_config_files}>"

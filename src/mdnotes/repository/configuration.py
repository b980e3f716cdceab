# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from mdnotes import configuration


class ConfigurationRepository:
    def __init__(self, config_path: Optional[Path] = None) -> None:
        self.config_path = config_path or configuration.APP_CONFIG_PATH
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        if not self.config_path.is_file():
            self._config = configuration.get_default_configuration()
            return

        self._config = load(self.config_path.read_text(), Loader=Loader)

        if self._config is None:
            self._config = configuration.get_default_configuration()
            return

        # Migration: back-fill keys added after the config file was written
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_notes_path(self) -> Path:
        return configuration.resolve_notes_path(self.config["notes_path"])

    def update_config(
        self,
        notes_path: Optional[str] = None,
        remove_notes_path: bool = False,
        use_git_versioning: Optional[bool] = None,
        show_header: Optional[bool] = None,
        commit_time_entries: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if notes_path is not None:
            self.config["notes_path"] = notes_path
        if remove_notes_path:
            self.config["notes_path"] = None
        if use_git_versioning is not None:
            self.config["use_git_versioning"] = use_git_versioning
        if show_header is not None:
            self.config["show_header"] = show_header
        if commit_time_entries is not None:
            self.config["commit_time_entries"] = commit_time_entries


CONFIGURATION_REPO = ConfigurationRepository()

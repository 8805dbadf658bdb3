# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CSafeDumper as Dumper
    from yaml import CSafeLoader as Loader
except ImportError:
    from yaml import SafeDumper as Dumper  # type: ignore[assignment]
    from yaml import SafeLoader as Loader  # type: ignore[assignment]

from zenote import configuration
from zenote.color import is_tag_color


class ConfigurationRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def path(self) -> Path:
        return self._path or configuration.APP_CONFIG_PATH

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        raw: Any = None
        if self.path.is_file():
            raw = load(self.path.read_text(encoding="utf-8"), Loader=Loader)
        if not isinstance(raw, dict):
            raw = {}

        # Back-fill keys added after the file was written
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in raw:
                raw[key] = value
                self.is_dirty = True
        self._config = cast(configuration.Configuration, raw)

    def __save_data(self, config: configuration.Configuration) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            dump(dict(config), Dumper=Dumper, sort_keys=False), encoding="utf-8"
        )

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        export_prefix: Optional[str] = None,
        max_import_file_size: Optional[int] = None,
        json_indent: Optional[int] = None,
        default_tag_color: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> None:
        if max_import_file_size is not None and max_import_file_size <= 0:
            raise ValueError("max_import_file_size must be positive")
        if json_indent is not None and json_indent < 0:
            raise ValueError("json_indent cannot be negative")
        if default_tag_color is not None and not is_tag_color(default_tag_color):
            raise ValueError(f"Unknown tag color '{default_tag_color}'")

        self.is_dirty = True

        if export_prefix is not None:
            self.config["export_prefix"] = export_prefix
        if max_import_file_size is not None:
            self.config["max_import_file_size"] = max_import_file_size
        if json_indent is not None:
            self.config["json_indent"] = json_indent
        if default_tag_color is not None:
            self.config["default_tag_color"] = default_tag_color
        if log_level is not None:
            self.config["log_level"] = log_level.upper()


CONFIGURATION_REPO = ConfigurationRepository()

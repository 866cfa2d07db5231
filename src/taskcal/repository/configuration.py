# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskcal import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
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
        self._config = configuration.get_default_configuration()
        if not configuration.APP_CONFIG_PATH.is_file():
            return

        stored: Optional[dict[str, Any]] = load(
            configuration.APP_CONFIG_PATH.read_text(), Loader=Loader
        )
        # Keys missing from older config files keep their defaults
        if stored is not None:
            self._config.update(stored)  # type: ignore[typeddict-item]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        clear_ids_on_view: Optional[bool] = None,
        log_level: Optional[str] = None,
        month_indicator_cap: Optional[int] = None,
        month_overflow_cap: Optional[int] = None,
        week_indicator_cap: Optional[int] = None,
        week_overflow_cap: Optional[int] = None,
        recent_tasks_limit: Optional[int] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        backend_url: Optional[str] = None,
        remove_backend_url: bool = False,
        backend_anon_key: Optional[str] = None,
        remove_backend_anon_key: bool = False,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if clear_ids_on_view is not None:
            self.config["clear_ids_on_view"] = clear_ids_on_view
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
        if month_indicator_cap is not None:
            self.config["month_indicator_cap"] = month_indicator_cap
        if month_overflow_cap is not None:
            self.config["month_overflow_cap"] = month_overflow_cap
        if week_indicator_cap is not None:
            self.config["week_indicator_cap"] = week_indicator_cap
        if week_overflow_cap is not None:
            self.config["week_overflow_cap"] = week_overflow_cap
        if recent_tasks_limit is not None:
            self.config["recent_tasks_limit"] = recent_tasks_limit
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if backend_url is not None:
            self.config["backend_url"] = backend_url
        if remove_backend_url:
            self.config["backend_url"] = None
        if backend_anon_key is not None:
            self.config["backend_anon_key"] = backend_anon_key
        if remove_backend_anon_key:
            self.config["backend_anon_key"] = None


CONFIGURATION_REPO = ConfigurationRepository()

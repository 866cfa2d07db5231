# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskcal import configuration
from taskcal.model.session import Session
from taskcal.template.session import get_session_template


class SessionRepository:
    def __init__(self) -> None:
        self._session: Optional[Session] = None
        self.is_dirty = False

    @property
    def session(self) -> Session:
        if self._session is None:
            self.__load_data()
        if self._session is None:
            raise ValueError()
        return self._session

    def __load_data(self) -> None:
        self._session = get_session_template()
        if configuration.DATA_SESSION_PATH.is_file():
            stored = load(configuration.DATA_SESSION_PATH.read_text(), Loader=Loader)
            if stored is not None:
                self._session.update(stored)

    def __save_data(self, session: Session) -> None:
        configuration.DATA_SESSION_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.DATA_SESSION_PATH.write_text(dump(dict(session), Dumper=Dumper))

    def flush(self) -> None:
        if self._session is not None and self.is_dirty:
            self.__save_data(self._session)
            self.is_dirty = False

    def get_session(self) -> Session:
        return deepcopy(self.session)

    def set_session(self, session: Session) -> None:
        self.is_dirty = True
        self._session = deepcopy(session)

    def clear_session(self) -> None:
        self.is_dirty = True
        self._session = get_session_template()

    def is_signed_in(self) -> bool:
        return self.session["workspace_id"] is not None

    def get_workspace_name(self) -> str:
        return self.session["workspace_name"] or "local"


SESSION_REPO = SessionRepository()

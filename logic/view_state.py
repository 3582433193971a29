import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from model.models import Case

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Closed:
    pass


@dataclass(frozen=True)
class Creating:
    pass


@dataclass(frozen=True)
class Viewing:
    case_id: str


ViewState = Union[Closed, Creating, Viewing]


class ViewSelector:
    """Which modal is open (at most one) and which case the detail view shows."""

    def __init__(self):
        self.state: ViewState = Closed()
        self.selected_case: Optional[Case] = None
        self._listeners: List[Callable[[], None]] = []

    def add_listener(self, listener: Callable[[], None]):
        self._listeners.append(listener)

    def clear_listeners(self):
        self._listeners.clear()

    def _set(self, state: ViewState):
        logger.debug("View state %s -> %s", self.state, state)
        self.state = state
        for listener in list(self._listeners):
            listener()

    @property
    def creation_open(self) -> bool:
        return isinstance(self.state, Creating)

    @property
    def detail_open(self) -> bool:
        return isinstance(self.state, Viewing)

    def open_creation(self):
        self._set(Creating())

    def close_creation(self):
        if self.creation_open:
            self._set(Closed())

    def select_case(self, case: Case):
        # listeners must never see Viewing(new id) paired with the old case
        self.selected_case = case
        self._set(Viewing(case.id))

    def close_detail(self):
        if self.detail_open:
            self._set(Closed())

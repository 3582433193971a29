import logging
from typing import Callable, List, Optional, Sequence

from model.models import Case

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class DataStore:
    """
    In-memory case collection shared by the list and detail views.

    Async completion handlers grab a ``token()`` before awaiting and check
    ``accepts(token)`` before writing, so a response that lands after
    ``close()`` is dropped instead of touching a dead view.
    """

    def __init__(self):
        self.cases: List[Case] = []
        self.loading = False
        self.error: Optional[str] = None
        self._listeners: List[Listener] = []
        self._generation = 0
        self._alive = True

    # ---------- liveness ----------
    def token(self) -> int:
        return self._generation

    def accepts(self, token: int) -> bool:
        return self._alive and token == self._generation

    def close(self):
        self._alive = False
        self._generation += 1
        self._listeners.clear()
        logger.debug("Case store closed")

    # ---------- listeners ----------
    def add_listener(self, listener: Listener):
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self):
        for listener in list(self._listeners):
            listener()

    # ---------- mutations ----------
    def begin_load(self):
        self.loading = True
        self.error = None
        self._notify()

    def replace_all(self, cases: Sequence[Case]):
        self.cases = list(cases)
        self.error = None
        self._notify()

    def fail(self, message: str):
        # previously loaded cases stay visible
        self.error = message
        self._notify()

    def end_load(self):
        self.loading = False
        self._notify()

    def append(self, case: Case):
        self.cases = self.cases + [case]
        self._notify()

    def find(self, case_id: str) -> Optional[Case]:
        for c in self.cases:
            if c.id == case_id:
                return c
        return None

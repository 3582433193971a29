import logging
from typing import Callable, List, Optional, Protocol, Sequence

from logic import form_mapper
from logic.errors import CaseServiceError, CreateFailure, DraftIncompleteError, ListLoadFailure
from logic.store import DataStore
from logic.view_state import ViewSelector
from model.models import Case, Draft, Perpetrator, empty_draft

logger = logging.getLogger(__name__)


class CaseBackend(Protocol):
    async def list_cases(self) -> Sequence[Case]: ...

    async def create_case(self, draft: Draft) -> Case: ...


class FetchController:
    """Loads the case list once at startup."""

    def __init__(self, backend: CaseBackend, store: DataStore):
        self.backend = backend
        self.store = store

    async def load(self):
        token = self.store.token()
        self.store.begin_load()
        try:
            cases = await self.backend.list_cases()
        except CaseServiceError as e:
            logger.error("Error fetching cases: %s", e)
            if self.store.accepts(token):
                self.store.fail(ListLoadFailure.user_message)
        else:
            if self.store.accepts(token):
                self.store.replace_all(cases)
            else:
                logger.debug("Dropping case list that arrived after teardown")
        finally:
            if self.store.accepts(token):
                self.store.end_load()


class SubmissionController:
    """
    Owns the creation flow: the Draft being edited, the single in-flight
    submission and the error shown in the creation dialog.
    """

    def __init__(self, backend: CaseBackend, store: DataStore, view: ViewSelector):
        self.backend = backend
        self.store = store
        self.view = view
        self.draft: Draft = empty_draft()
        self.submitting = False
        self.error: Optional[str] = None
        self._flow = 0
        self._listeners: List[Callable[[], None]] = []

    def add_listener(self, listener: Callable[[], None]):
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[], None]):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def clear_listeners(self):
        self._listeners.clear()

    def _notify(self):
        for listener in list(self._listeners):
            listener()

    @property
    def can_submit(self) -> bool:
        return not self.submitting

    # ---------- flow ----------
    def open(self):
        if self.view.creation_open:
            return
        self._flow += 1
        self.draft = empty_draft()
        self.error = None
        self.view.open_creation()
        self._notify()

    def cancel(self):
        self._flow += 1
        self.draft = empty_draft()
        self.error = None
        self.view.close_creation()
        self._notify()

    # ---------- editing ----------
    def set_field(self, path: str, value):
        self.draft = form_mapper.set_field(self.draft, path, value)

    def set_violation_types(self, text: str):
        self.draft = form_mapper.set_violation_types(self.draft, text)

    def add_perpetrator(self, name: str, type_: str, description: Optional[str] = None):
        command = form_mapper.PerpetratorAdded(Perpetrator(name, type_, description or None))
        self.draft = form_mapper.apply(self.draft, command)
        self._notify()

    def remove_perpetrator(self, index: int):
        self.draft = form_mapper.apply(self.draft, form_mapper.PerpetratorRemoved(index))
        self._notify()

    def missing_fields(self):
        return self.draft.missing_fields()

    # ---------- submission ----------
    async def submit(self, draft: Optional[Draft] = None) -> Optional[Case]:
        """
        Send ``draft`` (the owned draft by default) to the service.

        Returns the created Case, or None when the call was ignored (another
        submission in flight), failed, or completed after teardown.
        """
        if self.submitting:
            logger.warning("Ignoring submit while a submission is already in flight")
            return None
        draft = self.draft if draft is None else draft
        missing = draft.missing_fields()
        if missing:
            raise DraftIncompleteError(missing)

        token = self.store.token()
        flow = self._flow
        self.submitting = True
        self.error = None
        self._notify()
        try:
            case = await self.backend.create_case(draft)
        except CreateFailure as e:
            logger.error("Error creating case: %s", e)
            if self.store.accepts(token) and flow == self._flow:
                self.error = CreateFailure.user_message
            return None
        finally:
            self.submitting = False
            if self.store.accepts(token):
                self._notify()

        if not self.store.accepts(token):
            logger.debug("Dropping created case %s that arrived after teardown", case.id)
            return None
        self.store.append(case)
        if flow == self._flow:
            self.view.close_creation()
            self.draft = empty_draft()
            self._notify()
        return case

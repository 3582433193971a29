import asyncio
import logging
import os
import tkinter as tk

from logic.backend import make_backend
from logic.controllers import FetchController, SubmissionController
from logic.store import DataStore
from logic.view_state import ViewSelector
from ui.case_dialog import CaseDialog
from ui.cases_frame import CasesFrame
from ui.detail_dialog import DetailDialog

logging.basicConfig(
    level=os.getenv("CASE_DESK_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("case_desk")

# seconds between tkinter event pumps
FRAME_INTERVAL = 0.02


class App(tk.Tk):
    def __init__(self, backend=None):
        super().__init__()
        self.title("Case Management")
        self.geometry("1100x650")
        self.backend = backend or make_backend()

        # App state
        self.store = DataStore()
        self.view = ViewSelector()
        self.fetcher = FetchController(self.backend, self.store)
        self.creation = SubmissionController(self.backend, self.store, self.view)
        self._tasks = set()
        self._running = True
        self._case_dialog = None
        self._detail_dialog = None

        container = tk.Frame(self)
        container.pack(fill="both", expand=True)
        container.grid_rowconfigure(0, weight=1)
        container.grid_columnconfigure(0, weight=1)

        self.frames = {}
        for F in (CasesFrame,):
            frame = F(parent=container, controller=self)
            self.frames[F.__name__] = frame
            frame.grid(row=0, column=0, sticky="nsew")

        self.view.add_listener(self._sync_dialogs)
        self.protocol("WM_DELETE_WINDOW", self.shutdown)
        self.show_frame("CasesFrame")

    def show_frame(self, name: str):
        frame = self.frames[name]
        frame.tkraise()
        if hasattr(frame, "on_show"):
            frame.on_show()

    def spawn(self, coro):
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    # ---------- dialogs follow the view state ----------
    def _sync_dialogs(self):
        if self.view.creation_open and self._case_dialog is None:
            self._case_dialog = CaseDialog(self, self.creation, self.spawn)
        elif not self.view.creation_open and self._case_dialog is not None:
            dlg, self._case_dialog = self._case_dialog, None
            dlg.destroy()

        if self.view.detail_open:
            if self._detail_dialog is None:
                self._detail_dialog = DetailDialog(self, self.view)
            self._detail_dialog.show_case(self.view.selected_case)
        elif self._detail_dialog is not None:
            dlg, self._detail_dialog = self._detail_dialog, None
            dlg.destroy()

    # ---------- lifecycle ----------
    async def run(self):
        self.spawn(self.fetcher.load())
        while self._running:
            self.update()
            await asyncio.sleep(FRAME_INTERVAL)
        for task in list(self._tasks):
            task.cancel()
        await self.backend.aclose()

    def shutdown(self):
        logger.info("Shutting down")
        self._running = False
        self.store.close()
        self.view.clear_listeners()
        self.creation.clear_listeners()
        self.destroy()


def main():
    app = App()
    asyncio.run(app.run())


if __name__ == "__main__":
    main()

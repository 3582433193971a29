import tkinter as tk
import webbrowser
from tkinter import ttk

from logic.presenters import (
    FALLBACK_COLOR, PRIORITY_COLORS, STATUS_COLORS,
    display_id, edit_url, format_date, full_location, status_label,
)


class DetailDialog(tk.Toplevel):
    """
    Read-only case details: basic info, violation details, perpetrators
    and evidence links. ``show_case`` rebuilds the body from scratch, so
    switching cases never leaves fields from the previous one behind.
    """
    def __init__(self, parent, view):
        super().__init__(parent)
        self.view = view
        self.case = None
        self.transient(parent)

        style = ttk.Style(self)
        BG = "#0b1220"; CARD_BG = "#0f172a"; FG = "#e5e7eb"; MUTED = "#94a3b8"; PRIMARY = "#0ea5e9"
        self.configure(bg=BG)
        style.configure("Detail.TFrame", background=CARD_BG)
        style.configure("DetailTitle.TLabel", background=CARD_BG, foreground=FG, font=("Segoe UI", 14, "bold"))
        style.configure("Section.TLabel", background=CARD_BG, foreground=FG, font=("Segoe UI", 11, "bold"))
        style.configure("Key.TLabel", background=CARD_BG, foreground=MUTED, font=("Segoe UI", 10, "bold"))
        style.configure("Value.TLabel", background=CARD_BG, foreground=FG)
        style.configure("Link.TLabel", background=CARD_BG, foreground=PRIMARY, font=("Segoe UI", 10, "underline"))

        self.outer = ttk.Frame(self, style="Detail.TFrame", padding=16)
        self.outer.pack(fill="both", expand=True)
        self.body = None

        actions = ttk.Frame(self, style="Detail.TFrame", padding=(16, 0, 16, 16))
        actions.pack(fill="x")
        ttk.Button(actions, text="Edit Case", style="Accent.TButton", command=self._edit).pack(side="right")
        ttk.Button(actions, text="Close", style="Ghost.TButton",
                   command=self.view.close_detail).pack(side="right", padx=6)

        self.protocol("WM_DELETE_WINDOW", self.view.close_detail)
        self.bind("<Escape>", lambda e: self.view.close_detail())
        self.minsize(620, 480)

    def show_case(self, case):
        self.case = case
        self.title(f"Case Details: {display_id(case)}")
        if self.body is not None:
            self.body.destroy()
        self.body = ttk.Frame(self.outer, style="Detail.TFrame")
        self.body.pack(fill="both", expand=True)
        body = self.body

        ttk.Label(body, text=f"Case Details: {display_id(case)}", style="DetailTitle.TLabel")\
            .pack(anchor="w", pady=(0, 8))

        self._section(body, "Basic Information")
        self._row(body, "Title", case.title)
        self._row(body, "Status", status_label(case.status),
                  STATUS_COLORS.get(case.status, FALLBACK_COLOR))
        self._row(body, "Priority", case.priority.value,
                  PRIORITY_COLORS.get(case.priority, FALLBACK_COLOR))
        self._row(body, "Date Reported", format_date(case.date_reported))
        self._row(body, "Date Occurred", format_date(case.date_occurred))
        self._row(body, "Location", full_location(case))

        self._section(body, "Violation Details")
        self._row(body, "Violation Types", "  ".join(f"[{t}]" for t in case.violation_types))
        self._row(body, "Description", case.description)

        if case.perpetrators:
            self._section(body, "Perpetrators")
            for p in case.perpetrators:
                self._row(body, "Name", p.name)
                self._row(body, "Type", p.type)
                if p.description:
                    self._row(body, "Description", p.description)
                ttk.Separator(body).pack(fill="x", pady=4)

        if case.evidence:
            self._section(body, "Evidence")
            for item in case.evidence:
                self._row(body, "Type", item.type)
                self._row(body, "Description", item.description or "No description")
                link = ttk.Label(body, text="View Evidence", style="Link.TLabel", cursor="hand2")
                link.pack(anchor="w")
                link.bind("<Button-1>", lambda e, url=item.url: webbrowser.open(url))
                ttk.Separator(body).pack(fill="x", pady=4)

        self.deiconify()
        self.lift()

    # ---------- helpers ----------
    def _section(self, parent, text):
        ttk.Label(parent, text=text, style="Section.TLabel").pack(anchor="w", pady=(10, 4))

    def _row(self, parent, key, value, color=None):
        row = ttk.Frame(parent, style="Detail.TFrame")
        row.pack(fill="x", pady=1)
        ttk.Label(row, text=f"{key}:", style="Key.TLabel", width=16).pack(side="left")
        label = ttk.Label(row, text=value, style="Value.TLabel", wraplength=420, justify="left")
        if color:
            label.configure(foreground=color)
        label.pack(side="left", fill="x", expand=True)

    def _edit(self):
        if self.case is not None:
            webbrowser.open(edit_url(self.case))

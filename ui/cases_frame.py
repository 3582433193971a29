import tkinter as tk
import webbrowser
from tkinter import ttk, messagebox

from logic.presenters import STATUS_COLORS, case_row, edit_url


class CasesFrame(tk.Frame):
    """Cases table with dark UI, toolbar, zebra rows, and handy shortcuts."""
    def __init__(self, parent, controller):
        super().__init__(parent)
        self.controller = controller

        # ---------- Styles ----------
        style = ttk.Style(self)
        try:
            style.theme_use("clam")
        except tk.TclError:
            pass

        PRIMARY = "#0ea5e9"   # cyan-500
        BG       = "#0b1220"  # slate-950
        CARD_BG  = "#0f172a"  # slate-900
        FG       = "#e5e7eb"  # gray-200
        MUTED    = "#94a3b8"  # gray-400
        BORDER   = "#1f2937"  # slate-800
        DANGER   = "#ef4444"  # red-500
        ROW_EVEN = "#0b1220"
        ROW_ODD  = "#0e1627"

        style.configure("App.TFrame", background=BG)
        style.configure("Toolbar.TFrame", background=BG)
        style.configure("Card.TFrame", background=CARD_BG)
        style.configure("H1.TLabel", background=BG, foreground=FG, font=("Segoe UI", 18, "bold"))
        style.configure("Muted.TLabel", background=BG, foreground=MUTED)
        style.configure("Error.TLabel", background=BG, foreground=DANGER, font=("Segoe UI", 10, "bold"))

        style.configure("Accent.TButton", background=PRIMARY, foreground="#0b1220",
                        padding=(14, 8), borderwidth=0)
        style.map("Accent.TButton",
                  background=[("active", "#22d3ee"), ("!active", PRIMARY)])
        style.configure("Ghost.TButton", background=BG, foreground=MUTED,
                        padding=(12, 8), borderwidth=0)
        style.map("Ghost.TButton",
                  background=[("active", "#111827")],
                  foreground=[("active", FG), ("!active", MUTED)])

        style.configure("Treeview",
                        background=CARD_BG, fieldbackground=CARD_BG, foreground=FG,
                        bordercolor=BORDER, rowheight=28)
        style.configure("Treeview.Heading",
                        background=BG, foreground=FG, bordercolor=BORDER,
                        font=("Segoe UI", 10, "bold"))
        style.configure("Blue.Horizontal.TProgressbar", troughcolor=CARD_BG,
                        background=PRIMARY, bordercolor=BORDER)

        # ---------- Root ----------
        root = ttk.Frame(self, style="App.TFrame")
        root.pack(fill="both", expand=True)

        topbar = ttk.Frame(root, style="Toolbar.TFrame", padding=(16, 12))
        topbar.pack(fill="x")
        ttk.Label(topbar, text="Case Management", style="H1.TLabel").pack(side="left")

        right = ttk.Frame(topbar, style="Toolbar.TFrame")
        right.pack(side="right")
        self.btn_view = ttk.Button(right, text="View", style="Ghost.TButton", command=self.view_case)
        self.btn_edit = ttk.Button(right, text="Edit", style="Ghost.TButton", command=self.edit_case)
        self.btn_add  = ttk.Button(right, text="Add New Case", style="Accent.TButton", command=self.add_case)
        for b in (self.btn_view, self.btn_edit, self.btn_add):
            b.pack(side="left", padx=6)

        # status line: spinner or error
        status = ttk.Frame(root, style="Toolbar.TFrame", padding=(16, 0))
        status.pack(fill="x")
        self.progress = ttk.Progressbar(status, mode="indeterminate", length=220,
                                        style="Blue.Horizontal.TProgressbar")
        self.error_label = ttk.Label(status, text="", style="Error.TLabel")

        # Table card
        card = ttk.Frame(root, style="Card.TFrame", padding=12)
        card.pack(fill="both", expand=True, padx=16, pady=12)

        columns = ("id", "title", "status", "priority", "reported", "location")
        self.tree = ttk.Treeview(card, columns=columns, show="headings", selectmode="browse")
        headers = {"id": "Case ID", "title": "Title", "status": "Status", "priority": "Priority",
                   "reported": "Date Reported", "location": "Location"}
        widths = {"id": 150, "title": 300, "status": 170, "priority": 90, "reported": 130, "location": 200}
        for col in columns:
            self.tree.heading(col, text=headers[col])
            self.tree.column(col, stretch=True, width=widths[col])

        self.tree.tag_configure("evenrow", background=ROW_EVEN)
        self.tree.tag_configure("oddrow", background=ROW_ODD)
        for st, color in STATUS_COLORS.items():
            self.tree.tag_configure(st.value, foreground=color)
        self.tree.tag_configure("empty", foreground=MUTED)

        yscroll = ttk.Scrollbar(card, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=yscroll.set)
        self.tree.pack(side="left", fill="both", expand=True)
        yscroll.pack(side="right", fill="y")

        # bindings
        self.tree.bind("<Double-1>", lambda e: self.view_case())
        self.tree.bind("<Return>",   lambda e: self.view_case())
        self.bind_all("<Control-n>", lambda e: self.add_case())
        self.bind_all("<Control-e>", lambda e: self.edit_case())

        self.controller.store.add_listener(self.refresh)

    # ---------- lifecycle ----------
    def on_show(self):
        self.refresh()
        self.tree.focus_set()

    def destroy(self):
        self.controller.store.remove_listener(self.refresh)
        super().destroy()

    # ---------- rendering ----------
    def refresh(self):
        store = self.controller.store
        self._refresh_status(store)

        for row in self.tree.get_children():
            self.tree.delete(row)
        if store.loading and not store.cases:
            return
        for i, case in enumerate(store.cases):
            zebra = "evenrow" if i % 2 == 0 else "oddrow"
            self.tree.insert("", "end", iid=case.id, values=case_row(case),
                             tags=(zebra, case.status.value))
        if not store.cases and not store.error:
            self.tree.insert("", "end", iid="__empty__",
                             values=("", "No cases found", "", "", "", ""), tags=("empty",))

    def _refresh_status(self, store):
        self.progress.pack_forget()
        self.error_label.pack_forget()
        if store.loading and not store.cases:
            self.progress.pack(side="left", pady=(0, 4))
            self.progress.start(12)
        else:
            self.progress.stop()
        if store.error:
            self.error_label.config(text=store.error)
            self.error_label.pack(side="left", pady=(0, 4))

    # ---------- actions ----------
    def add_case(self):
        self.controller.creation.open()

    def _get_selected_case(self):
        sel = self.tree.selection()
        if not sel or sel[0] == "__empty__":
            messagebox.showwarning("Warning", "Select a case first")
            return None
        return self.controller.store.find(sel[0])

    def view_case(self):
        case = self._get_selected_case()
        if not case:
            return
        self.controller.view.select_case(case)

    def edit_case(self):
        case = self._get_selected_case()
        if not case:
            return
        webbrowser.open(edit_url(case))

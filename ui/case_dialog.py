import tkinter as tk
from tkinter import ttk, messagebox

from model.models import CasePriority, CaseStatus

STATUSES = [s.value for s in CaseStatus]
PRIORITIES = [p.value for p in CasePriority]

FIELD_LABELS = {
    "title": "Title",
    "description": "Description",
    "violation_types": "Violation types",
    "location.country": "Country",
    "date_occurred": "Date occurred",
}


class CaseDialog(tk.Toplevel):
    """Styled 'Add New Case' dialog bound to the creation flow."""
    def __init__(self, parent, creation, spawn):
        super().__init__(parent)
        self.title("Add New Case")
        self.creation = creation
        self._spawn = spawn
        self.transient(parent)
        self.grab_set()

        # ---------- Styles (align with app palette) ----------
        style = ttk.Style(self)
        PRIMARY = "#0ea5e9"
        BG       = "#0b1220"
        CARD_BG  = "#0f172a"
        FG       = "#e5e7eb"
        MUTED    = "#94a3b8"
        FIELD_BG = "#111827"
        BORDER   = "#1f2937"
        DANGER   = "#ef4444"

        self.configure(bg=BG)
        style.configure("Dialog.TFrame", background=CARD_BG)
        style.configure("DialogTitle.TLabel", background=CARD_BG, foreground=FG, font=("Segoe UI", 14, "bold"))
        style.configure("DialogMuted.TLabel", background=CARD_BG, foreground=MUTED)
        style.configure("DialogLabel.TLabel", background=CARD_BG, foreground=FG, font=("Segoe UI", 10, "bold"))
        style.configure("DialogError.TLabel", background=CARD_BG, foreground=DANGER)
        style.configure("TEntry",
                        fieldbackground=FIELD_BG, foreground=FG,
                        insertcolor=FG, bordercolor=BORDER, padding=6)
        style.map("TEntry",
                  bordercolor=[("focus", PRIMARY), ("!focus", BORDER)])

        # ---------- Layout ----------
        outer = ttk.Frame(self, style="Dialog.TFrame", padding=16)
        outer.pack(fill="both", expand=True)

        ttk.Label(outer, text="Add New Case", style="DialogTitle.TLabel").pack(anchor="w", pady=(0, 8))
        form = ttk.Frame(outer, style="Dialog.TFrame")
        form.pack(fill="x")
        for col in range(3):
            form.grid_columnconfigure(col, weight=1, uniform="form")

        draft = creation.draft

        self._label(form, "Title", 0, 0)
        self.title_var = self._bound_var("title", draft.title)
        self.title_entry = ttk.Entry(form, textvariable=self.title_var)
        self.title_entry.grid(row=1, column=0, columnspan=2, sticky="ew", padx=(0, 6))

        self._label(form, "Violation Types (comma separated)", 0, 2)
        self.types_var = tk.StringVar(value=", ".join(draft.violation_types))
        self.types_var.trace_add("write", lambda *_: creation.set_violation_types(self.types_var.get()))
        ttk.Entry(form, textvariable=self.types_var).grid(row=1, column=2, sticky="ew")

        self._label(form, "Description", 2, 0)
        self.desc_text = tk.Text(form, height=4, wrap="word", bg=FIELD_BG, fg=FG,
                                 insertbackground=FG, highlightthickness=0, relief="flat")
        self.desc_text.insert("1.0", draft.description)
        self.desc_text.grid(row=3, column=0, columnspan=3, sticky="ew")
        self.desc_text.bind("<KeyRelease>", lambda e: creation.set_field(
            "description", self.desc_text.get("1.0", "end-1c")))

        self._label(form, "Status", 4, 0)
        self.status_var = self._bound_var("status", draft.status.value)
        ttk.Combobox(form, textvariable=self.status_var, values=STATUSES,
                     state="readonly").grid(row=5, column=0, sticky="ew", padx=(0, 6))

        self._label(form, "Priority", 4, 1)
        self.priority_var = self._bound_var("priority", draft.priority.value)
        ttk.Combobox(form, textvariable=self.priority_var, values=PRIORITIES,
                     state="readonly").grid(row=5, column=1, sticky="ew", padx=(0, 6))

        self._label(form, "Date Occurred (YYYY-MM-DDTHH:MM)", 4, 2)
        self.date_var = self._bound_var("date_occurred", draft.date_occurred)
        ttk.Entry(form, textvariable=self.date_var).grid(row=5, column=2, sticky="ew")

        self.location_vars = {}
        for col, name in enumerate(("country", "region", "city")):
            self._label(form, name.capitalize(), 6, col)
            var = self._bound_var(f"location.{name}", getattr(draft.location, name))
            self.location_vars[name] = var
            ttk.Entry(form, textvariable=var).grid(row=7, column=col, sticky="ew",
                                                   padx=(0, 6 if col < 2 else 0))

        # Perpetrators list with add/remove
        self._label(form, "Perpetrators", 8, 0)
        self.perp_name = tk.StringVar()
        self.perp_type = tk.StringVar()
        self.perp_desc = tk.StringVar()
        entry_row = ttk.Frame(form, style="Dialog.TFrame")
        entry_row.grid(row=9, column=0, columnspan=3, sticky="ew")
        for var, hint in ((self.perp_name, "Name"), (self.perp_type, "Type"), (self.perp_desc, "Description")):
            ttk.Label(entry_row, text=hint, style="DialogMuted.TLabel").pack(side="left", padx=(0, 4))
            ttk.Entry(entry_row, textvariable=var, width=16).pack(side="left", padx=(0, 8))

        list_row = ttk.Frame(form, style="Dialog.TFrame")
        list_row.grid(row=10, column=0, columnspan=3, sticky="nsew", pady=(6, 0))
        self.perp_list = tk.Listbox(list_row, height=4, activestyle="none",
                                    bg=FIELD_BG, fg=FG, highlightthickness=0,
                                    selectbackground="#1f2937", selectforeground=FG)
        self.perp_list.pack(side="left", fill="both", expand=True)
        btns = ttk.Frame(list_row, style="Dialog.TFrame")
        btns.pack(side="left", padx=8, fill="y")
        ttk.Button(btns, text="Add", style="Ghost.TButton", command=self._add_perpetrator).pack(fill="x", pady=2)
        ttk.Button(btns, text="Remove", style="Ghost.TButton", command=self._remove_selected).pack(fill="x", pady=2)

        # Actions
        self.error_label = ttk.Label(outer, text="", style="DialogError.TLabel")
        self.error_label.pack(anchor="w", pady=(12, 0))
        actions = ttk.Frame(outer, style="Dialog.TFrame")
        actions.pack(fill="x", pady=(8, 0))
        ttk.Button(actions, text="Cancel", style="Ghost.TButton", command=self._cancel).pack(side="right", padx=6)
        self.submit_btn = ttk.Button(actions, text="Submit Case", style="Accent.TButton", command=self._submit)
        self.submit_btn.pack(side="right")

        # ---------- Behavior ----------
        self.protocol("WM_DELETE_WINDOW", self._cancel)
        self.bind("<Escape>", lambda e: self._cancel())
        self.bind("<Control-s>", lambda e: self._submit())
        creation.add_listener(self.refresh)

        self.after(50, lambda: self.title_entry.focus_set())
        self._center_on_parent(parent)
        self.minsize(720, 560)
        self.refresh()

    # ---------- Helpers ----------
    def _label(self, form, text, row, col):
        ttk.Label(form, text=text, style="DialogLabel.TLabel").grid(
            row=row, column=col, sticky="w", pady=(12, 2))

    def _bound_var(self, path, initial):
        var = tk.StringVar(value=initial)
        var.trace_add("write", lambda *_: self.creation.set_field(path, var.get()))
        return var

    def _center_on_parent(self, parent):
        self.update_idletasks()
        x = parent.winfo_rootx() + (parent.winfo_width() - self.winfo_width()) // 2
        y = parent.winfo_rooty() + (parent.winfo_height() - self.winfo_height()) // 2
        self.geometry(f"+{max(x, 0)}+{max(y, 0)}")

    def refresh(self):
        if not self.winfo_exists():
            return
        c = self.creation
        self.submit_btn.configure(
            state=("normal" if c.can_submit else "disabled"),
            text=("Submit Case" if c.can_submit else "Submitting..."),
        )
        self.error_label.config(text=c.error or "")
        self.perp_list.delete(0, "end")
        for p in c.draft.perpetrators:
            self.perp_list.insert("end", f"{p.name} ({p.type})")

    def _add_perpetrator(self):
        name = self.perp_name.get().strip()
        ptype = self.perp_type.get().strip()
        if not name or not ptype:
            messagebox.showerror("Validation", "Perpetrator name and type are required.", parent=self)
            return
        self.creation.add_perpetrator(name, ptype, self.perp_desc.get().strip())
        for var in (self.perp_name, self.perp_type, self.perp_desc):
            var.set("")

    def _remove_selected(self):
        for i in reversed(self.perp_list.curselection()):
            self.creation.remove_perpetrator(i)

    def _cancel(self):
        self.creation.cancel()

    def _submit(self):
        if not self.creation.can_submit:
            return
        missing = self.creation.missing_fields()
        if missing:
            names = ", ".join(FIELD_LABELS.get(m, m) for m in missing)
            messagebox.showerror("Validation", f"Required: {names}.", parent=self)
            return
        self._spawn(self.creation.submit())

    def destroy(self):
        self.creation.remove_listener(self.refresh)
        super().destroy()

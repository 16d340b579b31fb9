import tkinter as tk
from tkinter import ttk, messagebox

from logic.backend import CASE_PAGES, case_links, open_link


class CasesFrame(tk.Frame):
    """Instructor dashboard: create form, case table and per-case actions."""
    def __init__(self, parent, controller):
        super().__init__(parent)
        self.controller = controller

        # ---------- Styles (match login palette) ----------
        style = ttk.Style(self)
        try:
            style.theme_use("clam")
        except tk.TclError:
            pass

        PRIMARY = "#2563eb"   # blue-600
        BG       = "#f9fafb"  # gray-50
        CARD_BG  = "#ffffff"
        FG       = "#111827"  # gray-900
        MUTED    = "#6b7280"  # gray-500
        FAINT    = "#9ca3af"  # gray-400
        BORDER   = "#e5e7eb"  # gray-200
        DANGER   = "#dc2626"  # red-600
        ROW_EVEN = "#ffffff"
        ROW_ODD  = "#f3f4f6"

        style.configure("App.TFrame", background=BG)
        style.configure("Toolbar.TFrame", background=BG)
        style.configure("Card.TFrame", background=CARD_BG)
        style.configure("H1.TLabel", background=BG, foreground=FG, font=("Segoe UI", 20, "bold"))
        style.configure("H2.TLabel", background=CARD_BG, foreground=FG, font=("Segoe UI", 12, "bold"))
        style.configure("Muted.TLabel", background=BG, foreground=MUTED)
        style.configure("Empty.TLabel", background=CARD_BG, foreground=FAINT, font=("Segoe UI", 11))
        style.configure("Error.TLabel", background=BG, foreground=DANGER)

        style.configure("Accent.TButton", background=PRIMARY, foreground="#ffffff",
                        padding=(14, 8), borderwidth=0)
        style.map("Accent.TButton",
                  background=[("disabled", "#93c5fd"), ("active", "#1d4ed8"), ("!active", PRIMARY)])

        style.configure("Ghost.TButton", background=BG, foreground=PRIMARY,
                        padding=(8, 4), borderwidth=0)
        style.map("Ghost.TButton", background=[("active", "#eff6ff")])

        style.configure("Danger.TButton", background="#fef2f2", foreground=DANGER,
                        padding=(12, 8), borderwidth=0)
        style.map("Danger.TButton",
                  background=[("disabled", "#fef2f2"), ("active", "#fee2e2")],
                  foreground=[("disabled", "#fca5a5"), ("!disabled", DANGER)])

        style.configure("Treeview",
                        background=CARD_BG, fieldbackground=CARD_BG, foreground=FG,
                        bordercolor=BORDER, rowheight=30)
        style.configure("Treeview.Heading",
                        background=BG, foreground=FG, bordercolor=BORDER,
                        font=("Segoe UI", 10, "bold"))

        # ---------- Root ----------
        root = ttk.Frame(self, style="App.TFrame")
        root.pack(fill="both", expand=True)

        # Top bar: title + identity
        topbar = ttk.Frame(root, style="Toolbar.TFrame", padding=(16, 12, 16, 0))
        topbar.pack(fill="x")
        ttk.Label(topbar, text="Case Discussion Board", style="H1.TLabel").pack(side="left")
        ttk.Button(topbar, text="Switch", style="Ghost.TButton",
                   command=self.switch_user).pack(side="right")
        self.email_label = ttk.Label(topbar, text="", style="Muted.TLabel")
        self.email_label.pack(side="right")

        ttk.Label(root, text="Create and manage classroom discussion cases",
                  style="Muted.TLabel", padding=(16, 0)).pack(anchor="w")

        # Create form
        form = ttk.Frame(root, style="Card.TFrame", padding=16)
        form.pack(fill="x", padx=16, pady=12)
        ttk.Label(form, text="Create New Case", style="H2.TLabel").grid(row=0, column=0, columnspan=3,
                                                                        sticky="w", pady=(0, 8))
        self.id_var = tk.StringVar()
        self.title_var = tk.StringVar()
        self.id_entry = ttk.Entry(form, textvariable=self.id_var, width=20)
        self.id_entry.grid(row=1, column=0, sticky="w")
        ttk.Entry(form, textvariable=self.title_var).grid(row=1, column=1, sticky="ew", padx=8)
        form.grid_columnconfigure(1, weight=1)
        self.btn_create = ttk.Button(form, text="Create", style="Accent.TButton", command=self.create_case)
        self.btn_create.grid(row=1, column=2)
        ttk.Label(form, text="Case ID (e.g. skims)", background=CARD_BG, foreground=FAINT)\
            .grid(row=2, column=0, sticky="w")
        ttk.Label(form, text="Case title", background=CARD_BG, foreground=FAINT)\
            .grid(row=2, column=1, sticky="w", padx=8)

        self.status_label = ttk.Label(root, text="", style="Error.TLabel", padding=(16, 0))
        self.status_label.pack(anchor="w")

        # Actions for the selected case
        actions = ttk.Frame(root, style="Toolbar.TFrame", padding=(16, 0))
        actions.pack(fill="x")
        self.link_buttons = []
        for label, _ in CASE_PAGES:
            b = ttk.Button(actions, text=label, style="Ghost.TButton",
                           command=lambda name=label: self.open_page(name))
            b.pack(side="left", padx=(0, 6))
            self.link_buttons.append(b)
        self.btn_del = ttk.Button(actions, text="Delete", style="Danger.TButton", command=self.delete_case)
        self.btn_del.pack(side="right")

        # Table card
        card = ttk.Frame(root, style="Card.TFrame", padding=12)
        card.pack(fill="both", expand=True, padx=16, pady=12)

        self.message = ttk.Label(card, text="", style="Empty.TLabel", anchor="center")

        columns = ("title", "path", "created")
        self.table = ttk.Frame(card, style="Card.TFrame")
        self.tree = ttk.Treeview(self.table, columns=columns, show="headings", selectmode="browse")
        headers = {"title": "Title", "path": "Path", "created": "Created"}
        widths = {"title": 300, "path": 200, "created": 160}
        for col in columns:
            self.tree.heading(col, text=headers[col])
            self.tree.column(col, stretch=True, width=widths[col])

        self.tree.tag_configure("evenrow", background=ROW_EVEN)
        self.tree.tag_configure("oddrow", background=ROW_ODD)

        yscroll = ttk.Scrollbar(self.table, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=yscroll.set)
        self.tree.pack(side="left", fill="both", expand=True)
        yscroll.pack(side="right", fill="y")

        # bindings
        self.id_var.trace_add("write", lambda *_: self._sync_inputs())
        self.title_var.trace_add("write", lambda *_: self._sync_inputs())
        self.id_entry.bind("<Return>", lambda e: self.create_case())
        self.tree.bind("<<TreeviewSelect>>", lambda e: self._sync_actions())
        self.tree.bind("<Double-1>", lambda e: self.open_page("Instructor"))
        self.tree.bind("<Delete>", lambda e: self.delete_case())

    # ---------- lifecycle ----------
    def on_show(self):
        self.refresh()
        self.id_entry.focus_set()

    @property
    def dashboard(self):
        return self.controller.dashboard

    # ---------- rendering ----------
    def refresh(self):
        d = self.dashboard
        self.email_label.config(text=d.email or "")
        self.status_label.config(text=d.last_error or "")
        if self.id_var.get() != d.new_id:
            self.id_var.set(d.new_id)
        if self.title_var.get() != d.new_title:
            self.title_var.set(d.new_title)
        self.btn_create.config(text="..." if d.creating else "Create")
        self.btn_create.state(["!disabled" if d.can_create() else "disabled"])

        if d.loading or not d.cases:
            self.table.pack_forget()
            self.message.config(text="Loading cases..." if d.loading else "No cases yet. Create one above.")
            self.message.pack(fill="both", expand=True, pady=48)
        else:
            self.message.pack_forget()
            self.table.pack(fill="both", expand=True)
            self._fill_table()
        self._sync_actions()

    def _fill_table(self):
        selected = self._selected_id()
        for row in self.tree.get_children():
            self.tree.delete(row)
        for i, case in enumerate(self.dashboard.cases):
            tag = "evenrow" if i % 2 == 0 else "oddrow"
            created = case.created_at.strftime("%Y-%m-%d %H:%M") if case.created_at else ""
            self.tree.insert("", "end", iid=case.case_id,
                             values=(case.title, f"/{case.case_id}", created), tags=(tag,))
        if selected and self.tree.exists(selected):
            self.tree.selection_set(selected)

    def _selected_id(self):
        sel = self.tree.selection()
        return sel[0] if sel else None

    def _selected_case(self):
        case_id = self._selected_id()
        for c in self.dashboard.cases:
            if c.case_id == case_id:
                return c
        return None

    def _sync_inputs(self):
        self.dashboard.new_id = self.id_var.get()
        self.dashboard.new_title = self.title_var.get()
        self.btn_create.state(["!disabled" if self.dashboard.can_create() else "disabled"])

    def _sync_actions(self):
        case_id = self._selected_id()
        for b in self.link_buttons:
            b.state(["!disabled" if case_id else "disabled"])
        busy = case_id is not None and self.dashboard.deleting == case_id
        self.btn_del.config(text="..." if busy else "Delete")
        self.btn_del.state(["!disabled" if case_id and not busy else "disabled"])

    # ---------- actions ----------
    def switch_user(self):
        self.dashboard.switch_user()
        self.controller.show_frame("LoginFrame")

    def create_case(self):
        if not self.dashboard.can_create():
            return
        self.dashboard.create_case(self.id_var.get(), self.title_var.get())
        self.refresh()

    def delete_case(self):
        case = self._selected_case()
        if not case:
            return
        self.dashboard.delete_case(
            case.case_id, case.title,
            confirm=lambda prompt: messagebox.askyesno("Confirm delete", prompt, parent=self),
        )
        self.refresh()

    def open_page(self, label):
        case = self._selected_case()
        if not case:
            return
        for name, url in case_links(case.case_id):
            if name == label:
                open_link(url)
                return

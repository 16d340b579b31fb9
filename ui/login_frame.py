import tkinter as tk
from tkinter import ttk


class LoginFrame(tk.Frame):
    """
    Email capture card shown while no instructor identity is stored.
    The card stays centered and its width adapts to window size.
    """
    def __init__(self, parent, controller):
        super().__init__(parent)
        self.controller = controller

        # ---------- Styles ----------
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
        BORDER   = "#d1d5db"  # gray-300

        style.configure("App.TFrame", background=BG)
        style.configure("Card.TFrame", background=CARD_BG)
        style.configure("Title.TLabel", background=CARD_BG, foreground=FG, font=("Segoe UI", 20, "bold"))
        style.configure("Sub.TLabel",   background=CARD_BG, foreground=MUTED, font=("Segoe UI", 10))

        style.configure("TEntry",
                        fieldbackground=CARD_BG, foreground=FG,
                        insertcolor=FG, bordercolor=BORDER, padding=8)
        style.map("TEntry", bordercolor=[("focus", PRIMARY), ("!focus", BORDER)])

        style.configure("Accent.TButton", background=PRIMARY, foreground="#ffffff",
                        padding=10, borderwidth=0)
        style.map("Accent.TButton",
                  background=[("disabled", "#93c5fd"), ("active", "#1d4ed8"), ("!active", PRIMARY)])

        # ---------- Root layout ----------
        root = ttk.Frame(self, style="App.TFrame")
        root.pack(fill="both", expand=True)

        self.card = ttk.Frame(root, style="Card.TFrame", padding=32)
        self.card.place(relx=0.5, rely=0.5, anchor="c", width=420)

        root.bind("<Configure>", self._on_resize)
        self.after(10, self._on_resize)

        # ---------- Card content ----------
        ttk.Label(self.card, text="Case Discussion Board", style="Title.TLabel").pack(anchor="w")
        ttk.Label(self.card, text="Enter your email to get started",
                  style="Sub.TLabel").pack(anchor="w", pady=(4, 16))

        self.email_var = tk.StringVar()
        self.email_entry = ttk.Entry(self.card, textvariable=self.email_var)
        self.email_entry.pack(fill="x")

        self.continue_btn = ttk.Button(self.card, text="Continue", style="Accent.TButton",
                                       command=self.submit)
        self.continue_btn.pack(fill="x", pady=(16, 0))

        self.email_var.trace_add("write", lambda *_: self._sync_button())
        self.email_entry.bind("<Return>", lambda e: self.submit())

    # ---------- lifecycle ----------
    def on_show(self):
        self.email_var.set(self.controller.dashboard.email_input)
        self._sync_button()
        self.after(100, lambda: self.email_entry.focus_set())

    # ---------- Responsive behavior ----------
    def _on_resize(self, event=None):
        w = max(self.winfo_width(), 360)
        target_w = max(360, min(int(w * 0.35), 480))
        self.card.place_configure(relx=0.5, rely=0.5, anchor="c", width=target_w)

    # ---------- UI actions ----------
    def _sync_button(self):
        self.controller.dashboard.email_input = self.email_var.get()
        state = "!disabled" if self.controller.dashboard.can_continue() else "disabled"
        self.continue_btn.state([state])

    def submit(self):
        if not self.controller.dashboard.submit_email(self.email_var.get()):
            self.email_entry.focus_set()
            return
        self.controller.show_frame("CasesFrame")

import os
import logging
import tkinter as tk

from ui.login_frame import LoginFrame
from ui.cases_frame import CasesFrame
from logic.backend import create_repository
from logic.dashboard import Dashboard
from logic.identity_store import IdentityStore

logger = logging.getLogger(__name__)


class App(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Case Discussion Board")
        self.geometry("1000x650")

        # App state
        self.dashboard = Dashboard(create_repository(), IdentityStore(), on_change=self._repaint)
        self.current_frame = None

        # Main container that hosts all pages
        container = tk.Frame(self)
        container.pack(fill="both", expand=True)
        container.grid_rowconfigure(0, weight=1)
        container.grid_columnconfigure(0, weight=1)

        # Pages
        self.frames = {}
        for F in (LoginFrame, CasesFrame):
            frame = F(parent=container, controller=self)
            self.frames[F.__name__] = frame
            frame.grid(row=0, column=0, sticky="nsew")

        if self.dashboard.start():
            self.show_frame("CasesFrame")
        else:
            self.show_frame("LoginFrame")

    def show_frame(self, name: str):
        frame = self.frames[name]
        self.current_frame = name
        frame.tkraise()
        if hasattr(frame, "on_show"):
            frame.on_show()

    def _repaint(self):
        # flags change around blocking database calls; paint them before the call
        if self.current_frame == "CasesFrame":
            self.frames["CasesFrame"].refresh()
            self.update_idletasks()


def main():
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = App()
    app.mainloop()


if __name__ == "__main__":
    main()

"""Entry point: set up logging, then run the GUI."""

import logging
import sys
import tkinter as tk

from lofi_pixel.app import App
from lofi_pixel.log_config import setup_logging


def main():
    setup_logging()
    log = logging.getLogger("lofi_pixel.main")
    root = tk.Tk()
    try:
        App(root)
        root.mainloop()
    except Exception as e:
        log.exception("Startup error")
        root.destroy()
        from tkinter import messagebox
        messagebox.showerror('Startup error', str(e))
        sys.exit(1)


if __name__ == '__main__':
    main()

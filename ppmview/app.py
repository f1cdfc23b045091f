# ppmview/app.py
import logging
import tkinter as tk
from tkinter import messagebox
from tkinter.filedialog import askopenfilename, asksaveasfilename
from typing import Optional

from .constants import APP_SIZE, APP_TITLE, EXPORT_FILETYPES, FILETYPES
from .image import DecodedImage, placeholder_gradient
from .io import FormatError, decode_with_header
from .render import photo_from_image

log = logging.getLogger(__name__)


class ViewerApp(tk.Tk):
    """Okno z jednym bieżącym obrazem; udane wczytanie podmienia go w całości."""

    def __init__(self, image: Optional[DecodedImage] = None, src: Optional[str] = None):
        super().__init__()
        self.title(APP_TITLE)
        self.geometry(APP_SIZE)

        self.image: DecodedImage = image or placeholder_gradient()
        self.src = src
        self._photo: Optional[tk.PhotoImage] = None
        self.cid = None

        self._build_ui()
        self._show(self.image)

    def _build_ui(self):
        menubar = tk.Menu(self)
        filemenu = tk.Menu(menubar, tearoff=0)
        filemenu.add_command(label="Otwórz...", command=self.open_file, accelerator="Ctrl+O")
        filemenu.add_command(label="Eksportuj...", command=self.export_file)
        filemenu.add_separator()
        filemenu.add_command(label="Zakończ", command=self.destroy)
        menubar.add_cascade(label="Plik", menu=filemenu)
        self.config(menu=menubar)
        self.bind("<Control-o>", lambda e: self.open_file())

        self.canvas = tk.Canvas(self, highlightthickness=0, bg="black")
        self.canvas.pack(fill="both", expand=True)

        self.status_var = tk.StringVar(value="")
        tk.Label(self, textvariable=self.status_var, anchor="w").pack(fill="x")

    def _set_status(self, text: str):
        self.status_var.set(text)

    def _show(self, image: DecodedImage):
        self._photo = photo_from_image(image)
        if self.cid is None:
            self.cid = self.canvas.create_image(0, 0, image=self._photo, anchor="nw")
        else:
            self.canvas.itemconfigure(self.cid, image=self._photo)
        # rozmiar obszaru roboczego = rozmiar obrazu
        self.canvas.configure(width=image.width, height=image.height)
        self.geometry("")
        self._set_status(f"{self.src or 'placeholder'} – {image.width}x{image.height}")

    def load(self, path: str) -> bool:
        try:
            image, hdr = decode_with_header(path)
        except FormatError as e:
            log.error("Nie udało się wczytać %s: %s", path, e)
            messagebox.showerror("PPM", f"Nie udało się wczytać pliku PPM:\n{e}")
            return False
        log.info("%s image loaded: %dx%d", hdr.magic, image.width, image.height)
        self.image = image
        self.src = path
        self._show(image)
        return True

    def open_file(self):
        path = askopenfilename(filetypes=FILETYPES, title="Otwórz PPM (P3/P6)")
        if not path:
            return
        self.load(path)

    def export_file(self):
        from .io.pil_io import write_image

        path = asksaveasfilename(
            defaultextension=".png", filetypes=EXPORT_FILETYPES, title="Eksportuj obraz"
        )
        if not path:
            return
        try:
            write_image(path, self.image)
        except (OSError, ValueError) as e:
            messagebox.showerror("Eksport", f"Nie udało się zapisać:\n{e}")
            return
        log.info("Exported %s", path)
        self._set_status(f"Zapisano: {path}")

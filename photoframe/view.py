# view.py

import logging
import tkinter as tk
from tkinter import colorchooser, filedialog, messagebox, ttk
from typing import Optional, TYPE_CHECKING

from PIL import ImageTk

from photoframe.constants import MAX_FONT_SIZE, MIN_FONT_SIZE, SHAPE_TYPES
from photoframe.shapes import ShapeKind
from photoframe.utils.geometry import LayoutMode

if TYPE_CHECKING:
    from photoframe.controller import EditorSession

logger = logging.getLogger(__name__)

PANEL_WIDTH = 260
PREVIEW_SCALE = 0.8   # preview is shown smaller than the output canvas


# --- View - Handles UI and forwards events to the session ─────────────────────

class EditorView(tk.Frame):
    def __init__(self, master: tk.Tk, session: 'EditorSession'):
        super().__init__(master)
        self.session = session
        self.pack(fill=tk.BOTH, expand=True)

        self._photo: Optional[ImageTk.PhotoImage] = None
        self._image_path: Optional[str] = None
        self.shape_var = tk.StringVar(value=session.shape.value)
        self.size_var = tk.IntVar(value=session.caption.font_size)
        self.mode_var = tk.StringVar(value=session.model.layout_mode.value)

        self._build_ui()
        session.add_observer(self.refresh)
        self.refresh()

    def _build_ui(self):
        panel = tk.Frame(self, width=PANEL_WIDTH)
        panel.pack(side=tk.LEFT, fill=tk.Y, padx=8, pady=8)

        ttk.Label(panel, text="Upload Image").pack(anchor='w')
        ttk.Button(panel, text="Choose Image", command=self.choose_image).pack(fill='x', pady=(0, 8))

        ttk.Label(panel, text="Choose Frame").pack(anchor='w')
        shapes = tk.Frame(panel)
        shapes.pack(fill='x', pady=(0, 8))
        for i, shape_id in enumerate(SHAPE_TYPES):
            kind = ShapeKind(shape_id)
            ttk.Radiobutton(shapes, text=f"{kind.icon} {kind.label}", value=shape_id,
                            variable=self.shape_var, command=self._on_shape
                            ).grid(row=i // 2, column=i % 2, sticky='w')

        ttk.Label(panel, text="Add Your Joke Text").pack(anchor='w')
        self.text_box = tk.Text(panel, height=4, width=30, wrap='word')
        self.text_box.pack(fill='x')
        self.text_box.insert('1.0', self.session.caption.text)
        self.text_box.bind('<KeyRelease>', self._on_text)

        row = tk.Frame(panel)
        row.pack(fill='x', pady=4)
        ttk.Button(row, text="Text Color", command=self.choose_color).pack(side=tk.LEFT)
        tk.Scale(row, from_=MIN_FONT_SIZE, to=MAX_FONT_SIZE, orient=tk.HORIZONTAL,
                 variable=self.size_var, command=self._on_size, label="Size").pack(side=tk.LEFT, fill='x')

        ttk.Label(panel, text="Layout").pack(anchor='w')
        for mode in LayoutMode:
            ttk.Radiobutton(panel, text=mode.value.title(), value=mode.value,
                            variable=self.mode_var, command=self._on_mode).pack(anchor='w')

        buttons = tk.Frame(panel)
        buttons.pack(fill='x', pady=8)
        ttk.Button(buttons, text="Reset", command=self.reset).pack(side=tk.LEFT)
        self.download_btn = ttk.Button(buttons, text="Download", command=self.download)
        self.download_btn.pack(side=tk.RIGHT)

        width, height = self.display_size
        self.canvas = tk.Canvas(self, width=width, height=height, bg='#1f2937', highlightthickness=0)
        self.canvas.pack(side=tk.RIGHT, padx=8, pady=8)
        self.canvas.bind('<ButtonPress-1>', self._on_press)
        self.canvas.bind('<B1-Motion>', self._on_drag)
        self.canvas.bind('<ButtonRelease-1>', self._on_release)
        self.canvas.bind('<Leave>', self._on_leave)

    @property
    def display_size(self):
        frame = self.session.frame
        return (int(frame.width * PREVIEW_SCALE), int(frame.height * PREVIEW_SCALE))

    # ─── Session -> view ────────────────────────────────────────────────────────

    def refresh(self):
        self.canvas.delete('all')
        image = self.session.preview_image
        width, height = self.display_size
        if image is None:
            self._photo = None
            self.canvas.create_text(width / 2, height / 2, text="Upload an image to see preview",
                                    fill='#9ca3af')
        else:
            self._photo = ImageTk.PhotoImage(image.resize((width, height)))
            self.canvas.create_image(0, 0, image=self._photo, anchor='nw')
        self.download_btn.state(['!disabled'] if self.session.has_render else ['disabled'])

    # ─── View -> session ────────────────────────────────────────────────────────

    def choose_image(self):
        path = filedialog.askopenfilename(
            filetypes=[("Images", "*.png *.jpg *.jpeg *.gif *.bmp *.webp"), ("All files", "*.*")])
        if not path:
            return
        self.load_path(path)

    def load_path(self, path: str):
        try:
            with open(path, 'rb') as fh:
                data = fh.read()
        except OSError as e:
            messagebox.showerror("Open Image", f"Could not read {path}:\n{e}")
            return
        self._image_path = path
        self.session.load_image(data, on_complete=self._on_loaded)

    def _on_loaded(self, source, error):
        if error is not None:
            messagebox.showerror("Open Image", str(error))

    def _on_shape(self):
        self.session.set_shape(self.shape_var.get())

    def _on_text(self, _event=None):
        self.session.set_caption_text(self.text_box.get('1.0', 'end-1c'))

    def _on_size(self, _value=None):
        self.session.set_caption_size(self.size_var.get())

    def _on_mode(self):
        self.session.set_layout_mode(self.mode_var.get())

    def choose_color(self):
        _, hex_color = colorchooser.askcolor(color='#%02x%02x%02x' % self.session.caption.color)
        if hex_color:
            self.session.set_caption_color(hex_color)

    def _on_press(self, e):
        self.session.pointer_down(e.x, e.y, self.display_size)

    def _on_drag(self, e):
        self.session.pointer_move(e.x, e.y, self.display_size)

    def _on_release(self, e):
        self.session.pointer_up(e.x, e.y, self.display_size)

    def _on_leave(self, _e):
        self.session.pointer_leave()

    def reset(self):
        self._image_path = None
        self.text_box.delete('1.0', tk.END)
        self.session.reset()
        self.shape_var.set(self.session.shape.value)
        self.size_var.set(self.session.caption.font_size)
        self.mode_var.set(self.session.model.layout_mode.value)

    def download(self):
        png = self.session.export_png()
        if png is None:
            return
        path = filedialog.asksaveasfilename(defaultextension='.png',
                                            initialfile=self.session.download_filename,
                                            filetypes=[("PNG", "*.png")])
        if not path:
            return
        with open(path, 'wb') as fh:
            fh.write(png)
        logger.info("Saved %s", path)


def run_editor(session: 'EditorSession', root: tk.Tk, image_path: Optional[str] = None):
    """Build the editor window around `session` and enter the Tk main loop."""
    root.title("Joke Photo Generator")
    view = EditorView(root, session)

    def on_close():
        session.teardown()
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", on_close)
    if image_path:
        view.load_path(image_path)
    root.mainloop()

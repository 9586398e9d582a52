"""
Desktop line-encoding visualizer (Tk).

Usage:
  python tools/line_encoding_gui.py                    all six schemes
  python tools/line_encoding_gui.py --scheme ami       one scheme, full width
  python tools/line_encoding_gui.py --cache my.txt     custom last-input file

Enter a bit string and press Enter or Generate.  Random picks 4-11 random
bits.  The last valid input is remembered and redrawn on the next start and
whenever the window is resized.
"""
import sys
import os
import argparse
try:
    import tkinter as tk
except Exception:
    print("Tkinter is not available. On Windows install Python with tcl/tk support.")
    raise

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from LESV.SMM.constants import (
    SCHEME_ORDER, SCHEME_TITLES, SCHEME_COLORS,
    CANVAS_WIDTH, CANVAS_HEIGHT, CONTAINER_GUTTER,
    SURFACE_BACKGROUND, COLOR_ERROR, SINGLE_SURFACE_ID, surface_id,
)
from LESV.SGM.bitstream import InvalidBitString, parse_bits, random_bits, bits_to_str, is_binary
from LESV.SViz.surfaces import SurfaceRegistry, TkCanvasSurface
from LESV.SViz.visualizer_bridge import draw_all_encodings, draw_single_encoding, clear_all
from LESV.SViz.input_cache import load_last_input, save_last_input

WINDOW_BG  = "#11111b"
TEXT_FG    = "#cdd6f4"
RESIZE_DEBOUNCE_MS = 80


class VisualizerGUI:
    def __init__(self, root, scheme=None, cache_path=None):
        self.root = root
        self.scheme = scheme
        self.cache_path = cache_path
        self.registry = SurfaceRegistry()
        self._canvases: list[tk.Canvas] = []
        self._resize_job = None

        title = SCHEME_TITLES[scheme] if scheme else "All Schemes"
        root.title(f'Line Encoding Visualizer — {title}')
        root.geometry('1100x820' if scheme is None else '900x380')
        root.configure(bg=WINDOW_BG)

        top = tk.Frame(root, bg=WINDOW_BG)
        top.pack(fill='x', padx=8, pady=6)

        tk.Label(top, text='Binary:', bg=WINDOW_BG, fg=TEXT_FG).pack(side='left')
        self.entry = tk.Entry(top, width=32, font=('Courier New', 12))
        self.entry.pack(side='left', padx=6)
        self.entry.bind('<Return>', lambda _e: self.generate())
        tk.Button(top, text='Generate', command=self.generate).pack(side='left')
        tk.Button(top, text='Random', command=self.random).pack(side='left', padx=6)
        tk.Button(top, text='Clear', command=self.clear).pack(side='left')

        status = tk.Frame(root, bg=WINDOW_BG)
        status.pack(fill='x', padx=8)
        self.error_lbl = tk.Label(status, text='', bg=WINDOW_BG, fg=COLOR_ERROR)
        self.error_lbl.pack(side='left')
        self.current_lbl = tk.Label(status, text='Current: No input', bg=WINDOW_BG, fg=TEXT_FG)
        self.current_lbl.pack(side='right')

        body = tk.Frame(root, bg=WINDOW_BG)
        body.pack(fill='both', expand=True, padx=8, pady=(0, 6))

        if scheme is None:
            for i, sel in enumerate(SCHEME_ORDER):
                self._add_graph(body, surface_id(sel), SCHEME_TITLES[sel], SCHEME_COLORS[sel],
                                row=i // 2, col=i % 2)
            body.columnconfigure(0, weight=1)
            body.columnconfigure(1, weight=1)
        else:
            self._add_graph(body, SINGLE_SURFACE_ID, SCHEME_TITLES[scheme], SCHEME_COLORS[scheme],
                            row=0, col=0)
            body.columnconfigure(0, weight=1)

        root.bind('<Configure>', self._on_configure)

        self.entry.insert(0, load_last_input(cache_path))
        if is_binary(self.entry.get()):
            root.after_idle(self.generate)

    def _add_graph(self, parent, sid, title, color, row, col):
        cell = tk.Frame(parent, bg=WINDOW_BG)
        cell.grid(row=row, column=col, sticky='nsew', padx=4, pady=4)
        tk.Label(cell, text=title, bg=WINDOW_BG, fg=color, anchor='w').pack(fill='x')
        canvas = tk.Canvas(cell, width=CANVAS_WIDTH, height=CANVAS_HEIGHT,
                           bg=SURFACE_BACKGROUND, highlightthickness=0)
        canvas.pack(anchor='w')
        self._canvases.append(canvas)
        self.registry.register(sid, TkCanvasSurface(canvas))

    # ── Surface provisioning ────────────────────────────────────────────────

    def _provision(self):
        """Size every canvas to its container, like a fluid page layout."""
        self.root.update_idletasks()
        for canvas in self._canvases:
            width = canvas.master.winfo_width() - CONTAINER_GUTTER
            canvas.config(width=max(width, 1))

    def _draw(self, bits):
        self._provision()
        if self.scheme is None:
            draw_all_encodings(bits, self.registry)
        else:
            draw_single_encoding(bits, self.scheme, self.registry)

    # ── Actions ─────────────────────────────────────────────────────────────

    def generate(self):
        value = self.entry.get().strip()
        try:
            bits = parse_bits(value)
        except InvalidBitString as e:
            self.error_lbl.config(text=str(e))
            return
        self.error_lbl.config(text='')
        try:
            save_last_input(value, self.cache_path)
        except OSError as e:
            print(f"[!!] Could not cache input: {e}")
        self._draw(bits)
        self.current_lbl.config(text=f'Current: {value}')

    def random(self):
        self.entry.delete(0, 'end')
        self.entry.insert(0, bits_to_str(random_bits()))
        self.generate()

    def clear(self):
        self.entry.delete(0, 'end')
        self.error_lbl.config(text='')
        clear_all(self.registry)
        self.current_lbl.config(text='Current: No input')

    # ── Resize ──────────────────────────────────────────────────────────────

    def _on_configure(self, event):
        if event.widget is not self.root:
            return
        if self._resize_job is not None:
            self.root.after_cancel(self._resize_job)
        self._resize_job = self.root.after(RESIZE_DEBOUNCE_MS, self._redraw_cached)

    def _redraw_cached(self):
        self._resize_job = None
        cached = load_last_input(self.cache_path)
        if is_binary(cached):
            self._draw(parse_bits(cached))


def main():
    parser = argparse.ArgumentParser(description="Line Encoding Visualizer")
    parser.add_argument(
        "--scheme", choices=SCHEME_ORDER, default=None,
        help="Show a single scheme instead of all six",
    )
    parser.add_argument(
        "--cache", default=None,
        help="Last-input cache file, default ~/.lesv_last_input",
    )
    args = parser.parse_args()

    root = tk.Tk()
    VisualizerGUI(root, scheme=args.scheme, cache_path=args.cache)
    root.mainloop()


if __name__ == '__main__':
    main()

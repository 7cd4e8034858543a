import logging
import os
import tkinter as tk
from functools import partial
from tkinter import ttk

from colour import Color

from centroid_calculator.actions import draw_line, draw_rect, delete_nearest, \
    clear_shape, describe
from centroid_calculator.datastructures import Vec2
from centroid_calculator.exceptions import AbortAction
from centroid_calculator.shape import ShapeBuilder

logger = logging.getLogger(__name__)

LOG_LEVEL_VARIABLE = "CENTROID_CALCULATOR_LOG_LEVEL"

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600
BG_COLOUR = Color("white")
LINE_COLOUR = Color("black")
PREVIEW_COLOUR = Color(rgb=(128 / 255, 128 / 255, 128 / 255))
CENTROID_COLOUR = Color("red")
CENTROID_RADIUS = 5


class Application(ttk.Frame):
    def __init__(self, master=False):
        super().__init__(master, padding="10 10 10 10")
        self.grid(column=0, row=0, sticky=(tk.N, tk.W, tk.E, tk.S))

        self.builder = ShapeBuilder()
        self.statusbar = tk.StringVar()
        self.start = None

        self.rowconfigure(0, weight=1)
        self.rowconfigure(1, weight=0)
        self.rowconfigure(2, weight=0)
        self.columnconfigure(0, weight=1)

        self.canvas = tk.Canvas(self, width=CANVAS_WIDTH, height=CANVAS_HEIGHT, relief="sunken", bg=BG_COLOUR.get_hex_l())
        self.canvas.grid(column=0, row=0, sticky=tk.W+tk.E+tk.N+tk.S)
        self.canvas.bind("<Configure>", self.redraw_on_event)
        self.canvas.bind("<ButtonPress-1>", self.mouse_down)
        self.canvas.bind("<B1-Motion>", self.mouse_move)
        self.canvas.bind("<ButtonRelease-1>", partial(self.mouse_up, draw_line))
        self.canvas.bind("<Shift-ButtonRelease-1>", partial(self.mouse_up, draw_rect))
        self.canvas.bind("<ButtonPress-3>", self.delete_line)

        self.button_frame = ttk.Frame(self)
        self.button_frame.grid(column=0, row=1, sticky=tk.W)

        ttk.Button(self.button_frame, text="Clear", command=self.clear).pack(anchor=tk.W, side=tk.LEFT)

        ttk.Label(self, textvariable=self.statusbar, relief="sunken", padding="5 5 5 5").grid(column=0, row=2, sticky=tk.W+tk.E+tk.N+tk.S)
        self.update_statusbar(describe(self.builder))

    def update_statusbar(self, msg):
        self.statusbar.set(msg)

    def action(self, act, *args):
        try:
            self.builder = act(self.builder, *args, self.update_statusbar)
        except AbortAction:
            pass

        self.update_canvas()

    def mouse_down(self, event):
        self.start = Vec2(event.x, event.y)
        logger.debug("Mouse down: %s", self.start)

    def mouse_move(self, event):
        if self.start is None:
            return

        self.update_canvas()
        self.canvas.create_line(self.start.x, self.start.y, event.x, event.y, fill=PREVIEW_COLOUR.get_hex_l(), dash=(4, 2))

    def mouse_up(self, act, event):
        if self.start is None:
            return

        start, self.start = self.start, None
        end = Vec2(event.x, event.y)
        logger.debug("Mouse up: %s", end)

        self.action(act, start, end)

    def delete_line(self, event):
        self.action(delete_nearest, Vec2(event.x, event.y))

    def clear(self):
        self.action(clear_shape)

    def redraw_on_event(self, event):
        self.update_canvas()

    def update_canvas(self):
        self.canvas.delete(tk.ALL)

        for start, end in self.builder.lines():
            self.canvas.create_line(start.x, start.y, end.x, end.y, fill=LINE_COLOUR.get_hex_l(), width=2)

        centroid = self.builder.centroid()
        if centroid is None:
            return

        logger.debug("Centroid: %s", centroid)
        self.canvas.create_oval(
            centroid.x - CENTROID_RADIUS, centroid.y - CENTROID_RADIUS,
            centroid.x + CENTROID_RADIUS, centroid.y + CENTROID_RADIUS,
            fill=CENTROID_COLOUR.get_hex_l(), outline=CENTROID_COLOUR.get_hex_l()
        )


def main():
    logging.basicConfig(
        level=os.environ.get(LOG_LEVEL_VARIABLE, "WARNING").upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s"
    )

    root = tk.Tk()
    root.title("Centroid Calculator")

    tk.Grid.rowconfigure(root, 0, weight=1)
    tk.Grid.columnconfigure(root, 0, weight=1)

    app = Application(master=root)
    app.mainloop()


if __name__ == "__main__":
    main()

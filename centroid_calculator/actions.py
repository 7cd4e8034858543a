import logging
import math
from tkinter import messagebox

from centroid_calculator.analysis import is_closed, total_length
from centroid_calculator.exceptions import AbortAction

logger = logging.getLogger(__name__)

PICK_DISTANCE = 8.0


def _check_coordinates(title, *coordinates):
    if not all(math.isfinite(c) for c in coordinates):
        logger.error("Invalid coordinates: %s", coordinates)
        messagebox.showerror(title, "Invalid coordinates {}".format(coordinates))
        raise AbortAction()


def describe(builder):
    lines = builder.lines()
    if not lines:
        return "Drag on the canvas to draw a line"

    text = "{} lines, {} long, {}".format(
        len(lines),
        round(total_length(lines), 1),
        "closed" if is_closed(lines) else "open"
    )

    centroid = builder.centroid()
    if centroid is None:
        return text

    return "{}, centroid at ({}, {})".format(text, round(centroid.x, 1), round(centroid.y, 1))


def draw_line(builder, start, end, update_statusbar):
    _check_coordinates("Cannot add line", *start, *end)

    if start == end:
        update_statusbar("Line too short, ignored")
        raise AbortAction()

    logger.debug("Adding line %s -> %s", start, end)
    builder.add_line(start.x, start.y, end.x, end.y)
    logger.debug("Shape now holds %s lines", len(builder))

    update_statusbar(describe(builder))

    return builder


def draw_rect(builder, start, end, update_statusbar):
    _check_coordinates("Cannot add rectangle", *start, *end)

    if start.x == end.x or start.y == end.y:
        update_statusbar("Rectangle too small, ignored")
        raise AbortAction()

    logger.debug("Adding rectangle %s -> %s", start, end)
    builder.add_rect(start.x, start.y, end.x, end.y)

    update_statusbar(describe(builder))

    return builder


def delete_nearest(builder, point, update_statusbar, pick_distance=PICK_DISTANCE):
    _check_coordinates("Cannot delete line", *point)

    lines = builder.lines()
    if not lines:
        update_statusbar("Nothing to delete")
        raise AbortAction()

    nearest = min(lines, key=lambda line: line.distance_to(point))
    if nearest.distance_to(point) > pick_distance:
        update_statusbar("No line near ({}, {})".format(round(point.x), round(point.y)))
        raise AbortAction()

    logger.debug("Deleting line %s", nearest)
    builder.delete(nearest)

    update_statusbar(describe(builder))

    return builder


def clear_shape(builder, update_statusbar):
    builder.clear()
    logger.debug("Shape cleared")

    update_statusbar(describe(builder))

    return builder


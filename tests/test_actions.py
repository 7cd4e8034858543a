import pytest

pytest.importorskip("tkinter")

from centroid_calculator import actions
from centroid_calculator.actions import draw_line, draw_rect, delete_nearest, \
    clear_shape, describe
from centroid_calculator.datastructures import Vec2, Line
from centroid_calculator.exceptions import AbortAction
from centroid_calculator.shape import ShapeBuilder


@pytest.fixture
def errors(monkeypatch):
    shown = []
    monkeypatch.setattr(actions.messagebox, "showerror", lambda title, message: shown.append(title))
    return shown


def test_draw_line_updates_status():
    messages = []
    builder = draw_line(ShapeBuilder(), Vec2(0, 0), Vec2(10, 0), messages.append)
    assert builder.lines() == [Line(Vec2(0, 0), Vec2(10, 0))]
    assert messages == ["1 lines, 10.0 long, open"]


def test_draw_line_rejects_nan(errors):
    messages = []
    builder = ShapeBuilder()
    with pytest.raises(AbortAction):
        draw_line(builder, Vec2(0, 0), Vec2(float("nan"), 0), messages.append)
    assert errors == ["Cannot add line"]
    assert len(builder) == 0


def test_draw_line_ignores_a_click():
    messages = []
    with pytest.raises(AbortAction):
        draw_line(ShapeBuilder(), Vec2(3, 3), Vec2(3, 3), messages.append)
    assert messages == ["Line too short, ignored"]


def test_draw_rect_reports_centroid():
    messages = []
    builder = draw_rect(ShapeBuilder(), Vec2(0, 0), Vec2(4, 2), messages.append)
    assert len(builder) == 4
    assert messages == ["4 lines, 12.0 long, closed, centroid at (2.0, 1.0)"]


def test_draw_rect_rejects_flat_rectangle():
    messages = []
    builder = ShapeBuilder()
    with pytest.raises(AbortAction):
        draw_rect(builder, Vec2(0, 0), Vec2(4, 0), messages.append)
    assert len(builder) == 0


def test_delete_nearest():
    messages = []
    builder = ShapeBuilder()
    builder.add_line(0, 0, 10, 0)
    builder.add_line(0, 20, 10, 20)

    delete_nearest(builder, Vec2(5, 3), messages.append)

    assert builder.lines() == [Line(Vec2(0, 20), Vec2(10, 20))]


def test_delete_nearest_needs_a_close_line():
    messages = []
    builder = ShapeBuilder()
    builder.add_line(0, 0, 10, 0)

    with pytest.raises(AbortAction):
        delete_nearest(builder, Vec2(5, 50), messages.append)

    assert len(builder) == 1
    assert messages == ["No line near (5, 50)"]


def test_delete_nearest_on_empty_shape():
    messages = []
    with pytest.raises(AbortAction):
        delete_nearest(ShapeBuilder(), Vec2(5, 5), messages.append)
    assert messages == ["Nothing to delete"]


def test_clear_shape():
    messages = []
    builder = ShapeBuilder()
    builder.add_rect(0, 0, 1, 1)

    builder = clear_shape(builder, messages.append)

    assert len(builder) == 0
    assert messages == [describe(ShapeBuilder())]

from typing import List, Optional

from centroid_calculator.datastructures import Line, Vec2, IntersectionKind, \
    get_intersection

# Points closer than this are the same point. Crossing points are rounded, so
# the pieces of a split line only lie on the original line to within this.
EPSILON = 1e-9


def is_collinear(candidate: Line, line: Line):
    if get_intersection(candidate, line).kind is IntersectionKind.COLLINEAR:
        return True
    return all(candidate.perpendicular_distance(point) <= EPSILON for point in line)


def meeting_point(candidate: Line, line: Line) -> Optional[Vec2]:
    """
    Finds where a stored line that is not collinear with the candidate meets
    it, or returns None.

    An endpoint of either line lying on the other one is returned as it is,
    so lines sharing a vertex keep sharing the same point rather than a
    recomputed crossing a rounding error away from it. Only a crossing inside
    both lines is computed with the intersection primitive.
    """

    for point in line:
        if candidate.distance_to(point) <= EPSILON:
            return point

    for point in candidate:
        if line.distance_to(point) <= EPSILON:
            return point

    hit = get_intersection(candidate, line)
    if hit.kind is IntersectionKind.POINT:
        return hit.point

    return None


class ShapeBuilder:
    """
    Holds the lines of an outline while it is being drawn.

    Every insertion rewrites the stored lines so that none of them overlap
    along a shared line or cross another one away from their endpoints:
    collinear lines are merged into one and crossing lines are split at the
    crossing point. Lines may still meet at their endpoints, which is how the
    edges of a closed outline join up.
    """

    _lines: List[Line]

    def __init__(self):
        self._lines = []

    def add_line(self, x1, y1, x2, y2):
        self.insert(Line(Vec2(x1, y1), Vec2(x2, y2)))

    def add_rect(self, x1, y1, x2, y2):
        self.add_line(x1, y1, x2, y1)
        self.add_line(x2, y1, x2, y2)
        self.add_line(x2, y2, x1, y2)
        self.add_line(x1, y2, x1, y1)

    def insert(self, candidate: Line):
        if candidate.length() <= EPSILON:
            return

        candidate = candidate.copy()
        removed = []

        for line in self._lines:
            if is_collinear(candidate, line):
                candidate = candidate.merge(line)
                removed.append(line)

        # A stored line that already spans the merge stays where it is.
        for line in removed:
            if line == candidate:
                removed.remove(line)
                candidate = line
                break

        splits = []
        added = []

        for line in self._lines:
            if line in removed or line == candidate:
                continue

            point = meeting_point(candidate, line)
            if point is None:
                continue

            splits.append(point)

            if point == line.start or point == line.end:
                continue

            removed.append(line)
            added.append(Line(line.start, point))
            added.append(Line(point, line.end))

        added.extend(candidate.split(splits))

        self._apply(removed, added)

    def _apply(self, removed, added):
        self._lines = [line for line in self._lines if line not in removed]

        for line in added:
            if line.length() <= EPSILON or line in self._lines:
                continue
            self._lines.append(line)

    def delete_line(self, x1, y1, x2, y2):
        self.delete(Line(Vec2(x1, y1), Vec2(x2, y2)))

    def delete(self, target: Line):
        self._lines = [line for line in self._lines if line != target]

    def clear(self):
        self._lines = []

    def lines(self) -> List[Line]:
        return [line.copy() for line in self._lines]

    def centroid(self) -> Optional[Vec2]:
        """
        Averages the endpoints of every stored line, counting a point once
        for each line it belongs to. On a closed outline each corner is
        shared by exactly two edges, so this is the mean of the corners.
        Returns None while fewer than three lines are stored.
        """

        if len(self._lines) < 3:
            return None

        points = [point for line in self._lines for point in line]
        x = sum(point.x for point in points) / len(points)
        y = sum(point.y for point in points) / len(points)

        return Vec2(x, y)

    def __len__(self):
        return len(self._lines)

    def __iter__(self):
        return iter(self.lines())

    def __repr__(self):
        return "<ShapeBuilder {} lines>".format(len(self._lines))

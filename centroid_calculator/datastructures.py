import math
from enum import Enum

from typing import List, NamedTuple, Optional


class Vec2:
    x: float
    y: float

    def __init__(self, x, y):
        self.x = float(x)
        self.y = float(y)

    def __add__(self, other):
        assert isinstance(other, Vec2)
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        assert isinstance(other, Vec2)
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        assert isinstance(other, (int, float))
        return Vec2(self.x * other, self.y * other)

    def length(self):
        return math.sqrt(self.x ** 2 + self.y ** 2)

    def distance(self, other):
        assert isinstance(other, Vec2)
        line = self - other
        return line.length()

    def __iter__(self):
        return iter((self.x, self.y))

    def __hash__(self):
        return hash((self.x, self.y))

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def __eq__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __repr__(self):
        return "<Vec2 ({}, {})>".format(self.x, self.y)


class IntersectionKind(Enum):
    NONE = 0
    COLLINEAR = 1
    POINT = 2


class Intersection(NamedTuple):
    kind: IntersectionKind
    point: Optional[Vec2] = None
    alpha: Optional[float] = None
    beta: Optional[float] = None


NO_INTERSECTION = Intersection(IntersectionKind.NONE)
COLLINEAR = Intersection(IntersectionKind.COLLINEAR)


def get_intersection(a, b) -> Intersection:
    """
    Classifies how segment ``a`` relates to segment ``b``.

    Both are written parametrically, ``a.start + alpha * (a.end - a.start)``
    and ``b.start + beta * (b.end - b.start)``, and the 2x2 system is solved
    with cross product determinants. Segments whose supporting lines coincide
    are reported as COLLINEAR whether or not their finite extents overlap.
    Otherwise a POINT result is returned when both parameters fall in the
    closed interval [0, 1], so touching endpoints count as an intersection.
    """

    (a1x, a1y), (a2x, a2y) = a
    (b1x, b1y), (b2x, b2y) = b

    denom = (b2x - b1x) * (a2y - a1y) - (b2y - b1y) * (a2x - a1x)
    alpha_num = (b2x - b1x) * (b1y - a1y) - (b2y - b1y) * (b1x - a1x)
    beta_num = (a2x - a1x) * (b1y - a1y) - (a2y - a1y) * (b1x - a1x)

    if denom == 0 and alpha_num == 0:
        return COLLINEAR

    if denom == 0:
        return NO_INTERSECTION

    alpha = alpha_num / denom
    beta = beta_num / denom

    if 0 <= alpha <= 1 and 0 <= beta <= 1:
        point = Vec2(a1x + alpha * (a2x - a1x), a1y + alpha * (a2y - a1y))
        return Intersection(IntersectionKind.POINT, point, alpha, beta)

    return NO_INTERSECTION


def sort_along(line, points) -> List[Vec2]:
    # Vertical lines are ordered by y, everything else by x, running from
    # the line's start towards its end.
    start, end = line
    if start.x == end.x:
        return sorted(points, key=lambda p: p.y, reverse=start.y > end.y)
    return sorted(points, key=lambda p: p.x, reverse=start.x > end.x)


class Line:
    start: Vec2
    end: Vec2
    line: Vec2

    def __init__(self, start: Vec2, end: Vec2):
        self.start = start
        self.end = end
        self.line = end - start

    def length(self):
        return self.line.length()

    def is_degenerate(self):
        return self.start == self.end

    def copy(self):
        return Line(Vec2(*self.start), Vec2(*self.end))

    def distance_to(self, point: Vec2):
        if self.is_degenerate():
            return point.distance(self.start)

        t = (point - self.start).dot(self.line) / self.line.dot(self.line)
        t = max(0.0, min(1.0, t))
        return point.distance(self.start + self.line * t)

    def perpendicular_distance(self, point: Vec2):
        # Distance to the infinite line through start and end.
        offset = point - self.start
        return abs(self.line.x * offset.y - self.line.y * offset.x) / self.length()

    def merge(self, other):
        """
        Merges two collinear lines into the line between the two endpoints
        that lie furthest apart. The pairs are tried with this line's own
        endpoints first and only a strictly longer pair replaces the current
        best, so a line that already covers ``other`` comes back unchanged.
        """

        points = [self.start, self.end, other.start, other.end]
        best = (self.start, self.end)
        best_distance = self.start.distance(self.end)

        for i in range(len(points)):
            for j in range(i + 1, len(points)):
                distance = points[i].distance(points[j])
                if distance > best_distance:
                    best = (points[i], points[j])
                    best_distance = distance

        return Line(*best)

    def split(self, points):
        verts = []
        for point in sort_along(self, [self.start, self.end] + list(points)):
            if point not in verts:
                verts.append(point)

        lines = []

        for i in range(len(verts) - 1):
            line = Line(verts[i], verts[i + 1])
            if not line.is_degenerate():
                lines.append(line)

        return lines

    def __repr__(self):
        return "<Line ({}, {})>".format(self.start, self.end)

    def __iter__(self):
        return iter((self.start, self.end))

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        ts, te = self
        os, oe = other
        return (ts == os and te == oe) or (ts == oe and te == os)

    def __hash__(self):
        return hash(frozenset(self))

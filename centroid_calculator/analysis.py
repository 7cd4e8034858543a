from collections import Counter

from typing import List

from centroid_calculator.datastructures import Line


class LineSet:
    lines: List[Line]
    degrees: Counter

    def __init__(self, start):
        self.lines = []
        self.degrees = Counter()
        self.add(start)

    def add(self, line):
        if line in self.lines:
            raise ValueError("Line already in Lineset")

        self.lines.append(line)
        self.degrees.update(line)

    def connected(self, line):
        start, end = line
        return (start in self.degrees) or (end in self.degrees)

    @property
    def closed(self):
        return all(degree >= 2 for degree in self.degrees.values())

    def __iter__(self):
        return iter(self.lines)

    def merge(self, other):
        for line in other:
            self.add(line)

    def __len__(self):
        return len(self.lines)


def collate_lines(lines):
    line_sets = []

    for line in lines:
        disconnected = []
        connected = []
        for line_set in line_sets:
            if line_set.connected(line):
                connected.append(line_set)
            else:
                disconnected.append(line_set)

        new_set = LineSet(line)
        for other in connected:
            new_set.merge(other)
        line_sets = disconnected + [new_set]

    return line_sets


def is_closed(lines):
    line_sets = collate_lines(lines)
    return bool(line_sets) and all(line_set.closed for line_set in line_sets)


def total_length(lines):
    return sum(line.length() for line in lines)

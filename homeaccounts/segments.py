"""Records grouped into segments, each segment carrying its own header data."""

from dataclasses import dataclass, field
from typing import Any, List, Optional


def _index_of(values, target):
    for index, value in enumerate(values):
        if value is target:
            return index
    return None


@dataclass(eq=False)
class Item:
    """One record inside a segment."""

    data: Any = None


@dataclass(eq=False)
class Segment:
    """A header record and the ordered items that follow it."""

    data: Any = None
    items: List[Item] = field(default_factory=list)

    def add_item(self, item):
        """Append an item at the end."""
        self.items.append(item)

    def insert_item(self, pos, item):
        """Insert an item directly after the item ``pos``."""
        index = _index_of(self.items, pos)
        if index is None:
            raise ValueError("position item is not in this segment")
        self.items.insert(index + 1, item)

    def insert_item_head(self, item):
        """Insert an item before all others."""
        self.items.insert(0, item)

    def remove_item(self, item):
        """Remove an item; an item that is not present is ignored."""
        index = _index_of(self.items, item)
        if index is not None:
            del self.items[index]

    def is_empty(self):
        """Return True when the segment holds no items."""
        return not self.items

    def __iter__(self):
        return iter(self.items)


@dataclass(eq=False)
class Segments:
    """The ordered segments of a document."""

    segments: List[Segment] = field(default_factory=list)

    def add_segment(self, segment):
        """Append a segment at the end."""
        self.segments.append(segment)

    def add_segment_head(self, segment):
        """Insert a segment before all others."""
        self.segments.insert(0, segment)

    def remove_segment(self, segment):
        """Remove a segment; a segment that is not present is ignored."""
        index = _index_of(self.segments, segment)
        if index is not None:
            del self.segments[index]

    def last_segment(self) -> Optional[Segment]:
        """Return the last segment, or None when there is none."""
        return self.segments[-1] if self.segments else None

    def is_empty(self):
        """Return True when there are no segments."""
        return not self.segments

    def __iter__(self):
        return iter(self.segments)

    def __len__(self):
        return len(self.segments)
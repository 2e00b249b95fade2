"""Documents made of segments: a ``#`` header line followed by item lines."""

from .segments import Item, Segment
from .text import ParseError, is_line_end

HEADER_MARK = "#"


class SegmentalParser:
    """Reads and writes segmented documents with one parser per line kind."""

    def __init__(self, item_parser, segment_parser):
        self.item_parser = item_parser
        self.segment_parser = segment_parser

    def new_item(self):
        """Return an item holding an initial record."""
        return Item(self.item_parser.new_record())

    def new_segment(self):
        """Return an empty segment holding an initial header record."""
        return Segment(self.segment_parser.new_record())

    def add_new_item(self, segment):
        """Append a new item to ``segment`` and return it."""
        item = self.new_item()
        segment.add_item(item)
        return item

    def insert_new_item(self, segment, pos):
        """Insert a new item after the item ``pos`` of ``segment`` and return it."""
        item = self.new_item()
        segment.insert_item(pos, item)
        return item

    def insert_new_item_head(self, segment):
        """Insert a new item at the start of ``segment`` and return it."""
        item = self.new_item()
        segment.insert_item_head(item)
        return item

    def add_new_segment(self, segments):
        """Append a new segment to ``segments`` and return it."""
        segment = self.new_segment()
        segments.add_segment(segment)
        return segment

    def parse(self, lines, segments):
        """Read ``lines`` into ``segments``; return the number of lines read.

        Blank lines are counted but skipped.  Item lines before any header
        go into a segment with an initial header.  A line that cannot be
        parsed raises :class:`ParseError` whose ``line`` is its number.
        """
        number = 0
        for line in lines:
            number += 1
            if is_line_end(line[0] if line else ""):
                continue
            try:
                if line.startswith(HEADER_MARK):
                    record, _ = self.segment_parser.parse_line(line[len(HEADER_MARK):])
                    segments.add_segment(Segment(record))
                else:
                    segment = segments.last_segment()
                    if segment is None:
                        segment = self.add_new_segment(segments)
                    record, _ = self.item_parser.parse_line(line)
                    segment.add_item(Item(record))
            except ParseError as exc:
                error = ParseError(f"line {number}: {exc}")
                error.line = number
                raise error from exc
        return number

    def output(self, segments):
        """Yield the lines of ``segments``, without line ends."""
        for segment in segments:
            yield HEADER_MARK + self.segment_parser.format_line(segment.data)
            for item in segment:
                yield self.item_parser.format_line(item.data)
"""Plain-text rendering of built tracks.

Output format::

    Track 1
    09:00 AM => Writing Fast Tests Against Enterprise Rails
    ...
    12:00 PM => Lunch
    01:00 PM => Communicating Over Distance
    ...
    04:00 PM => Networking Session
"""

from collections.abc import Iterable
from datetime import time
from typing import TextIO

from django_tracks.scheduling.clock import format_12_hour
from django_tracks.scheduling.scheduler import Track


def format_start_time(value: time | None) -> str:
    """Render an item start time on a 12-hour clock; blank when unset."""
    if value is None:
        return ""
    return format_12_hour(value)


class TrackRenderer:
    """Turns a list of tracks into human-readable lines.

    Args:
        header: Format string for the per-track header line.
        line: Format string for each session line, with ``time`` and
            ``description`` placeholders.
    """

    def __init__(self, header: str = "Track {n}", line: str = "{time} => {description}") -> None:
        self.header = header
        self.line = line

    def render_track(self, track: Track) -> list[str]:
        lines = [self.header.format(n=track.day_sequence)]
        lines.extend(
            self.line.format(time=format_start_time(item.start_time), description=item.description)
            for item in track.items
        )
        return lines

    def render(self, tracks: Iterable[Track]) -> list[str]:
        """Render every track, headers included, in day order."""
        lines: list[str] = []
        for track in tracks:
            lines.extend(self.render_track(track))
        return lines

    def write(self, tracks: Iterable[Track], stream: TextIO) -> None:
        """Write the rendered lines to *stream*, one per line."""
        for line in self.render(tracks):
            stream.write(f"{line}\n")

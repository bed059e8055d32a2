"""Markdown logger for session events (drag start/end, shutdown)."""

import datetime

from .vector import Vec2


class SessionLogger:
    """Handles logging of light drag events to a markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the session logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.drags = 0
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Interactive Raytracer Session Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Light Drag Events\n\n")
                f.write("| Timestamp | Position (x,y) | Event | Details |\n")
                f.write("|-----------|---------------|-------|---------|\n")
        except OSError as e:
            print(f"Failed to initialize log file: {e}")

    def _write_row(self, event: str, position: str, details: str) -> None:
        try:
            timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {position} | {event} | {details} |\n")
        except OSError as e:
            print(f"Failed to log {event.lower()}: {e}")

    def log_drag_start(self, pos: Vec2) -> None:
        """
        Log the light being grabbed.

        Parameters
        ----------
        pos : Vec2
            Light position when the drag began
        """
        self.drags += 1
        x, y = pos.to_pixel()
        self._write_row("DRAG START", f"({x}, {y})", f"Drag #{self.drags}")

    def log_drag_end(self, pos: Vec2, hits: int) -> None:
        """
        Log the light being released.

        Parameters
        ----------
        pos : Vec2
            Light position where it was dropped
        hits : int
            Rays hitting the occluder from the drop position
        """
        x, y = pos.to_pixel()
        self._write_row("DRAG END", f"({x}, {y})", f"{hits} rays hit the occluder")

    def log_shutdown(self, frames: int) -> None:
        self._write_row("QUIT", "SYSTEM", f"{frames} frames rendered, {self.drags} drags")

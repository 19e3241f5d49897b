import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sketch_algebra import (
  EditingSession, Ellipse, Line, Parabola, Point, LogLevel, configure_logging,
  export_session, to_clipboard_text
)
from sketch_algebra.rendering import Viewport, render_session


def main(output_path="sketch.png"):
  configure_logging(LogLevel.DETAILED)

  session = EditingSession()
  session.add(Line(Point(2, 2), Point(-5, 5)))
  session.add(Ellipse(Point(-3, -2), 2, 1))
  parabola_id = session.add(Parabola(Point(1, -1), Point(3, 3)))

  # Drag the parabola's outer point, as a pointer would
  session.select_at(Point(3, 3))
  session.drag_to(Point(4, 5))

  viewport = Viewport(800, 600, unit_size=30)
  figure = render_session(session, viewport)
  figure.savefig(output_path)
  print(f"Saved {output_path}")

  session.release()
  print("Statements:")
  print(to_clipboard_text(export_session(session)))
  print(f"Parabola #{parabola_id}: {session.shapes[parabola_id]}")


if __name__ == "__main__":
  main(*sys.argv[1:])

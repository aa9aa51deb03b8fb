"""
Drawing surface protocol - defines the primitives the render step needs
"""

from typing import Protocol

Color = tuple[int, int, int]


class DrawingSurface(Protocol):
    """
    Protocol for drawing surface implementations.

    Enables multiple rendering backends: Pygame window, headless recorder, etc.
    Coordinates use the top-left origin with y increasing downwards.
    """

    def fill_background(self, color: Color) -> None:
        """Fill the whole surface with a color"""
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """
        Fill an axis-aligned rectangle.

        Args:
            x: Left edge
            y: Top edge
            width: Rectangle width
            height: Rectangle height
            color: RGB fill color
        """
        ...

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        """Fill a circle centred on (x, y)"""
        ...

    def draw_text(self, x: float, y: float, text: str, color: Color, font_size: int) -> None:
        """
        Draw a line of text horizontally centred on x with its baseline at y.

        Args:
            x: Horizontal centre of the text
            y: Baseline of the text
            text: Text to draw
            color: RGB text color
            font_size: Font size
        """
        ...

    def present(self) -> None:
        """Show the finished frame"""
        ...

"""
Shared primitive data types for the simulation.

This module provides the basic geometric types used throughout the
codebase: points for positions and bounding boxes for collision tests.
"""

from pydantic import BaseModel, ConfigDict, computed_field, field_validator


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions and offsets.

    World coordinates grow rightward (x) and downward (y); y=0 is the top
    of the sky, the water surface sits further down.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical, downward)

    Examples:
        >>> anchor = Point2D(x=190.0, y=280.0)
        >>> anchor.y
        280.0
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Rectangle(BaseModel):
    """Immutable axis-aligned box defined by its top-left corner and size.

    Used for the hook's catch box and for fish/token bodies.

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> hook_box = Rectangle.centered(Point2D(x=100.0, y=100.0), 10.0, 10.0)
        >>> hook_box.left
        95.0
        >>> fish_box = Rectangle(x=98.0, y=90.0, width=40.0, height=25.0)
        >>> hook_box.overlaps(fish_box)
        True
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @classmethod
    def centered(cls, center: Point2D, width: float, height: float) -> 'Rectangle':
        """Build a rectangle of the given size centered on a point."""
        return cls(
            x=center.x - width / 2,
            y=center.y - height / 2,
            width=width,
            height=height,
        )

    @computed_field
    @property
    def center(self) -> Point2D:
        """Calculate the center point of the rectangle."""
        return Point2D(
            x=self.x + self.width / 2,
            y=self.y + self.height / 2
        )

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def overlaps(self, other: 'Rectangle') -> bool:
        """Check if this rectangle strictly overlaps another.

        Boxes that only touch along an edge do not overlap.

        Args:
            other: Another rectangle to test against

        Returns:
            True if the interiors intersect

        Examples:
            >>> a = Rectangle(x=0.0, y=0.0, width=10.0, height=10.0)
            >>> a.overlaps(Rectangle(x=5.0, y=5.0, width=10.0, height=10.0))
            True
            >>> a.overlaps(Rectangle(x=10.0, y=0.0, width=10.0, height=10.0))
            False
        """
        return (self.left < other.right and
                self.right > other.left and
                self.top < other.bottom and
                self.bottom > other.top)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"

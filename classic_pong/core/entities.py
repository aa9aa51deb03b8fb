"""
Classic Pong game entities: the moving-entity contract, paddles and the ball
"""

import logging
import math
from abc import ABC
from abc import abstractmethod
from enum import Enum

from classic_pong.core.geometry import Vector2D
from classic_pong.core.geometry import circle_overlaps_rect

logger = logging.getLogger(__name__)


class CollisionTag(Enum):
    """What the ball's candidate move struck"""

    NONE = "none"
    CANVAS_LEFT = "canvas_left"
    CANVAS_RIGHT = "canvas_right"
    CANVAS_TOP = "canvas_top"
    CANVAS_BOTTOM = "canvas_bottom"
    PADDLE1 = "paddle1"
    PADDLE2 = "paddle2"


class Entity(ABC):
    """
    Base class for every moving object on the surface.

    Each frame an entity attempts to move by direction * speed. Concrete
    entities decide whether the candidate position is free and, if not, how
    the collision is resolved. The position is left unchanged on a collision
    unless the resolution hook overwrites it.
    """

    def __init__(self, x: float, y: float, surface_width: float, surface_height: float):
        self.position = Vector2D(x, y)
        self.direction = Vector2D(0.0, 0.0)
        self.speed = 0.0
        self.surface_width = surface_width
        self.surface_height = surface_height

    @property
    def velocity(self) -> Vector2D:
        """Displacement applied by one collision-free move"""
        return self.direction * self.speed

    def set_direction(self, x_direction: float, y_direction: float) -> None:
        self.direction = Vector2D(x_direction, y_direction)

    def move(self, *obstacles: "Entity") -> None:
        """Attempts one frame of movement, delegating to the collision hook on contact"""
        candidate = self.position + self.velocity

        if self.has_no_collisions(candidate.x, candidate.y, *obstacles):
            self.position = candidate
        else:
            self.do_collision_behaviour(*obstacles)

    @abstractmethod
    def has_no_collisions(self, new_x: float, new_y: float, *obstacles: "Entity") -> bool:
        """
        Checks whether the entity may occupy (new_x, new_y)

        Args:
            new_x: Candidate x coordinate
            new_y: Candidate y coordinate
            obstacles: Other entities the candidate position may overlap

        Returns:
            bool: True if the candidate position is free
        """
        return True

    def do_collision_behaviour(self, *obstacles: "Entity") -> None:
        """Resolves a collision detected by has_no_collisions (no-op by default)"""


class Paddle(Entity):
    """Player paddle, a centre-anchored rectangle that stays inside the surface"""

    SPEED = 8.0

    def __init__(self, x: float, y: float, surface_width: float, surface_height: float):
        super().__init__(x, y, surface_width, surface_height)
        self.width = surface_width / 3
        self.height = surface_height / 16
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Paddle size must be positive, got {self.width}x{self.height} "
                f"for a {surface_width}x{surface_height} surface"
            )
        self.speed = self.SPEED
        self.starting_position = Vector2D(x, y)

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2

    def has_no_collisions(self, new_x: float, new_y: float, *obstacles: Entity) -> bool:
        if new_x - self.half_width < 0:
            return False
        elif new_x + self.half_width > self.surface_width:
            return False

        if new_y - self.half_height < 0:
            return False
        elif new_y + self.half_height > self.surface_height:
            return False

        return True

    def reset_to_origin(self) -> None:
        """Moves the paddle back to its starting centre"""
        self.position = self.starting_position.copy()

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the top-left anchored rectangle (x, y, width, height)"""
        return (
            self.position.x - self.half_width,
            self.position.y - self.half_height,
            self.width,
            self.height,
        )


class Ball(Entity):
    """Game ball"""

    BASE_SPEED = 4.0
    MAX_SPEED = 12.0
    SPEED_INCREMENT = 0.5

    def __init__(self, x: float, y: float, surface_width: float, surface_height: float):
        super().__init__(x, y, surface_width, surface_height)
        self.radius = surface_width / 32
        self.speed = self.BASE_SPEED
        self.starting_position = Vector2D(x, y)
        self.colliding_with = CollisionTag.NONE
        self.last_serve_direction = 1

    @property
    def scored_by(self) -> int:
        """Player credited by the last collision (1 or 2), or 0 if nobody scored"""
        if self.colliding_with is CollisionTag.CANVAS_TOP:
            return 2
        if self.colliding_with is CollisionTag.CANVAS_BOTTOM:
            return 1
        return 0

    def move(self, paddle1: Paddle, paddle2: Paddle) -> None:
        """Moves one frame, bouncing off the walls and both paddles"""
        super().move(paddle1, paddle2)

    def has_no_collisions(
        self, new_x: float, new_y: float, paddle1: Paddle, paddle2: Paddle
    ) -> bool:
        """Classifies the candidate position; walls take priority over paddles"""

        if new_x - self.radius < 0:
            self.colliding_with = CollisionTag.CANVAS_LEFT
        elif new_x + self.radius > self.surface_width:
            self.colliding_with = CollisionTag.CANVAS_RIGHT
        elif new_y - self.radius < 0:
            self.colliding_with = CollisionTag.CANVAS_TOP
        elif new_y + self.radius > self.surface_height:
            self.colliding_with = CollisionTag.CANVAS_BOTTOM
        elif self.is_colliding_with_paddle(new_x, new_y, paddle1):
            self.colliding_with = CollisionTag.PADDLE1
        elif self.is_colliding_with_paddle(new_x, new_y, paddle2):
            self.colliding_with = CollisionTag.PADDLE2
        else:
            self.colliding_with = CollisionTag.NONE
            return True

        return False

    def is_colliding_with_paddle(self, new_x: float, new_y: float, paddle: Paddle) -> bool:
        return circle_overlaps_rect(
            new_x,
            new_y,
            self.radius,
            paddle.position.x,
            paddle.position.y,
            paddle.width,
            paddle.height,
        )

    def do_collision_behaviour(self, paddle1: Paddle, paddle2: Paddle) -> None:
        # Scoring hits also ramp up, but the reset below discards it
        if self.speed < self.MAX_SPEED:
            self.speed = self.speed + self.SPEED_INCREMENT

        tag = self.colliding_with
        if tag is CollisionTag.CANVAS_LEFT:
            new_direction = Vector2D(-self.direction.x, self.direction.y)
            self.position.x = self.radius
        elif tag is CollisionTag.CANVAS_RIGHT:
            new_direction = Vector2D(-self.direction.x, self.direction.y)
            self.position.x = self.surface_width - self.radius
        elif tag in (CollisionTag.CANVAS_TOP, CollisionTag.CANVAS_BOTTOM):
            logger.debug("Ball left the surface (%s)", tag.value)
            self.reset_to_origin()
            return
        elif tag is CollisionTag.PADDLE1:
            new_direction = self._deflect_from(paddle1, away=1)
        elif tag is CollisionTag.PADDLE2:
            new_direction = self._deflect_from(paddle2, away=-1)
        else:
            new_direction = Vector2D(0.0, 0.0)

        self.set_direction(new_direction.x, new_direction.y)
        logger.debug("Ball bounced off %s at speed %.1f", tag.value, self.speed)

    def _deflect_from(self, paddle: Paddle, away: int) -> Vector2D:
        """
        Computes the bounce direction off a paddle.

        The offset from the paddle centre is divided by the full paddle width,
        so the deflection angle spans roughly -pi/4..pi/4. ``away`` is +1 when
        the ball should leave downwards (top paddle) and -1 for upwards.
        """
        relative_x = (self.position.x - paddle.position.x) / paddle.width
        angle = relative_x * math.pi / 2
        new_direction = Vector2D(math.sin(angle), away * math.cos(angle))

        if away > 0:
            penetrated = self.position.y - self.radius < paddle.position.y + paddle.half_height
        else:
            penetrated = self.position.y + self.radius > paddle.position.y - paddle.half_height

        # Pushed clear of a moving paddle's side so it cannot hit again next frame
        if penetrated:
            push_out = paddle.half_width + self.radius + (paddle.speed + 1)
            if self.position.x < paddle.position.x:
                self.position.x = paddle.position.x - push_out
            else:
                self.position.x = paddle.position.x + push_out

        return new_direction

    def reset_to_origin(self) -> None:
        """Puts the ball back on its starting spot, serving opposite to the last serve"""
        self.position = self.starting_position.copy()
        self.last_serve_direction = -self.last_serve_direction
        self.set_direction(0, self.last_serve_direction)
        self.speed = self.BASE_SPEED

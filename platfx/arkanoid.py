"""Brick-breaker game: a paddle, a ball and a wall of blocks."""

from __future__ import annotations

from .geometry import Rect

BLOCKS_W = 10
BLOCKS_H = 10
SCR_W = 20.0
SCR_H = 20.0
PLATFORM_SPEED = 3.0


class Arkanoid:
    """Game state in a 20 x 20 world with the origin at the top-left."""

    def __init__(self) -> None:
        self.blocks = [[True] * BLOCKS_W for _ in range(BLOCKS_H)]
        self.ball_x = 12.0
        self.ball_y = 7.0
        self.dx = 3.5
        self.dy = -3.5
        self.platform_x = 10.0
        self.stick = True
        self.platform_width = 5.0
        self.platform_height = 0.2

    @property
    def block_w(self) -> float:
        return SCR_W / BLOCKS_W

    @property
    def block_h(self) -> float:
        return 7.0 / BLOCKS_H

    def block_rect(self, row: int, column: int) -> Rect:
        """Drawn rectangle of a block; the hit area is 0.1 larger on each axis."""
        if not (0 <= row < BLOCKS_H and 0 <= column < BLOCKS_W):
            raise IndexError("block position outside the wall")
        return Rect(
            column * self.block_w + 0.05,
            row * self.block_h + 0.05,
            self.block_w - 0.1,
            self.block_h - 0.1,
        )

    def blocks_left(self) -> int:
        return sum(sum(row) for row in self.blocks)

    def update(self, dt: float, left: bool = False, right: bool = False, launch: bool = False) -> None:
        """Advance by ``dt`` seconds with the given controls held."""
        half = self.platform_width / 2.0
        if right and self.platform_x < SCR_W - half:
            self.platform_x += PLATFORM_SPEED * dt
        if left and self.platform_x > half:
            self.platform_x -= PLATFORM_SPEED * dt

        if not self.stick:
            self.ball_x += self.dx * dt
            self.ball_y += self.dy * dt
        else:
            self.ball_x = self.platform_x
            self.ball_y = SCR_H - 0.5
            self.stick = not launch

        if self.ball_x <= 0.0 or self.ball_x > SCR_W:
            self.dx = -self.dx
        on_platform = (
            self.ball_y > SCR_H - self.platform_height - 0.15 / 2.0
            and self.platform_x - half <= self.ball_x <= self.platform_x + half
        )
        if self.ball_y <= 0.0 or on_platform:
            self.dy = -self.dy
        if self.ball_y >= SCR_H:
            self.ball_y = 10.0
            self.dy = -abs(self.dy)
            self.stick = True

        for j, row in enumerate(self.blocks):
            for i, alive in enumerate(row):
                if not alive:
                    continue
                block_x = i * self.block_w + 0.05
                block_y = j * self.block_h + 0.05
                if (
                    block_x <= self.ball_x < block_x + self.block_w
                    and block_y <= self.ball_y < block_y + self.block_h
                ):
                    self.dy = -self.dy
                    row[i] = False
import random

from flappy_dragon.constants import (
    SCREEN_HEIGHT, PLAYER_OFFSET, OBSTACLE_GLYPH, PLAYER_GLYPH, YELLOW, RED
)
from flappy_dragon.data_models import Obstacle, Player


def test_player_advances_one_column_per_tick():
    player = Player(20, 25)
    player.gravity_and_move()
    assert player.x == 21


def test_player_reaches_terminal_velocity_after_eleven_ticks():
    player = Player(20, 25)
    expected_velocity, expected_y = 0.0, 25
    for _ in range(11):
        expected_velocity = min(expected_velocity + 0.2, 2.0)
        expected_y += int(expected_velocity)
        player.gravity_and_move()

    assert player.velocity == 2.0
    assert player.y == expected_y
    assert player.y > 25


def test_player_clamped_to_top_row():
    player = Player(0, 1)
    for _ in range(5):
        player.flap()
        player.gravity_and_move()
        assert player.y >= 0
    assert player.y == 0


def test_flap_overrides_any_velocity():
    for velocity in (-2.1, 0.0, 1.3, 2.0):
        player = Player(0, 25, velocity)
        player.flap()
        assert player.velocity == -2.1


def test_player_drawn_at_fixed_column(ctx):
    player = Player(500, 12)
    player.render(ctx)
    cell = ctx.cell(PLAYER_OFFSET, 12)
    assert cell.glyph == PLAYER_GLYPH
    assert cell.fg == YELLOW


def test_player_below_grid_is_not_drawn(ctx):
    Player(0, SCREEN_HEIGHT + 3).render(ctx)
    assert all(ctx.row_text(y).strip() == "" for y in range(SCREEN_HEIGHT))


def test_obstacle_gap_size_from_score(rng):
    assert Obstacle.new(80, 0, rng).size == 20
    assert Obstacle.new(80, 5, rng).size == 15
    assert Obstacle.new(80, 20, rng).size == 2
    assert Obstacle.new(80, 35, rng).size == 2


def test_obstacle_gap_centre_range():
    rng = random.Random(99)
    centres = {Obstacle.new(0, 0, rng).gap_y for _ in range(2000)}
    assert min(centres) == 10
    assert max(centres) == 39


def test_obstacle_generation_is_reproducible():
    first = [Obstacle.new(0, 0, random.Random(5)).gap_y for _ in range(3)]
    second = [Obstacle.new(0, 0, random.Random(5)).gap_y for _ in range(3)]
    assert first == second


def test_obstacle_render_leaves_gap(ctx):
    obstacle = Obstacle(x=30, gap_y=25, size=10)
    obstacle.render(ctx, player_x=0)

    column = [ctx.cell(30, y).glyph for y in range(SCREEN_HEIGHT)]
    assert column[:20] == [OBSTACLE_GLYPH] * 20
    assert column[20:30] == [" "] * 10
    assert column[30:] == [OBSTACLE_GLYPH] * (SCREEN_HEIGHT - 30)
    assert ctx.cell(30, 0).fg == RED


def test_obstacle_scrolls_with_player(ctx):
    obstacle = Obstacle(x=100, gap_y=25, size=10)
    obstacle.render(ctx, player_x=80)
    assert ctx.cell(PLAYER_OFFSET, 0).glyph == OBSTACLE_GLYPH


def test_offscreen_obstacle_draws_nothing(ctx):
    Obstacle(x=200, gap_y=25, size=4).render(ctx, player_x=0)
    assert all(ctx.row_text(y).strip() == "" for y in range(SCREEN_HEIGHT))


def test_hit_requires_alignment():
    obstacle = Obstacle(x=100, gap_y=25, size=2)
    for y in range(0, 60):
        assert not obstacle.hit_obstacle(Player(79, y))
        assert not obstacle.hit_obstacle(Player(81, y))


def test_hit_outside_gap():
    obstacle = Obstacle(x=100, gap_y=25, size=10)
    assert obstacle.hit_obstacle(Player(80, 0))
    assert obstacle.hit_obstacle(Player(80, 19))
    assert not obstacle.hit_obstacle(Player(80, 20))
    assert not obstacle.hit_obstacle(Player(80, 30))
    assert obstacle.hit_obstacle(Player(80, 31))

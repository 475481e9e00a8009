import pytest

from gridsnake.config import Config, Direction
from gridsnake.snake import MoveResult, Snake


FAR_APPLE = (9, 9)


def test_first_tick_moves_right_without_growing():
    snake = Snake()
    assert snake.segments == [(2, 2)]

    result = snake.advance(FAR_APPLE)

    assert result is MoveResult.MOVED
    assert snake.head == (3, 2)
    assert len(snake.segments) == 1


def test_cannot_reverse_after_moving_right():
    snake = Snake()
    snake.advance(FAR_APPLE)

    assert snake.set_facing(Direction.LEFT) is False
    assert snake.facing is Direction.RIGHT
    assert snake.set_facing(Direction.UP) is True
    assert snake.facing is Direction.UP


def test_two_quick_turns_cannot_fold_back():
    snake = Snake()
    snake.advance(FAR_APPLE)

    assert snake.set_facing(Direction.UP)
    # still blocked: the last committed move was RIGHT
    assert not snake.set_facing(Direction.LEFT)
    assert snake.set_facing(Direction.DOWN)
    assert snake.facing is Direction.DOWN


def test_same_direction_is_a_no_op():
    snake = Snake()
    assert snake.set_facing(Direction.RIGHT) is False


def test_eating_grows_scores_and_speeds_up():
    snake = Snake()

    result = snake.advance((3, 2))

    assert result is MoveResult.ATE
    assert snake.score == 1
    assert snake.segments == [(3, 2), (2, 2)]
    assert snake.has_eaten
    assert snake.speed == pytest.approx(0.95)

    assert snake.advance(FAR_APPLE) is MoveResult.MOVED
    assert snake.segments == [(4, 2), (3, 2)]
    assert not snake.has_eaten


def test_length_tracks_score_every_tick():
    snake = Snake(segments=[(0, 0)])
    for i in range(9):
        apple = (i + 1, 0) if i % 2 == 0 else FAR_APPLE
        snake.advance(apple)
        assert len(snake.segments) == snake.score + 1
    assert snake.score == 5


@pytest.mark.parametrize(
    "start, facing",
    [((9, 5), Direction.RIGHT), ((0, 5), Direction.LEFT), ((4, 0), Direction.UP), ((4, 9), Direction.DOWN)],
)
def test_leaving_the_grid_does_not_touch_segments(start, facing):
    snake = Snake(segments=[start], facing=facing)

    result = snake.advance(FAR_APPLE)

    assert result is MoveResult.OUT_OF_BOUNDS
    assert snake.segments == [start]
    assert not snake.is_alive
    assert not snake.is_out_of_bounds()


def test_running_into_own_body():
    snake = Snake(segments=[(2, 2), (2, 3), (3, 3), (3, 2), (3, 1)], facing=Direction.RIGHT)

    result = snake.advance(FAR_APPLE)

    assert result is MoveResult.SELF_COLLISION
    assert not snake.is_alive
    assert snake.head == (3, 2)


def test_grown_snake_turns_into_own_body():
    snake = Snake(segments=[(2, 2), (2, 3), (3, 3), (3, 4)], facing=Direction.RIGHT)

    assert snake.advance((3, 2)) is MoveResult.ATE
    assert snake.segments == [(3, 2), (2, 2), (2, 3), (3, 3), (3, 4)]

    assert snake.set_facing(Direction.DOWN)
    result = snake.advance(FAR_APPLE)

    assert result is MoveResult.SELF_COLLISION
    assert not snake.is_alive
    assert snake.head == (3, 3)
    assert snake.segments[4] == (3, 3)


def test_following_own_tail_is_safe():
    snake = Snake(segments=[(2, 2), (2, 3), (3, 3), (3, 2)], facing=Direction.RIGHT)

    assert snake.advance(FAR_APPLE) is MoveResult.MOVED
    assert snake.is_alive
    assert snake.segments == [(3, 2), (2, 2), (2, 3), (3, 3)]


def test_single_segment_never_self_collides():
    snake = Snake()
    for _ in range(5):
        snake.advance(FAR_APPLE)
        assert not snake.is_colliding_with_itself()


def test_speed_is_clamped_at_floor():
    snake = Snake(cfg=Config(speed_step=0.05, min_speed=0.1))
    snake.speed = 0.12

    snake.advance((3, 2))
    assert snake.speed == pytest.approx(0.1)
    snake.advance((4, 2))
    assert snake.speed == pytest.approx(0.1)

from snakeswarm import constants
from snakeswarm.food import Food
from snakeswarm.settings import Settings
from snakeswarm.snake import Snake
from snakeswarm.utils import DOWN, LEFT, RIGHT, UP, Grid, Vec2
from snakeswarm.world import World


def test_new_world_has_one_centred_snake(world, grid):
    assert len(world.snakes) == 1
    lead = world.lead
    assert lead.head == grid.center
    assert lead.direction == RIGHT
    assert len(lead) == constants.INITIAL_SNAKE_LENGTH
    assert grid.contains(world.food.position)


def test_snake_waits_for_its_interval(world):
    world.food = Food(Vec2(0, 0))
    start = world.lead.head
    assert not world.update(constants.BASE_INTERVAL_MS - 1)
    assert world.lead.head == start
    world.update(1)
    assert world.lead.head == start + RIGHT
    assert world.lead.accumulated_ms == 0


def test_movement_wraps_across_the_edge(world, grid):
    world.snakes = [Snake.spawn(Vec2(0, 5), LEFT, grid)]
    world.food = Food(Vec2(15, 15))
    world.update(constants.BASE_INTERVAL_MS)
    assert world.lead.head == Vec2(grid.width - 1, 5)
    assert all(grid.contains(segment) for segment in world.lead.body)
    assert len(world.lead) == constants.INITIAL_SNAKE_LENGTH


def test_snakes_tick_independently(world, grid):
    fast = world.lead
    slow = Snake.spawn(Vec2(3, 3), RIGHT, grid)
    slow.interval_ms = 300
    world.snakes.append(slow)
    world.food = Food(Vec2(0, 0))
    world.update(constants.BASE_INTERVAL_MS)
    assert fast.head == grid.center + RIGHT
    assert slow.head == Vec2(3, 3)
    assert slow.accumulated_ms == constants.BASE_INTERVAL_MS


def test_eating_spawns_a_snake_and_grows_the_eater(world, grid):
    eater = world.lead
    world.food = Food(eater.head + RIGHT)
    world.set_heading(RIGHT)
    world.update(constants.BASE_INTERVAL_MS)

    assert len(world.snakes) == 2
    assert len(eater) == constants.INITIAL_SNAKE_LENGTH + 1
    assert not eater.growing
    newborn = world.snakes[1]
    assert newborn.direction == eater.direction
    assert len(newborn) == constants.INITIAL_SNAKE_LENGTH
    assert newborn.accumulated_ms == 0
    assert grid.contains(world.food.position)


def test_food_is_redrawn_when_eaten(world):
    eaten = world.food = Food(world.lead.head + RIGHT)
    world.update(constants.BASE_INTERVAL_MS)
    assert world.food is not eaten


def test_independent_speed_only_speeds_up_the_eater(world, grid):
    other = Snake.spawn(Vec2(3, 3), RIGHT, grid)
    world.snakes.append(other)
    eater = world.lead
    world.food = Food(eater.head + RIGHT)
    world.update(constants.BASE_INTERVAL_MS)
    assert eater.interval_ms == constants.BASE_INTERVAL_MS - constants.SPEED_DECREMENT_MS
    assert other.interval_ms == constants.BASE_INTERVAL_MS
    assert world.snakes[-1].interval_ms == constants.BASE_INTERVAL_MS


def test_global_speed_up_hits_every_existing_snake(grid, rng):
    world = World(grid, Settings(independent_speed=False), rng)
    other = Snake.spawn(Vec2(3, 3), RIGHT, grid)
    world.snakes.append(other)
    eater = world.lead
    world.food = Food(eater.head + RIGHT)
    world.update(constants.BASE_INTERVAL_MS)

    faster = constants.BASE_INTERVAL_MS - constants.SPEED_DECREMENT_MS
    assert eater.interval_ms == faster
    assert other.interval_ms == faster
    newborn = world.snakes[-1]
    assert newborn is not other
    assert newborn.interval_ms == constants.BASE_INTERVAL_MS


def test_global_speed_up_is_floor_clamped(grid, rng):
    world = World(grid, Settings(independent_speed=False), rng)
    world.lead.interval_ms = constants.MIN_INTERVAL_MS + 1
    world.food = Food(world.lead.head + RIGHT)
    world.update(constants.BASE_INTERVAL_MS)
    assert world.lead.interval_ms == constants.MIN_INTERVAL_MS


def test_no_speed_change_when_disabled(grid, rng):
    world = World(grid, Settings(speed_increase=False, independent_speed=False), rng)
    world.food = Food(world.lead.head + RIGHT)
    world.update(constants.BASE_INTERVAL_MS)
    assert len(world.snakes) == 2
    assert all(snake.interval_ms == constants.BASE_INTERVAL_MS for snake in world.snakes)


def test_set_heading_reaches_every_snake(world, grid):
    world.snakes.append(Snake.spawn(Vec2(2, 2), RIGHT, grid))
    world.set_heading(UP)
    assert world.heading == UP
    assert all(snake.direction == UP for snake in world.snakes)


def test_update_reports_collisions(world):
    world.snakes = [
        Snake(body=[Vec2(5, 5), Vec2(6, 5), Vec2(6, 6), Vec2(5, 6), Vec2(4, 6)], direction=DOWN)
    ]
    world.food = Food(Vec2(0, 0))
    assert world.update(constants.BASE_INTERVAL_MS)


def test_resize_keeps_count_and_headings(world, grid):
    world.snakes.append(Snake.spawn(Vec2(18, 18), UP, grid))
    world.snakes.append(Snake.spawn(Vec2(2, 15), LEFT, grid))
    world.food = Food(Vec2(15, 15))
    small = Grid(5, 5)
    world.resize(small)

    assert world.grid == small
    assert [snake.direction for snake in world.snakes] == [RIGHT, UP, LEFT]
    assert all(small.contains(segment) for snake in world.snakes for segment in snake.body)
    assert small.contains(world.food.position)


def test_resize_keeps_food_that_still_fits(world):
    world.food = Food(Vec2(2, 2))
    world.resize(Grid(5, 5))
    assert world.food.position == Vec2(2, 2)


def test_reset_discards_the_pool(world):
    world.food = Food(world.lead.head + RIGHT)
    world.update(constants.BASE_INTERVAL_MS)
    world.set_heading(UP)
    old_food = world.food
    world.reset()
    assert len(world.snakes) == 1
    assert world.heading == RIGHT
    assert world.lead.interval_ms == constants.BASE_INTERVAL_MS
    assert world.food is not old_food
    assert world.grid.contains(world.food.position)


def test_all_snakes_move_before_collisions_are_checked(world):
    chaser = Snake(body=[Vec2(4, 5), Vec2(3, 5), Vec2(2, 5)], direction=RIGHT)
    leader = Snake(body=[Vec2(5, 3), Vec2(5, 4), Vec2(5, 5)], direction=UP)
    world.snakes = [chaser, leader]
    world.food = Food(Vec2(0, 0))
    assert not world.update(constants.BASE_INTERVAL_MS)
    assert chaser.head == Vec2(5, 5)
    assert Vec2(5, 5) not in leader.body

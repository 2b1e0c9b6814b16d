from catch_collide import clamp_x, collides, fell_through
from catch_symbol import Basket, FallingSymbol, next_letter


def basket():
    return Basket(200, 700, 150, 75, 10)


def test_clamp_x():
    assert clamp_x(-5, 150, 600) == 0
    assert clamp_x(1000, 150, 600) == 450
    assert clamp_x(123, 150, 600) == 123
    assert clamp_x(10, 150, 100) == 0


def test_collides_inside_band():
    assert collides(FallingSymbol("A", 245, 690, 2), basket(), 60)


def test_no_collision_above_half_height():
    # bottom at 735, band starts at 737.5
    assert not collides(FallingSymbol("A", 245, 675, 2), basket(), 60)


def test_no_collision_below_basket():
    assert not collides(FallingSymbol("A", 245, 775, 2), basket(), 60)


def test_no_collision_when_centre_outside():
    assert not collides(FallingSymbol("A", 140, 700, 2), basket(), 60)
    assert not collides(FallingSymbol("A", 320, 700, 2), basket(), 60)
    assert collides(FallingSymbol("A", 319, 700, 2), basket(), 60)


def test_fell_through():
    assert fell_through(FallingSymbol("A", 0, 801, 2), 800)
    assert not fell_through(FallingSymbol("A", 0, 800, 2), 800)


def test_next_letter():
    assert next_letter("A") == "B"
    assert next_letter("Y") == "Z"
    assert next_letter("Z") is None

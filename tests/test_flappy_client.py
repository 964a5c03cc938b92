"""Tests for the display-free parts of the pygame frontend."""

from neon_flap.constants import STAR_COUNT
from neon_flap.flappy_client import make_star_field, parse_args


def test_star_field_is_seeded():
    """The same seed always draws the same sky."""
    assert make_star_field() == make_star_field()
    assert make_star_field(seed=1) != make_star_field(seed=2)


def test_star_field_fits_the_window():
    stars = make_star_field()
    assert len(stars) == STAR_COUNT
    for fx, fy, radius, alpha in stars:
        assert 0 <= fx < 1 and 0 <= fy < 1
        assert 0 <= radius < 1.5
        assert 0 <= alpha <= 127


def test_parse_args_defaults():
    args = parse_args([])
    assert args.username is None
    assert not args.quiet and not args.basic_debug
    assert (args.width, args.height) == (480, 800)

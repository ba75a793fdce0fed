"""Unit tests for colour parsing."""

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_moldraw2d_to_sys_path()

# local repo modules
from moldraw2d import colors


#============================================
def test_hex_colours():
	assert colors.to_colour("#ff0000") == colors.DrawColour(1.0, 0.0, 0.0)
	assert colors.to_colour("#00f") == colors.DrawColour(0.0, 0.0, 1.0)
	assert colors.to_colour(" #0F0 ") == colors.DrawColour(0.0, 1.0, 0.0)


#============================================
def test_unit_tuple_passes_through():
	colour = colors.to_colour((0.2, 0.4, 0.6))
	assert colour.rgb() == pytest.approx((0.2, 0.4, 0.6))
	assert colour.is_opaque()


#============================================
def test_byte_tuple_is_scaled():
	colour = colors.to_colour((255, 0, 127, 255))
	assert colour.r == pytest.approx(1.0)
	assert colour.b == pytest.approx(127 / 255.0)
	assert colour.a == pytest.approx(1.0)


#============================================
def test_translucent_colour():
	colour = colors.to_colour((0.0, 0.0, 0.0, 0.5))
	assert not colour.is_opaque()


#============================================
def test_draw_colour_is_returned_unchanged():
	assert colors.to_colour(colors.WHITE) is colors.WHITE


#============================================
@pytest.mark.parametrize("value", ["red", "#12", "#gggggg", (1.0, 0.0), None])
def test_invalid_colours(value):
	with pytest.raises(ValueError):
		colors.to_colour(value)

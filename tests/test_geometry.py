"""Unit tests for molecule/canvas point types and perpendicular helper."""

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_moldraw2d_to_sys_path()

# local repo modules
from moldraw2d import geometry


#============================================
def test_point_arithmetic_keeps_type():
	p = geometry.MolPoint(1.0, 2.0) + geometry.MolPoint(3.0, 4.0)
	assert p == geometry.MolPoint(4.0, 6.0)
	assert isinstance(p, geometry.MolPoint)
	assert (p / 2) == geometry.MolPoint(2.0, 3.0)
	assert 2 * geometry.CanvasPoint(1.0, 1.5) == geometry.CanvasPoint(2.0, 3.0)
	assert -geometry.MolPoint(1.0, -1.0) == geometry.MolPoint(-1.0, 1.0)


#============================================
def test_spaces_do_not_mix():
	mol = geometry.MolPoint(1.0, 1.0)
	canvas = geometry.CanvasPoint(1.0, 1.0)
	assert mol != canvas
	with pytest.raises(TypeError):
		mol + canvas
	with pytest.raises(TypeError):
		canvas - mol


#============================================
def test_point_unpacks():
	x, y = geometry.CanvasPoint(3.0, 4.0)
	assert (x, y) == (3.0, 4.0)
	assert geometry.CanvasPoint(3.0, 4.0).length() == pytest.approx(5.0)


#============================================
def test_perpendicular_horizontal():
	perp = geometry.calc_perpendicular(geometry.MolPoint(0.0, 0.0), geometry.MolPoint(2.0, 0.0))
	assert perp.x == pytest.approx(0.0)
	assert perp.y == pytest.approx(-1.0)
	assert isinstance(perp, geometry.MolPoint)


#============================================
def test_perpendicular_is_unit_and_orthogonal():
	p1 = geometry.MolPoint(1.0, 2.0)
	p2 = geometry.MolPoint(4.0, 6.0)
	perp = geometry.calc_perpendicular(p1, p2)
	direction = p2 - p1
	assert perp.length() == pytest.approx(1.0)
	assert perp.x * direction.x + perp.y * direction.y == pytest.approx(0.0)


#============================================
def test_perpendicular_degenerate_line():
	p = geometry.MolPoint(1.0, 1.0)
	with pytest.raises(ValueError):
		geometry.calc_perpendicular(p, p)

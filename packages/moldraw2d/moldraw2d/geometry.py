#--------------------------------------------------------------------------
#     This file is part of MolDraw2D - a chemical drawing backend
#     Copyright (C) 2026 the MolDraw2D developers
#
#     This program is free software; you can redistribute it and/or modify
#     it under the terms of the GNU General Public License as published by
#     the Free Software Foundation; either version 2 of the License, or
#     (at your option) any later version.
#
#     This program is distributed in the hope that it will be useful,
#     but WITHOUT ANY WARRANTY; without even the implied warranty of
#     MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#     GNU General Public License for more details.
#
#     Complete text of GNU GPL can be found in the file LICENSE in the
#     main directory of the program
#
#--------------------------------------------------------------------------

"""Points in molecule space and canvas space.

The two point types never mix: arithmetic between a MolPoint and a
CanvasPoint is a TypeError, and the two compare unequal even with the same
coordinates.
"""

# Standard Library
import dataclasses
import math


#============================================
@dataclasses.dataclass(frozen=True)
class _Point:
	x: float
	y: float

	def __iter__(self):
		yield self.x
		yield self.y

	def __add__(self, other):
		if type(other) is not type(self):
			return NotImplemented
		return type(self)(self.x + other.x, self.y + other.y)

	def __sub__(self, other):
		if type(other) is not type(self):
			return NotImplemented
		return type(self)(self.x - other.x, self.y - other.y)

	def __mul__(self, factor):
		if not isinstance(factor, (int, float)):
			return NotImplemented
		return type(self)(self.x * factor, self.y * factor)

	__rmul__ = __mul__

	def __truediv__(self, factor):
		if not isinstance(factor, (int, float)):
			return NotImplemented
		return type(self)(self.x / factor, self.y / factor)

	def __neg__(self):
		return type(self)(-self.x, -self.y)

	def length(self):
		return math.hypot(self.x, self.y)


#============================================
class MolPoint(_Point):
	"""Point in the layout engine's molecule coordinates."""
	pass


#============================================
class CanvasPoint(_Point):
	"""Point in output raster pixels."""
	pass


#============================================
def calc_perpendicular(p1, p2):
	"""Unit vector perpendicular to the line p1 -> p2.

	The vector is (p1 - p2) rotated a quarter turn counter-clockwise, so for
	p1=(0, 0), p2=(1, 0) it is (0, -1).

	Raises:
		ValueError: when p1 and p2 coincide.
	"""
	bx = p1.x - p2.x
	by = p1.y - p2.y
	length = math.hypot(bx, by)
	if length == 0:
		raise ValueError("p1 and p2 must be different")
	return type(p1)(-by / length, bx / length)

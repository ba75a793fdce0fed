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

"""Mapping between molecule coordinates and canvas pixels."""

# Standard Library
import dataclasses

# local repo modules
from . import errors
from . import geometry


# ranges below this are treated as a single point when fitting
_MIN_RANGE = 1e-4


#============================================
@dataclasses.dataclass(frozen=True)
class CoordinateMapper:
	"""Scale and translate molecule coordinates onto a canvas.

	Molecule y grows upwards, canvas y grows downwards, so the mapped y is
	measured from the bottom edge of a canvas `height` pixels tall.
	"""
	height: float
	scale: float = 1.0
	x_min: float = 0.0
	y_min: float = 0.0
	x_trans: float = 0.0
	y_trans: float = 0.0
	x_offset: float = 0.0
	y_offset: float = 0.0

	def to_canvas(self, point):
		errors.precondition(isinstance(point, geometry.MolPoint),
				f"expected a MolPoint, got {type(point).__name__}")
		x = self.scale * (point.x - self.x_min + self.x_trans)
		y = self.scale * (point.y - self.y_min + self.y_trans)
		x += self.x_offset
		y -= self.y_offset
		return geometry.CanvasPoint(x, self.height - y)

	def to_molecule(self, point):
		errors.precondition(isinstance(point, geometry.CanvasPoint),
				f"expected a CanvasPoint, got {type(point).__name__}")
		x = (point.x - self.x_offset) / self.scale
		y = (self.height - point.y + self.y_offset) / self.scale
		return geometry.MolPoint(x + self.x_min - self.x_trans, y + self.y_min - self.y_trans)

	@classmethod
	def fit(cls, points, width, height, padding=0.05):
		"""Build a mapper that centres the bounds of points on the canvas.

		Args:
			points: iterable of MolPoint.
			width: canvas width in pixels.
			height: canvas height in pixels.
			padding: fraction of the molecule range added on every side.

		Returns:
			CoordinateMapper
		"""
		points = list(points)
		errors.precondition(points, "cannot fit a mapper to no points")
		errors.precondition(width > 0 and height > 0, "canvas must have a positive size")
		xs = [point.x for point in points]
		ys = [point.y for point in points]
		x_min = min(xs)
		y_min = min(ys)
		x_range = max(xs) - x_min
		y_range = max(ys) - y_min
		if x_range < _MIN_RANGE:
			x_range = 1.0
			x_min -= 0.5
		if y_range < _MIN_RANGE:
			y_range = 1.0
			y_min -= 0.5
		x_min -= padding * x_range
		x_range *= 1 + 2 * padding
		y_min -= padding * y_range
		y_range *= 1 + 2 * padding
		scale = min(width / x_range, height / y_range)
		x_trans = (width / scale - x_range) / 2.0
		y_trans = (height / scale - y_range) / 2.0
		return cls(height=height, scale=scale, x_min=x_min, y_min=y_min,
				x_trans=x_trans, y_trans=y_trans)

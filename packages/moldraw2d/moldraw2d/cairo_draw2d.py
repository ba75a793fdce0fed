#--------------------------------------------------------------------------
#     This file is part of MolDraw2D - a chemical drawing backend
#     Copyright (C) 2026 the MolDraw2D developers
#     Drawing primitives follow RDKit MolDraw2DCairo,
#     Copyright (C) 2015 Greg Landrum, BSD license
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

"""Cairo raster backend for MolDraw2D drawing commands."""

# Standard Library
import contextlib
import dataclasses
import math

# Third Party
import cairo

# local repo modules
from . import colors
from . import draw_options
from . import errors
from . import geometry
from . import render_out
from . import text_markup
from . import transform


# share of the natural advance used by sub/superscript glyphs
SCRIPT_WIDTH_RATIO = 0.75
# superscripts rise a quarter above the normal glyph top
SUPERSCRIPT_HEIGHT_RATIO = 1.25
# empirical, glyph boxes are tighter than the visual line height
LABEL_HEIGHT_FACTOR = 1.2
# a period at normal size is too light next to other glyphs
PERIOD_SIZE_FACTOR = 1.5
# font scale of sub/superscript glyphs in draw_string
SCRIPT_FONT_SCALE = 0.75


class cairo_draw2d(object):
	"""Draw molecule-space primitives onto a cairo canvas.

	One instance is one drawing session: construct it, issue drawing calls in
	program order, then serialize with get_drawing_text or
	write_drawing_text. All primitives take MolPoint input and map it with
	the session mapper, except draw_char which takes an already mapped
	CanvasPoint.

	Usage:

	drawer = cairo_draw2d(300, 300, mapper=mapper)
	drawer.clear_drawing()
	drawer.draw_line(MolPoint(0, 0), MolPoint(1.5, 0))
	png_bytes = drawer.get_drawing_text()

	Without a context argument the session owns a new ARGB32 image surface of
	width x height pixels; with one it draws into the caller's context.
	"""

	def __init__(self, width, height, context=None, options=None, state=None, mapper=None):
		self.width = width
		self.height = height
		self.options = options or draw_options.DrawOptions()
		if state is None:
			state = draw_options.DrawState()
		self.state = state
		self.mapper = mapper or transform.CoordinateMapper(height=height)
		self._owned_surface = None
		if context is None:
			self._owned_surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, int(width), int(height))
			context = cairo.Context(self._owned_surface)
		self.context = context
		self.init_drawing()

	@property
	def surface(self):
		self._require_context()
		return self.context.get_target()

	## ------------------------------ session ------------------------------

	def init_drawing(self):
		self._require_context()
		self.context.select_font_face(self.options.font_family,
				cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL)
		self.context.set_font_size(self.options.font_size)
		self.context.set_line_cap(cairo.LINE_CAP_BUTT)
		self._apply_source(self.state.colour)

	def finish_drawing(self):
		"""Nothing is buffered by this backend."""
		self._require_context()

	def close(self):
		"""End the session; further calls raise PreconditionError."""
		if self._owned_surface is not None:
			self._owned_surface.finish()
			self._owned_surface = None
		self.context = None

	## ------------------------------ pen state ------------------------------

	def set_colour(self, colour):
		self._require_context()
		colour = colors.to_colour(colour)
		self.state.colour = colour
		self._apply_source(colour)

	def set_line_width(self, width):
		self._require_context()
		self.state.line_width = width

	def set_dash(self, pattern):
		self._require_context()
		self.state.dash = tuple(float(value) for value in pattern)

	def set_fill_polys(self, fill_polys):
		self._require_context()
		self.state.fill_polys = bool(fill_polys)

	def set_font_size(self, size):
		"""Change the base font size used for drawing and measuring text."""
		self._require_context()
		self.options = dataclasses.replace(self.options, font_size=size)
		self.context.set_font_size(size)

	## ------------------------------ primitives ------------------------------

	def draw_line(self, p1, p2):
		self._require_context()
		c1 = self.mapper.to_canvas(p1)
		c2 = self.mapper.to_canvas(p2)
		self.context.set_line_width(self._draw_line_width())
		# the list stays referenced until after stroke()
		dashes = list(self.state.dash)
		self.context.set_dash(dashes, 0)
		self.context.move_to(c1.x, c1.y)
		self.context.line_to(c2.x, c2.y)
		self.context.stroke()

	def draw_wavy_line(self, p1, p2, col1, col2, n_segments=16, vert_offset=0.05):
		"""Draw a squiggle of alternating bezier arcs from p1 to p2.

		Each of the n_segments equal sub-intervals is one cubic bezier whose
		control points sit at 1/3 and 2/3 of the sub-interval, pushed
		vert_offset (molecule units) to alternating sides of the line. Odd
		segment counts are bumped to the next even number so the wave is
		symmetric.

		Only col1 is used; col2 is accepted for the two-colour bond contract
		but the whole wave is stroked in one colour.
		"""
		self._require_context()
		errors.precondition(n_segments > 1, "too few segments")
		self._require_mol_points(p1, p2)
		errors.precondition(p1 != p2, "wavy line end points must be different")
		if n_segments % 2:
			n_segments += 1

		perp = geometry.calc_perpendicular(p1, p2) * vert_offset
		delta = (p2 - p1) / n_segments
		c1 = self.mapper.to_canvas(p1)

		self.context.set_line_width(self._draw_line_width())
		self.context.set_dash([], 0)
		self.set_colour(col1)
		self.context.move_to(c1.x, c1.y)
		for i in range(n_segments):
			side = -1 if i % 2 else 1
			start = p1 + delta * i
			seg_end = self.mapper.to_canvas(start + delta)
			cpt1 = self.mapper.to_canvas(start + delta / 3.0 + perp * side)
			cpt2 = self.mapper.to_canvas(start + delta * 2.0 / 3.0 + perp * side)
			self.context.curve_to(cpt1.x, cpt1.y, cpt2.x, cpt2.y, seg_end.x, seg_end.y)
		self.context.stroke()

	def draw_char(self, char, origin, font_scale=1.0):
		"""Draw char with its baseline-left corner at the canvas point origin."""
		self._require_context()
		errors.precondition(len(char) == 1, "draw_char draws exactly one character")
		errors.precondition(isinstance(origin, geometry.CanvasPoint),
				f"draw_char expects a CanvasPoint, got {type(origin).__name__}")
		size = self.options.font_size * font_scale
		if char == ".":
			size *= PERIOD_SIZE_FACTOR
		with self._font_size(size):
			self.context.move_to(origin.x, origin.y)
			self.context.show_text(char)
			self.context.stroke()

	def draw_polygon(self, points):
		"""Outline points in order, filled as well when fill_polys is set.

		Caps are butt and joins bevelled for the outline; the previous cap and
		join styles are restored afterwards.
		"""
		self._require_context()
		points = list(points)
		errors.precondition(len(points) >= 3, "must have at least three points")
		canvas_points = [self.mapper.to_canvas(point) for point in points]
		width = self._draw_line_width()
		with self._line_style(cairo.LINE_CAP_BUTT, cairo.LINE_JOIN_BEVEL):
			self.context.set_dash([], 0)
			self.context.set_line_width(width)
			for index, point in enumerate(canvas_points):
				if index == 0:
					self.context.move_to(point.x, point.y)
				else:
					self.context.line_to(point.x, point.y)
			if self.state.fill_polys:
				self.context.close_path()
				self.context.fill_preserve()
			self.context.stroke()

	def draw_triangle(self, p1, p2, p3):
		self.draw_polygon((p1, p2, p3))

	def draw_rect(self, corner1, corner2):
		self._require_mol_points(corner1, corner2)
		self.draw_polygon((
			corner1,
			geometry.MolPoint(corner2.x, corner1.y),
			corner2,
			geometry.MolPoint(corner1.x, corner2.y),
		))

	def draw_ellipse(self, corner1, corner2):
		"""Draw the ellipse inscribed in the box spanned by two corners."""
		self._require_context()
		c1 = self.mapper.to_canvas(corner1)
		c2 = self.mapper.to_canvas(corner2)
		rx = abs(c2.x - c1.x) / 2.0
		ry = abs(c2.y - c1.y) / 2.0
		errors.precondition(rx > 0 and ry > 0, "ellipse bounding box is empty")
		self.context.set_dash([], 0)
		self.context.set_line_width(self._draw_line_width())
		self.context.new_path()
		# the path survives restore(), the scaled matrix does not
		self.context.save()
		self.context.translate((c1.x + c2.x) / 2.0, (c1.y + c2.y) / 2.0)
		self.context.scale(rx, ry)
		self.context.arc(0.0, 0.0, 1.0, 0.0, 2 * math.pi)
		self.context.restore()
		self.context.close_path()
		if self.state.fill_polys:
			self.context.fill_preserve()
		self.context.stroke()

	def clear_drawing(self):
		self._require_context()
		self.set_colour(self.options.background_colour)
		self.context.rectangle(0, 0, self.width, self.height)
		self.context.fill()

	## ------------------------------ text ------------------------------

	def get_string_size(self, label):
		"""Width and height label would take at the base font size.

		<sub> and <sup> markup is not measured; sub- and superscript glyphs
		count with 3/4 of their advance. The height is the tallest glyph,
		raised by a quarter when the label has a superscript, times an
		empirical 1.2.

		Returns:
			tuple[float, float]: (width, height) in canvas pixels
		"""
		self._require_context()
		label_width = 0.0
		label_height = 0.0
		had_a_super = False
		for char, mode in text_markup.iter_label_chars(label):
			advance, height = self._glyph_extents(char)
			label_height = max(label_height, height)
			if mode == text_markup.TEXT_DRAW_SUBSCRIPT:
				advance *= SCRIPT_WIDTH_RATIO
			elif mode == text_markup.TEXT_DRAW_SUPERSCRIPT:
				advance *= SCRIPT_WIDTH_RATIO
				had_a_super = True
			label_width += advance

		if had_a_super:
			label_height *= SUPERSCRIPT_HEIGHT_RATIO
		label_height *= LABEL_HEIGHT_FACTOR
		return label_width, label_height

	def draw_string(self, label, centre):
		"""Draw a marked-up label centred on the molecule point centre."""
		self._require_context()
		origin = self.mapper.to_canvas(centre)
		label_width, label_height = self.get_string_size(label)
		x = origin.x - label_width / 2.0
		baseline = origin.y + label_height / 2.0
		for char, mode in text_markup.iter_label_chars(label):
			advance, height = self._glyph_extents(char)
			y = baseline
			font_scale = 1.0
			if mode == text_markup.TEXT_DRAW_SUBSCRIPT:
				advance *= SCRIPT_WIDTH_RATIO
				font_scale = SCRIPT_FONT_SCALE
				y += 0.5 * height
			elif mode == text_markup.TEXT_DRAW_SUPERSCRIPT:
				advance *= SCRIPT_WIDTH_RATIO
				font_scale = SCRIPT_FONT_SCALE
				y -= 0.5 * height
			self.draw_char(char, geometry.CanvasPoint(x, y), font_scale=font_scale)
			x += advance

	## ------------------------------ output ------------------------------

	def get_drawing_text(self):
		"""Return the canvas encoded as PNG bytes."""
		self._require_context()
		return render_out.surface_to_png_bytes(self.context.get_target())

	def write_drawing_text(self, filename):
		self._require_context()
		render_out.write_png(self.context.get_target(), filename)

	## ------------------------------ lowlevel helpers ------------------------------

	def _require_context(self):
		errors.precondition(self.context is not None, "no draw context")

	def _require_mol_points(self, *points):
		for point in points:
			errors.precondition(isinstance(point, geometry.MolPoint),
					f"expected a MolPoint, got {type(point).__name__}")

	def _draw_line_width(self):
		# cairo gets whole pixels
		return int(self.state.draw_line_width(self.mapper, self.options))

	def _apply_source(self, colour):
		if colour.is_opaque():
			self.context.set_source_rgb(colour.r, colour.g, colour.b)
		else:
			self.context.set_source_rgba(colour.r, colour.g, colour.b, colour.a)

	def _glyph_extents(self, char):
		with self._font_size(self.options.font_size):
			extents = self.context.text_extents(char)
		return extents.x_advance, extents.height

	@contextlib.contextmanager
	def _font_size(self, size):
		self.context.set_font_size(size)
		try:
			yield
		finally:
			self.context.set_font_size(self.options.font_size)

	@contextlib.contextmanager
	def _line_style(self, cap, join):
		old_cap = self.context.get_line_cap()
		old_join = self.context.get_line_join()
		self.context.set_line_cap(cap)
		self.context.set_line_join(join)
		try:
			yield
		finally:
			self.context.set_line_cap(old_cap)
			self.context.set_line_join(old_join)

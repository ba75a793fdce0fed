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

"""Drawing colours and conversion from hex strings and channel tuples."""

# Standard Library
import dataclasses


#============================================
@dataclasses.dataclass(frozen=True)
class DrawColour:
	r: float
	g: float
	b: float
	a: float = 1.0

	def rgb(self):
		return (self.r, self.g, self.b)

	def is_opaque(self):
		return self.a >= 1.0


BLACK = DrawColour(0.0, 0.0, 0.0)
WHITE = DrawColour(1.0, 1.0, 1.0)


#============================================
def _expand_hex(text):
	value = text[1:]
	if len(value) == 3:
		value = "".join(ch * 2 for ch in value)
	if len(value) != 6:
		raise ValueError(f"Invalid hex colour: {text!r}")
	return value


#============================================
def _hex_to_colour(text):
	value = _expand_hex(text)
	try:
		r = int(value[0:2], 16) / 255.0
		g = int(value[2:4], 16) / 255.0
		b = int(value[4:6], 16) / 255.0
	except ValueError as exc:
		raise ValueError(f"Invalid hex colour: {text!r}") from exc
	return DrawColour(r, g, b)


#============================================
def _tuple_to_colour(values):
	if len(values) not in (3, 4):
		raise ValueError(f"Colour tuple needs 3 or 4 channels, got {len(values)}")
	values = [float(value) for value in values]
	# 0-255 channels are recognised by any value above 1.0
	scale = 1.0
	if max(values[:3]) > 1.0:
		scale = 1.0 / 255.0
	r = min(max(values[0] * scale, 0.0), 1.0)
	g = min(max(values[1] * scale, 0.0), 1.0)
	b = min(max(values[2] * scale, 0.0), 1.0)
	a = 1.0
	if len(values) == 4:
		a = values[3]
		if a > 1.0:
			a = a / 255.0
		a = min(max(a, 0.0), 1.0)
	return DrawColour(r, g, b, a)


#============================================
def to_colour(value):
	"""Convert a colour description into a DrawColour.

	Args:
		value: DrawColour, "#rgb" / "#rrggbb" string, or a 3/4 channel
			tuple with either 0-1 or 0-255 channels.

	Returns:
		DrawColour
	"""
	if isinstance(value, DrawColour):
		return value
	if isinstance(value, str):
		text = value.strip()
		if not text.startswith("#"):
			raise ValueError(f"Invalid hex colour: {value!r}")
		return _hex_to_colour(text)
	if isinstance(value, (tuple, list)):
		return _tuple_to_colour(value)
	raise ValueError(f"Unsupported colour value: {value!r}")


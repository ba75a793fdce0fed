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

"""Drawing options shared with the layout engine and the pen state."""

# Standard Library
import dataclasses

# local repo modules
from . import colors


#============================================
@dataclasses.dataclass(frozen=True)
class DrawOptions:
	background_colour: colors.DrawColour = colors.WHITE
	font_family: str = "sans"
	# base font size in canvas pixels
	font_size: float = 12.0
	# scale the line width with the molecule-to-canvas scale
	scale_bond_width: bool = False


#============================================
@dataclasses.dataclass
class DrawState:
	"""Pen state read and written by the layout engine and the backend."""
	colour: colors.DrawColour = colors.BLACK
	line_width: float = 2.0
	dash: tuple = ()
	fill_polys: bool = True

	def draw_line_width(self, mapper, options):
		width = self.line_width
		if options.scale_bond_width:
			width *= mapper.scale * 0.02
			if width < 0.0:
				width = 0.0
		return width


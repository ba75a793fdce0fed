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

"""Cairo raster backend for 2D molecule drawings."""

# local repo modules
from . import cairo_draw2d
from . import colors
from . import draw_options
from . import errors
from . import geometry
from . import render_out
from . import text_markup
from . import transform

from .colors import DrawColour
from .draw_options import DrawOptions
from .draw_options import DrawState
from .errors import PreconditionError
from .geometry import CanvasPoint
from .geometry import MolPoint
from .transform import CoordinateMapper


__version__ = "0.1.0"

__all__ = [
	"CanvasPoint",
	"CoordinateMapper",
	"DrawColour",
	"DrawOptions",
	"DrawState",
	"MolPoint",
	"PreconditionError",
	"cairo_draw2d",
	"colors",
	"draw_options",
	"errors",
	"geometry",
	"render_out",
	"text_markup",
	"transform",
]

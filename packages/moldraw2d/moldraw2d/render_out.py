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

"""PNG serialization of a finished drawing."""

# Standard Library
import os
import sys

# Third Party
import cairo


#============================================
class _ChunkAccumulator:
	"""Write target for cairo's PNG stream, keeps chunks in emission order."""

	def __init__(self):
		self.chunks = []

	def write(self, data):
		self.chunks.append(bytes(data))
		return len(data)

	def getvalue(self):
		return b"".join(self.chunks)


#============================================
def surface_to_png_bytes(surface):
	accumulator = _ChunkAccumulator()
	surface.write_to_png(accumulator)
	return accumulator.getvalue()


#============================================
def write_png(surface, filename):
	"""Write surface as PNG to filename, reporting failures on stderr.

	A failed write is not raised; callers check for the file themselves.
	"""
	try:
		surface.write_to_png(filename)
	except (cairo.Error, OSError):
		print(f"Failed to write PNG file {filename}", file=sys.stderr)


#============================================
def _resolve_format(filename, format_override):
	if format_override:
		output_format = format_override.lower()
	else:
		output_format = os.path.splitext(filename)[1].lower().lstrip(".")
	if output_format != "png":
		raise ValueError(
			"Output format could not be determined; only png output is supported."
		)
	return output_format


#============================================
def drawing_to_output(drawer, filename, format=None):
	"""Write a finished drawing to filename through a single entry point."""
	_resolve_format(filename, format)
	drawer.finish_drawing()
	drawer.write_drawing_text(filename)
	return filename

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

"""Contract-violation faults raised by the drawing backend."""


#============================================
class PreconditionError(RuntimeError):
	"""A caller broke the drawing contract (missing canvas, bad arguments)."""
	pass


#============================================
def precondition(condition, message):
	"""Raise PreconditionError with message when condition is false."""
	if not condition:
		raise PreconditionError(message)

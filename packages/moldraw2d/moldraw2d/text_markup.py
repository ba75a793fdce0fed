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

"""Inline <sub>/<sup> markup in atom labels."""


TEXT_DRAW_NORMAL = "normal"
TEXT_DRAW_SUBSCRIPT = "subscript"
TEXT_DRAW_SUPERSCRIPT = "superscript"

_MARKUP_TAGS = (
	("<sub>", TEXT_DRAW_SUBSCRIPT),
	("<sup>", TEXT_DRAW_SUPERSCRIPT),
	("</sub>", TEXT_DRAW_NORMAL),
	("</sup>", TEXT_DRAW_NORMAL),
)


#============================================
def match_markup_tag(label, index):
	"""Check for a markup tag starting at label[index].

	Returns:
		tuple[str, int] | None: (new draw mode, tag length) or None when
		label[index] does not start a tag.
	"""
	if label[index] != "<":
		return None
	for tag, mode in _MARKUP_TAGS:
		if label.startswith(tag, index):
			return mode, len(tag)
	return None


#============================================
def iter_label_chars(label):
	"""Yield (char, draw_mode) for every literal character of label."""
	mode = TEXT_DRAW_NORMAL
	index = 0
	length = len(label)
	while index < length:
		match = match_markup_tag(label, index)
		if match:
			mode, tag_length = match
			index += tag_length
			continue
		yield label[index], mode
		index += 1


#============================================
def strip_markup(label):
	return "".join(char for char, _mode in iter_label_chars(label))

"""Cairo context stand-ins that record every call issued by the backend."""

# Standard Library
import collections
import sys

# Third Party
import cairo


TextExtents = collections.namedtuple(
	"TextExtents",
	("x_bearing", "y_bearing", "width", "height", "x_advance", "y_advance"),
)


#============================================
class RecordingContext:
	"""Forward calls to a real cairo.Context and keep (name, args) for each."""

	def __init__(self, context):
		self._context = context
		self.calls = []

	def __getattr__(self, name):
		target = getattr(self._context, name)
		if not callable(target):
			return target

		def recorder(*args, **kwargs):
			self.calls.append((name, args))
			return target(*args, **kwargs)
		return recorder

	def calls_named(self, name):
		return [args for call_name, args in self.calls if call_name == name]

	def names(self):
		return [call_name for call_name, _args in self.calls]

	def clear(self):
		self.calls = []


#============================================
class FixedMetricsContext(RecordingContext):
	"""Recording context with font metrics that do not depend on installed fonts.

	Every glyph advances 0.6 * size and is 0.7 * size tall, a period is
	0.1 * size tall.
	"""

	def __init__(self, context):
		super().__init__(context)
		self.font_size = None

	def set_font_size(self, size):
		self.calls.append(("set_font_size", (size,)))
		self.font_size = size
		self._context.set_font_size(size)

	def text_extents(self, text):
		self.calls.append(("text_extents", (text,)))
		advance = 0.6 * self.font_size * len(text)
		height = 0.7 * self.font_size
		if text == ".":
			height = 0.1 * self.font_size
		return TextExtents(0.0, -height, advance, height, advance, 0.0)


#============================================
def make_surface(width=100, height=100):
	return cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)


#============================================
def make_context(width=100, height=100):
	return cairo.Context(make_surface(width, height))


#============================================
def recording_context(width=100, height=100):
	return RecordingContext(make_context(width, height))


#============================================
def fixed_metrics_context(width=100, height=100):
	return FixedMetricsContext(make_context(width, height))


#============================================
def pixel_alpha(surface, x, y):
	"""Alpha channel of one ARGB32 pixel."""
	return pixel_argb(surface, x, y)[0]


#============================================
def pixel_argb(surface, x, y):
	surface.flush()
	data = bytes(surface.get_data())
	offset = y * surface.get_stride() + x * 4
	value = int.from_bytes(data[offset:offset + 4], byteorder=sys.byteorder)
	return ((value >> 24) & 0xff, (value >> 16) & 0xff, (value >> 8) & 0xff, value & 0xff)



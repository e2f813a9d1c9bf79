"""UniMath — LaTeX-style escape words to Unicode math symbols."""
from unimath.engine import UnicodeMath
from unimath.expander import expand
from unimath.completer import suggest
from unimath.locator import locate

__version__ = "0.1.0"

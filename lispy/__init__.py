# Core type alias for Lispy's data model.
# Runtime values are the tagged variants in lispy.types.values; BuiltinFn
# names the shape of a primitive: it takes the calling Environment and its
# already-evaluated arguments and returns a value.

from typing import Any, Callable

# Builtin primitive signature: (env, args) -> value
BuiltinFn = Callable[[Any, list], Any]

__version__ = "0.1.0"

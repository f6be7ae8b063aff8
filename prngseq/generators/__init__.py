"""Built-in generators; importing this package registers them."""

from . import lcg, mersenne, randu, xorshift  # noqa: F401

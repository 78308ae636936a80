"""tzclock - user configuration for a terminal world clock.

Reads ~/.config/tz/conf.toml, resolves every configured timezone against
the host timezone database, and exposes the result as an immutable Config
for the rendering and input-handling layers.

Package entry point. Exports the version string only; functional modules
are imported lazily by main.py.
"""

__version__ = "0.1.0"

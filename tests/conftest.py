"""Root conftest — points HOME at a scratch directory BEFORE tzclock is imported.

ConfigLoader falls back to Path.home(), so without this a test that loads
the default location would read the developer's real ~/.config/tz/conf.toml.
"""

import os
import tempfile

# Force-set (not setdefault) to prevent the real home from leaking into tests
os.environ["HOME"] = tempfile.mkdtemp(prefix="tzclock-test-")

"""Plugin-specific fixtures for Upload plugin tests.

Import shared fixtures from main conftest.
"""

# Import all shared fixtures
from tests.conftest import *  # noqa: F401, F403

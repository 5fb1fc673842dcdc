"""Unit test configuration.

Unit tests are pure and in-process; HTTP is mocked with respx.
"""

import pytest


pytestmark = pytest.mark.unit

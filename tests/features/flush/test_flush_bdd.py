"""BDD tests for flushing a queue to the remote logger.

Step definitions are in conftest.py.
"""

import pytest
from pytest_bdd import scenarios

scenarios("flush.feature")

pytestmark = [
    pytest.mark.tier(2),
    pytest.mark.tra("Remote.Flush.EndToEnd"),
]

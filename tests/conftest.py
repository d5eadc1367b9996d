import random

import pytest


DECISION_FLOW = """graph TD
    A[Start] --> B{Decision}
    B -->|Yes| C[Process A]
    B -->|No| D[Process B]
    C --> E[End]
    D --> E
"""


@pytest.fixture
def decision_flow() -> str:
    return DECISION_FLOW


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)

import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for `import planar_toolkit` without install
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def four_points():
    return [[1, 2], [5, 6.6], [-7, 8.1], [3.1, -1.7]]


@pytest.fixture
def eleven_points():
    return [
        [5.4, 0.3],
        [0.8, 7.3],
        [1.3, 1.2],
        [7.6, 9],
        [4.6, 6.7],
        [3.8, 8.4],
        [8.9, 9],
        [0, 2.1],
        [8.9, 7.6],
        [6.3, 8.1],
        [9, 2.8],
    ]

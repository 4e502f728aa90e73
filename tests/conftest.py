import io
import sys
from pathlib import Path

import pytest

# Add project root to sys.path for local package imports
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cookielog_core.line_source import LineSource  # noqa: E402

SAMPLE_LOG = """cookie,timestamp
AtY0laUfhglK3lC7,2018-12-09T14:19:00+00:00
SAZuXPGUrfbcn5UA,2018-12-09T10:13:00+00:00
5UAVanZf6UtGyKVS,2018-12-09T07:25:00+00:00
AtY0laUfhglK3lC7,2018-12-09T06:19:00+00:00
SAZuXPGUrfbcn5UA,2018-12-08T22:03:00+00:00
4sMM2LxV07bPJzwf,2018-12-08T21:30:00+00:00
fbcn5UAVanZf6UtG,2018-12-08T09:30:00+00:00
4sMM2LxV07bPJzwf,2018-12-07T23:30:00+00:00
"""


@pytest.fixture
def make_source():
    """Factory for a LineSource over in-memory text."""
    def _make(text: str) -> LineSource:
        return LineSource(io.StringIO(text), name="<test>")
    return _make


@pytest.fixture
def sample_log(tmp_path):
    """Sample cookie log written to disk."""
    path = tmp_path / 'cookie_log.csv'
    path.write_text(SAMPLE_LOG, encoding='utf-8')
    return path

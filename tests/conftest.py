# tests/conftest.py
import logging
import sys
import pytest
from datetime import datetime, timezone
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from clippings.models import Book, Clipping

FIXTURES = Path(__file__).parent / 'fixtures'

@pytest.fixture
def sample_clippings_path():
    """Path to a small export with four valid records for three books."""
    return FIXTURES / 'clippings_sample.txt'

@pytest.fixture
def sample_record():
    """The three lines of one well-formed record."""
    return [
        "乌合之众:大众心理研究 (社会学经典名著) (古斯塔夫·勒宠)",
        "- 您在位置 #116-119的标注 | 添加于 2015年2月14日星期六 下午3:21:03",
        "群体只会干两种事——锦上添花或落井下石。",
    ]

@pytest.fixture
def make_clipping():
    """Factory for clippings with a fixed timestamp."""
    def _make(text="A quoted passage", position="#1-2",
              date_time=datetime(2015, 2, 14, 15, 21, 3, tzinfo=timezone.utc)):
        return Clipping(position=position, date_time=date_time, text=text)
    return _make

@pytest.fixture
def sample_book():
    return Book(title="Test Book", author="Test Author")

@pytest.fixture(autouse=True)
def restore_clippings_logger():
    """Undo any handler/propagation changes made by setup_logging."""
    logger = logging.getLogger('clippings')
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate

from datetime import datetime, timezone

import pytest
from loguru import logger

from .workbooks import build_workbook, names_frame

FIXED_DATE = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def roster_bytes() -> bytes:
    return build_workbook(
        {
            "Students": names_frame("Ana", "Ben", "Cai", "Dee", "Eli", "Fay", "Gus"),
            "Mentors": names_frame("Mia", "Max", "Mo"),
            "Judges": names_frame("Jo", "Jay"),
        }
    )


@pytest.fixture
def log_messages():
    messages: list[str] = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)

from datetime import date

import pytest

from survey.models import DraftResponse
from tests.builders import TODAY, build_valid_draft


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def valid_draft() -> DraftResponse:
    return build_valid_draft()

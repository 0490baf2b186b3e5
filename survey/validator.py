# survey/validator.py
from __future__ import annotations

from datetime import date
from typing import Dict, Optional

from .models import DraftResponse
from .schema import (
    AGE_RANGE_MESSAGE,
    DATE_OF_BIRTH,
    MAX_AGE,
    MIN_AGE,
    RATING_REQUIRED_MESSAGE,
    REQUIRED_MESSAGES,
    TEXT_FIELDS,
    rating_field_id,
)


def calculate_age(date_of_birth: date, as_of: date) -> int:
    """Whole years between ``date_of_birth`` and ``as_of``.

    The naive year difference is reduced by one when the birthday has not
    happened yet in the ``as_of`` year. A Feb 29 birthday counts as reached
    on Mar 1 in common years.
    """
    age = as_of.year - date_of_birth.year
    if (as_of.month, as_of.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def validate(draft: DraftResponse, today: Optional[date] = None) -> Dict[str, str]:
    """Return ``{field_id: message}`` for every problem found in ``draft``.

    An empty dict means the draft can be committed. The draft is not modified
    and nothing is raised for invalid input.

    Args:
        draft: the response as currently filled in.
        today: reference date for the age rule; defaults to the local date.
    """
    if today is None:
        today = date.today()

    errors: Dict[str, str] = {}

    for field_id in TEXT_FIELDS:
        value = getattr(draft, DraftResponse.attribute_for(field_id))
        if not value.strip():
            errors[field_id] = REQUIRED_MESSAGES[field_id]

    if draft.date_of_birth is None:
        errors[DATE_OF_BIRTH] = REQUIRED_MESSAGES[DATE_OF_BIRTH]
    else:
        # replaces the required message, never appended to it
        age = calculate_age(draft.date_of_birth, today)
        if age < MIN_AGE or age > MAX_AGE:
            errors[DATE_OF_BIRTH] = AGE_RANGE_MESSAGE

    # out-of-range ratings cannot get this far, the model rejects them
    for key, value in draft.ratings.by_key().items():
        if value is None:
            errors[rating_field_id(key)] = RATING_REQUIRED_MESSAGE

    return errors

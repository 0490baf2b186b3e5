"""
Tests for the response validator.

Covers:
    - Required text fields (trimmed), date of birth and ratings
    - Isolation: one missing field flags only that field
    - Age boundaries 5 and 120, and the birthday-not-yet-reached rule
    - Purity: no mutation, same answer on every call
"""

from datetime import date

import pytest
from pydantic import ValidationError

from survey.models import DraftRatings, DraftResponse, FavoriteFoods, empty_draft
from survey.schema import AGE_RANGE_MESSAGE, REQUIRED_MESSAGES, all_field_ids
from survey.validator import calculate_age, validate

from tests.builders import TODAY, build_valid_draft


def test_valid_draft_has_no_errors(valid_draft, today):
    """A fully completed draft is accepted."""
    assert validate(valid_draft, today=today) == {}


def test_empty_draft_flags_every_required_field(today):
    """The blank form reports all eight required identifiers."""
    errors = validate(empty_draft(), today=today)

    assert sorted(errors) == sorted(all_field_ids())
    assert errors["fullName"] == "Full name is required"
    assert errors["email"] == "Email is required"
    assert errors["dateOfBirth"] == "Date of birth is required"
    assert errors["contactNumber"] == "Contact number is required"
    assert errors["rating-watchTV"] == "Please select a rating"


@pytest.mark.parametrize(
    "overrides, field_id",
    [
        ({"fullName": ""}, "fullName"),
        ({"fullName": "   "}, "fullName"),
        ({"email": "\t\n"}, "email"),
        ({"contactNumber": " "}, "contactNumber"),
        ({"dateOfBirth": None}, "dateOfBirth"),
    ],
)
def test_missing_text_or_date_is_isolated(overrides, field_id, today):
    """Only the missing field is reported."""
    errors = validate(build_valid_draft(**overrides), today=today)

    assert list(errors) == [field_id]
    assert errors[field_id] == REQUIRED_MESSAGES[field_id]


@pytest.mark.parametrize("key", ["watchMovies", "listenToRadio", "eatOut", "watchTV"])
def test_missing_rating_is_keyed_by_rating_id(key, today):
    """An unselected rating is reported as rating-<key>."""
    ratings = {"watchMovies": 1, "listenToRadio": 2, "eatOut": 3, "watchTV": 4}
    ratings[key] = None
    draft = build_valid_draft(ratings=DraftRatings(**ratings))

    assert validate(draft, today=today) == {f"rating-{key}": "Please select a rating"}


@pytest.mark.parametrize(
    "date_of_birth, accepted",
    [
        (date(2021, 10, 18), True),   # exactly 5 today
        (date(2021, 10, 19), False),  # 4, turns 5 tomorrow
        (date(1906, 10, 18), True),   # exactly 120 today
        (date(1905, 10, 19), True),   # still 120, 121 tomorrow
        (date(1905, 10, 18), False),  # 121
        (date(2030, 1, 1), False),    # not born yet
    ],
)
def test_age_boundaries(date_of_birth, accepted, today):
    """Ages 5 and 120 pass, 4 and 121 fail on the dateOfBirth key."""
    errors = validate(build_valid_draft(dateOfBirth=date_of_birth), today=today)

    if accepted:
        assert errors == {}
    else:
        assert errors == {"dateOfBirth": AGE_RANGE_MESSAGE}


def test_age_error_applies_when_other_fields_are_invalid(today):
    """The range error is reported alongside unrelated errors."""
    draft = build_valid_draft(fullName="", dateOfBirth=date(2024, 1, 1))
    errors = validate(draft, today=today)

    assert errors == {"fullName": "Full name is required", "dateOfBirth": AGE_RANGE_MESSAGE}


def test_favorite_foods_are_never_validated(today):
    """No food selected, or all of them, is fine."""
    none_selected = build_valid_draft(favoriteFoods=FavoriteFoods())
    all_selected = build_valid_draft(
        favoriteFoods=FavoriteFoods(pizza=True, pasta=True, papAndWors=True, other=True)
    )

    assert validate(none_selected, today=today) == {}
    assert validate(all_selected, today=today) == {}


def test_validate_is_idempotent_and_does_not_mutate(today):
    """Two calls give the same errors and the draft is unchanged."""
    draft = build_valid_draft(email="  ", ratings=DraftRatings(watchMovies=2))
    before = draft.model_dump()

    first = validate(draft, today=today)
    second = validate(draft, today=today)

    assert first == second
    assert draft.model_dump() == before
    assert draft.email == "  "


def test_validate_defaults_to_current_date():
    """Without an explicit date the validator still works."""
    assert validate(build_valid_draft(dateOfBirth=date(1980, 6, 1))) == {}


class TestCalculateAge:
    def test_birthday_already_passed(self):
        assert calculate_age(date(2000, 3, 1), TODAY) == 26

    def test_birthday_today(self):
        assert calculate_age(date(2000, 10, 18), TODAY) == 26

    def test_birthday_later_this_year_subtracts_one(self):
        """Born later in the calendar year than today: naive difference minus one."""
        assert calculate_age(date(2000, 10, 19), TODAY) == 25
        assert calculate_age(date(2000, 12, 25), TODAY) == 25

    def test_leap_day_birthday(self):
        assert calculate_age(date(2004, 2, 29), date(2025, 2, 28)) == 20
        assert calculate_age(date(2004, 2, 29), date(2025, 3, 1)) == 21
        assert calculate_age(date(2004, 2, 29), date(2028, 2, 29)) == 24


class TestDraftInput:
    def test_blank_strings_read_as_unselected(self, today):
        """Form values posted as empty strings mean "not chosen"."""
        draft = DraftResponse.model_validate(
            {
                "fullName": "A",
                "email": "a@example.com",
                "dateOfBirth": "",
                "contactNumber": "1",
                "ratings": {"watchMovies": "", "listenToRadio": "2", "eatOut": "3", "watchTV": "4"},
            }
        )

        assert draft.date_of_birth is None
        assert draft.ratings.watch_movies is None
        assert draft.ratings.listen_to_radio == 2
        assert validate(draft, today=today) == {
            "dateOfBirth": "Date of birth is required",
            "rating-watchMovies": "Please select a rating",
        }

    def test_out_of_range_rating_is_rejected_by_the_model(self):
        with pytest.raises(ValidationError):
            DraftRatings(watchMovies=6)
        with pytest.raises(ValidationError):
            DraftRatings(eatOut=0)

    def test_snake_case_names_are_accepted(self):
        draft = DraftResponse(full_name="B", contact_number="2")
        assert draft.full_name == "B"
        assert draft.model_dump(by_alias=True)["contactNumber"] == "2"

    def test_null_text_reads_as_empty(self, today):
        draft = DraftResponse.model_validate(
            {"fullName": None, "email": None, "contactNumber": None}
        )

        assert draft.full_name == ""
        assert validate(draft, today=today)["email"] == "Email is required"

    def test_boolean_rating_is_rejected_by_the_model(self):
        with pytest.raises(ValidationError):
            DraftRatings(watchMovies=True)
        with pytest.raises(ValidationError):
            DraftRatings(eatOut=False)
        assert DraftRatings(eatOut="2").eat_out == 2

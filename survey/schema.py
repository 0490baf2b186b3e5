# survey/schema.py
from __future__ import annotations

from typing import Any, Dict, List, Tuple


# ---------------------------------------------------------------------
# Fixed enumerations
# ---------------------------------------------------------------------
FOOD_OPTIONS: Dict[str, str] = {
    "pizza": "Pizza",
    "pasta": "Pasta",
    "papAndWors": "Pap and Wors",
    "other": "Other",
}

# "other" is collected but never reported
TRACKED_FOODS: Tuple[str, ...] = ("pizza", "pasta", "papAndWors")

RATING_STATEMENTS: Dict[str, str] = {
    "watchMovies": "I like to watch movies",
    "listenToRadio": "I like to listen to radio",
    "eatOut": "I like to eat out",
    "watchTV": "I like to watch TV",
}

# 1 is the strongest agreement, the scale is not reversed for reporting
RATING_SCALE: Dict[int, str] = {
    1: "Strongly Agree",
    2: "Agree",
    3: "Neutral",
    4: "Disagree",
    5: "Strongly Disagree",
}

MIN_AGE = 5
MAX_AGE = 120


# ---------------------------------------------------------------------
# Field identifiers and messages
# ---------------------------------------------------------------------
TEXT_FIELDS: Tuple[str, ...] = ("fullName", "email", "contactNumber")
DATE_OF_BIRTH = "dateOfBirth"

REQUIRED_MESSAGES: Dict[str, str] = {
    "fullName": "Full name is required",
    "email": "Email is required",
    "dateOfBirth": "Date of birth is required",
    "contactNumber": "Contact number is required",
}
AGE_RANGE_MESSAGE = f"Age must be between {MIN_AGE} and {MAX_AGE}"
RATING_REQUIRED_MESSAGE = "Please select a rating"

SUBMITTED_MESSAGE = "Survey submitted successfully!"
EMPTY_STATE_MESSAGE = "No Surveys Available"


def rating_field_id(key: str) -> str:
    return f"rating-{key}"


def all_field_ids() -> List[str]:
    fields = ["fullName", "email", DATE_OF_BIRTH, "contactNumber"]
    fields.extend(rating_field_id(key) for key in RATING_STATEMENTS)
    return fields


# ---------------------------------------------------------------------
# Form description for the presentation layer
# ---------------------------------------------------------------------
def get_form_schema() -> Dict[str, Any]:
    scale = [{"value": value, "label": label} for value, label in RATING_SCALE.items()]

    return {
        "title": "Surveys",
        "sections": [
            {
                "section_id": "personal_details",
                "title": "Personal Details:",
                "questions": [
                    {
                        "field_id": "fullName",
                        "title": "Full Names",
                        "type": "text",
                        "required": True,
                    },
                    {
                        "field_id": "email",
                        "title": "Email",
                        "type": "email",
                        "required": True,
                    },
                    {
                        "field_id": DATE_OF_BIRTH,
                        "title": "Date of Birth",
                        "type": "date",
                        "required": True,
                        "min_age": MIN_AGE,
                        "max_age": MAX_AGE,
                    },
                    {
                        "field_id": "contactNumber",
                        "title": "Contact Number",
                        "type": "text",
                        "required": True,
                    },
                ],
            },
            {
                "section_id": "favorite_foods",
                "title": "What is your favorite food?",
                "questions": [
                    {
                        "field_id": "favoriteFoods",
                        "type": "multi_choice",
                        "required": False,
                        "options": [
                            {"value": key, "label": label}
                            for key, label in FOOD_OPTIONS.items()
                        ],
                    },
                ],
            },
            {
                "section_id": "ratings",
                "title": (
                    "Please rate your level of agreement on a scale from 1 to 5, "
                    "with 1 being \"strongly agree\" and 5 being \"strongly disagree.\""
                ),
                "questions": [
                    {
                        "field_id": rating_field_id(key),
                        "statement": key,
                        "title": label,
                        "type": "rating_1_5",
                        "required": True,
                        "options": scale,
                    }
                    for key, label in RATING_STATEMENTS.items()
                ],
            },
        ],
    }

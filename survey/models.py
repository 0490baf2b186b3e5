# survey/models.py
from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from .schema import EMPTY_STATE_MESSAGE, SUBMITTED_MESSAGE


FoodKey = Literal["pizza", "pasta", "papAndWors", "other"]
RatingKey = Literal["watchMovies", "listenToRadio", "eatOut", "watchTV"]
TextFieldId = Literal["fullName", "email", "contactNumber"]
ViewName = Literal["survey", "results"]


def _not_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("rating must be a number from 1 to 5, not a boolean")
    return value


RatingValue = Annotated[int, BeforeValidator(_not_bool), Field(ge=1, le=5)]


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class _WireModel(BaseModel):
    # camelCase on the wire, snake_case in Python; either is accepted on input
    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def attribute_for(cls, wire_key: str) -> str:
        for name, info in cls.model_fields.items():
            if wire_key in (name, info.alias):
                return name
        raise KeyError(wire_key)


class _FrozenWireModel(_WireModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


# ---------------------------------------------------------------------
# Response parts
# ---------------------------------------------------------------------
class FavoriteFoods(_FrozenWireModel):
    pizza: bool = False
    pasta: bool = False
    pap_and_wors: bool = Field(False, alias="papAndWors")
    other: bool = False

    def is_selected(self, food: str) -> bool:
        return bool(getattr(self, self.attribute_for(food)))


class DraftRatings(_FrozenWireModel):
    watch_movies: Optional[RatingValue] = Field(None, alias="watchMovies")
    listen_to_radio: Optional[RatingValue] = Field(None, alias="listenToRadio")
    eat_out: Optional[RatingValue] = Field(None, alias="eatOut")
    watch_tv: Optional[RatingValue] = Field(None, alias="watchTV")

    @field_validator("*", mode="before")
    @classmethod
    def _unselected(cls, value: Any) -> Any:
        return _blank_to_none(value)

    def by_key(self) -> Dict[str, Optional[int]]:
        return self.model_dump(by_alias=True)


class AcceptedRatings(_FrozenWireModel):
    watch_movies: RatingValue = Field(..., alias="watchMovies")
    listen_to_radio: RatingValue = Field(..., alias="listenToRadio")
    eat_out: RatingValue = Field(..., alias="eatOut")
    watch_tv: RatingValue = Field(..., alias="watchTV")

    def by_key(self) -> Dict[str, int]:
        return self.model_dump(by_alias=True)


# ---------------------------------------------------------------------
# Draft / accepted responses
# ---------------------------------------------------------------------
class DraftResponse(_WireModel):
    full_name: str = Field("", alias="fullName")
    email: str = ""
    date_of_birth: Optional[date] = Field(None, alias="dateOfBirth")
    contact_number: str = Field("", alias="contactNumber")
    favorite_foods: FavoriteFoods = Field(default_factory=FavoriteFoods, alias="favoriteFoods")
    ratings: DraftRatings = Field(default_factory=DraftRatings)

    @field_validator("full_name", "email", "contact_number", mode="before")
    @classmethod
    def _no_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def _no_date(cls, value: Any) -> Any:
        return _blank_to_none(value)


class AcceptedResponse(_FrozenWireModel):
    id: str = Field(..., min_length=1)
    full_name: str = Field(..., alias="fullName")
    email: str
    date_of_birth: date = Field(..., alias="dateOfBirth")
    contact_number: str = Field(..., alias="contactNumber")
    favorite_foods: FavoriteFoods = Field(..., alias="favoriteFoods")
    ratings: AcceptedRatings
    age: int
    submitted_at: datetime = Field(..., alias="submittedAt")


def empty_draft() -> DraftResponse:
    """Canonical blank form, used at session start and after every commit."""
    return DraftResponse()


# ---------------------------------------------------------------------
# Aggregate report
# ---------------------------------------------------------------------
class SurveyStatistics(_FrozenWireModel):
    status: Literal["ok"] = "ok"
    total_surveys: int = Field(..., alias="totalSurveys")
    avg_age: float = Field(..., alias="avgAge")
    oldest_age: int = Field(..., alias="oldestAge")
    youngest_age: int = Field(..., alias="youngestAge")
    pizza_percentage: float = Field(..., alias="pizzaPercentage")
    pasta_percentage: float = Field(..., alias="pastaPercentage")
    pap_and_wors_percentage: float = Field(..., alias="papAndWorsPercentage")
    watch_movies_avg: float = Field(..., alias="watchMoviesAvg")
    listen_to_radio_avg: float = Field(..., alias="listenToRadioAvg")
    eat_out_avg: float = Field(..., alias="eatOutAvg")
    watch_tv_avg: float = Field(..., alias="watchTVAvg")


class NoSurveyData(_FrozenWireModel):
    status: Literal["empty"] = "empty"
    message: str = EMPTY_STATE_MESSAGE


SurveySummary = Annotated[Union[SurveyStatistics, NoSurveyData], Field(discriminator="status")]


# ---------------------------------------------------------------------
# Input events (one explicit kind per input widget family)
# ---------------------------------------------------------------------
class TextFieldEvent(_WireModel):
    kind: Literal["text"] = "text"
    field_id: TextFieldId = Field(..., alias="fieldId")
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _no_text(cls, value: Any) -> Any:
        return "" if value is None else value


class DateFieldEvent(_WireModel):
    kind: Literal["date"] = "date"
    value: Optional[date] = None

    @field_validator("value", mode="before")
    @classmethod
    def _no_date(cls, value: Any) -> Any:
        return _blank_to_none(value)


class FoodToggleEvent(_WireModel):
    kind: Literal["food"] = "food"
    food: FoodKey
    checked: bool


class RatingEvent(_WireModel):
    kind: Literal["rating"] = "rating"
    statement: RatingKey
    value: RatingValue


FieldEvent = Annotated[
    Union[TextFieldEvent, DateFieldEvent, FoodToggleEvent, RatingEvent],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------
# HTTP envelopes
# ---------------------------------------------------------------------
class ValidationReport(BaseModel):
    valid: bool
    errors: Dict[str, str] = Field(default_factory=dict)


class SubmitSurveyResponse(BaseModel):
    status: str = "ok"
    record_id: str = Field(..., min_length=1)
    message: str = SUBMITTED_MESSAGE


class DraftState(BaseModel):
    draft: DraftResponse
    errors: Dict[str, str] = Field(default_factory=dict)
    view: ViewName = "survey"


class ViewRequest(BaseModel):
    view: ViewName

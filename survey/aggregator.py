# survey/aggregator.py
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Sequence, Union

from .models import AcceptedResponse, NoSurveyData, SurveyStatistics
from .schema import RATING_STATEMENTS, TRACKED_FOODS


_ONE_DECIMAL = Decimal("0.1")


def round_one_decimal(numerator: int, denominator: int) -> float:
    """``numerator / denominator`` rounded half away from zero to one decimal.

    Division is done in ``Decimal`` so exact ties such as 2.25 round up
    instead of depending on their binary float representation.
    """
    if denominator == 0:
        raise ZeroDivisionError("denominator must be non-zero")
    quotient = Decimal(numerator) / Decimal(denominator)
    return float(quotient.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def summarize(responses: Sequence[AcceptedResponse]) -> Union[SurveyStatistics, NoSurveyData]:
    """Reduce the accepted responses to the figures shown on the report view.

    Returns ``NoSurveyData`` for an empty sequence. Ratings are averaged as
    stored, so a lower average still means stronger agreement. The "other"
    food choice is not reported.
    """
    total = len(responses)
    if total == 0:
        return NoSurveyData()

    ages = [r.age for r in responses]
    food_counts: Dict[str, int] = {food: 0 for food in TRACKED_FOODS}
    rating_sums: Dict[str, int] = {key: 0 for key in RATING_STATEMENTS}

    for response in responses:
        for food in TRACKED_FOODS:
            if response.favorite_foods.is_selected(food):
                food_counts[food] += 1
        for key, value in response.ratings.by_key().items():
            rating_sums[key] += value

    return SurveyStatistics(
        totalSurveys=total,
        avgAge=round_one_decimal(sum(ages), total),
        oldestAge=max(ages),
        youngestAge=min(ages),
        pizzaPercentage=round_one_decimal(food_counts["pizza"] * 100, total),
        pastaPercentage=round_one_decimal(food_counts["pasta"] * 100, total),
        papAndWorsPercentage=round_one_decimal(food_counts["papAndWors"] * 100, total),
        watchMoviesAvg=round_one_decimal(rating_sums["watchMovies"], total),
        listenToRadioAvg=round_one_decimal(rating_sums["listenToRadio"], total),
        eatOutAvg=round_one_decimal(rating_sums["eatOut"], total),
        watchTVAvg=round_one_decimal(rating_sums["watchTV"], total),
    )

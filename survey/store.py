# survey/store.py
from __future__ import annotations

import threading
import uuid
from datetime import date, datetime, timezone
from typing import Dict, Iterator, List, Optional, Tuple

from pydantic import ValidationError

from .models import AcceptedRatings, AcceptedResponse, DraftResponse
from .validator import calculate_age


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


class ResponseStore:
    """Append-only, in-memory list of accepted responses.

    Nothing is written to disk; the store lives as long as the session that
    owns it. Appends are serialised with a lock so the HTTP server can share
    one store across worker threads, and readers get a tuple snapshot.
    """

    def __init__(self) -> None:
        self._items: List[AcceptedResponse] = []
        self._lock = threading.Lock()

    def append(self, response: AcceptedResponse) -> None:
        with self._lock:
            self._items.append(response)

    def snapshot(self) -> Tuple[AcceptedResponse, ...]:
        with self._lock:
            return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[AcceptedResponse]:
        return iter(self.snapshot())


def commit(
    draft: DraftResponse,
    validation_result: Dict[str, str],
    as_of: Optional[date] = None,
    submitted_at: Optional[datetime] = None,
) -> AcceptedResponse:
    """Turn a validated draft into an immutable ``AcceptedResponse``.

    Assigns a fresh id, freezes the age as of ``as_of`` (the submission date
    by default) and trims the text fields. Raises ``ValueError`` if called
    with a non-empty validation result.
    """
    if validation_result:
        raise ValueError(
            "Cannot commit a draft that failed validation: "
            + ", ".join(sorted(validation_result))
        )
    if draft.date_of_birth is None:
        raise ValueError("dateOfBirth is required and cannot be empty.")

    submitted_at = submitted_at or _now_utc()
    if as_of is None:
        as_of = submitted_at.astimezone().date()

    try:
        ratings = AcceptedRatings(**draft.ratings.by_key())
    except ValidationError as e:
        raise ValueError(f"Invalid ratings: {e}")

    return AcceptedResponse(
        id=str(uuid.uuid4()),
        fullName=draft.full_name.strip(),
        email=draft.email.strip(),
        dateOfBirth=draft.date_of_birth,
        contactNumber=draft.contact_number.strip(),
        favoriteFoods=draft.favorite_foods,
        ratings=ratings,
        age=calculate_age(draft.date_of_birth, as_of),
        submittedAt=submitted_at,
    )

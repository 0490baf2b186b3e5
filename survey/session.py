# survey/session.py
from __future__ import annotations

import threading
from datetime import date, datetime, timezone
from typing import Dict, Optional, Tuple, Union

from .aggregator import summarize
from .config import debug
from .models import (
    AcceptedResponse,
    DateFieldEvent,
    DraftRatings,
    DraftResponse,
    FavoriteFoods,
    FoodToggleEvent,
    NoSurveyData,
    RatingEvent,
    SurveyStatistics,
    TextFieldEvent,
    ViewName,
    empty_draft,
)
from .store import ResponseStore, commit
from .validator import validate


AnyFieldEvent = Union[TextFieldEvent, DateFieldEvent, FoodToggleEvent, RatingEvent]


def apply_event(draft: DraftResponse, event: AnyFieldEvent) -> DraftResponse:
    """Return a copy of ``draft`` with one input change applied."""
    if isinstance(event, TextFieldEvent):
        return draft.model_copy(update={DraftResponse.attribute_for(event.field_id): event.value})

    if isinstance(event, DateFieldEvent):
        return draft.model_copy(update={"date_of_birth": event.value})

    if isinstance(event, FoodToggleEvent):
        foods = draft.favorite_foods.model_copy(
            update={FavoriteFoods.attribute_for(event.food): event.checked}
        )
        return draft.model_copy(update={"favorite_foods": foods})

    if isinstance(event, RatingEvent):
        ratings = draft.ratings.model_copy(
            update={DraftRatings.attribute_for(event.statement): event.value}
        )
        return draft.model_copy(update={"ratings": ratings})

    raise TypeError(f"Unsupported field event: {event!r}")


class SurveySession:
    """State behind one running survey UI.

    Holds the draft being filled in, the errors from the last validation
    attempt, the accepted responses and which view is showing. The
    presentation layer owns one instance and routes every user action
    through it. Mutators hold a re-entrant lock, since the HTTP server
    calls them from worker threads.
    """

    def __init__(self, store: Optional[ResponseStore] = None) -> None:
        self.store = store if store is not None else ResponseStore()
        self.draft: DraftResponse = empty_draft()
        self.errors: Dict[str, str] = {}
        self.view: ViewName = "survey"
        self._lock = threading.RLock()

    # -----------------------------------------------------------------
    # Form
    # -----------------------------------------------------------------
    def apply(self, event: AnyFieldEvent) -> DraftResponse:
        with self._lock:
            self.draft = apply_event(self.draft, event)
            return self.draft

    def validate(self, today: Optional[date] = None) -> Dict[str, str]:
        with self._lock:
            self.errors = validate(self.draft, today=today)
            return dict(self.errors)

    def reset(self) -> None:
        with self._lock:
            self.draft = empty_draft()
            self.errors = {}

    def submit_draft(
        self,
        draft: DraftResponse,
        today: Optional[date] = None,
        submitted_at: Optional[datetime] = None,
    ) -> Tuple[Optional[AcceptedResponse], Dict[str, str]]:
        """Validate ``draft`` and append it to the store if it passes.

        Returns ``(accepted, {})`` on success and ``(None, errors)``
        otherwise. The session's own draft is left alone.
        """
        submitted_at = submitted_at or datetime.now(timezone.utc)
        if today is None:
            today = submitted_at.astimezone().date()

        errors = validate(draft, today=today)
        if errors:
            debug(f"[Submit] rejected fields={sorted(errors)}")
            return None, errors

        accepted = commit(draft, errors, as_of=today, submitted_at=submitted_at)
        self.store.append(accepted)
        debug(f"[Submit] accepted record_id={accepted.id} total={len(self.store)}")
        return accepted, {}

    def submit(
        self,
        today: Optional[date] = None,
        submitted_at: Optional[datetime] = None,
    ) -> Optional[AcceptedResponse]:
        """Submit the session draft; on success the form starts over blank."""
        with self._lock:
            accepted, errors = self.submit_draft(self.draft, today=today, submitted_at=submitted_at)
            if accepted is None:
                self.errors = errors
                return None

            self.reset()
            return accepted

    def form_state(self) -> Tuple[DraftResponse, Dict[str, str], ViewName]:
        with self._lock:
            return self.draft, dict(self.errors), self.view

    # -----------------------------------------------------------------
    # Report
    # -----------------------------------------------------------------
    def show(self, view: ViewName) -> None:
        with self._lock:
            self.view = view

    def responses(self) -> Tuple[AcceptedResponse, ...]:
        return self.store.snapshot()

    def results(self) -> Union[SurveyStatistics, NoSurveyData]:
        summary = summarize(self.store.snapshot())
        debug(f"[Results] status={summary.status}")
        return summary

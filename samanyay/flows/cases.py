"""
Case list flows: loading, client-side filtering, and creation.

The list is always held newest first. A reload replaces it wholesale and the
only local mutation is prepending a freshly created case, so the order never
needs re-sorting.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional

from samanyay.backend.base import BackendError, CASES
from samanyay.models import Case, CaseStatus
from samanyay.notifications import Notifier
from samanyay.session import SessionContext

logger = logging.getLogger(__name__)


@dataclass
class CaseListState:
    cases: list[Case] = field(default_factory=list)
    loading: bool = True
    in_progress: bool = False


@dataclass
class CaseDraft:
    """The "New Case" surface: open/closed, its inputs, and the submit guard."""
    is_open: bool = False
    title: str = ""
    description: str = ""
    submitting: bool = False

    def open(self) -> None:
        self.is_open = True

    def close(self) -> bool:
        if self.submitting:
            return False
        self.is_open = False
        return True

    @property
    def can_submit(self) -> bool:
        return bool(self.title.strip()) and not self.submitting


# ─────────────────────────────── LOAD ─────────────────────────────────────

def load_cases(state: CaseListState, session: SessionContext, backend, notifier: Notifier) -> None:
    if state.in_progress or not session.signed_in:
        return
    state.in_progress = True
    try:
        rows = backend.select_all(CASES, session.user.id, order_by="created_at", descending=True,
                                  token=session.user.access_token)
        state.cases = [Case.from_row(r) for r in rows]
    except BackendError:
        logger.exception("Error fetching cases")
        notifier.error("Failed to load cases")
    finally:
        state.in_progress = False
        state.loading = False


# ─────────────────────────────── FILTER ───────────────────────────────────

def filter_cases(cases: list[Case], query: str) -> list[Case]:
    """Cases whose title or description contains `query`, ignoring case."""
    if not query:
        return list(cases)
    q = query.lower()
    return [
        c for c in cases
        if q in c.title.lower() or (c.description is not None and q in c.description.lower())
    ]


# ─────────────────────────────── CREATE ───────────────────────────────────

def create_case(
    draft: CaseDraft,
    state: CaseListState,
    session: SessionContext,
    backend,
    notifier: Notifier,
) -> Optional[Case]:
    """
    Submit the draft as a new active case and prepend it to the list.

    Returns the created case, or None when nothing was created (blank title,
    no user, a submit already running, or a backend failure). On failure the
    draft stays open with its inputs so the user can retry.
    """
    title = draft.title.strip()
    if not session.signed_in or not title or draft.submitting:
        return None

    draft.submitting = True
    try:
        row = backend.insert(CASES, {
            "user_id": session.user.id,
            "title": title,
            "description": draft.description.strip() or None,
            "status": CaseStatus.ACTIVE.value,
            "file_count": 0,
        }, token=session.user.access_token)
    except BackendError:
        logger.exception("Error creating case")
        notifier.error("Failed to create case")
        return None
    finally:
        draft.submitting = False

    case = Case.from_row(row)
    state.cases = [case] + state.cases
    draft.title = ""
    draft.description = ""
    draft.close()
    notifier.success("Case created successfully!")
    logger.info("Created case %s for user %s", case.id, session.user.id)
    return case

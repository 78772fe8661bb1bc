"""
Fasting repository.

Handles database operations for :class:`FastingSession` and
:class:`FastHistory`.  History rows are only ever inserted.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.fasting import FastHistory, FastingSession


class FastingRepository:
    """Repository for fasting session and history database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_session(self, user_id: int) -> Optional[FastingSession]:
        statement = select(FastingSession).where(FastingSession.user_id == user_id)
        return self.session.exec(statement).first()

    def list_sessions(self, user_id: int) -> list[FastingSession]:
        statement = select(FastingSession).where(FastingSession.user_id == user_id)
        return list(self.session.exec(statement).all())

    def list_history(self, user_id: int) -> list[FastHistory]:
        statement = (select(FastHistory).where(FastHistory.user_id == user_id).order_by(FastHistory.end_time,
                                                                                      FastHistory.id))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def save_session(self, entry: FastingSession) -> FastingSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def complete_session(self, entry: FastingSession, history: FastHistory) -> FastingSession:
        """Persist a completed session together with its history row."""
        self.session.add(entry)
        self.session.add(history)
        self.session.commit()
        self.session.refresh(entry)
        return entry

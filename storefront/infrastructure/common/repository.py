"""Session handling shared by the SQLAlchemy repositories."""

import logging

from sqlalchemy.orm import Session


class SessionRepository:
    """
    Base for repositories bound to a request-scoped session.

    Every public method accepts an optional ``tx``. When given, work runs on
    that session and is only flushed, leaving the commit to the caller.
    Otherwise the repository's own session is used and committed.
    """

    def __init__(self, db: Session, logger: logging.Logger | None = None) -> None:
        self.db = db
        self.logger = logger or logging.getLogger(__name__)

    def _session(self, tx: Session | None) -> Session:
        return tx if tx is not None else self.db

    def _commit(self, session: Session, tx: Session | None) -> None:
        if tx is None:
            session.commit()
        else:
            session.flush()

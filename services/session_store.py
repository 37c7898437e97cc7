"""Server-side session storage backed by SQLAlchemy.

The cookie carries only an opaque session id. The session document itself
(roster, flash messages, CSRF token) lives in the ``sessions`` table and
expires after ``PERMANENT_SESSION_LIFETIME`` of inactivity.
"""
from __future__ import annotations

import logging
import secrets
from datetime import datetime

from flask import request
from flask.sessions import SessionInterface, SessionMixin
from werkzeug.datastructures import CallbackDict

from database import db
from models.session_record import SessionRecord, utcnow

logger = logging.getLogger(__name__)


def load(sid: str) -> dict | None:
    """Return the stored document for ``sid``, or None if absent or expired."""
    record = db.session.get(SessionRecord, sid)
    if record is None or record.is_expired:
        return None
    return record.get_data()


def save(sid: str, data: dict, expires_at: datetime) -> None:
    record = db.session.get(SessionRecord, sid)
    if record is None:
        record = SessionRecord(sid=sid)
        db.session.add(record)
    record.set_data(data)
    record.expires_at = expires_at
    db.session.commit()


def delete(sid: str) -> None:
    SessionRecord.query.filter_by(sid=sid).delete(synchronize_session=False)
    db.session.commit()


def purge_expired() -> int:
    """Remove every expired session document and return how many went."""
    removed = SessionRecord.query.filter(
        SessionRecord.expires_at <= utcnow()
    ).delete(synchronize_session=False)
    db.session.commit()
    if removed:
        logger.info('Purged %d expired session(s)', removed)
    return removed


class ServerSideSession(CallbackDict, SessionMixin):
    """Session dict that remembers its id and whether it was modified."""

    # Every session expires after PERMANENT_SESSION_LIFETIME of inactivity.
    permanent = True

    def __init__(self, initial=None, sid: str | None = None, new: bool = False):
        def on_update(self):
            self.modified = True

        super().__init__(initial, on_update)
        self.sid = sid
        self.new = new
        self.modified = False


class SqlAlchemySessionInterface(SessionInterface):
    """Flask session interface storing documents through :mod:`session_store`."""

    session_class = ServerSideSession
    sid_bytes = 32

    def _generate_sid(self) -> str:
        return secrets.token_urlsafe(self.sid_bytes)

    def open_session(self, app, request):
        sid = request.cookies.get(self.get_cookie_name(app))
        if sid:
            data = load(sid)
            if data is not None:
                return self.session_class(data, sid=sid)
        return self.session_class(sid=self._generate_sid(), new=True)

    def should_set_cookie(self, app, session):
        if request.endpoint == 'static' and not session.modified:
            return False
        return super().should_set_cookie(app, session)

    def save_session(self, app, session, response):
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)

        if not session:
            if session.modified:
                delete(session.sid)
                response.delete_cookie(name, domain=domain, path=path)
            return

        if not self.should_set_cookie(app, session):
            return

        lifetime = app.permanent_session_lifetime
        save(session.sid, dict(session), utcnow() + lifetime)
        response.set_cookie(
            name,
            session.sid,
            max_age=lifetime,
            path=path,
            domain=domain,
            httponly=self.get_cookie_httponly(app),
            secure=self.get_cookie_secure(app),
            samesite=self.get_cookie_samesite(app),
        )
        response.vary.add('Cookie')

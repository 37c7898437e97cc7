"""Server-side session documents keyed by the cookie session id."""
from datetime import datetime, timezone
from flask.json.tag import TaggedJSONSerializer
from database import db

serializer = TaggedJSONSerializer()


def utcnow() -> datetime:
    """Naive UTC timestamp, matching what SQLite hands back."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SessionRecord(db.Model):
    """One browser session and its JSON document."""

    __tablename__ = 'sessions'
    __table_args__ = (
        db.Index('ix_sessions_expires_at', 'expires_at'),
    )

    sid = db.Column(db.String(64), primary_key=True)
    data = db.Column(db.Text, nullable=False, default='{}')
    expires_at = db.Column(db.DateTime, nullable=False)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f'<SessionRecord {self.sid[:8]}>'

    @property
    def is_expired(self):
        return self.expires_at <= utcnow()

    def get_data(self) -> dict:
        try:
            value = serializer.loads(self.data or '{}')
        except ValueError:
            return {}
        return value if isinstance(value, dict) else {}

    def set_data(self, value: dict) -> None:
        self.data = serializer.dumps(value)

"""
Roster data classes and the SQLAlchemy session model.
"""
from .team import Team, Member
from .session_record import SessionRecord

__all__ = [
    'Team',
    'Member',
    'SessionRecord',
]

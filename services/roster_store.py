"""
Session-scoped roster of teams and their members.

A ``Roster`` is loaded from the session at the start of a request, mutated by
the route handler, and written back with ``save_roster``. Uniqueness of team
and member names is checked by the validation rules before ``add_team`` or
``add_member`` are called.
"""
from __future__ import annotations

from collections.abc import MutableMapping

from models.team import Member, Team

SESSION_KEY = 'teams'


def _name_key(item) -> str:
    return item.name.lower()


class Roster:
    """Ordered list of teams owned by one session."""

    def __init__(self, teams: list[Team] | None = None):
        self.teams: list[Team] = list(teams or [])

    def __len__(self):
        return len(self.teams)

    def __iter__(self):
        return iter(self.teams)

    def find_team(self, name: str) -> Team | None:
        for team in self.teams:
            if team.name == name:
                return team
        return None

    @staticmethod
    def find_member(team: Team, name: str) -> Member | None:
        for member in team.members:
            if member.name == name:
                return member
        return None

    def add_team(self, team: Team) -> Team:
        self.teams.append(team)
        return team

    @staticmethod
    def add_member(team: Team, member: Member) -> Member:
        team.members.append(member)
        return member

    @staticmethod
    def remove_member(team: Team, name: str) -> bool:
        """Remove the first member called ``name``; False when there is none."""
        for idx, member in enumerate(team.members):
            if member.name == name:
                del team.members[idx]
                return True
        return False

    def sorted_teams(self) -> list[Team]:
        """Teams by case-insensitive name; equal keys keep insertion order."""
        return sorted(self.teams, key=_name_key)

    @staticmethod
    def sorted_members(team: Team) -> list[Member]:
        return sorted(team.members, key=_name_key)

    def to_list(self) -> list[dict]:
        return [team.to_dict() for team in self.teams]

    @classmethod
    def from_list(cls, data) -> 'Roster':
        return cls([Team.from_dict(item) for item in data or []])


def load_roster(session: MutableMapping) -> Roster:
    """Build the roster from the session, empty when nothing is stored yet."""
    return Roster.from_list(session.get(SESSION_KEY))


def save_roster(session: MutableMapping, roster: Roster) -> None:
    session[SESSION_KEY] = roster.to_list()

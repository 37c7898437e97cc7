"""
Team and member records kept in the session roster.
"""


class Member:
    """A single team member. Age is kept as the submitted digit string."""

    def __init__(self, name: str, age: str, sex: str):
        self.name = name
        self.age = age
        self.sex = sex

    def __repr__(self):
        return f'<Member {self.name}>'

    def __eq__(self, other):
        if not isinstance(other, Member):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'age': self.age,
            'sex': self.sex,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Member':
        return cls(
            name=data.get('name', ''),
            age=data.get('age', ''),
            sex=data.get('sex', ''),
        )


class Team:
    """A named team with an activity and an ordered list of members."""

    def __init__(self, name: str, activity: str, members: list | None = None):
        self.name = name
        self.activity = activity
        self.members: list[Member] = list(members or [])

    def __repr__(self):
        return f'<Team {self.name}>'

    def __eq__(self, other):
        if not isinstance(other, Team):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @property
    def member_count(self):
        """Return total number of team members."""
        return len(self.members)

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'activity': self.activity,
            'members': [m.to_dict() for m in self.members],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Team':
        return cls(
            name=data.get('name', ''),
            activity=data.get('activity', ''),
            members=[Member.from_dict(m) for m in data.get('members') or []],
        )

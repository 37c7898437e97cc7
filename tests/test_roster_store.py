"""Unit tests for the session roster store."""
from models.team import Member, Team
from services.roster_store import Roster, load_roster, save_roster


def test_find_team_is_exact_match(roster):
    assert roster.find_team('Apple').activity == 'Orchard'
    assert roster.find_team('apple') is None
    assert roster.find_team('Pear') is None


def test_find_member_within_team(roster):
    banana = roster.find_team('banana')
    assert roster.find_member(banana, 'Zed').age == '40'
    assert roster.find_member(banana, 'zed') is None
    assert roster.find_member(roster.find_team('Apple'), 'Zed') is None


def test_sorted_teams_is_case_insensitive(roster):
    assert [t.name for t in roster.sorted_teams()] == ['Apple', 'banana', 'cherry']


def test_sorted_teams_does_not_reorder_roster(roster):
    roster.sorted_teams()
    assert [t.name for t in roster.teams] == ['banana', 'Apple', 'cherry']


def test_sort_keeps_insertion_order_for_case_duplicates():
    roster = Roster([Team('bob', 'x'), Team('Alice', 'x'), Team('Bob', 'x'), Team('BOB', 'x')])
    assert [t.name for t in roster.sorted_teams()] == ['Alice', 'bob', 'Bob', 'BOB']


def test_sorted_members(roster):
    banana = roster.find_team('banana')
    assert [m.name for m in roster.sorted_members(banana)] == ['amy', 'Zed']


def test_add_team_and_member_append(roster):
    team = roster.add_team(Team('Durian', 'Smelling'))
    assert roster.teams[-1] is team
    assert team.members == []

    roster.add_member(team, Member('Al', '30', 'M'))
    roster.add_member(team, Member('Bo', '31', 'F'))
    assert [m.name for m in team.members] == ['Al', 'Bo']


def test_remove_member_removes_first_match(roster):
    banana = roster.find_team('banana')
    assert roster.remove_member(banana, 'Zed') is True
    assert [m.name for m in banana.members] == ['amy']


def test_remove_missing_member_leaves_team_unchanged(roster):
    banana = roster.find_team('banana')
    before = list(banana.members)
    assert roster.remove_member(banana, 'Nobody') is False
    assert banana.members == before


def test_load_roster_from_empty_session():
    roster = load_roster({})
    assert len(roster) == 0
    assert roster.sorted_teams() == []


def test_save_and_load_roster_through_session(roster):
    session = {}
    save_roster(session, roster)

    assert session['teams'][0] == {
        'name': 'banana',
        'activity': 'Fruit',
        'members': [
            {'name': 'Zed', 'age': '40', 'sex': 'M'},
            {'name': 'amy', 'age': '22', 'sex': 'F'},
        ],
    }
    loaded = load_roster(session)
    assert loaded.teams == roster.teams


def test_team_from_dict_always_has_members():
    team = Team.from_dict({'name': 'Solo', 'activity': 'Chess', 'members': None})
    assert team.members == []

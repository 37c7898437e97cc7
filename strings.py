"""
Centralized text labels and messages for the roster manager.

Templates reach labels through ``ui(key)``; routes and validation rules use
the ``FLASH`` and ``VALIDATION`` mappings.
"""
from __future__ import annotations

from collections.abc import Mapping

TEXT = {
    'NAV': {
        'brand': 'Team Roster',
        'teams': 'Teams',
        'new_team': 'New Team',
    },
    'FLASH': {
        'team_created': 'New team created.',
        'member_added': 'New member added.',
        'member_deleted': 'Member deleted.',
    },
    'VALIDATION': {
        'team_name_required': 'Team name is required.',
        'team_name_too_long': 'Team name must be less than 100 characters.',
        'team_name_unusable': 'Team name cannot contain "/" or be "new".',
        'team_name_unique': 'Team name must be unique.',
        'activity_required': 'Activity name is required.',
        'activity_too_long': 'Activity name must be less than 100 characters.',
        'member_name_required': 'Member name is required.',
        'member_name_too_long': 'Member name must be less than 50 characters.',
        'member_name_unusable': 'Member name cannot contain "/".',
        'member_name_unique': 'Member name must be unique.',
        'member_age_required': 'Member age is required.',
        'member_age_range': 'Age must be between 1 and 100.',
        'member_sex_required': "Please choose one option of member's sex.",
    },
    'ERRORS': {
        'team_not_found': 'Team "{name}" not found.',
        'member_not_found': 'Member "{name}" not found in team "{team}".',
    },
    'UI': {
        'app_title': 'Team Roster Manager',
        'teams_heading': 'Teams',
        'no_teams': 'There are no teams yet.',
        'create_team': 'Create a new team',
        'team_name': 'Team name',
        'team_activity': 'Activity',
        'members': 'Members',
        'member_count': '{count} member(s)',
        'no_members': 'This team has no members yet.',
        'add_member': 'Add member',
        'member_name': 'Name',
        'member_age': 'Age',
        'member_sex': 'Sex',
        'choose_sex': 'Choose one',
        'delete': 'Delete',
        'save': 'Save',
        'cancel': 'Cancel',
        'back_to_teams': 'All teams',
        'error_heading': 'Something went wrong',
    },
}


def section(name: str) -> dict:
    return TEXT.get(name, {})


def tr(section_name: str, key: str, **kwargs) -> str:
    text_value = section(section_name).get(key, key)
    return text_value.format(**kwargs) if kwargs else text_value


def ui(key: str, **kwargs) -> str:
    return tr('UI', key, **kwargs)


class _Section(Mapping):
    def __init__(self, section_name: str):
        self.section_name = section_name

    def __getitem__(self, key: str) -> str:
        return tr(self.section_name, key)

    def __iter__(self):
        return iter(section(self.section_name))

    def __len__(self):
        return len(section(self.section_name))


FLASH = _Section('FLASH')
VALIDATION = _Section('VALIDATION')
ERRORS = _Section('ERRORS')

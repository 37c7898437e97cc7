"""
Form validation for the roster manager.

Rules are declared as data: each form field has an ordered list of
``FieldRule`` objects. ``validate_form`` runs every field, collects one
message per failed rule, and returns the cleaned (trimmed) values alongside
the errors.

A rule with ``bail=True`` only runs when every earlier rule on the same field
passed, so e.g. the uniqueness check is skipped for an empty team name.
"""
import re
from typing import Callable, Dict, List, Mapping, Optional

import config
import strings as text
from models.team import Team

_AGE_PATTERN = re.compile(r'[0-9]{1,3}')
# Names appear as single URL path segments; "new" is the new-team form.
RESERVED_TEAM_NAMES = {'new'}


class ValidationError:
    """Represents a single validation error."""

    def __init__(self, code: str, message: str, field: str = None):
        self.code = code
        self.message = message
        self.field = field

    def __repr__(self):
        return f'<ValidationError {self.field}:{self.code}>'

    def to_dict(self) -> dict:
        return {
            'code': self.code,
            'message': self.message,
            'field': self.field,
        }


class ValidationResult:
    """Collection of validation errors plus the cleaned form values."""

    def __init__(self):
        self.errors: List[ValidationError] = []
        self.cleaned: Dict[str, str] = {}

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def messages(self) -> List[str]:
        return [e.message for e in self.errors]

    def add_error(self, code: str, message: str, field: str = None):
        self.errors.append(ValidationError(code, message, field))

    def to_dict(self) -> dict:
        return {
            'is_valid': self.is_valid,
            'error_count': len(self.errors),
            'errors': [e.to_dict() for e in self.errors],
        }


class FieldRule:
    """A predicate over a field value and the message shown when it fails."""

    def __init__(self, code: str, predicate: Callable[[str], bool], message: str, bail: bool = False):
        self.code = code
        self.predicate = predicate
        self.message = message
        self.bail = bail


class FormField:
    """A named form field and its ordered rules."""

    def __init__(self, name: str, rules: List[FieldRule], trim: bool = True):
        self.name = name
        self.rules = rules
        self.trim = trim

    def clean(self, raw: Optional[str]) -> str:
        value = raw or ''
        return value.strip() if self.trim else value


def validate_form(form: Mapping[str, str], fields: List[FormField]) -> ValidationResult:
    """Validate ``form`` against ``fields``, collecting every failed rule."""
    result = ValidationResult()
    for field in fields:
        value = field.clean(form.get(field.name))
        result.cleaned[field.name] = value
        failed = False
        for rule in field.rules:
            if rule.bail and failed:
                break
            if not rule.predicate(value):
                failed = True
                result.add_error(rule.code, rule.message, field.name)
    return result


def _required(value: str) -> bool:
    return len(value) >= 1


def _max_length(limit: int) -> Callable[[str], bool]:
    return lambda value: len(value) <= limit


def _is_path_segment(value: str) -> bool:
    return '/' not in value


def _is_usable_team_name(value: str) -> bool:
    return _is_path_segment(value) and value not in RESERVED_TEAM_NAMES


def is_valid_age(value: str) -> bool:
    """True for a whole number of years between the configured bounds."""
    if not _AGE_PATTERN.fullmatch(value):
        return False
    return config.MEMBER_AGE_MIN <= int(value) <= config.MEMBER_AGE_MAX


def team_fields(roster) -> List[FormField]:
    """Rules for the new-team form; names must be unique within ``roster``."""
    messages = text.VALIDATION
    return [
        FormField('teamName', [
            FieldRule('required', _required, messages['team_name_required']),
            FieldRule('too_long', _max_length(config.TEAM_NAME_MAX_LENGTH), messages['team_name_too_long']),
            FieldRule('unusable', _is_usable_team_name, messages['team_name_unusable'], bail=True),
            FieldRule('not_unique', lambda value: roster.find_team(value) is None,
                      messages['team_name_unique'], bail=True),
        ]),
        FormField('teamActivity', [
            FieldRule('required', _required, messages['activity_required']),
            FieldRule('too_long', _max_length(config.TEAM_ACTIVITY_MAX_LENGTH), messages['activity_too_long']),
        ]),
    ]


def member_fields(team: Team) -> List[FormField]:
    """Rules for the add-member form; names must be unique within ``team``."""
    messages = text.VALIDATION
    return [
        FormField('memberName', [
            FieldRule('required', _required, messages['member_name_required']),
            FieldRule('too_long', _max_length(config.MEMBER_NAME_MAX_LENGTH), messages['member_name_too_long']),
            FieldRule('unusable', _is_path_segment, messages['member_name_unusable'], bail=True),
            FieldRule('not_unique', lambda value: all(m.name != value for m in team.members),
                      messages['member_name_unique'], bail=True),
        ]),
        FormField('memberAge', [
            FieldRule('required', _required, messages['member_age_required']),
            FieldRule('out_of_range', is_valid_age, messages['member_age_range']),
        ]),
        FormField('memberSex', [
            FieldRule('required', _required, messages['member_sex_required']),
        ], trim=False),
    ]

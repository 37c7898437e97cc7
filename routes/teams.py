"""
Team roster routes: list and create teams, add and delete members.
"""
import logging

from flask import Blueprint, render_template, redirect, url_for, flash, request, session, abort

import config
import strings as text
from models.team import Member, Team
from services.roster_store import Roster, load_roster, save_roster
from services.validation import member_fields, team_fields, validate_form

teams_bp = Blueprint('teams', __name__)
logger = logging.getLogger(__name__)


def _get_team_or_404(roster: Roster, team_name: str) -> Team:
    team = roster.find_team(team_name) if team_name else None
    if team is None:
        logger.warning('Team not found: %r', team_name)
        abort(404, description=text.ERRORS['team_not_found'].format(name=team_name))
    return team


def _flash_errors(result) -> None:
    for message in result.messages:
        flash(message, 'error')


def _render_team(roster: Roster, team: Team, form=None):
    form = form or {}
    return render_template('team.html',
                           team=team,
                           members=roster.sorted_members(team),
                           sex_choices=config.MEMBER_SEX_CHOICES,
                           memberName=form.get('memberName', ''),
                           memberAge=form.get('memberAge', ''),
                           memberSex=form.get('memberSex', ''))


@teams_bp.route('/')
def index():
    return redirect(url_for('teams.list_teams'))


@teams_bp.route('/teams')
def list_teams():
    """Roster overview, teams sorted by name."""
    roster = load_roster(session)
    return render_template('teams.html', teams=roster.sorted_teams())


@teams_bp.route('/teams/new')
def new_team():
    return render_template('new_team.html', teamName='', teamActivity='')


@teams_bp.route('/teams', methods=['POST'])
def create_team():
    """Validate the new-team form and append the team to the roster."""
    roster = load_roster(session)
    result = validate_form(request.form, team_fields(roster))

    if not result.is_valid:
        _flash_errors(result)
        return render_template('new_team.html',
                               teamName=request.form.get('teamName', ''),
                               teamActivity=request.form.get('teamActivity', ''))

    team = roster.add_team(Team(
        name=result.cleaned['teamName'],
        activity=result.cleaned['teamActivity'],
    ))
    save_roster(session, roster)
    logger.info('Team created: %s', team.name)
    flash(text.FLASH['team_created'], 'success')
    return redirect(url_for('teams.list_teams'))


@teams_bp.route('/teams/<team_name>')
def team_detail(team_name):
    """Team page with its members sorted by name."""
    roster = load_roster(session)
    team = _get_team_or_404(roster, team_name)
    return _render_team(roster, team)


@teams_bp.route('/teams/<team_name>/members/new', methods=['POST'])
def add_member(team_name):
    """Validate the add-member form and append the member to the team."""
    roster = load_roster(session)
    team = _get_team_or_404(roster, team_name)
    result = validate_form(request.form, member_fields(team))

    if not result.is_valid:
        _flash_errors(result)
        return _render_team(roster, team, request.form)

    member = roster.add_member(team, Member(
        name=result.cleaned['memberName'],
        age=result.cleaned['memberAge'],
        sex=result.cleaned['memberSex'],
    ))
    save_roster(session, roster)
    logger.info('Member added to %s: %s', team.name, member.name)
    flash(text.FLASH['member_added'], 'success')
    return redirect(url_for('teams.team_detail', team_name=team.name))


@teams_bp.route('/teams/<team_name>/members/<member_name>/delete', methods=['POST'])
def delete_member(team_name, member_name):
    """Remove a member from the team."""
    roster = load_roster(session)
    team = _get_team_or_404(roster, team_name)

    if not roster.remove_member(team, member_name):
        logger.warning('Member not found in %s: %r', team.name, member_name)
        abort(404, description=text.ERRORS['member_not_found'].format(name=member_name, team=team.name))

    save_roster(session, roster)
    logger.info('Member deleted from %s: %s', team.name, member_name)
    flash(text.FLASH['member_deleted'], 'success')
    return redirect(url_for('teams.team_detail', team_name=team.name))

"""Shared pytest fixtures for the fof9_editor test suite.

Fixtures defined here are available to all tests without explicit imports.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from fof9_editor.records.schema import Coach, Player, Team


@pytest.fixture(autouse=True)
def _reset_fof9_editor_logger() -> Iterator[None]:
    """Undo `configure_logging` side effects so ``caplog`` sees every record."""
    yield
    root = logging.getLogger("fof9_editor")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture
def valid_player() -> Player:
    """Return a player that passes every validation rule."""
    return Player(
        player_id=1,
        first_name="Tom",
        last_name="Brady",
        team=5,
        position_key=0,
        uniform=12,
        height=76,
        weight=225,
        hand_size=9,
        arm_length=32,
        birth_month=8,
        birth_day=3,
        birth_year=1977,
        birth_city="San Mateo",
        college="Michigan",
        year_entry=2000,
        round_drafted=6,
        selection_drafted=199,
        experience=20,
        overall_rating=88,
        skill_speed=40,
    )


@pytest.fixture
def valid_coach() -> Coach:
    """Return a coach that passes every validation rule."""
    return Coach(
        first_name="Bill",
        last_name="Belichick",
        birth_month=4,
        birth_day=16,
        birth_year=1952,
        birth_city="Nashville",
        birth_city_id=120,
        college="Wesleyan",
        college_id=44,
        team=1,
        position=0,
        position_group=0,
        offensive_style=2,
        defensive_style=3,
        pay_scale=1500,
    )


@pytest.fixture
def valid_team() -> Team:
    """Return a team that passes every validation rule."""
    return Team(
        year=2025,
        team_id=3,
        team_name="Boston",
        nick_name="Minutemen",
        abbreviation="BOS",
        conference=0,
        division=1,
        city=17,
        primary_red=200,
        primary_green=16,
        primary_blue=46,
        secondary_red=255,
        secondary_green=255,
        secondary_blue=255,
        roof=0,
        turf=1,
        built=2002,
        capacity=65000,
        luxury=120,
        condition=8,
        attendance=64000,
        support=75,
    )

"""Pydantic schemas for JSON payload validation."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from .constants import ROLE_ALIASES, PlayerRole


def _coerce_role(v):
    """Accept both short codes (WK) and long names (WicketKeeper)."""
    if isinstance(v, str) and v in ROLE_ALIASES:
        return ROLE_ALIASES[v]
    return v


class PlayerRef(BaseModel):
    """Player on a fantasy team roster."""

    name: str = Field(..., min_length=1)
    role: PlayerRole = Field(..., alias='type')

    @field_validator('role', mode='before')
    @classmethod
    def normalize_role(cls, v):
        return _coerce_role(v)

    class Config:
        extra = 'allow'
        populate_by_name = True


class TeamSubmission(BaseModel):
    """Team entry as submitted by a user."""

    team_name: str = Field(..., alias='teamName', min_length=1)
    players: list[PlayerRef]
    captain: Any = None
    vice_captain: Any = Field(None, alias='viceCaptain')

    class Config:
        extra = 'forbid'
        populate_by_name = True


class TeamRecord(BaseModel):
    """Team document as held by the team store."""

    team_name: str = Field(..., alias='teamName')
    players: list[PlayerRef]
    captain: Any = None
    vice_captain: Any = Field(None, alias='viceCaptain')
    points: int = 0

    class Config:
        extra = 'allow'
        populate_by_name = True

    @classmethod
    def from_submission(cls, submission: TeamSubmission) -> 'TeamRecord':
        """Build a fresh record with zero points."""
        return cls(
            team_name=submission.team_name,
            players=submission.players,
            captain=submission.captain,
            vice_captain=submission.vice_captain,
            points=0,
        )

    def to_document(self) -> dict[str, Any]:
        """Serialize with wire field names."""
        return self.model_dump(mode='json', by_alias=True)


class MatchPlayerStat(BaseModel):
    """One player's performance in one match."""

    name: str = Field(..., min_length=1)
    role: PlayerRole = Field(..., alias='type')
    runs: int = Field(0, ge=0)
    boundary_bonus: int = Field(0, alias='boundaryBonus', ge=0)
    six_bonus: int = Field(0, alias='sixBonus', ge=0)
    dismissal: str | None = None
    wickets: int = Field(0, ge=0)
    bonus: int = Field(0, ge=0)
    maiden: bool = False
    catches: int = Field(0, ge=0)
    stumpings: int = Field(0, ge=0)
    run_outs: int = Field(0, alias='runOuts', ge=0)

    @field_validator('role', mode='before')
    @classmethod
    def normalize_role(cls, v):
        return _coerce_role(v)

    @field_validator(
        'runs', 'boundary_bonus', 'six_bonus', 'wickets', 'bonus', 'catches', 'stumpings',
        'run_outs',
        mode='before',
    )
    @classmethod
    def null_counts_as_zero(cls, v):
        """Treat explicit nulls in count fields as zero."""
        return 0 if v is None else v

    @field_validator('maiden', mode='before')
    @classmethod
    def null_maiden_is_false(cls, v):
        return False if v is None else v

    class Config:
        extra = 'allow'
        populate_by_name = True


class MatchRecord(BaseModel):
    """A match result with per-player statistics."""

    players: list[MatchPlayerStat] = Field(default_factory=list)

    class Config:
        extra = 'allow'


class AppConfig(BaseModel):
    """Service configuration settings."""

    host: str = '127.0.0.1'
    port: int = Field(3000, ge=0, le=65535)
    teams_path: str = 'data/teams.json'
    match_path: str = 'data/match.json'
    store: str = Field('json', pattern=r'^(json|memory)$')
    log_level: str = Field('INFO', pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$')

    @field_validator('log_level', mode='before')
    @classmethod
    def upper_case_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    class Config:
        extra = 'forbid'

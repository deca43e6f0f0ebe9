"""Domain records for quiz games, players, questions and user accounts."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _format_time(moment: datetime) -> str:
    """Render a timestamp as RFC 3339 with trimmed fractional seconds."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return text + "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


class GameStatus(str, Enum):
    """Lifecycle state of a game."""

    WAITING = "waiting"
    IN_PROGRESS = "inprogress"
    FINISHED = "finished"


class QuestionType(str, Enum):
    """The kinds of question a quiz can ask."""

    MULTIPLE_CHOICE_SINGLE = "multiple_choice_single"
    MULTIPLE_CHOICE_MULTIPLE = "multiple_choice_multiple"
    TRUE_FALSE = "true_false"
    FILL_IN_BLANK = "fill_in_blank"
    ORDERING = "ordering"
    ESTIMATION = "estimation"
    ODD_ONE_OUT = "odd_one_out"


@dataclass
class Question:
    """A quiz question; the answer fields are never serialised."""

    id: str
    type: QuestionType
    text: str
    options: list[str] = field(default_factory=list)
    correct_answer_index: int | None = None
    correct_answer_indices: list[int] = field(default_factory=list)
    correct_answers: list[str] = field(default_factory=list)
    correct_order_indices: list[int] = field(default_factory=list)
    acceptable_min_value: float | None = None
    acceptable_max_value: float | None = None
    time_limit_seconds: int = 0
    category: str = ""
    difficulty: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Public JSON form, leaving out empty optional fields."""
        data: dict[str, Any] = {
            "id": self.id,
            "type": QuestionType(self.type).value,
            "text": self.text,
        }
        if self.options:
            data["options"] = list(self.options)
        if self.time_limit_seconds:
            data["timeLimitSeconds"] = self.time_limit_seconds
        if self.category:
            data["category"] = self.category
        if self.difficulty:
            data["difficulty"] = self.difficulty
        return data


@dataclass
class Player:
    """A player profile with long-running statistics."""

    id: str
    user_id: str = ""
    nickname: str = ""
    matchmaking_rating: int = 0
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    total_score: int = 0
    last_seen_at: datetime = _ZERO_TIME
    created_at: datetime = _ZERO_TIME
    updated_at: datetime = _ZERO_TIME

    def to_dict(self) -> dict[str, Any]:
        """Public JSON form."""
        return {
            "id": self.id,
            "userId": self.user_id,
            "nickname": self.nickname,
            "mmr": self.matchmaking_rating,
            "gamesPlayed": self.games_played,
            "wins": self.wins,
            "losses": self.losses,
            "totalScore": self.total_score,
            "lastSeenAt": _format_time(self.last_seen_at),
            "createdAt": _format_time(self.created_at),
            "updatedAt": _format_time(self.updated_at),
        }


@dataclass
class User:
    """A user account; the password hash is never serialised."""

    id: str
    username: str = ""
    email: str = ""
    hashed_password: str = field(default="", repr=False)
    created_at: datetime = _ZERO_TIME
    updated_at: datetime = _ZERO_TIME

    def to_dict(self) -> dict[str, Any]:
        """Public JSON form."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "createdAt": _format_time(self.created_at),
            "updatedAt": _format_time(self.updated_at),
        }


@dataclass
class Game:
    """A game session; questions stay internal and are not serialised."""

    id: str
    players: dict[str, Player] = field(default_factory=dict)
    questions: list[Question] = field(default_factory=list)
    current_question_idx: int = 0
    status: GameStatus = GameStatus.WAITING
    lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    def to_dict(self) -> dict[str, Any]:
        """Public JSON form."""
        with self.lock:
            return {
                "id": self.id,
                "players": {pid: p.to_dict() for pid, p in self.players.items()},
                "currentQuestionIndex": self.current_question_idx,
                "status": GameStatus(self.status).value,
            }
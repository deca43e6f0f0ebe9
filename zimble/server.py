"""HTTP server for quick two-player quiz duels."""

from __future__ import annotations

import argparse
import json
import logging
import random
import threading
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from flask import Flask, jsonify, redirect, request, send_from_directory

from zimble.representations import GameStatus

log = logging.getLogger(__name__)


class GameError(Exception):
    """Base error for game operations, carrying an HTTP status."""

    status_code = 400
    message = "Game error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class GameNotFoundError(GameError):
    status_code = 404
    message = "Game not found"


class PlayerNotFoundError(GameError):
    status_code = 404
    message = "Player not found in this game"


class GameNotInProgressError(GameError):
    status_code = 400
    message = "Game is not in progress"


class GameFinishedError(GameError):
    status_code = 400
    message = "Game has already finished"


@dataclass(frozen=True)
class QuizQuestion:
    """A question with a single case-sensitive answer."""

    id: str
    text: str
    answer: str


DEFAULT_QUESTION_BANK = (
    QuizQuestion("q1", "What is the capital of France?", "Paris"),
    QuizQuestion("q2", "What is 2 + 2?", "4"),
    QuizQuestion("q3", "What language is this backend written in?", "Go"),
)


@dataclass
class DuelPlayer:
    id: str
    name: str
    score: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "score": self.score}


@dataclass
class DuelGame:
    id: str
    players: dict[str, DuelPlayer]
    questions: list[QuizQuestion]
    current_question_index: int = 0
    status: GameStatus = GameStatus.IN_PROGRESS
    lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    def to_dict(self) -> dict[str, Any]:
        """Public JSON form; questions stay hidden."""
        with self.lock:
            return {
                "id": self.id,
                "players": {pid: p.to_dict() for pid, p in self.players.items()},
                "currentQuestionIndex": self.current_question_index,
                "status": self.status.value,
            }


@dataclass(frozen=True)
class AnswerResult:
    result: str
    your_score: int
    correct_answer: str
    game_status: GameStatus

    def to_dict(self) -> dict[str, Any]:
        return {
            "result": self.result,
            "yourScore": self.your_score,
            "correctAnswer": self.correct_answer,
            "gameStatus": self.game_status.value,
        }


def generate_id() -> str:
    """A time-based identifier; not guaranteed unique under heavy load."""
    return str(time.time_ns() + random.randrange(1000))


class GameStore:
    """Thread-safe in-memory registry of duel games."""

    def __init__(self, question_bank: Iterable[QuizQuestion] | None = None) -> None:
        bank = DEFAULT_QUESTION_BANK if question_bank is None else question_bank
        self._question_bank = tuple(bank)
        self._games: dict[str, DuelGame] = {}
        self._lock = threading.Lock()

    def create_game(self) -> DuelGame:
        """Start a new in-progress duel between two fresh players."""
        game_id = generate_id()
        first_id = generate_id()
        second_id = generate_id()
        while second_id == first_id:
            second_id = generate_id()
        game = DuelGame(
            id=game_id,
            players={
                first_id: DuelPlayer(first_id, "Player1"),
                second_id: DuelPlayer(second_id, "Player2"),
            },
            questions=list(self._question_bank),
        )
        with self._lock:
            self._games[game_id] = game
        log.info("Created Game: %s with players %s, %s", game_id, first_id, second_id)
        return game

    def get_game(self, game_id: str) -> DuelGame:
        with self._lock:
            try:
                return self._games[game_id]
            except KeyError:
                raise GameNotFoundError() from None

    def current_question(self, game_id: str) -> dict[str, Any] | None:
        """Public view of the current question, or None when none are left."""
        game = self.get_game(game_id)
        with game.lock:
            if game.status is not GameStatus.IN_PROGRESS:
                raise GameNotInProgressError()
            if game.current_question_index >= len(game.questions):
                return None
            question = game.questions[game.current_question_index]
            return {
                "id": question.id,
                "text": question.text,
                "index": game.current_question_index,
            }

    def submit_answer(self, game_id: str, player_id: str, answer: str) -> AnswerResult:
        """Score an answer and advance the game to the next question."""
        game = self.get_game(game_id)
        with game.lock:
            if game.status is not GameStatus.IN_PROGRESS:
                raise GameNotInProgressError()
            player = game.players.get(player_id)
            if player is None:
                raise PlayerNotFoundError()
            if game.current_question_index >= len(game.questions):
                raise GameFinishedError()

            correct_answer = game.questions[game.current_question_index].answer
            if answer == correct_answer:
                player.score += 1
                result = "Correct"
                log.info("Game %s: Player %s answered correctly!", game_id, player_id)
            else:
                result = "Incorrect"
                log.info("Game %s: Player %s answered incorrectly.", game_id, player_id)

            game.current_question_index += 1
            if game.current_question_index >= len(game.questions):
                game.status = GameStatus.FINISHED
                log.info("Game %s finished.", game_id)

            return AnswerResult(result, player.score, correct_answer, game.status)


def _parse_answer_payload() -> tuple[str, str]:
    raw = request.get_data(as_text=True)
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(exc.msg or "malformed JSON") from None
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValueError("expected a JSON object")
    fields = []
    for key in ("playerId", "answer"):
        value = payload.get(key, "")
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise ValueError(f"field {key!r} must be a string")
        fields.append(value)
    return fields[0], fields[1]


def create_app(store: GameStore | None = None, web_dir: str | Path = "web") -> Flask:
    """Build the web application with its API and static web view."""
    store = store if store is not None else GameStore()
    web_root = Path(web_dir).resolve()
    app = Flask(__name__, static_folder=None)

    @app.errorhandler(GameError)
    def _game_error(exc: GameError):
        return jsonify({"error": str(exc)}), exc.status_code

    @app.post("/api/games")
    def create_game():
        return jsonify(store.create_game().to_dict()), 201

    @app.get("/api/games/<game_id>")
    def get_game(game_id: str):
        return jsonify(store.get_game(game_id).to_dict())

    @app.get("/api/games/<game_id>/question")
    def get_question(game_id: str):
        question = store.current_question(game_id)
        if question is None:
            return jsonify({"message": "No more questions"})
        return jsonify(question)

    @app.post("/api/games/<game_id>/answer")
    def submit_answer(game_id: str):
        try:
            player_id, answer = _parse_answer_payload()
        except ValueError as exc:
            return jsonify({"error": f"Invalid request body: {exc}"}), 400
        return jsonify(store.submit_answer(game_id, player_id, answer).to_dict())

    @app.get("/web")
    @app.get("/web/")
    def web_index():
        return send_from_directory(web_root, "index.html")

    @app.get("/web/<path:filename>")
    def web_file(filename: str):
        return send_from_directory(web_root, filename)

    @app.get("/")
    def root():
        return redirect("/web", code=301)

    return app


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the quiz duel server.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--web-dir", default="./web")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    app = create_app(GameStore(), args.web_dir)
    print(f"Server starting on http://localhost:{args.port}")
    try:
        app.run(host=args.host, port=args.port)
    except OSError as exc:
        print(f"Error starting server: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
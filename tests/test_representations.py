from datetime import datetime, timezone

from zimble.representations import (
    Game,
    GameStatus,
    Player,
    Question,
    QuestionType,
    User,
)


def test_status_values():
    assert GameStatus.WAITING.value == "waiting"
    assert GameStatus.IN_PROGRESS.value == "inprogress"
    assert GameStatus("finished") is GameStatus.FINISHED


def test_question_type_values():
    assert QuestionType("multiple_choice_single") is QuestionType.MULTIPLE_CHOICE_SINGLE
    assert QuestionType.ODD_ONE_OUT.value == "odd_one_out"


def test_question_hides_answers_and_empty_fields():
    question = Question(
        id="q1",
        type=QuestionType.FILL_IN_BLANK,
        text="Capital of France?",
        correct_answers=["Paris"],
    )
    assert question.to_dict() == {
        "id": "q1",
        "type": "fill_in_blank",
        "text": "Capital of France?",
    }


def test_question_includes_optional_fields_when_set():
    question = Question(
        id="q2",
        type=QuestionType.MULTIPLE_CHOICE_SINGLE,
        text="Pick one",
        options=["a", "b"],
        correct_answer_index=1,
        time_limit_seconds=30,
        category="misc",
        difficulty=2,
    )
    data = question.to_dict()
    assert data["options"] == ["a", "b"]
    assert data["timeLimitSeconds"] == 30
    assert data["category"] == "misc"
    assert data["difficulty"] == 2
    assert "correctAnswerIndex" not in data


def test_player_zero_times_and_keys():
    data = Player(id="p1", nickname="nick", matchmaking_rating=1200).to_dict()
    assert data["mmr"] == 1200
    assert data["nickname"] == "nick"
    assert data["createdAt"] == "0001-01-01T00:00:00Z"
    assert data["lastSeenAt"] == data["updatedAt"] == data["createdAt"]


def test_player_time_formatting():
    moment = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    data = Player(id="p1", created_at=moment).to_dict()
    assert data["createdAt"] == "2024-05-01T12:30:00Z"


def test_user_never_exposes_hash():
    user = User(id="u1", username="alice", email="alice@example.com", hashed_password="secret")
    data = user.to_dict()
    assert "secret" not in data.values()
    assert data["email"] == "alice@example.com"
    assert set(data) == {"id", "username", "email", "createdAt", "updatedAt"}


def test_game_to_dict_nests_players_and_hides_questions():
    player = Player(id="p1", nickname="one")
    game = Game(
        id="g1",
        players={"p1": player},
        questions=[Question(id="q", type=QuestionType.TRUE_FALSE, text="t")],
        status=GameStatus.IN_PROGRESS,
    )
    data = game.to_dict()
    assert data["players"]["p1"] == player.to_dict()
    assert data["status"] == "inprogress"
    assert data["currentQuestionIndex"] == 0
    assert "questions" not in data
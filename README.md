# zimble

A small quiz duel server. A game has two players and a bank of questions.
Each answer is scored and the game moves on to the next question. Scores
are kept in memory.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Running the server

    zimble-server

Options:

| Option      | Default   | Meaning                                  |
|-------------|-----------|------------------------------------------|
| `--host`    | `0.0.0.0` | Address to listen on                     |
| `--port`    | `8080`    | Port to listen on                        |
| `--web-dir` | `./web`   | Directory of static files for the web view |

Files in the web directory are served under `/web/<file>`. `/web` itself
serves `index.html`, and `/` redirects to `/web` with a 301 status. Game
events are written through the standard `logging` module.

## HTTP API

| Method | Path                              | What it does                                   |
|--------|-----------------------------------|------------------------------------------------|
| POST   | `/api/games`                      | Create a game with two players (201)           |
| GET    | `/api/games/<gameId>`             | Game state: `id`, `players`, `currentQuestionIndex`, `status` |
| GET    | `/api/games/<gameId>/question`    | Current question: `id`, `text`, `index`        |
| POST   | `/api/games/<gameId>/answer`      | Body `{"playerId": ..., "answer": ...}`        |

A new game starts at once with status `inprogress` and two players named
`Player1` and `Player2`. Each player has `id`, `name` and `score`. The
player ids are the keys of `players`. Questions and their answers are never
included in the game state.

Answers are compared case-sensitively. After any answer, from either
player, the game moves on to the next question. When the questions run out
the status becomes `finished`. The answer response reports `result`
(`Correct` or `Incorrect`), `yourScore`, `correctAnswer` and `gameStatus`.

Errors come back as `{"error": "..."}`. The status is 404 for an unknown game
or player. It is 400 for a malformed body (`Invalid request body: ...`) and
for a game that is not in progress.

## Using it from Python

```python
from zimble.server import GameStore, QuizQuestion, create_app

store = GameStore([QuizQuestion("q1", "What is 2 + 2?", "4")])
game = store.create_game()
player_id = next(iter(game.players))
print(store.current_question(game.id))   # {'id': 'q1', 'text': ..., 'index': 0}
result = store.submit_answer(game.id, player_id, "4")
print(result.to_dict())

app = create_app(store, "./web")          # a Flask application
```

`GameStore()` with no argument uses a built-in bank of three questions.
`GameStore.current_question` returns `None` when no questions are left.
The store methods raise `GameNotFoundError`, `PlayerNotFoundError`,
`GameNotInProgressError` or `GameFinishedError`. All four are subclasses of
`GameError`, and each carries the HTTP `status_code` the server sends.

`zimble.representations` holds the fuller data models: `Game`, `Player`,
`Question`, `User`, `GameStatus` and `QuestionType`. Each model provides
`to_dict()`, which returns its public JSON shape. Question answers and
password hashes are never part of that shape. Timestamps come out in
RFC 3339 form. The server does not use these models yet; it keeps its own
`DuelGame` and `DuelPlayer` records.

## What it does not do

- Games live only in the memory of the running process. They are lost when
  the server stops, and nothing is stored in a database.
- There are no user accounts, logins or player statistics behind the API.
  `User` and `Player` are data records only.
- The game does not wait for both players or run a timer. The first answer
  to a question settles it.
- Only single-answer text questions are asked. The other `QuestionType`
  kinds are described in `Question`, but nothing scores them.
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from wordsearch.errors import IllegalStateError, InvalidArgumentError
from wordsearch.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordsearch")

# Populated at startup
_game = None


class BoardRequest(BaseModel):
    tiles: list[str]


class LexiconRequest(BaseModel):
    path: str


class ScoreRequest(BaseModel):
    words: list[str] = Field(default_factory=list)
    min_length: int | None = None


def _board_payload(board) -> dict:
    return {"size": board.size, "tiles": list(board.tiles), "render": board.render()}


def _resolve_dictionary(name: str) -> Path:
    """Resolve a client-supplied dictionary name inside DICTIONARY_DIR."""
    base = settings.DICTIONARY_DIR.resolve()
    path = (base / name).resolve()
    if path == base or not path.is_relative_to(base):
        raise InvalidArgumentError(f"Dictionary {name!r} is not inside {base}")
    return path


def _apply_log_level():
    logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _game

        _apply_log_level()

        from wordsearch.game import WordSearchGame
        _game = WordSearchGame(max_board_size=settings.MAX_BOARD_SIZE)

        dict_path = settings.DICTIONARY_PATH
        if dict_path.exists():
            logger.info("Loading dictionary from %s", dict_path)
            _game.load_lexicon(str(dict_path))
        else:
            logger.warning("No dictionary at %s; word queries disabled until POST /lexicon", dict_path)

        yield

    application = FastAPI(title="Word Search Solver", lifespan=lifespan)

    # Handlers are async and never await mid-search, so a board replacement
    # cannot interleave with a running search.

    @application.exception_handler(InvalidArgumentError)
    async def invalid_argument(request: Request, exc: InvalidArgumentError):
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
        return JSONResponse({"detail": str(exc)}, status_code=400)

    @application.exception_handler(IllegalStateError)
    async def illegal_state(request: Request, exc: IllegalStateError):
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
        return JSONResponse({"detail": str(exc)}, status_code=409)

    @application.get("/health")
    async def health():
        return {"status": "ok", "lexicon_loaded": _game is not None and _game.lexicon_loaded}

    @application.get("/board")
    async def get_board():
        return _board_payload(_game.board)

    @application.put("/board")
    async def put_board(body: BoardRequest):
        _game.max_board_size = settings.MAX_BOARD_SIZE
        _game.set_board(body.tiles)
        return _board_payload(_game.board)

    @application.post("/lexicon")
    async def post_lexicon(body: LexiconRequest):
        count = _game.load_lexicon(str(_resolve_dictionary(body.path)))
        return {"word_count": count}

    @application.get("/words")
    async def get_words(min_length: int | None = None):
        from wordsearch.metrics import SearchTimer

        if min_length is None:
            min_length = settings.MIN_WORD_LENGTH
        timer = SearchTimer("enumerate")
        all_words = _game.get_all_scorable_words(min_length, timer=timer)

        words = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
        logger.info("Found %d words (returning %d)", len(all_words), len(words))

        return {
            "words": words,
            "word_count": len(all_words),
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        }

    @application.post("/score")
    async def post_score(body: ScoreRequest):
        min_length = body.min_length if body.min_length is not None else settings.MIN_WORD_LENGTH
        return {"score": _game.get_score_for_words(body.words, min_length)}

    @application.get("/words/{word}")
    async def get_word(word: str):
        return {"word": word, "valid": _game.is_valid_word(word), "path": _game.is_on_board(word)}

    @application.get("/prefixes/{prefix}")
    async def get_prefix(prefix: str):
        return {"prefix": prefix, "valid": _game.is_valid_prefix(prefix)}

    @application.get("/api/settings")
    async def api_get_settings():
        from wordsearch.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordsearch.settings import update_settings, get_editable_settings
        body = await request.json()
        if not isinstance(body, dict):
            return JSONResponse(
                {"updated": get_editable_settings(settings), "errors": {"body": "expected a JSON object"}},
                status_code=400,
            )
        errors = update_settings(settings, **body)
        _apply_log_level()
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()

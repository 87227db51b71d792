import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from . import config
from .errors import ArticleUnavailableError
from .game import GameEngine
from .index import Position
from .models import (
    GuessRequest,
    GuessResponse,
    PositionModel,
    RevealResponse,
    WinResponse,
    WordsRequest,
)

logger = logging.getLogger(__name__)

_engine = GameEngine()


def get_engine() -> GameEngine:
    return _engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Build today's index up front so the first player does not pay for it
    try:
        index = _engine.current_index()
        logger.info("[game] Ready for %s: %s", index.date_key, index.title)
    except ArticleUnavailableError as exc:
        logger.warning("[game] No article at startup (%s). Will retry on request.", exc)
    yield


app = FastAPI(lifespan=lifespan)


@app.exception_handler(ArticleUnavailableError)
async def article_unavailable_handler(request: Request, exc: ArticleUnavailableError):
    logger.error("[game] %s: %s", exc.message, exc.detail)
    return JSONResponse(status_code=503, content={"error": exc.message})


def _position_model(pos: Position) -> PositionModel:
    return PositionModel(
        section=pos.section, part=pos.part, word_index=pos.word_index, display=pos.display
    )


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------


@app.get("/api/game")
def get_game(engine: GameEngine = Depends(get_engine)):
    """Return the masked token streams of today's article."""
    return engine.get_masked_view()


@app.post("/api/game/guess", response_model=GuessResponse)
def post_guess(body: GuessRequest, engine: GameEngine = Depends(get_engine)):
    word = body.word.strip()
    if not word or len(word) > config.MAX_GUESS_LENGTH:
        raise HTTPException(status_code=400, detail="Invalid word")

    result = engine.submit_guess(word)
    return GuessResponse(
        found=result.found,
        word=result.normalized_word,
        positions=[_position_model(p) for p in result.positions],
        occurrences=result.occurrence_count,
        similarity=result.confidence,
    )


@app.post("/api/game/win", response_model=WinResponse)
def post_win(body: WordsRequest, engine: GameEngine = Depends(get_engine)):
    return WinResponse(won=engine.check_win(body.words))


@app.post("/api/game/reveal", response_model=RevealResponse)
def post_reveal(body: WordsRequest, engine: GameEngine = Depends(get_engine)):
    """Unmask the whole article once the submitted words solve the title."""
    if not body.words:
        raise HTTPException(status_code=400, detail="Word list required")
    if not engine.check_win(body.words):
        raise HTTPException(status_code=403, detail="Win not verified")
    return RevealResponse(positions=[_position_model(p) for p in engine.reveal_all(body.words)])

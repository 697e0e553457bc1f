import logging

from fastapi import BackgroundTasks, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from wordgrid.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordgrid")

# These will be populated at startup
_common_trie = None
_full_trie = None
_store = None


class SolveRequest(BaseModel):
    board: list[str]


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _common_trie, _full_trie, _store

        from wordgrid.dictionaries import get_dictionaries
        from wordgrid.store import PuzzleStore

        logger.info("Loading dictionaries from %s and %s", settings.DICTIONARY_COMMON_PATH, settings.DICTIONARY_PATH)
        _common_trie, _full_trie = get_dictionaries(settings)
        _store = PuzzleStore(settings.PUZZLES_DIR)
        logger.info("Puzzle store at %s", settings.PUZZLES_DIR)

        yield

    application = FastAPI(title="Word Grid Puzzles", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {"status": "ok", "tries_loaded": _common_trie is not None and _full_trie is not None}

    @application.get("/puzzles")
    async def list_puzzles():
        _require_store()
        return {"dates": _store.dates()}

    @application.get("/puzzles/today")
    async def today_puzzle():
        from wordgrid.store import puzzle_date
        return _get_puzzle(puzzle_date(settings.PUZZLE_TIMEZONE))

    @application.get("/puzzles/{date_str}")
    async def get_puzzle(date_str: str):
        return _get_puzzle(date_str)

    @application.post("/puzzles/generate")
    def generate(background_tasks: BackgroundTasks, date: str | None = None, seed: int | None = None):
        import random
        from wordgrid.generator import GenerationConfig, GenerationExhaustedError, generate_puzzle
        from wordgrid.metrics import StageTimer
        from wordgrid.notifier import send_notification
        from wordgrid.store import puzzle_date

        _require_tries()
        _require_store()
        date_str = date or puzzle_date(settings.PUZZLE_TIMEZONE)
        try:
            _store.path_for(date_str)
            config = GenerationConfig.from_settings(settings)
        except ValueError as e:
            raise HTTPException(400, str(e))

        logger.info("Generating new puzzle for %s...", date_str)
        timer = StageTimer()
        rng = random.Random(seed) if seed is not None else None
        try:
            record = generate_puzzle(_common_trie, _full_trie, config, rng=rng, timer=timer)
        except GenerationExhaustedError as e:
            logger.error("Failed to generate a suitable puzzle for %s: %s", date_str, e)
            raise HTTPException(503, str(e))

        _store.save(date_str, record)
        timer.log_summary()

        if settings.NOTIFY_ON_GENERATE:
            background_tasks.add_task(
                send_notification, date_str, record, timer.summary(),
                settings.NTFY_TOPIC, settings.NTFY_URL, config.cols,
            )

        return JSONResponse({
            "date": date_str,
            "puzzle": record.to_dict(),
            "attempts": record.attempts,
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary() if settings.DEBUG else None,
        })

    @application.post("/solve")
    async def solve(body: SolveRequest):
        from wordgrid.grid import DEFAULT_GRID
        from wordgrid.solver import find_words, sort_words

        _require_tries()
        board = [cell.strip().upper() for cell in body.board]
        if any(len(cell) != 1 or not cell.isalpha() for cell in board):
            raise HTTPException(400, "Board cells must be single letters")
        try:
            words = sort_words(find_words(board, _full_trie, DEFAULT_GRID))
        except ValueError as e:
            raise HTTPException(400, str(e))

        logger.info("Board %s: %d words", "".join(board), len(words))
        return {"board": board, "words": words, "word_count": len(words)}

    @application.get("/api/settings")
    async def api_get_settings():
        from wordgrid.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordgrid.settings import update_settings, get_editable_settings
        body = await request.json()
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


def _require_tries():
    if _common_trie is None or _full_trie is None:
        raise HTTPException(503, "Dictionaries not loaded")


def _require_store():
    if _store is None:
        raise HTTPException(503, "Puzzle store not initialized")


def _get_puzzle(date_str: str) -> dict:
    _require_store()
    try:
        puzzle = _store.load(date_str)
    except ValueError as e:
        raise HTTPException(400, str(e))
    if puzzle is None:
        raise HTTPException(404, f"No puzzle for {date_str}")
    return {"date": date_str, "puzzle": puzzle}


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)

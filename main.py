import logging
from pathlib import Path
from typing import Optional, Union

from fastapi import FastAPI, Form, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

import config
from errors import FALLBACK_ERROR_MESSAGE, AnalysisInProgressError, AnalysisValidationError, ProviderError
from flow import build_flow
from page import PageController
from schemas import AnalysisResult, FoodLogInput, PageSnapshot

# --------- Logging ----------
logger = logging.getLogger("nutrijournal")

BASE_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def format_number(value: Union[int, float]) -> str:
    # Whole numbers render without a trailing ".0"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


templates.env.filters["num"] = format_number


def get_controller(request: Request) -> PageController:
    return request.app.state.page


# --------- FastAPI ----------
def create_app(controller: Optional[PageController] = None) -> FastAPI:
    """Build the app around one in-memory page shared by every client (single-user)."""
    logging.basicConfig(level=config.LOG_LEVEL.upper())

    app = FastAPI(title="NutriJournal", version="1.0.0")
    app.state.page = controller or PageController(build_flow())
    logger.info("NutriJournal ready (model=%s, variant=%s)", config.OPENAI_MODEL, config.PROMPT_VARIANT)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --------- Routes ----------
    @app.get("/health")
    def health():
        return {"ok": True}

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        page = get_controller(request)
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "food_log": page.food_log,
                "result": page.result,
                "history": page.history,
                "is_loading": page.is_loading,
                "notification": page.pop_notification(),
            },
        )

    @app.post("/analyze")
    async def analyze_form(request: Request, food_log: str = Form("")):
        page = get_controller(request)
        if page.is_loading:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="An analysis is already running.")

        page.set_food_log(food_log)
        try:
            # Failures become a notification on the page.
            await page.analyze()
        except AnalysisInProgressError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
        return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)

    @app.post("/api/analyze-food-log", response_model=AnalysisResult, response_model_by_alias=True)
    async def analyze_food_log(request: Request, payload: FoodLogInput):
        page = get_controller(request)
        if page.is_loading:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="An analysis is already running.")

        page.set_food_log(payload.food_log)
        try:
            return await page.analyze(raise_errors=True)
        except AnalysisInProgressError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
        except AnalysisValidationError as e:
            raise HTTPException(status_code=422, detail=str(e))
        except ProviderError as e:
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
        except Exception as e:
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e) or FALLBACK_ERROR_MESSAGE)

    @app.get("/api/state", response_model=PageSnapshot, response_model_by_alias=True)
    def state(request: Request):
        return get_controller(request).snapshot()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL,
    )

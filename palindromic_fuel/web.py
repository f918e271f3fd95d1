"""FastAPI application: JSON API and a form page for forward searches."""

import logging
from pathlib import Path
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, FastAPI, Query, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from . import __version__
from .config import Settings, get_settings
from .exceptions import InputError
from .inputs import check_search_bounds, parse_max_volume, parse_price
from .report import format_volume
from .schemas import CalculateRequest, CalculateResponse, HealthResponse, ResultOut
from .search import forward_search

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


def _check_bounds(settings: Settings, price: float, max_volume: int) -> None:
    check_search_bounds(price, max_volume, settings.max_volume_limit, settings.max_cost_limit)


def _calculate(settings: Settings, price: float, max_volume: int) -> CalculateResponse:
    try:
        _check_bounds(settings, price, max_volume)
    except InputError as e:
        logger.info("Rejected search price=%s max=%s: %s", price, max_volume, e)
        return CalculateResponse(error=str(e))

    results = forward_search(price, max_volume, settings.epsilon)
    return CalculateResponse(results=[ResultOut.from_result(r) for r in results])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@router.get("/api/calculate", response_model=CalculateResponse,
            response_model_exclude_none=True)
def calculate_get(
    settings: SettingsDep,
    price: Optional[str] = None,
    max_volume: Optional[str] = Query(default=None, alias="max"),
) -> CalculateResponse:
    """Forward search from the `price` and `max` query parameters."""
    if not price or not max_volume:
        return CalculateResponse(error="Missing price or max parameters")

    try:
        parsed_price = parse_price(price)
        parsed_max = parse_max_volume(max_volume)
    except InputError as e:
        logger.info("Rejected query price=%r max=%r: %s", price, max_volume, e)
        return CalculateResponse(error=str(e))

    return _calculate(settings, parsed_price, parsed_max)


@router.post("/api/calculate", response_model=CalculateResponse,
             response_model_exclude_none=True)
async def calculate_post(request: Request, settings: SettingsDep) -> CalculateResponse:
    """Forward search from a JSON body {"pricePerVolume": ..., "maxVolume": ...}."""
    body = await request.body()
    try:
        req = CalculateRequest.model_validate_json(body)
    except ValidationError:
        logger.info("Rejected request body: invalid JSON")
        return CalculateResponse(error="Invalid JSON")

    return await run_in_threadpool(_calculate, settings, req.price_per_volume, req.max_volume)


@router.options("/api/calculate")
async def calculate_options() -> Response:
    return Response(status_code=200)


def _display_rows(settings: Settings, price: float, max_volume: int) -> List[dict]:
    _check_bounds(settings, price, max_volume)
    return [
        {
            "volume": format_volume(result.volume),
            "cost": result.cost_major_units,
            "palindromic": result.volume_is_palindromic,
            "kind": result.kind.value,
        }
        for result in forward_search(price, max_volume, settings.epsilon)
    ]


@router.api_route("/", methods=["GET", "POST"], response_class=HTMLResponse)
async def index(request: Request, settings: SettingsDep):
    """Form page; a POST with `price` and `max` renders the results."""
    context = {"settings": settings, "results": None, "error": None, "request_data": None}

    if request.method == "POST":
        form = await request.form()
        price_text = str(form.get("price", ""))
        max_text = str(form.get("max", ""))

        if price_text and max_text:
            try:
                price = parse_price(price_text)
                max_volume = parse_max_volume(max_text)
            except InputError as e:
                logger.info("Rejected form price=%r max=%r: %s", price_text, max_text, e)
                context["error"] = "Invalid input values"
            else:
                try:
                    context["results"] = await run_in_threadpool(
                        _display_rows, settings, price, max_volume)
                    context["request_data"] = {"price": price, "max_volume": max_volume}
                except InputError as e:
                    logger.info("Rejected form search price=%s max=%s: %s", price, max_volume, e)
                    context["error"] = str(e)

    return templates.TemplateResponse(request, "index.html", context)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the web application."""
    app = FastAPI(title="Palindromic Fuel Calculator", version=__version__)
    app.state.settings = settings or get_settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.include_router(router)
    return app

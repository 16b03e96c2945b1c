"""FastAPI application entry point."""

from __future__ import annotations

import logging
from typing import Callable

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from wyr.api.responses import emit
from wyr.config import settings
from wyr.errors import ConfigurationError, RequestShapeError, WyrError
from wyr.llm.question_generator import QuestionGenerator
from wyr.models.question import KNOWN_CATEGORIES, CategoriesResponse, QuestionRequest

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

GeneratorFactory = Callable[[], QuestionGenerator]

ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]

app = FastAPI(
    title="Would You Rather",
    description="Generates two-option 'would you rather' questions",
    version="0.1.0",
)


def get_generator_factory() -> GeneratorFactory:
    """The generator is built per request so a missing key fails that request only."""
    return QuestionGenerator


async def read_question_request(request: Request) -> QuestionRequest:
    body = await request.body()
    try:
        return QuestionRequest.model_validate_json(body)
    except ValidationError as exc:
        logger.warning("Failed to parse request body, using defaults: %s", exc.errors()[0]["msg"])
        return QuestionRequest()


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.get("/health")
def health() -> dict[str, str]:
    """Simple readiness probe."""
    return {"status": "ok"}


@app.get("/categories", response_model=CategoriesResponse)
def categories() -> CategoriesResponse:
    """Categories the front-end offers; any other string is accepted too."""
    return CategoriesResponse(categories=KNOWN_CATEGORIES, default=settings.default_category)


@app.api_route("/generate-question", methods=ROUTED_METHODS)
@app.api_route("/.netlify/functions/generate-question", methods=ROUTED_METHODS, include_in_schema=False)
async def generate_question(
    request: Request,
    make_generator: GeneratorFactory = Depends(get_generator_factory),
) -> JSONResponse:
    """Generate one question pair for the posted category."""
    try:
        if request.method != "POST":
            raise RequestShapeError(request.method)

        payload = await read_question_request(request)
        category = payload.category or settings.default_category
        generator = make_generator()
        pair = await run_in_threadpool(generator.generate, category, payload.mode)
    except ConfigurationError as exc:
        logger.error("Refusing to generate: %s", exc)
        return emit(exc)
    except WyrError as exc:
        logger.info("Question request failed with status %s: %s", exc.status_code, exc)
        return emit(exc)

    return emit(pair)

import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from . import config, gemini
from .errors import ConfigurationError, FunFactError
from .models import ErrorResponse, FactRequest, FactResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def get_transport() -> Optional[httpx.AsyncBaseTransport]:
    # None means httpx's default transport (timeout and proxies from env)
    return None


def normalize_theme(theme: Optional[str]) -> str:
    return (theme or config.DEFAULT_THEME).lower()


def choose_fact(text: str, theme: str) -> str:
    text = text.strip()
    if len(text) > config.MIN_FACT_LENGTH:
        return text
    return config.FALLBACK_FACT.format(theme=theme)


def _error_response() -> JSONResponse:
    body = ErrorResponse(error=config.ERROR_MESSAGE)
    return JSONResponse(status_code=500, content=body.model_dump())


@router.api_route(
    "/funfact",
    methods=["GET", "HEAD"],
    response_model=FactResponse,
    responses={500: {"model": ErrorResponse}},
)
@router.api_route("/funfact/", methods=["GET", "HEAD"], include_in_schema=False)
async def get_funfact(
    theme: Optional[str] = Query(None),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
):
    try:
        req = FactRequest(theme=normalize_theme(theme))

        api_key = config.get_api_key()
        if not api_key:
            raise ConfigurationError("API_KEY not found in environment or .env file.")

        async with httpx.AsyncClient(transport=transport) as client:
            text = await gemini.generate_text(client, req.theme, api_key)
        logger.info("Fun fact from API: %s", text.strip())

        return FactResponse(theme=req.theme, fact=choose_fact(text, req.theme))
    except FunFactError as e:
        logger.error("Error fetching fun fact: %s", e)
        return _error_response()
    except Exception:
        logger.exception("Unexpected error fetching fun fact")
        return _error_response()

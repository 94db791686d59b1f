"""Recipe extraction API endpoint."""

from typing import Optional

import sentry_sdk
from fastapi import APIRouter, HTTPException, Query

from app.models.recipe import ExtractionFailure
from app.models.schemas import ErrorResponse, RecipeResponse
from app.services.loader import document_loader, is_valid_url
from app.services.pipeline import ERROR_MESSAGES, get_domain, recipe_pipeline

router = APIRouter(prefix="/api", tags=["recipe"])

# Messages shown to the user for failures outside the extraction engine
BOUNDARY_MESSAGES = {
    "missing_url": "URL parameter is required",
    "invalid_url": "Invalid URL",
    "fetch_timeout": "The website took too long to respond",
    "fetch_failed": "Failed to fetch page",
    "internal": "Failed to fetch or parse the page",
}


def _log_fetch_failure(url: str, error_type: str, status_code: Optional[int] = None):
    """Log fetch failure to Sentry with domain context."""
    domain = get_domain(url)
    sentry_sdk.capture_message(
        f"Page fetch failed: {error_type}",
        level="warning",
        extras={"url": url, "status_code": status_code},
        tags={
            "feature": "recipe_fetch",
            "error_type": error_type,
            "domain": domain,
        },
    )


@router.get(
    "/recipe",
    response_model=RecipeResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def get_recipe(url: Optional[str] = Query(default=None)):
    """
    Fetch a recipe page and return its structured recipe data.

    Status codes:
    - 400: missing or non-http(s) URL
    - 404: no recipe data on the page
    - 502: the page couldn't be fetched
    - 500: anything unexpected
    """
    if not url:
        raise HTTPException(status_code=400, detail=BOUNDARY_MESSAGES["missing_url"])

    if not is_valid_url(url):
        raise HTTPException(status_code=400, detail=BOUNDARY_MESSAGES["invalid_url"])

    print(f"🔍 Extracting recipe from: {url}")

    try:
        fetched = await document_loader.fetch(url)

        if fetched.error_type == "invalid_url":
            raise HTTPException(status_code=400, detail=BOUNDARY_MESSAGES["invalid_url"])

        if fetched.error_type == "fetch_status":
            _log_fetch_failure(url, fetched.error_type, fetched.status_code)
            raise HTTPException(
                status_code=502,
                detail=f"Failed to fetch page (HTTP {fetched.status_code})",
            )

        if not fetched.ok:
            error_type = fetched.error_type or "fetch_failed"
            _log_fetch_failure(url, error_type)
            raise HTTPException(
                status_code=502,
                detail=BOUNDARY_MESSAGES.get(error_type, BOUNDARY_MESSAGES["fetch_failed"]),
            )

        result = recipe_pipeline.extract(fetched.html, url)

    except HTTPException:
        raise
    except Exception as e:
        print(f"❌ Fetch error: {e}")
        sentry_sdk.capture_exception(e)
        raise HTTPException(status_code=500, detail=BOUNDARY_MESSAGES["internal"])

    if isinstance(result, ExtractionFailure):
        raise HTTPException(
            status_code=404,
            detail=result.message or ERROR_MESSAGES["not_found"],
        )

    print(f"✅ Extracted '{result.title or 'Recipe'}' from {get_domain(url)}")
    return RecipeResponse.from_recipe(result)

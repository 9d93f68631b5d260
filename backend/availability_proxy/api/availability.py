from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
import json
import logging

from availability_proxy.core.errors import (
    AvailabilityProxyError,
    ConfigurationError,
    MSG_INVALID_BODY,
    UpstreamError,
    ValidationError,
    error_response,
)
from availability_proxy.services import AvailabilityResolver
from .validation import parse_availability_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Availability"])


def get_resolver(request: Request) -> AvailabilityResolver:
    """Resolver bound to the upstream config validated at startup"""
    config = getattr(request.app.state, "upstream_config", None)
    if config is None:
        raise ConfigurationError("Upstream configuration was not loaded at startup")
    return AvailabilityResolver(config)


@router.post("/mews-availability")
async def mews_availability(request: Request):
    """
    Resolve unavailable dates for one category

    Expected body:
    - categoryId: string (villaId is accepted too)
    - startDate: string (YYYY-MM-DD)
    - endDate: string (YYYY-MM-DD)
    """
    try:
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise ValidationError(MSG_INVALID_BODY)

        query = parse_availability_request(body)
        logger.info(
            f"Availability request for category {query.category_id}: "
            f"{query.start_date} - {query.end_date}"
        )

        resolver = get_resolver(request)
        result = await resolver.resolve(query)

        logger.info(f"Returning {len(result.unavailable)} unavailable dates for {query.category_id}")
        return JSONResponse(result.model_dump())

    except ValidationError as e:
        logger.warning(f"Rejected availability request: {e}")
        return error_response(e)
    except UpstreamError as e:
        logger.error(f"Mews request failed (status {e.upstream_status}): {e}")
        return error_response(e)
    except AvailabilityProxyError as e:
        logger.error(f"Error resolving availability: {e}")
        return error_response(e)
    except Exception as e:
        logger.exception(f"Unexpected error resolving availability: {e}")
        return error_response(e)


# CORS preflight OPTIONS requests are answered by the middleware before reaching this route
@router.api_route(
    "/mews-availability",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def mews_availability_method_not_allowed(request: Request):
    return JSONResponse(
        {"error": f"Method {request.method} Not Allowed"},
        status_code=405,
        headers={"Allow": "POST"},
    )

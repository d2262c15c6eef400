"""Parse routes - normalize handwritten recipe names."""

from fastapi import APIRouter

from app.exceptions import ServiceValidationError
from domain.schemas.summary_schemas import ParseRequest, ParseResponse
from services.parsing_service import normalize_name

router = APIRouter(tags=["Parse"])


@router.post("/parse", response_model=ParseResponse)
def parse(request: ParseRequest) -> ParseResponse:
    parsed = normalize_name(request.input)
    if parsed is None:
        raise ServiceValidationError("this string is cooked", code="UNPARSEABLE_NAME")
    return ParseResponse(msg=parsed)

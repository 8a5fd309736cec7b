"""Parse endpoints: read free-form measurement text into numbers."""

from fastapi import APIRouter, HTTPException

from tapeline.models.schemas import ParseLengthRequest, ParseVolumeRequest, ParsedValueResponse
from tapeline.core.errors import MeasurementError
from tapeline.core.parser.length import parse_length
from tapeline.core.parser.volume import parse_volume

router = APIRouter(tags=["parse"])


def _unprocessable(e: MeasurementError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail=[{"message": str(e), "col": e.col}],
    )


@router.post("/parse/length", response_model=ParsedValueResponse)
async def parse_length_text(req: ParseLengthRequest):
    """Parse a length such as 5' 3-1/2" and return it in the target unit."""
    try:
        value = parse_length(req.text, req.target_unit, req.default_unit)
    except MeasurementError as e:
        raise _unprocessable(e)
    return {"value": value, "unit": req.target_unit.value}


@router.post("/parse/volume", response_model=ParsedValueResponse)
async def parse_volume_text(req: ParseVolumeRequest):
    """Parse a volume and return it in the requested unit."""
    try:
        value = parse_volume(req.text, req.unit)
    except MeasurementError as e:
        raise _unprocessable(e)
    return {"value": value, "unit": req.unit.value}

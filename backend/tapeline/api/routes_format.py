"""Format endpoints: render numbers as display strings."""

from fastapi import APIRouter

from tapeline.models.schemas import FormatLengthRequest, FormatVolumeRequest, FormattedTextResponse
from tapeline.core.formatter.length import format_length
from tapeline.core.formatter.volume import format_volume

router = APIRouter(tags=["format"])


@router.post("/format/length", response_model=FormattedTextResponse)
async def format_length_value(req: FormatLengthRequest):
    text = format_length(req.value, req.unit, req.display_format, req.inch_format, req.show_units)
    return {"text": text}


@router.post("/format/volume", response_model=FormattedTextResponse)
async def format_volume_value(req: FormatVolumeRequest):
    return {"text": format_volume(req.value, req.unit, req.show_units)}

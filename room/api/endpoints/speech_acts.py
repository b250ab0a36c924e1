from fastapi import APIRouter

from room.api.schemas.rooms import SpeechActModel, SpeechActsResponse
from room.core.actions import BUILDERS

router = APIRouter(prefix="/api/v1/speech-acts", tags=["speech-acts"])


@router.get("", response_model=SpeechActsResponse)
def list_speech_acts():
    return SpeechActsResponse(
        speech_acts=[
            SpeechActModel(name=sa.name, params=list(sa.params), placements=sorted(sa.placements))
            for sa in sorted(BUILDERS.values(), key=lambda s: s.name)
        ]
    )

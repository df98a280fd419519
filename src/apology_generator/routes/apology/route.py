from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from apology_generator.dependencies import get_flow
from apology_generator.flow import ApologyFlow, Failed, Succeeded
from apology_generator.log_config import logger

from .schema import GenerateApologyRequest, GenerateApologyResponse

router = APIRouter(prefix="/v1/apology", tags=["apology"])

_FAILURE_STATUS = {
    "configuration": status.HTTP_503_SERVICE_UNAVAILABLE,
    "provider": status.HTTP_502_BAD_GATEWAY,
}


@router.post("/generate", response_model=GenerateApologyResponse)
async def generate_apology(
    request: GenerateApologyRequest,
    flow: ApologyFlow = Depends(get_flow),
) -> GenerateApologyResponse:
    task = flow.submit(request.description)
    if task is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Description must not be empty")

    state = await task
    if isinstance(state, Succeeded):
        return GenerateApologyResponse(apology=state.result)
    if isinstance(state, Failed):
        raise HTTPException(status_code=_FAILURE_STATUS[state.reason], detail=state.error)

    logger.error("Apology flow settled in unexpected state: %s", state.status)
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Apology generation did not complete")

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ...domain.errors import FormatMismatch, NotFound, UnsupportedAnswerShape
from ...schemas.qcm_schemas import CheckIn, CheckOut, QcmOut
from ...services.qcm_service import QcmService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["qcm"])

# Сервіс створюється один раз під час старту і лежить в app.state

def get_service(request: Request) -> QcmService:
    return request.app.state.qcm_service

ServiceDep = Annotated[QcmService, Depends(get_service)]

@router.get("/qcm", response_model=QcmOut)
async def get_qcm(svc: ServiceDep, count: Optional[str] = None, random: Optional[str] = None):
    # count/random — сирі рядки: некоректний count означає «без ліміту»
    return svc.get_qcm(count=count, random=random)

@router.post("/check", response_model=CheckOut)
async def check_answer(payload: CheckIn, svc: ServiceDep):
    try:
        return svc.check(payload.questionId, payload.answer)
    except NotFound:
        logger.info("Check for unknown question %d", payload.questionId)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Question not found")
    except FormatMismatch as e:
        logger.info("Rejected answer for question %d: %s", payload.questionId, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid answer format")
    except UnsupportedAnswerShape:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Invalid question format")

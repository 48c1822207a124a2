import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from relay.core.mailer import Mailer
from relay.dependencies import get_mailer
from relay.lib.email_body import Submission

router = APIRouter(tags=["contact"])
log = logging.getLogger("uvicorn.error")

SENT_MESSAGE = "Email sent successfully"
FAILED_MESSAGE = "Failed to send email"


class RelayOut(BaseModel):
    message: str


@router.post("/", response_model=RelayOut)
@router.post("/send-email", response_model=RelayOut)
async def handle_submission(
    payload: Optional[Submission] = Body(default=None),
    mailer: Mailer = Depends(get_mailer),
):
    # an empty body is relayed like one with every field missing
    result = await mailer.send(payload or Submission())
    if result.ok:
        return {"message": SENT_MESSAGE}

    # cause stays in the server log
    log.warning("[contact] submission dropped after transport failure")
    return JSONResponse(status_code=500, content={"message": FAILED_MESSAGE})

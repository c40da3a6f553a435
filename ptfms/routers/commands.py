from fastapi import APIRouter, Depends

from ptfms.dependencies import get_command_history
from ptfms.services.commands import CommandHistory, CommandResult
from ptfms.utils.exceptions import AppException
from ptfms.utils.response import success_response

router = APIRouter(prefix="/commands", tags=["commands"])


@router.get("/history")
async def get_history(history: CommandHistory = Depends(get_command_history)):
    return success_response(data=history.descriptions())


@router.post("/undo")
async def undo_last(history: CommandHistory = Depends(get_command_history)):
    if not len(history):
        raise AppException("Nothing to undo", status_code=409)
    result = await history.undo_last()
    if result is CommandResult.NOT_EXECUTED:
        raise AppException("Record was already removed; history entry discarded", status_code=409)
    if result is CommandResult.FAILED:
        raise AppException("Undo failed", status_code=500)
    return success_response(data={"result": result.value, "remaining": len(history)}, message="Last command undone")

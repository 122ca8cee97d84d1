"""Greeting controller."""

from typing import Annotated, Optional

from fastapi import APIRouter, Query

from app.controllers.dependencies import SayHelloDep
from app.telemetry import increment_greetings
from app.views import ErrorResponse, HelloResponse

router = APIRouter(prefix="/hello", tags=["hello"])


NameQuery = Annotated[Optional[str], Query()]


@router.get(
    "",
    response_model=HelloResponse,
    responses={
        422: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def say_hello(
    use_case: SayHelloDep,
    name: NameQuery = None,
) -> HelloResponse:
    """Greet the caller and persist the greeting"""

    result = await use_case.execute(name)
    increment_greetings()
    return HelloResponse.model_validate(result.model_dump())

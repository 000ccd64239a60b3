"""Greeting: GET / constant responder."""

from fastapi import APIRouter, status

from sort_service.schemas.probes import GreetingResponse

router = APIRouter(tags=["greeting"])


@router.get("/", response_model=GreetingResponse, status_code=status.HTTP_200_OK)
async def greeting() -> GreetingResponse:
    return GreetingResponse()

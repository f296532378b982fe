"""
Home Handler

Root greeting endpoint, handy as a smoke test that the API is up.
"""

from fastapi import APIRouter

from kennel.shared.schemas.common import MessageResponse


router = APIRouter()


@router.get("/", response_model=MessageResponse)
async def hello():
    """Static greeting."""
    return MessageResponse(message="Hello World!")

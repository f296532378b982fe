"""
Dog Handler

CRUD endpoints for Dog records.

ARCHITECTURE:
=============
    Handler → DogService → DogRepository → Dog

Handlers should ONLY:
- Parse HTTP requests (path ids, raw JSON bodies)
- Call service methods
- Format HTTP responses
- Handle HTTP-specific errors

Status Codes:
=============
    GET    /dogs        200
    GET    /dogs/{id}   200 | 400 bad id | 204 not found
    POST   /dogs        201 | 400 validation | 500 store error
    PATCH  /dogs/{id}   201 | 400 validation | 404 not found
    DELETE /dogs/{id}   200 | 400 bad id | 204 not found

GET and DELETE answer a missing Dog with an empty 204; PATCH answers
404 with {"message": "Dog not found"} and reports a successful update as
201. Clients of this API depend on these codes.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import Response

from kennel.shared.core.exceptions import DogNotFoundError, InvalidIdError
from kennel.shared.core.logging import get_logger
from kennel.shared.schemas.common import ErrorResponse, MessageResponse, ValidationErrorResponse
from kennel.shared.schemas.dog import DogResponse
from kennel.shared.services.dog_service import DogService
from kennel.shared.utils.identifiers import parse_record_id
from kennel.api.dependencies.services import get_dog_service


router = APIRouter()
logger = get_logger(__name__)

BAD_ID_RESPONSE = {"model": MessageResponse, "description": "id is not a number"}
NO_CONTENT_RESPONSE = {"description": "Dog not found"}


def _no_content(exc: DogNotFoundError) -> Response:
    """Not-found answer used by GET and DELETE: 204 carries no body."""
    logger.info(exc.message, dog_id=exc.resource_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=List[DogResponse])
async def list_dogs(
    dog_service: DogService = Depends(get_dog_service),
):
    """List every Dog."""
    return await dog_service.list_dogs()


@router.get(
    "/{dog_id}",
    response_model=DogResponse,
    responses={204: NO_CONTENT_RESPONSE, 400: BAD_ID_RESPONSE},
)
async def get_dog(
    dog_id: str,
    dog_service: DogService = Depends(get_dog_service),
):
    """Get one Dog by id."""
    record_id = parse_record_id(dog_id)
    try:
        if record_id is None:
            raise DogNotFoundError(dog_id)
        return await dog_service.get_dog(record_id)
    except DogNotFoundError as e:
        return _no_content(e)


@router.post(
    "",
    response_model=DogResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_dog(
    payload: Optional[dict[str, Any]] = Body(default=None),
    dog_service: DogService = Depends(get_dog_service),
):
    """
    Create a Dog.

    The body must hold exactly name, breed, description (strings) and
    age (number). Every problem is reported at once.
    """
    return await dog_service.create_dog(payload or {})


@router.patch(
    "/{dog_id}",
    response_model=DogResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse}, 404: {"model": MessageResponse}},
)
async def update_dog(
    dog_id: str,
    payload: Optional[dict[str, Any]] = Body(default=None),
    dog_service: DogService = Depends(get_dog_service),
):
    """
    Update some fields of a Dog.

    Only the fields present in the body are changed. An id that is not a
    number can never match a Dog and is answered with 404.
    """
    try:
        record_id = parse_record_id(dog_id)
    except InvalidIdError:
        record_id = None
    return await dog_service.update_dog(record_id, payload or {})


@router.delete(
    "/{dog_id}",
    response_model=DogResponse,
    responses={204: NO_CONTENT_RESPONSE, 400: BAD_ID_RESPONSE},
)
async def delete_dog(
    dog_id: str,
    dog_service: DogService = Depends(get_dog_service),
):
    """Delete a Dog and return it as it was."""
    record_id = parse_record_id(dog_id)
    try:
        if record_id is None:
            raise DogNotFoundError(dog_id)
        return await dog_service.delete_dog(record_id)
    except DogNotFoundError as e:
        return _no_content(e)

"""Order line endpoints addressed by line identifier."""

import uuid

from fastapi import APIRouter

from api.dependencies import RecordStoreDep
from api.models import DeleteResponse
from models.order import OrderLine

router = APIRouter(
    prefix="/lines",
    tags=["lines"],
)


@router.get("/{line_id}", response_model=OrderLine)
async def get_line(line_id: uuid.UUID, store: RecordStoreDep):
    """Get a single order line."""
    return store.get_line(line_id)


@router.delete("/{line_id}", response_model=DeleteResponse)
async def delete_line(line_id: uuid.UUID, store: RecordStoreDep):
    """Delete a single order line."""
    store.delete_line(line_id)
    return DeleteResponse(deleted=True, id=line_id)

from typing import Any, List

from fastapi import APIRouter, Depends, status

from skillswap.api.dependencies import get_current_active_user
from skillswap.db.database import get_db
from skillswap.db.store import Database
from skillswap.models.user import User
from skillswap.schemas.base import BaseResponseModel
from skillswap.schemas.swap_request import SwapRequestCreate, SwapRequestResponse, SwapRequestStatusUpdate
from skillswap.services.swap_request_service import SwapRequestService

router = APIRouter()


@router.get("", response_model=BaseResponseModel[List[SwapRequestResponse]])
async def read_swap_requests(
    current_user: User = Depends(get_current_active_user),
    db: Database = Depends(get_db)
) -> Any:
    """Swap requests the caller sent or received."""
    requests = await SwapRequestService.list_for_user(db, current_user)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Success", data=requests)


@router.post("", response_model=BaseResponseModel[SwapRequestResponse], status_code=status.HTTP_201_CREATED)
async def create_swap_request(
    request_in: SwapRequestCreate,
    current_user: User = Depends(get_current_active_user),
    db: Database = Depends(get_db)
) -> Any:
    swap_request = await SwapRequestService.create_request(db, current_user, request_in)
    return BaseResponseModel(code=status.HTTP_201_CREATED, message="Swap request sent", data=swap_request)


@router.get("/{request_id}", response_model=BaseResponseModel[SwapRequestResponse])
async def read_swap_request(
    request_id: int,
    current_user: User = Depends(get_current_active_user),
    db: Database = Depends(get_db)
) -> Any:
    swap_request = await SwapRequestService.get_request(db, current_user, request_id)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Success", data=swap_request)


@router.put("/{request_id}", response_model=BaseResponseModel[SwapRequestResponse])
async def update_swap_request(
    request_id: int,
    update_in: SwapRequestStatusUpdate,
    current_user: User = Depends(get_current_active_user),
    db: Database = Depends(get_db)
) -> Any:
    """Change the status of a request the caller takes part in."""
    swap_request = await SwapRequestService.update_status(db, current_user, request_id, update_in.status)
    return BaseResponseModel(
        code=status.HTTP_200_OK,
        message=f"Request {swap_request.status} successfully",
        data=swap_request
    )


@router.delete("/{request_id}", response_model=BaseResponseModel[SwapRequestResponse])
async def delete_swap_request(
    request_id: int,
    current_user: User = Depends(get_current_active_user),
    db: Database = Depends(get_db)
) -> Any:
    """Withdraw a request. Requester only."""
    swap_request = await SwapRequestService.delete_request(db, current_user, request_id)
    return BaseResponseModel(code=status.HTTP_200_OK, message="Swap request deleted", data=swap_request)

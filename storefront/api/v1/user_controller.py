# Standard library imports
from typing import Optional, Union

# External package imports
from fastapi import APIRouter, Depends, Query

# Local application imports
from ...application.dto.user_dto import UserResponse, AddressUpdateRequest, AddressResponse
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.set_address import SetAddressUseCase
from ...domain.models.user import User
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["users"])


@router.get("/{user_id}", response_model=Union[UserResponse, AddressResponse])
async def get_user(
    user_id: str,
    q: Optional[str] = Query(default=None, pattern="^address$"),
    current_user: User = Depends(get_current_user),
) -> Union[UserResponse, AddressResponse]:
    """
    Get a user's own record, or only their address with ``?q=address``
    
    Args:
        user_id: ID of the user
        q: Optional projection, only "address" is supported
        current_user: Current authenticated user (from dependency)
    """
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)
    
    user = await get_user_use_case.execute(user_id=user_id, current_user=current_user)
    if q == "address":
        return AddressResponse(address=user.address)
    return UserResponse.from_user(user)


@router.put("/{user_id}", response_model=AddressResponse)
async def set_address(
    user_id: str,
    request: AddressUpdateRequest,
    current_user: User = Depends(get_current_user),
) -> AddressResponse:
    """
    Set the shipping address of the current user
    
    Args:
        user_id: ID of the user
        request: New address
        current_user: Current authenticated user (from dependency)
    """
    container = get_container()
    set_address_use_case = container.get(SetAddressUseCase)
    
    address = await set_address_use_case.execute(
        user_id=user_id,
        address=request.address,
        current_user=current_user,
    )
    return AddressResponse(address=address)

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_user_service, path_user_id
from app.schemas.user import NewUser, ServerMessage, UserList, UserRead
from app.services import UserService

router = APIRouter(tags=["users"])

@router.get("/users", response_model=UserList)
def list_users(service: UserService = Depends(get_user_service)):
    return UserList(data=service.list_users())

@router.get(
    "/users/{id}",
    response_model=UserRead,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "User not found"}},
)
def get_user(user_id: int = Depends(path_user_id), service: UserService = Depends(get_user_service)):
    user = service.get_user(user_id)
    if user is None:
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return user

@router.post("/users", response_model=UserRead)
def create_user(data: NewUser, service: UserService = Depends(get_user_service)):
    return service.create_user(data)

@router.put(
    "/user/{id}",
    response_model=UserRead,
    responses={status.HTTP_404_NOT_FOUND: {"description": "User not found"}},
)
def update_user(
    data: NewUser,
    user_id: int = Depends(path_user_id),
    service: UserService = Depends(get_user_service),
):
    user = service.update_user(user_id, data)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return user

@router.delete("/user/{id}", response_model=ServerMessage)
def delete_user(user_id: int = Depends(path_user_id), service: UserService = Depends(get_user_service)):
    if service.delete_user(user_id):
        return ServerMessage(message="Delete Success")
    return ServerMessage(message="Delete Failed")

# blogapp/api/endpoints/users.py
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from blogapp import crud, schemas
from blogapp.api import deps
from blogapp.core.authorization import authorize_or_forbid
from blogapp.core.config import Settings
from blogapp.core.exceptions import NotFoundError, UnauthorizedError
from blogapp.core.security import CallerIdentity

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/signup", response_model=schemas.User, status_code=status.HTTP_201_CREATED)
def signup(user: schemas.UserCreate, db: Session = Depends(deps.get_db)):
    return crud.create_user(db=db, user=user)

@router.post("/login", response_model=schemas.Token)
def login(
    credentials: schemas.LoginRequest,
    db: Session = Depends(deps.get_db),
    settings: Settings = Depends(deps.get_settings),
):
    user = crud.authenticate(db, email=credentials.email, password=credentials.password)
    if user is None:
        raise UnauthorizedError("Invalid credentials")
    return schemas.Token(access_token=crud.issue_token(user, settings))

@router.get("/me", response_model=schemas.User)
def read_current_user(
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db),
):
    user = crud.get_user(db, caller.user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user

@router.put("/{user_id}", response_model=schemas.User)
def update_user(
    user_id: int,
    user_update: schemas.UserUpdate,
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db),
):
    authorize_or_forbid(user_id, caller.user_id, owner_key=lambda uid: uid,
                        message="You can only update your own profile")
    return crud.update_user(db, user_id=user_id, user_update=user_update)

@router.delete("/me", response_model=schemas.Message)
def delete_current_user(
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db),
):
    crud.delete_user(db, caller.user_id)
    return {"message": "User deleted successfully"}

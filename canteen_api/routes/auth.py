import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from canteen_api.database import get_db
from canteen_api.errors import AuthError, NotFoundError, ValidationError
from canteen_api.models.user import User
from canteen_api.schemas.user_schema import (
    AuthResponse,
    GoalEstimate,
    GoalEstimateRequest,
    ProfileUpdate,
    ProfileUpdateResponse,
    UserCreate,
    UserLogin,
    UserOut,
)
from canteen_api.services.goal_estimator import calculate_bmr, calculate_tdee
from canteen_api.utils.security import (
    TokenClaims,
    create_access_token,
    current_claims,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


def current_user(claims: TokenClaims = Depends(current_claims), db: Session = Depends(get_db)) -> User:
    user = db.get(User, claims.user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def _email_taken(db: Session, email: str) -> bool:
    return db.query(User.id).filter(User.email == email).first() is not None


def _token_for(user: User) -> str:
    return create_access_token(user.id, user.email, user.is_admin)


def _estimate(weight, height, age, gender, activity_level) -> GoalEstimate:
    bmr = calculate_bmr(weight, height, age, gender)
    return GoalEstimate(bmr=bmr, tdee=calculate_tdee(bmr, activity_level))


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    if _email_taken(db, payload.email):
        raise ValidationError("Email already registered")
    user = User(
        email=payload.email,
        password=hash_password(payload.password),
        name=payload.name,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # concurrent registration of the same email
        db.rollback()
        raise ValidationError("Email already registered")
    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return AuthResponse(message="User registered successfully", token=_token_for(user), user=user)


@router.post("/login", response_model=AuthResponse)
def login(payload: UserLogin, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == payload.email).first()
    if not verify_password(payload.password, user.password if user else None):
        logger.warning("Failed login attempt")
        raise AuthError("Invalid email or password")
    return AuthResponse(message="Login successful", token=_token_for(user), user=user)


@router.get("/profile", response_model=UserOut)
def get_profile(user: User = Depends(current_user)):
    return user


@router.put("/profile", response_model=ProfileUpdateResponse)
def update_profile(
    patch: ProfileUpdate,
    user: User = Depends(current_user),
    db: Session = Depends(get_db),
):
    if patch.name is not None:
        user.name = patch.name
    if patch.height is not None:
        user.height = patch.height
    if patch.weight is not None:
        user.weight = patch.weight
    if patch.age is not None:
        user.age = patch.age
    if patch.gender is not None:
        user.gender = patch.gender
    if patch.activity_level is not None:
        user.activity_level = patch.activity_level
    if patch.daily_calorie_goal is not None:
        user.daily_calorie_goal = patch.daily_calorie_goal
    db.commit()
    db.refresh(user)
    return ProfileUpdateResponse(message="Profile updated successfully", user=user)


@router.post("/goal-estimate", response_model=GoalEstimate)
def goal_estimate(payload: GoalEstimateRequest):
    return _estimate(payload.weight, payload.height, payload.age, payload.gender, payload.activity_level)


@router.get("/profile/goal-estimate", response_model=GoalEstimate)
def profile_goal_estimate(user: User = Depends(current_user)):
    return _estimate(user.weight, user.height, user.age, user.gender, user.activity_level)

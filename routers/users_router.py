import logging
from fastapi import APIRouter, Depends

from database import MongoStore
from typings.user import UserCredential, UserSignup
from util.cert import check_password_async, hash_password_async, jwt_encode
from util.response import authentication_error
from utils import get_current_user, get_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/user")
async def create_user(credential: UserSignup, store: MongoStore = Depends(get_store)):
    """
    Sign up. Only the bcrypt hash of the password is stored
    """
    hashed = await hash_password_async(credential.password)
    inserted_id = await store.insert_one(
        "users", {"email": credential.email, "password": hashed}
    )
    logger.info("user %s signed up", inserted_id)
    return {
        "result": {"acknowledged": True, "insertedId": str(inserted_id)},
    }


@router.post("/login")
async def login(credential: UserCredential, store: MongoStore = Depends(get_store)):
    """
    Exchange email and password for a token valid for 3 days
    """
    user = await store.find_one("users", {"email": credential.email})
    # Unknown email and wrong password must look the same
    if user is None or not await check_password_async(
        credential.password, user.get("password", "")
    ):
        raise authentication_error("Invalid login credentials")

    token = jwt_encode(str(user["_id"]), user["email"])
    return {"token": token}


@router.get("/profile")
async def read_profile(user=Depends(get_current_user)):
    return {
        "message": "success in accessing protected route",
        "payload": user,
    }


@router.get("/payment")
async def read_payment(user=Depends(get_current_user)):
    return {"message": "accessing protected payment route"}

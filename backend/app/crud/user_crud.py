# app/crud/user_crud.py
from bson import ObjectId

from app.models.user import Role, User


async def create_user(users, user: User):
    return await users.insert_one(user.model_dump())


async def get_user_by_email(users, email: str):
    return await users.find_one({"email": email})


async def list_users(users):
    return await users.find({}, sort=[("createdAt", -1)]).to_list(length=None)


async def promote_to_admin(users, user_id: ObjectId):
    return await users.update_one({"_id": user_id}, {"$set": {"role": Role.ADMIN.value}})

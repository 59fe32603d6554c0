from pydantic import BaseModel

from models.schemas.profile import UserProfile


class RecommendRequest(BaseModel):
    profile: UserProfile

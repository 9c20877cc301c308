from pydantic import BaseModel


class AdminStats(BaseModel):
    users: int
    lessons: int
    reports: int

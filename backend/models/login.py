from typing import Optional
from pydantic import BaseModel


class LoginSubmission(BaseModel):
    user_id: Optional[str] = None     # taken as-is, never validated

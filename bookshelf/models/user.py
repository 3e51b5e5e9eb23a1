# bookshelf/models/user.py

from pydantic import BaseModel, ConfigDict

class UserViewModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    full_name: str

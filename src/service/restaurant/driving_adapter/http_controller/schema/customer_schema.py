from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr


class CustomerCreateRequest(BaseModel):
    name: str
    email: EmailStr
    phone: str = ''

    class Config:
        json_schema_extra = {
            'example': {'name': 'Ada Lovelace', 'email': 'ada@example.com', 'phone': '555-0100'}
        }


class CustomerResponse(BaseModel):
    model_config = {'from_attributes': True}

    id: int
    name: str
    email: EmailStr
    phone: str
    created_at: Optional[datetime] = None

from datetime import datetime
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError


@attrs.define
class Customer:
    name: str
    email: str
    phone: str = ''
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def create(cls, *, name: str, email: str, phone: str = '') -> 'Customer':
        name = name.strip()
        email = email.strip()
        if not name:
            raise DomainError('Customer name is required')
        return cls(name=name, email=email, phone=phone.strip())

from typing import Any, Optional
from pydantic import BaseModel


class StudentPayload(BaseModel):
    """
    Body of POST /students and PUT /students/{id}.
    Fields are optional here and checked one by one in the router.
    """
    name: Optional[str] = None
    age: Optional[int] = None
    subjects: Any = None
    dateEnrolled: Any = None  # ISO 8601 text or epoch milliseconds

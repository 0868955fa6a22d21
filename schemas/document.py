from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime

class DocumentCreate(BaseModel):
    filename: str
    file_type: str
    user_id: int
    product_id: Optional[int] = None
    content: bytes

class DocumentFilter(BaseModel):
    file_type: Optional[str] = None
    user_id: Optional[int] = None
    id: Optional[int] = None
    filename: Optional[str] = None
    upload_date: Optional[date] = None

class Document(BaseModel):
    id: int
    filename: str
    file_type: str
    upload_date: datetime
    user_id: int
    user_name: Optional[str] = None
    product_id: Optional[int] = None
    product_name: Optional[str] = None

from pydantic import BaseModel, Field, condecimal
from typing import Optional
from datetime import datetime
from decimal import Decimal

class ProductEntryCreate(BaseModel):
    product_id: int = Field(gt=0)
    supplier_id: int = Field(gt=0)
    entry_date: datetime
    quantity: condecimal(max_digits=10, decimal_places=2) = Field(gt=0)
    unit_value: condecimal(max_digits=10, decimal_places=2) = Field(gt=0)
    total_value: Optional[Decimal] = None
    invoice_number: str = Field(min_length=1)
    batch: Optional[str] = None
    category: Optional[str] = None
    observations: Optional[str] = None

class ProductEntry(BaseModel):
    id: int
    entry_code: str
    product_id: int
    product_name: str
    supplier_id: int
    supplier_name: str
    entry_date: datetime
    quantity: Decimal
    unit_value: Decimal
    total_value: Decimal
    invoice_number: str
    batch: Optional[str] = None
    category: Optional[str] = None
    observations: Optional[str] = None
    document_id: Optional[int] = None

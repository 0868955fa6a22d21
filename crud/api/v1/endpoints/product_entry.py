from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from config import Settings, get_settings
from database import get_db
from schemas.product_entry import ProductEntry, ProductEntryCreate
from schemas.user import User
from crud import product_entry
from crud.api.v1.deps import get_current_user

router = APIRouter(dependencies=[Depends(get_current_user)])

@router.get("/", response_model=List[ProductEntry])
def list_entries(db: Session = Depends(get_db)):
    return product_entry.get_entries(db)

@router.get("/{entry_id}", response_model=ProductEntry)
def get_entry(entry_id: int, db: Session = Depends(get_db)):
    return product_entry.get_entry(db, entry_id)

@router.post("/", response_model=ProductEntry, status_code=201)
async def create_entry(
    product_id: int = Form(..., gt=0),
    supplier_id: int = Form(..., gt=0),
    entry_date: datetime = Form(...),
    quantity: Decimal = Form(..., gt=0),
    unit_value: Decimal = Form(..., gt=0),
    total_value: Optional[Decimal] = Form(None),
    invoice_number: str = Form(..., min_length=1),
    batch: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    observations: Optional[str] = Form(None),
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    entry = ProductEntryCreate(
        product_id=product_id,
        supplier_id=supplier_id,
        entry_date=entry_date,
        quantity=quantity,
        unit_value=unit_value,
        total_value=total_value,
        invoice_number=invoice_number,
        batch=batch or None,
        category=category or None,
        observations=observations or None,
    )
    content = await file.read()
    return product_entry.create_entry(
        db,
        entry,
        filename=file.filename,
        file_type=file.content_type,
        content=content,
        user_id=current_user.id,
        max_upload_size=settings.MAX_UPLOAD_SIZE,
    )

@router.delete("/{entry_id}")
def delete_entry(entry_id: int, db: Session = Depends(get_db)):
    product_entry.delete_entry(db, entry_id)
    return {"status": "success"}

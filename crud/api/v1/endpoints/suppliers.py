from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from database import get_db
from schemas.supplier import Supplier, SupplierCreate, SupplierUpdate
from crud import suppliers

router = APIRouter()

@router.post("/", response_model=Supplier, status_code=201)
def create_supplier(supplier: SupplierCreate, db: Session = Depends(get_db)):
    return suppliers.create_supplier(db, supplier)

@router.get("/", response_model=List[Supplier])
def list_suppliers(db: Session = Depends(get_db)):
    return suppliers.get_suppliers(db)

@router.get("/{supplier_id}", response_model=Supplier)
def get_supplier(supplier_id: int, db: Session = Depends(get_db)):
    return suppliers.find_by_code(db, supplier_id)

@router.put("/{supplier_id}", response_model=Supplier)
def update_supplier(supplier_id: int, supplier_update: SupplierUpdate, db: Session = Depends(get_db)):
    return suppliers.update_supplier(db, supplier_id, supplier_update)

@router.delete("/{supplier_id}")
def delete_supplier(supplier_id: int, db: Session = Depends(get_db)):
    suppliers.delete_supplier(db, supplier_id)
    return {"status": "success"}

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from database import get_db
from schemas.product import Product, ProductCreate, ProductUpdate
from crud import products

router = APIRouter()

@router.post("/", response_model=Product, status_code=201)
def create_product(product: ProductCreate, db: Session = Depends(get_db)):
    return products.create_product(db, product)

@router.get("/", response_model=List[Product])
def list_products(search: Optional[str] = None, db: Session = Depends(get_db)):
    return products.get_products(db, search)

@router.get("/{product_id}", response_model=Product)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return products.get_product(db, product_id)

@router.put("/{product_id}", response_model=Product)
def update_product(product_id: int, product_update: ProductUpdate, db: Session = Depends(get_db)):
    return products.update_product(db, product_id, product_update)

@router.delete("/{product_id}")
def delete_product(product_id: int, db: Session = Depends(get_db)):
    products.delete_product(db, product_id)
    return {"status": "success"}

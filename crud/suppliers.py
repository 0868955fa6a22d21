import logging
from sqlalchemy.orm import Session
from typing import List
from models.supplier import Supplier
from schemas.supplier import SupplierCreate, SupplierUpdate
from utils.exceptions import InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)


def create_supplier(db: Session, supplier: SupplierCreate) -> Supplier:
    db_supplier = Supplier(**supplier.model_dump())
    db.add(db_supplier)
    db.commit()
    db.refresh(db_supplier)
    logger.info("created supplier %s", db_supplier.id)
    return db_supplier

def get_supplier(db: Session, supplier_id: int) -> Supplier:
    db_supplier = db.query(Supplier).filter(Supplier.id == supplier_id).first()
    if db_supplier is None:
        raise NotFoundError("Supplier not found")
    return db_supplier

def find_by_code(db: Session, code: int) -> Supplier:
    db_supplier = db.query(Supplier).filter(Supplier.id == code).first()
    if db_supplier is None:
        raise NotFoundError(f"Supplier with code {code} not found")
    return db_supplier

def get_suppliers(db: Session) -> List[Supplier]:
    return db.query(Supplier).order_by(Supplier.id).all()

def update_supplier(db: Session, supplier_id: int, supplier_update: SupplierUpdate) -> Supplier:
    db_supplier = get_supplier(db, supplier_id)
    update_data = supplier_update.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(db_supplier, key, value)
    db.commit()
    db.refresh(db_supplier)
    return db_supplier

def delete_supplier(db: Session, supplier_id: int) -> None:
    db_supplier = get_supplier(db, supplier_id)
    if db_supplier.entries:
        raise InvalidInputError("Cannot delete supplier with product entries")
    db.delete(db_supplier)
    db.commit()
    logger.info("deleted supplier %s", supplier_id)

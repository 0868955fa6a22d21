"""Conversion of persisted rows into the DTOs returned by the API."""
import re
from models.user import User as UserModel
from models.document import Document as DocumentModel
from models.product_entry import ProductEntry as ProductEntryModel
from schemas.user import User
from schemas.document import Document
from schemas.product_entry import ProductEntry


def normalize_cpf(cpf: str) -> str:
    """Strip everything but digits from a national id."""
    return re.sub(r"\D", "", cpf or "")


def mask_cpf(cpf: str) -> str:
    """Render a national id as 000.000.000-00, whatever punctuation it came with."""
    return re.sub(r"(\d{3})(\d{3})(\d{3})(\d{2})", r"\1.\2.\3-\4", normalize_cpf(cpf))


def to_user_dto(entity: UserModel) -> User:
    return User(
        id=entity.id,
        uid=entity.uid,
        name=entity.name,
        email=entity.email,
        cpf=mask_cpf(entity.cpf),
    )


def to_document_dto(entity: DocumentModel) -> Document:
    return Document(
        id=entity.id,
        filename=entity.filename,
        file_type=entity.file_type,
        upload_date=entity.upload_date,
        user_id=entity.user_id,
        user_name=entity.user.name if entity.user else None,
        product_id=entity.product_id,
        product_name=entity.product.name if entity.product else None,
    )


def to_product_entry_dto(entity: ProductEntryModel) -> ProductEntry:
    return ProductEntry(
        id=entity.id,
        entry_code=entity.entry_code,
        product_id=entity.product_id,
        product_name=entity.product.name if entity.product else "",
        supplier_id=entity.supplier_id,
        supplier_name=entity.supplier.name if entity.supplier else "",
        entry_date=entity.entry_date,
        quantity=entity.quantity,
        unit_value=entity.unit_value,
        total_value=entity.total_value,
        invoice_number=entity.invoice_number,
        batch=entity.batch,
        category=entity.category,
        observations=entity.observations,
        document_id=entity.document_id,
    )

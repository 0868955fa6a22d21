from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from database import Base

class ProductEntry(Base):
    __tablename__ = "product_entries"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    entry_code = Column(String(6), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), nullable=False)
    entry_date = Column(DateTime(timezone=True), nullable=False)
    quantity = Column(Numeric(10, 2), nullable=False)
    unit_value = Column(Numeric(10, 2), nullable=False)
    total_value = Column(Numeric(12, 2), nullable=False)
    invoice_number = Column(String, nullable=False)
    batch = Column(String, nullable=True)
    category = Column(String, nullable=True)
    observations = Column(String, nullable=True)
    document_id = Column(Integer, ForeignKey("documents.id"), nullable=True)

    product = relationship("Product", back_populates="entries")
    supplier = relationship("Supplier", back_populates="entries")
    document = relationship("Document")

from sqlalchemy import Column, Integer, String, DateTime, LargeBinary, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship, deferred
from database import Base

class Document(Base):
    __tablename__ = "documents"
    __table_args__ = (
        UniqueConstraint("filename", "user_id", name="uq_documents_filename_user"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    filename = Column(String, nullable=False)
    file_type = Column(String, nullable=False)
    upload_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=True)
    # listing never needs the payload
    content = deferred(Column(LargeBinary, nullable=False))

    user = relationship("User", back_populates="documents")
    product = relationship("Product", back_populates="documents")

import enum
from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func
from shared.config.database import Base


class ProductCategory(str, enum.Enum):
    PAPER = "Kertas"
    WRITING = "Pena & Pensil"
    BOOKS = "Buku"
    FILING = "Arsip"
    OTHER = "Lainnya"


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Integer, nullable=False) # whole Rupiah
    stock = Column(Integer, nullable=False, default=0)
    category = Column(String, nullable=False, default=ProductCategory.PAPER.value)
    image_url = Column(String, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

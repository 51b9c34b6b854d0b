"""
Supplier and customer records.
"""
from sqlalchemy import Column, Integer, String, Text

from kasir.core.database import Base


class Supplier(Base):
    __tablename__ = "supplier"

    id = Column(Integer, primary_key=True, index=True)
    nama_supplier = Column(String(200), nullable=False)
    kontak = Column(String(100), nullable=True)
    alamat = Column(Text, nullable=True)

    def __repr__(self):
        return f"<Supplier(id={self.id}, nama='{self.nama_supplier}')>"


class Customer(Base):
    __tablename__ = "pelanggan"

    id = Column(Integer, primary_key=True, index=True)
    nama_pelanggan = Column(String(200), nullable=False)
    kontak = Column(String(100), nullable=True)
    alamat = Column(Text, nullable=True)

    def __repr__(self):
        return f"<Customer(id={self.id}, nama='{self.nama_pelanggan}')>"

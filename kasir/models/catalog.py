"""
Catalog models: categories, item types and stocked items.
"""
from sqlalchemy import Column, Integer, String, Numeric, ForeignKey

from kasir.core.database import Base


class Category(Base):
    """Model for item categories."""
    __tablename__ = "kategori_barang"

    id = Column(Integer, primary_key=True, index=True)
    nama_kategori = Column(String(100), nullable=False)

    def __repr__(self):
        return f"<Category(id={self.id}, nama='{self.nama_kategori}')>"


class ItemType(Base):
    """Model for item types."""
    __tablename__ = "jenis_barang"

    id = Column(Integer, primary_key=True, index=True)
    nama_jenis = Column(String(100), nullable=False)

    def __repr__(self):
        return f"<ItemType(id={self.id}, nama='{self.nama_jenis}')>"


class Item(Base):
    """Model for stocked items."""
    __tablename__ = "barang"

    id = Column(Integer, primary_key=True, index=True)
    nama_barang = Column(String(200), nullable=False)
    id_kategori = Column(Integer, ForeignKey("kategori_barang.id"), nullable=True)
    id_jenis = Column(Integer, ForeignKey("jenis_barang.id"), nullable=True)

    # Never negative; the sale workflow only decrements through a guarded update
    stok = Column(Integer, nullable=False, default=0)
    harga_beli = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)
    harga_jual = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)

    def __repr__(self):
        return f"<Item(id={self.id}, nama='{self.nama_barang}', stok={self.stok})>"

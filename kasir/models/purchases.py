"""
Purchase models for goods received from suppliers.
"""
from sqlalchemy import Column, Integer, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from kasir.core.database import Base


class Purchase(Base):
    """Model for purchase transaction headers."""
    __tablename__ = "transaksi_pembelian"

    id = Column(Integer, primary_key=True, index=True)
    id_supplier = Column(Integer, ForeignKey("supplier.id"), nullable=True)
    total_harga = Column(Numeric(14, 2, asdecimal=False), nullable=False)
    tanggal = Column(DateTime, nullable=False, index=True)

    # Relationships
    details = relationship("PurchaseLine", back_populates="pembelian", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Purchase(id={self.id}, total={self.total_harga})>"


class PurchaseLine(Base):
    """Model for individual items in a purchase."""
    __tablename__ = "detail_pembelian"

    id = Column(Integer, primary_key=True, index=True)
    id_pembelian = Column(Integer, ForeignKey("transaksi_pembelian.id", ondelete="CASCADE"), nullable=False)
    id_barang = Column(Integer, ForeignKey("barang.id"), nullable=False)
    jumlah = Column(Integer, nullable=False)
    harga_satuan = Column(Numeric(14, 2, asdecimal=False), nullable=False)
    subtotal = Column(Numeric(14, 2, asdecimal=False), nullable=False)

    pembelian = relationship("Purchase", back_populates="details")

    def __repr__(self):
        return f"<PurchaseLine(id={self.id}, barang={self.id_barang}, jumlah={self.jumlah})>"

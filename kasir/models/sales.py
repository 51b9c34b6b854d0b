"""
Sales models for tracking POS transactions.
"""
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from kasir.core.database import Base


class Sale(Base):
    """Model for sales transaction headers."""
    __tablename__ = "transaksi_penjualan"

    id = Column(Integer, primary_key=True, index=True)
    id_user = Column(Integer, ForeignKey("users.id"), nullable=False)
    id_pelanggan = Column(Integer, ForeignKey("pelanggan.id"), nullable=True)

    # Payment information
    total_harga = Column(Numeric(14, 2, asdecimal=False), nullable=False)
    diskon = Column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)
    metode_pembayaran = Column(String(50), nullable=False)

    invoice = Column(String(30), unique=True, index=True, nullable=False)
    tanggal = Column(DateTime, nullable=False, index=True)

    # Relationships
    details = relationship("SaleLine", back_populates="penjualan", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Sale(id={self.id}, invoice='{self.invoice}', total={self.total_harga})>"


class SaleLine(Base):
    """Model for individual items in a sale."""
    __tablename__ = "detail_penjualan"

    id = Column(Integer, primary_key=True, index=True)
    id_penjualan = Column(Integer, ForeignKey("transaksi_penjualan.id", ondelete="CASCADE"), nullable=False)
    id_barang = Column(Integer, ForeignKey("barang.id"), nullable=False)
    jumlah = Column(Integer, nullable=False)
    harga_satuan = Column(Numeric(14, 2, asdecimal=False), nullable=False)
    subtotal = Column(Numeric(14, 2, asdecimal=False), nullable=False)

    penjualan = relationship("Sale", back_populates="details")

    def __repr__(self):
        return f"<SaleLine(id={self.id}, barang={self.id_barang}, jumlah={self.jumlah})>"


class InvoiceCounter(Base):
    """Last invoice sequence handed out per calendar day."""
    __tablename__ = "invoice_counters"

    tanggal = Column(Date, primary_key=True)
    last_seq = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<InvoiceCounter(tanggal={self.tanggal}, last_seq={self.last_seq})>"

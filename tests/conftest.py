"""
Shared fixtures: an in-memory database, an API client and signed-in users.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from kasir.core.database import Base, build_engine, get_db
from kasir.core.security import Principal, create_access_token, hash_password
from kasir.main import app
from kasir.models import Category, Customer, Item, Supplier, User


@pytest.fixture
def engine():
    """Fresh in-memory database shared by every session of one test."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """API client whose requests each get their own session."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def _make_user(db, nama, username, password, role):
    user = User(nama=nama, username=username, password_hash=hash_password(password), role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def _headers_for(user):
    token = create_access_token(Principal(id=user.id, username=user.username, role=user.role))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_user(db):
    return _make_user(db, "Administrator", "admin", "admin123", "admin")


@pytest.fixture
def cashier_user(db):
    return _make_user(db, "Kasir Satu", "kasir1", "kasir123", "kasir")


@pytest.fixture
def admin_headers(admin_user):
    return _headers_for(admin_user)


@pytest.fixture
def cashier_headers(cashier_user):
    return _headers_for(cashier_user)


@pytest.fixture
def category(db):
    category = Category(nama_kategori="Minuman")
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@pytest.fixture
def supplier(db):
    supplier = Supplier(nama_supplier="PT Sumber Air", kontak="021-555", alamat="Jakarta")
    db.add(supplier)
    db.commit()
    db.refresh(supplier)
    return supplier


@pytest.fixture
def customer(db):
    customer = Customer(nama_pelanggan="Budi", kontak="0812", alamat="Bandung")
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer


@pytest.fixture
def make_item(db):
    """Factory for stocked items."""
    def make(nama_barang="Teh Botol", stok=5, harga_beli=3000, harga_jual=5000, id_kategori=None):
        item = Item(
            nama_barang=nama_barang,
            id_kategori=id_kategori,
            stok=stok,
            harga_beli=harga_beli,
            harga_jual=harga_jual,
        )
        db.add(item)
        db.commit()
        db.refresh(item)
        return item
    return make


@pytest.fixture
def stock_of(session_factory):
    """Read an item's stock through a fresh session."""
    def read(item_id):
        session = session_factory()
        try:
            return session.get(Item, item_id).stok
        finally:
            session.close()
    return read

"""
Tests for categories, item types, items, suppliers and customers.
"""
from unittest.mock import Mock

import pytest
from sqlalchemy.exc import OperationalError

from kasir.core.exceptions import StoreError
from kasir.services.catalog_manager import CategoryManager


class TestCategories:
    """Test cases for category endpoints."""

    def test_create_category(self, client, admin_headers):
        response = client.post("/api/kategori", json={"nama_kategori": "Minuman"}, headers=admin_headers)

        assert response.status_code == 201
        assert response.json()["nama_kategori"] == "Minuman"
        assert isinstance(response.json()["id"], int)

    def test_duplicate_names_are_allowed(self, client, admin_headers):
        first = client.post("/api/kategori", json={"nama_kategori": "Minuman"}, headers=admin_headers)
        second = client.post("/api/kategori", json={"nama_kategori": "Minuman"}, headers=admin_headers)

        assert second.status_code == 201
        assert first.json()["id"] != second.json()["id"]

    def test_listing_is_sorted_and_stable(self, client, admin_headers, cashier_headers):
        for name in ["Snack", "Minuman", "Alat Tulis", "Minuman"]:
            client.post("/api/kategori", json={"nama_kategori": name}, headers=admin_headers)

        first = client.get("/api/kategori", headers=cashier_headers).json()
        second = client.get("/api/kategori", headers=cashier_headers).json()

        assert [c["nama_kategori"] for c in first] == ["Alat Tulis", "Minuman", "Minuman", "Snack"]
        assert first == second

    def test_update_and_delete(self, client, admin_headers, category):
        updated = client.put(
            f"/api/kategori/{category.id}", json={"nama_kategori": "Minuman Dingin"}, headers=admin_headers
        )
        assert updated.status_code == 200
        assert updated.json() == {"id": category.id, "nama_kategori": "Minuman Dingin"}

        deleted = client.delete(f"/api/kategori/{category.id}", headers=admin_headers)
        assert deleted.json() == {"message": "Kategori deleted successfully"}

    def test_missing_category(self, client, admin_headers):
        response = client.put("/api/kategori/404", json={"nama_kategori": "X"}, headers=admin_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Kategori not found"
        assert client.delete("/api/kategori/404", headers=admin_headers).status_code == 404

    def test_referenced_category_cannot_be_deleted(self, client, admin_headers, category, make_item):
        make_item(id_kategori=category.id)

        response = client.delete(f"/api/kategori/{category.id}", headers=admin_headers)

        assert response.status_code == 400
        assert client.get("/api/kategori", headers=admin_headers).json()[0]["id"] == category.id

    def test_blank_name_is_rejected(self, client, admin_headers):
        response = client.post("/api/kategori", json={"nama_kategori": ""}, headers=admin_headers)
        assert response.status_code == 400


class TestItemTypes:
    """Test cases for item type endpoints."""

    def test_crud(self, client, admin_headers, cashier_headers):
        created = client.post("/api/jenis", json={"nama_jenis": "Botol"}, headers=admin_headers)
        assert created.status_code == 201
        type_id = created.json()["id"]

        assert client.get("/api/jenis", headers=cashier_headers).json() == [{"id": type_id, "nama_jenis": "Botol"}]

        updated = client.put(f"/api/jenis/{type_id}", json={"nama_jenis": "Kaleng"}, headers=admin_headers)
        assert updated.json()["nama_jenis"] == "Kaleng"

        deleted = client.delete(f"/api/jenis/{type_id}", headers=admin_headers)
        assert deleted.json() == {"message": "Jenis barang deleted successfully"}


class TestItems:
    """Test cases for item endpoints."""

    @pytest.fixture
    def item_payload(self, category):
        return {
            "nama_barang": "Teh Botol",
            "id_kategori": category.id,
            "id_jenis": None,
            "stok": 12,
            "harga_beli": 3000,
            "harga_jual": 5000,
        }

    def test_create_and_list_with_names(self, client, admin_headers, cashier_headers, item_payload):
        created = client.post("/api/barang", json=item_payload, headers=admin_headers)
        assert created.status_code == 201
        assert created.json()["stok"] == 12

        items = client.get("/api/barang", headers=cashier_headers).json()
        assert len(items) == 1
        assert items[0]["nama_kategori"] == "Minuman"
        assert items[0]["nama_jenis"] is None
        assert items[0]["harga_jual"] == 5000

    def test_negative_stock_is_rejected(self, client, admin_headers, item_payload):
        item_payload["stok"] = -1
        response = client.post("/api/barang", json=item_payload, headers=admin_headers)
        assert response.status_code == 400

    def test_unknown_category_is_rejected(self, client, admin_headers, item_payload):
        item_payload["id_kategori"] = 999
        response = client.post("/api/barang", json=item_payload, headers=admin_headers)

        assert response.status_code == 400
        assert client.get("/api/barang", headers=admin_headers).json() == []

    def test_update_item(self, client, admin_headers, make_item, item_payload):
        item = make_item()
        item_payload["stok"] = 40

        response = client.put(f"/api/barang/{item.id}", json=item_payload, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["stok"] == 40

    def test_update_without_stock_keeps_stock(self, client, admin_headers, make_item, stock_of):
        item = make_item(stok=40)

        response = client.put(
            f"/api/barang/{item.id}",
            json={"nama_barang": "Teh Botol 500ml", "harga_beli": 3500, "harga_jual": 6000},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request data"
        assert stock_of(item.id) == 40

    def test_cashier_cannot_write(self, client, cashier_headers, item_payload):
        response = client.post("/api/barang", json=item_payload, headers=cashier_headers)
        assert response.status_code == 403

    def test_delete_missing_item(self, client, admin_headers):
        response = client.delete("/api/barang/77", headers=admin_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Barang not found"


class TestParties:
    """Test cases for supplier and customer endpoints."""

    def test_supplier_crud(self, client, admin_headers, cashier_headers):
        created = client.post(
            "/api/supplier",
            json={"nama_supplier": "CV Maju", "kontak": "0811", "alamat": "Bogor"},
            headers=admin_headers,
        )
        assert created.status_code == 201
        supplier_id = created.json()["id"]

        assert client.get("/api/supplier", headers=cashier_headers).json()[0]["nama_supplier"] == "CV Maju"

        updated = client.put(
            f"/api/supplier/{supplier_id}",
            json={"nama_supplier": "CV Maju Jaya", "kontak": None, "alamat": None},
            headers=admin_headers,
        )
        assert updated.json()["nama_supplier"] == "CV Maju Jaya"
        assert client.delete(f"/api/supplier/{supplier_id}", headers=admin_headers).status_code == 200

    def test_cashier_can_register_and_edit_customers(self, client, cashier_headers):
        created = client.post(
            "/api/pelanggan",
            json={"nama_pelanggan": "Ani", "kontak": "0857", "alamat": "Depok"},
            headers=cashier_headers,
        )
        assert created.status_code == 201

        updated = client.put(
            f"/api/pelanggan/{created.json()['id']}",
            json={"nama_pelanggan": "Ani Lestari", "kontak": "0857", "alamat": "Depok"},
            headers=cashier_headers,
        )
        assert updated.status_code == 200
        assert updated.json()["nama_pelanggan"] == "Ani Lestari"

    def test_only_admin_deletes_customers(self, client, admin_headers, cashier_headers, customer):
        denied = client.delete(f"/api/pelanggan/{customer.id}", headers=cashier_headers)
        assert denied.status_code == 403

        deleted = client.delete(f"/api/pelanggan/{customer.id}", headers=admin_headers)
        assert deleted.json() == {"message": "Pelanggan deleted successfully"}

    def test_missing_customer_update(self, client, cashier_headers):
        response = client.put(
            "/api/pelanggan/55",
            json={"nama_pelanggan": "X"},
            headers=cashier_headers,
        )
        assert response.status_code == 404
        assert response.json() == {"message": "Pelanggan not found"}


class TestStoreFailures:
    """Store errors reach clients only as a generic message."""

    def test_commit_failure_is_generic(self):
        db = Mock()
        db.commit.side_effect = OperationalError("INSERT", {}, Exception("disk I/O error"))

        with pytest.raises(StoreError) as excinfo:
            CategoryManager().create(db, {"nama_kategori": "Minuman"})

        assert excinfo.value.message == "Server error"
        assert excinfo.value.detail is None
        db.rollback.assert_called_once()

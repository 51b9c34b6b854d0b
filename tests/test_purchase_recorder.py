"""
Tests for the purchase workflow.
"""
import pytest

from kasir.models import Purchase, PurchaseLine


def purchase_line(item_id, jumlah, harga_satuan=3000):
    return {
        "id_barang": item_id,
        "jumlah": jumlah,
        "harga_satuan": harga_satuan,
        "subtotal": jumlah * harga_satuan,
    }


class TestRecordPurchase:
    """Test cases for POST /pembelian."""

    def test_each_line_raises_stock(self, client, admin_headers, supplier, make_item, stock_of):
        tea = make_item("Teh Botol", stok=5)
        water = make_item("Air Mineral", stok=0)

        response = client.post(
            "/api/pembelian",
            json={
                "id_supplier": supplier.id,
                "total_harga": 39000,
                "details": [purchase_line(tea.id, 10), purchase_line(water.id, 3)],
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Transaksi pembelian berhasil"
        assert isinstance(response.json()["id"], int)
        assert stock_of(tea.id) == 15
        assert stock_of(water.id) == 3

    def test_bad_reference_mid_loop_rolls_back_everything(
        self, client, admin_headers, supplier, make_item, stock_of, db
    ):
        first = make_item("Teh Botol", stok=5)
        third = make_item("Kopi", stok=2)

        response = client.post(
            "/api/pembelian",
            json={
                "id_supplier": supplier.id,
                "total_harga": 30000,
                "details": [
                    purchase_line(first.id, 4),
                    purchase_line(9999, 1),
                    purchase_line(third.id, 5),
                ],
            },
            headers=admin_headers,
        )

        assert response.status_code == 500
        assert response.json() == {"message": "Server error"}
        assert stock_of(first.id) == 5
        assert stock_of(third.id) == 2
        assert db.query(Purchase).count() == 0
        assert db.query(PurchaseLine).count() == 0

    @pytest.mark.parametrize("details", [[], None])
    def test_purchase_needs_lines(self, client, admin_headers, details):
        response = client.post(
            "/api/pembelian",
            json={"id_supplier": None, "total_harga": 0, "details": details},
            headers=admin_headers,
        )
        assert response.status_code == 400

    def test_quantity_must_be_positive(self, client, admin_headers, make_item):
        item = make_item()
        response = client.post(
            "/api/pembelian",
            json={"total_harga": 0, "details": [purchase_line(item.id, 0)]},
            headers=admin_headers,
        )
        assert response.status_code == 400


class TestPurchaseQueries:
    """Test cases for listing and reading purchases."""

    @pytest.fixture
    def recorded(self, client, admin_headers, supplier, make_item):
        item = make_item("Teh Botol", stok=1)
        response = client.post(
            "/api/pembelian",
            json={"id_supplier": supplier.id, "total_harga": 6000, "details": [purchase_line(item.id, 2)]},
            headers=admin_headers,
        )
        return response.json()["id"]

    def test_list_includes_supplier_name(self, client, admin_headers, recorded):
        purchases = client.get("/api/pembelian", headers=admin_headers).json()

        assert len(purchases) == 1
        assert purchases[0]["id"] == recorded
        assert purchases[0]["nama_supplier"] == "PT Sumber Air"
        assert purchases[0]["total_harga"] == 6000

    def test_detail_includes_lines(self, client, admin_headers, recorded):
        body = client.get(f"/api/pembelian/{recorded}", headers=admin_headers).json()

        assert body["pembelian"]["id"] == recorded
        assert len(body["details"]) == 1
        assert body["details"][0]["nama_barang"] == "Teh Botol"
        assert body["details"][0]["jumlah"] == 2

    def test_missing_purchase(self, client, admin_headers):
        response = client.get("/api/pembelian/321", headers=admin_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Transaksi pembelian not found"

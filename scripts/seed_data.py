#!/usr/bin/env python3
"""
Sample data population script for the Kasir API.
Creates the tables, an admin account and a small sample catalog.
"""
import argparse
import sys

from kasir.core.database import get_db_context, init_db
from kasir.models import Category, ItemType, Item, Supplier, Customer
from kasir.services.user_manager import UserManager


SAMPLE_CATEGORIES = ["Minuman", "Makanan Ringan", "Kebutuhan Rumah"]
SAMPLE_ITEM_TYPES = ["Botol", "Kaleng", "Bungkus"]

SAMPLE_ITEMS = [
    # nama_barang, kategori, jenis, stok, harga_beli, harga_jual
    ("Teh Botol 350ml", "Minuman", "Botol", 48, 3000, 5000),
    ("Air Mineral 600ml", "Minuman", "Botol", 96, 2000, 3500),
    ("Kopi Susu Kaleng", "Minuman", "Kaleng", 8, 6500, 9000),
    ("Keripik Singkong", "Makanan Ringan", "Bungkus", 30, 7000, 10000),
    ("Sabun Cuci Piring", "Kebutuhan Rumah", "Bungkus", 5, 9500, 13000),
]


def create_admin(username: str, password: str):
    """Create the admin account unless users already exist."""
    with get_db_context() as db:
        created = UserManager().ensure_admin(db, username, password, "Administrator")
    if created:
        print(f"Created admin account: {username}")
    else:
        print("Users already exist, skipping admin account...")


def create_sample_catalog():
    """Create sample categories, item types, items and parties."""
    with get_db_context() as db:
        if db.query(Item).first() is not None:
            print("Items already exist, skipping sample catalog...")
            return

        categories = {name: Category(nama_kategori=name) for name in SAMPLE_CATEGORIES}
        item_types = {name: ItemType(nama_jenis=name) for name in SAMPLE_ITEM_TYPES}
        db.add_all(list(categories.values()) + list(item_types.values()))
        db.flush()

        for nama, kategori, jenis, stok, harga_beli, harga_jual in SAMPLE_ITEMS:
            db.add(Item(
                nama_barang=nama,
                id_kategori=categories[kategori].id,
                id_jenis=item_types[jenis].id,
                stok=stok,
                harga_beli=harga_beli,
                harga_jual=harga_jual,
            ))
            print(f"Created item: {nama} - Initial stock: {stok}")

        db.add(Supplier(nama_supplier="PT Sumber Segar", kontak="021-5550123", alamat="Jakarta"))
        db.add(Customer(nama_pelanggan="Pelanggan Umum", kontak=None, alamat=None))
        db.commit()

    print(f"Created {len(SAMPLE_ITEMS)} sample items")


def main():
    """Main function to populate sample data."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--admin-username", default="admin")
    parser.add_argument("--admin-password", required=True)
    parser.add_argument("--no-catalog", action="store_true", help="Only create tables and the admin account")
    args = parser.parse_args()

    print("Kasir Sample Data Population")
    print("=" * 50)

    try:
        print("Initializing database...")
        init_db()

        create_admin(args.admin_username, args.admin_password)

        if not args.no_catalog:
            print("\nCreating sample catalog...")
            create_sample_catalog()

        print("\nSample data population completed successfully!")

    except Exception as e:
        print(f"Error populating sample data: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

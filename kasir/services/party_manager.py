"""
Supplier and customer services.
"""
from kasir.models.parties import Supplier, Customer
from kasir.services.crud import CrudService


class SupplierManager(CrudService):
    model = Supplier
    label = "Supplier"
    order_by = ("nama_supplier", "id")
    fields = ("nama_supplier", "kontak", "alamat")


class CustomerManager(CrudService):
    model = Customer
    label = "Pelanggan"
    order_by = ("nama_pelanggan", "id")
    fields = ("nama_pelanggan", "kontak", "alamat")

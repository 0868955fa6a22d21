from .user import User, UserCreate, UserUpdate, UserList
from .auth import LoginUser, LoginStatus, RegistrationStatus
from .supplier import Supplier, SupplierCreate, SupplierUpdate
from .product import Product, ProductCreate, ProductUpdate
from .product_entry import ProductEntry, ProductEntryCreate
from .document import Document, DocumentCreate, DocumentFilter

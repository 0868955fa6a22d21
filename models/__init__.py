from .user import User
from .supplier import Supplier
from .product import Product
from .product_entry import ProductEntry
from .document import Document

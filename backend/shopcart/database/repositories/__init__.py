"""
Repository Pattern for MongoDB

Database abstraction layer providing:
- Testability with stub repositories
- Centralized query logic
- Driver errors translated into Shopcart exceptions

Repositories:
- ProductRepository: CRUD operations on the 'products' collection
"""

from shopcart.database.repositories.products import ProductRepository

__all__ = ["ProductRepository"]

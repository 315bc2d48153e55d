# Services package init
"""
Bev's Bakery Backend - Services Layer
======================================

What:  Business logic sitting between routes (HTTP) and storage.

Service Inventory:
    - catalog: The two products, their prices and order_total()
    - OrderStorage (abstract): create / list / get persistence contract
    - DatabaseOrderStorage / InMemoryOrderStorage: the two storage variants
    - OrderService: Order workflows and the admin dashboard summary
"""

# Routes package init
"""
Bev's Bakery Backend - Routes Package
======================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - orders.py:  POST /api/orders           (submit an order request)
                  GET  /api/orders           (list all orders)
                  GET  /api/orders/{id}      (get one order)
    - pages.py:   GET  /                     (marketing page + order form)
                  GET  /admin                (login form or orders table)
                  POST /admin/login          (credential check)
                  POST /admin/logout         (forget the admin flag)
    - health.py:  GET  /health               (service health check)

Routes stay thin: extract the request data, call OrderService, pick the
status code. Business rules live in services.
"""

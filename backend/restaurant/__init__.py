"""
restaurant - restaurant domain built on the core association framework

- domain: Menu, MenuItem, Order, OrderItem, Payment, Staff, Table, Reservation
- models: persistence record schemas and enumerations
- services: payment gateway and extent persistence
- config: settings and logging setup
"""

__version__ = "0.1.0"

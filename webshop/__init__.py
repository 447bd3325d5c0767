"""
Web Shop Store

In-memory data store for the web shop: product categories with their
products, and customers with their orders.

Author: TM3
Date: 2025-10-17
"""
__version__ = "1.0.0"

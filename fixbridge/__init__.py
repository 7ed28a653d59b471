"""
fixbridge - Symbol and Order Translation for a FIX Bridge

Translation layer between a FIX-style order-entry protocol and an exchange's
native API. Maps trading symbols between the exchange and each connected
counterparty, and normalizes exchange order records into canonical orders.
"""

__version__ = "0.1.0"
__author__ = "fixbridge Team"

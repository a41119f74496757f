"""
ordersync: BigCommerce order processing worker.

Consumes queued order events, enriches them with their products, shipping
addresses and coupons, stores them, updates their status on the store and
announces them on a Pub/Sub topic.
"""

__version__ = "0.1.0"

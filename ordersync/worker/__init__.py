"""
ordersync Worker Service

Hosts the order batch processor behind HTTP task endpoints:
- Process a batch of queued order messages delivered in the request
- Pull a batch from the new-orders subscription and process it
"""

__all__ = []

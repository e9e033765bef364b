"""Activities app package.

The activity feed shown on the realtor dashboard: new listings, leads,
messages, appointments and offers. Other apps append to it through
``apps.activities.services.record_activity``.
"""

"""Properties app package.

This app encapsulates property listings shown on the marketing site and
managed from the realtor dashboard: the property model, filters and the
listing API.
"""

"""Chat app package.

Messaging inbox of the realtor dashboard. A message goes from a realtor to
either another user or one of the realtor's clients; conversations are
derived from the message log.
"""

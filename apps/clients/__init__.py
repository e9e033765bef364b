"""Clients app package.

Leads and clients tracked by a realtor. Clients can be attached to
appointments and can take part in inbox conversations.
"""

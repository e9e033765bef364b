"""Users app package.

This module initializes the users app. It defines the custom user model
representing realtors (the dashboard owner and public agent profile). Use
``apps.users.models.CustomUser`` as the AUTH_USER_MODEL throughout the
project.
"""

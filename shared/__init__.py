"""
Shared Kernel

This module contains base classes and utilities shared across all RealtorHub
apps: value objects used by both the scheduling and the theming domains.
"""

"""Orders module for ordercore API

Creates draft orders and attaches line items to them.
"""

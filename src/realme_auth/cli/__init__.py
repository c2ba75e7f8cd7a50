"""CLI module.

This module provides the realme-auth command-line interface.
"""

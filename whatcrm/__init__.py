"""Client, models and command line for the WhatCRM instances API."""

__version__ = "0.1.0"

__all__ = ["__version__"]
"""
Core building blocks: settings, logging, database bootstrap and the
storage exceptions.
"""

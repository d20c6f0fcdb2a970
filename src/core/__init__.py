"""Core: configuration, domain models, route table and logging.

No HTTP here: the core describes *what* to request, adapters perform it.
"""

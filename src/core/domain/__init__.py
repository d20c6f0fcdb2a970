"""Domain models, route table and failure taxonomy.

Why:
- Pure data structures (Pydantic v2) and exceptions shared by adapters/CLI.
- The domain knows URLs as strings, never the HTTP library.
"""

"""
Persistence adapters.

These modules encapsulate how data is stored/retrieved (today one JSON file).
Services should go through DocumentStore/DocumentRepository rather than
touching the file themselves.
"""

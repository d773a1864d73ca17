"""
Storage backend implementations of the reader and writer protocols.

Subpackages:
- sql: relational tables through a SQLAlchemy session
- excel: worksheet regions of .xlsx workbooks (openpyxl)
- jsonfile: JSON array files and one-file-per-record directories
"""

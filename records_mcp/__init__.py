"""Records MCP — paginated, color-filtered client for the /records endpoint.

Fetches one page at a time and derives:
- ids on the page
- open records annotated with isPrimary
- closed primary-colored record count
- previous / next page numbers
"""

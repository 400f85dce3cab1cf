"""Domain layer (pure logic).

- Keep the greeting text here.
- Avoid I/O: no HTTP/FastAPI, no logging.
"""

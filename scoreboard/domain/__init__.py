"""Domain layer (pure logic).

- Keep scoring rules, validation and standings calculations here.
- Avoid I/O: no DB sessions, no HTTP/FastAPI.
- Prefer deterministic functions over stored, incrementally maintained state.
"""

"""Domain layer (pure logic).

- Keep bidding, meld, trick and scoring rules here.
- Avoid I/O: no DB sessions, no HTTP/FastAPI, no logging.
- Values are immutable; every transition returns a new Hand/Game.
"""

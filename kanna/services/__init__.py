"""Business Logic Services.

This package contains the service modules behind a word lookup.

Service Categories:
- Core: Word cache repository
- Translation: Youdao provider client
- Audio: Pronunciation download and playback
- Lookup: Cache-aside orchestration
- Dispatcher: Serialized command execution
- Formatter: Text rendering of lookup results
"""

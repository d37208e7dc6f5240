"""
Test Suite for ymdflag

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: End-to-end command line tests

Test Categories:
- YYYYMMDD validation, parsing and formatting
- YMDFlag lazy defaulting and accessors
- Timezone lookup and configuration
- click option integration
"""

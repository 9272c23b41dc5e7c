"""
Tests for dendrogen

This package contains tests for:
- SWC record rendering and id assignment
- Parameter validation
- The four topology builders
- Generation API, export and CLI
- Structural tree checks and output policies
"""

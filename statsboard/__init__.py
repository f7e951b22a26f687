"""Core (UI-agnostic) stats dashboard logic.

This package contains:
- source loading (CSV / benchmark log -> parsed, cached)
- tabular parsing and chart dataset building
- series color assignment
- price derivation for benchmark log lines
- page compute functions (JSON-serializable payloads)
- chart helpers (Altair -> Vega-Lite spec dict)
"""

"""Core (UI-agnostic) dashboard logic.

This package contains:
- CSV loading (URL or local path -> text) and parsing (text -> rows)
- per-dataset aggregators (rows -> chart-ready series)
- chart helpers (series -> Altair -> Vega-Lite spec dict)
- the orchestration entry point that wires the five charts together
"""
